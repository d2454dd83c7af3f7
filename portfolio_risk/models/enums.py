"""Domain enums shared by the scoring modules."""

import enum


# ── Risk assessment ──────────────────────────────────────────────────────────


class RiskCategory(str, enum.Enum):
    MARKET = "MARKET"
    OPERATIONAL = "OPERATIONAL"
    FINANCIAL = "FINANCIAL"
    REGULATORY = "REGULATORY"
    STRATEGIC = "STRATEGIC"
    TECHNOLOGY = "TECHNOLOGY"
    ESG = "ESG"
    LIQUIDITY = "LIQUIDITY"


class RiskSeverity(str, enum.Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class RiskStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    MONITORING = "MONITORING"
    MITIGATED = "MITIGATED"
    ESCALATED = "ESCALATED"


class RiskEntityType(str, enum.Enum):
    PORTFOLIO_COMPANY = "PORTFOLIO_COMPANY"
    DEAL = "DEAL"
    FUND = "FUND"
    MARKET_SECTOR = "MARKET_SECTOR"


class RiskGrade(str, enum.Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class AlertLevel(str, enum.Enum):
    NONE = "NONE"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class TrendDirection(str, enum.Enum):
    INCREASING = "INCREASING"
    STABLE = "STABLE"
    DECREASING = "DECREASING"


# ── Deal screening ───────────────────────────────────────────────────────────


class ScreeningMode(str, enum.Enum):
    TRADITIONAL = "traditional"
    ASSISTED = "assisted"
    AUTONOMOUS = "autonomous"


class AutomationLevel(str, enum.Enum):
    NONE = "none"
    ASSISTED = "assisted"
    AUTONOMOUS = "autonomous"


class CriterionCategory(str, enum.Enum):
    FINANCIAL = "financial"
    STRATEGIC = "strategic"
    OPERATIONAL = "operational"
    RISK = "risk"
    IMPACT = "impact"


class ScoreFunction(str, enum.Enum):
    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    THRESHOLD = "threshold"


# ── Fund operations ──────────────────────────────────────────────────────────


class FundRiskLevel(str, enum.Enum):
    VERY_LOW = "VERY_LOW"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    VERY_HIGH = "VERY_HIGH"


class ComplianceAlertType(str, enum.Enum):
    REGULATORY = "REGULATORY"
    CONTRACTUAL = "CONTRACTUAL"
    INTERNAL = "INTERNAL"
    TAX = "TAX"


# ── Deal structuring ─────────────────────────────────────────────────────────


class DealType(str, enum.Enum):
    LBO_STRUCTURE = "LBO_STRUCTURE"
    SINGLE_ASSET_CONTINUATION = "SINGLE_ASSET_CONTINUATION"
    MULTI_ASSET_CONTINUATION = "MULTI_ASSET_CONTINUATION"
    OTHER = "OTHER"


class RecommendationPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class TaskStatus(str, enum.Enum):
    COMPLETED = "completed"
    FAILED = "failed"
    REQUIRES_APPROVAL = "requires_approval"


# ── Workspaces ───────────────────────────────────────────────────────────────


class IndustryTemplate(str, enum.Enum):
    TECHNOLOGY = "technology"
    FINANCIAL = "financial"
    HEALTHCARE = "healthcare"
    MANUFACTURING = "manufacturing"


class RiskRating(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
