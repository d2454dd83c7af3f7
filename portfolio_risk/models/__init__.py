"""Domain enums package."""

from portfolio_risk.models.enums import (
    AlertLevel,
    AutomationLevel,
    ComplianceAlertType,
    CriterionCategory,
    DealType,
    FundRiskLevel,
    IndustryTemplate,
    RecommendationPriority,
    RiskCategory,
    RiskEntityType,
    RiskGrade,
    RiskRating,
    RiskSeverity,
    RiskStatus,
    ScoreFunction,
    ScreeningMode,
    TaskStatus,
    TrendDirection,
)

__all__ = [
    "AlertLevel",
    "AutomationLevel",
    "ComplianceAlertType",
    "CriterionCategory",
    "DealType",
    "FundRiskLevel",
    "IndustryTemplate",
    "RecommendationPriority",
    "RiskCategory",
    "RiskEntityType",
    "RiskGrade",
    "RiskRating",
    "RiskSeverity",
    "RiskStatus",
    "ScoreFunction",
    "ScreeningMode",
    "TaskStatus",
    "TrendDirection",
]
