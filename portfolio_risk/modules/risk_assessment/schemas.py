"""Risk Assessment API schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from portfolio_risk.models.enums import (
    AlertLevel,
    RiskCategory,
    RiskEntityType,
    RiskGrade,
    RiskSeverity,
    RiskStatus,
    TrendDirection,
)


# ── Risk factors & assessments ────────────────────────────────────────────────


class RiskFactor(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: RiskCategory
    severity: RiskSeverity
    probability: float = Field(..., ge=0, le=1)
    impact: float = Field(..., ge=0, le=10)
    description: str
    source: str                      # module that raised the factor
    indicators: list[str] = Field(default_factory=list)
    mitigation: list[str] = Field(default_factory=list)  # first entry is the primary action
    status: RiskStatus
    detected_at: datetime
    last_assessed: datetime


class RiskTrend(BaseModel):
    direction: TrendDirection
    velocity: float
    driver_factors: list[str]


class RiskRecommendations(BaseModel):
    immediate: list[str]
    short_term: list[str]
    long_term: list[str]


class RiskAssessment(BaseModel):
    entity_id: str
    entity_type: RiskEntityType
    overall_risk_score: float        # 0-10
    risk_grade: RiskGrade
    risks: list[RiskFactor]
    risk_trends: RiskTrend
    recommendations: RiskRecommendations
    alert_level: AlertLevel
    generated_at: datetime


# ── Domain inputs ─────────────────────────────────────────────────────────────
# Metrics left unset never trip their threshold.


class PortfolioRiskInput(BaseModel):
    domain: Literal["portfolio"] = "portfolio"
    largest_position: float | None = Field(None, ge=0, le=1)
    liquidity_ratio: float | None = Field(None, ge=0)
    recent_performance: float | None = None   # recent IRR as a fraction


class DueDiligenceRiskInput(BaseModel):
    domain: Literal["due_diligence"] = "due_diligence"
    deal_id: str | None = None
    data_completeness: float | None = Field(None, ge=0, le=1)
    days_remaining: int | None = None
    completeness: float | None = Field(None, ge=0, le=1)
    red_flags: list[str] = Field(default_factory=list)


class LegalRiskInput(BaseModel):
    domain: Literal["legal"] = "legal"
    compliance_score: float | None = Field(None, ge=0, le=100)
    pending_regulations: list[str] = Field(default_factory=list)
    legal_cost_ratio: float | None = Field(None, ge=0)


class MarketRiskInput(BaseModel):
    domain: Literal["market"] = "market"
    vix: float | None = Field(None, ge=0)
    rate_change_velocity: float | None = None
    sector_concentration: float | None = Field(None, ge=0, le=1)


class OperationsRiskInput(BaseModel):
    domain: Literal["operations"] = "operations"
    processing_efficiency: float | None = Field(None, ge=0, le=1)
    system_uptime: float | None = Field(None, ge=0, le=1)
    staff_turnover: float | None = Field(None, ge=0)


DomainRiskInput = Annotated[
    Union[
        PortfolioRiskInput,
        DueDiligenceRiskInput,
        LegalRiskInput,
        MarketRiskInput,
        OperationsRiskInput,
    ],
    Field(discriminator="domain"),
]


class DomainAssessmentRequest(BaseModel):
    metrics: DomainRiskInput


class ComprehensiveRiskInput(BaseModel):
    portfolio: PortfolioRiskInput | None = None
    due_diligence: DueDiligenceRiskInput | None = None
    legal: LegalRiskInput | None = None
    market: MarketRiskInput | None = None
    operations: OperationsRiskInput | None = None


# ── Comprehensive output ──────────────────────────────────────────────────────


class RiskTrendPoint(BaseModel):
    date: str
    overall_risk: float
    category_breakdown: dict[str, float]


class AlertSummary(BaseModel):
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0


class RiskMetrics(BaseModel):
    module_risk_scores: dict[str, float]
    portfolio_risk_distribution: dict[str, int]
    risk_trends: list[RiskTrendPoint]
    alert_summary: AlertSummary
    mitigation_effectiveness: dict[str, float]


class ComprehensiveRiskAssessment(BaseModel):
    overall_assessment: RiskAssessment
    module_assessments: dict[str, RiskAssessment]
    cross_module_risks: list[RiskFactor]
    risk_metrics: RiskMetrics


class GradeResponse(BaseModel):
    score: float
    risk_grade: RiskGrade
    alert_level: AlertLevel
