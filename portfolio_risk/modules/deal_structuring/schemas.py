"""Deal Structuring API schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from portfolio_risk.models.enums import (
    DealType,
    RecommendationPriority,
    ScreeningMode,
    TaskStatus,
)


class DealKeyMetrics(BaseModel):
    irr: float | None = None                 # percent
    multiple: float | None = None
    payback_period: float | None = None
    leverage: float | None = None            # turns of EBITDA
    equity_contribution: float | None = None


class DealStructuringProject(BaseModel):
    id: str
    name: str
    type: DealType = DealType.OTHER
    stage: str = ""
    target_value: float | None = None
    current_valuation: float | None = None
    progress: int = Field(0, ge=0, le=100)
    key_metrics: DealKeyMetrics = Field(default_factory=DealKeyMetrics)


# ── Recommendations ───────────────────────────────────────────────────────────


class PotentialImpact(BaseModel):
    irr: float
    risk_reduction: float
    time_to_close: float
    cost_savings: float


class RecommendedAction(BaseModel):
    id: str
    label: str
    action: str
    params: dict[str, Any] | None = None
    estimated_time: int | None = None        # minutes


class StructuringRecommendation(BaseModel):
    id: str
    type: Literal["structure", "pricing", "risk", "optimization", "template"]
    priority: RecommendationPriority
    title: str
    description: str
    reasoning: str
    confidence: float
    potential_impact: PotentialImpact
    actions: list[RecommendedAction]
    supporting_data: dict[str, Any] = Field(default_factory=dict)


class RecommendationsRequest(BaseModel):
    deal: DealStructuringProject
    mode: ScreeningMode = ScreeningMode.ASSISTED


class RecommendationsResponse(BaseModel):
    deal_id: str
    mode: ScreeningMode
    recommendations: list[StructuringRecommendation]
    high_priority_count: int
    average_confidence: float


# ── Risk analysis ─────────────────────────────────────────────────────────────


class DealRiskCategory(BaseModel):
    category: Literal["financial", "operational", "market", "regulatory", "execution"]
    risk: Literal["low", "medium", "high"]
    factors: list[str]
    mitigation: list[str]
    impact: float


class MonitoringItem(BaseModel):
    metric: str
    threshold: float
    frequency: Literal["daily", "weekly", "monthly"]
    alert_level: Literal["info", "warning", "critical"]


class DealRiskAssessment(BaseModel):
    overall_risk: Literal["low", "medium", "high", "critical"]
    risk_score: int                          # 0-100
    categories: list[DealRiskCategory]
    monitoring: list[MonitoringItem]


# ── Financial model ───────────────────────────────────────────────────────────


class ModelAssumption(BaseModel):
    parameter: str
    value: float
    reasoning: str
    confidence: float


class SensitivityScenarios(BaseModel):
    bear: float
    base: float
    bull: float


class SensitivityVariable(BaseModel):
    variable: str
    impact: float
    scenarios: SensitivityScenarios


class FinancialModelSuggestion(BaseModel):
    model_type: Literal["DCF", "LBO", "SOP", "NAV", "Comparable"]
    parameters: dict[str, float]
    assumptions: list[ModelAssumption]
    sensitivity: list[SensitivityVariable]


# ── Autonomous tasks ──────────────────────────────────────────────────────────


class AutonomousTasksRequest(BaseModel):
    deal: DealStructuringProject
    tasks: list[str] = Field(..., min_length=1)


class TaskExecutionRecord(BaseModel):
    task: str
    completed: bool
    timestamp: datetime
    details: str


class TaskResult(BaseModel):
    task: str
    status: TaskStatus
    confidence: float
    result: TaskExecutionRecord | None = None


class AutonomousTasksResponse(BaseModel):
    deal_id: str
    results: list[TaskResult]
    completed: int
    requires_approval: int
