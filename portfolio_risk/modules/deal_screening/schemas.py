"""Deal Screening API schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from portfolio_risk.models.enums import (
    AutomationLevel,
    CriterionCategory,
    ScoreFunction,
    ScreeningMode,
)


# ── Templates ─────────────────────────────────────────────────────────────────


class ScreeningCriterion(BaseModel):
    id: str
    name: str
    category: CriterionCategory
    description: str = ""
    weight: float = Field(..., ge=0, le=1)
    score_function: ScoreFunction = ScoreFunction.LINEAR
    min_value: float = 0
    max_value: float = 10
    threshold_value: float | None = None
    is_required: bool = True
    is_active: bool = True


class TemplateAnalytics(BaseModel):
    usage_count: int = 0
    success_rate: float = Field(0.0, ge=0, le=1)
    average_score: float = 0.0
    last_used: datetime | None = None
    deals_closed: int = 0
    total_deals_evaluated: int = 0
    times_saved: int = 0             # minutes
    automation_rate: float = 0.0


class TraditionalModeConfig(BaseModel):
    show_all_criteria: bool = True
    enable_shortcuts: bool = True


class AssistedModeConfig(BaseModel):
    ai_suggestions: bool = True
    auto_scoring: bool = False
    show_confidence: bool = True


class AutonomousModeConfig(BaseModel):
    ai_suggestions: bool = True
    auto_scoring: bool = True
    require_approval: bool = True


class ModeSpecificConfig(BaseModel):
    traditional: TraditionalModeConfig = Field(default_factory=TraditionalModeConfig)
    assisted: AssistedModeConfig = Field(default_factory=AssistedModeConfig)
    autonomous: AutonomousModeConfig = Field(default_factory=AutonomousModeConfig)


class AssetTypeSpecific(BaseModel):
    asset_type: str                  # fund | direct | co-investment | gp-led | other
    specific_criteria: list[str] = Field(default_factory=list)


class DealScreeningTemplate(BaseModel):
    id: str
    name: str
    description: str = ""
    criteria: list[ScreeningCriterion]
    created_at: datetime
    updated_at: datetime
    created_by: str = "system"
    is_default: bool = False
    ai_enhanced: bool = False
    automation_level: AutomationLevel = AutomationLevel.NONE
    analytics: TemplateAnalytics = Field(default_factory=TemplateAnalytics)
    mode_specific_config: ModeSpecificConfig = Field(default_factory=ModeSpecificConfig)
    asset_type_specific: AssetTypeSpecific | None = None

    @property
    def asset_type(self) -> str | None:
        return self.asset_type_specific.asset_type if self.asset_type_specific else None


class TemplateCreate(BaseModel):
    # name and criteria are optional here so that missing fields surface as a
    # 400 from the service rather than a 422
    name: str | None = None
    description: str = ""
    criteria: list[ScreeningCriterion] | None = None
    created_by: str = "user"
    ai_enhanced: bool = False
    automation_level: AutomationLevel = AutomationLevel.NONE
    mode_specific_config: ModeSpecificConfig | None = None
    asset_type_specific: AssetTypeSpecific | None = None


class TemplateCreateResponse(BaseModel):
    template: DealScreeningTemplate
    message: str


class TemplateListMetadata(BaseModel):
    total: int
    asset_type_filter: str | None = None
    mode_filter: ScreeningMode | None = None
    ai_enhanced_filter: bool | None = None


class TemplateListResponse(BaseModel):
    templates: list[DealScreeningTemplate]
    metadata: TemplateListMetadata


# ── Recommendation ────────────────────────────────────────────────────────────


class DealOpportunity(BaseModel):
    id: str | None = None
    name: str = ""
    asset_type: str | None = None
    sector: str = ""
    geography: str = ""
    vintage: str = ""
    ask_price: float = 0.0
    nav_percentage: float | None = None
    expected_return: float | None = None
    expected_irr: float | None = None
    expected_multiple: float | None = None
    similar_deals: list[str] = Field(default_factory=list)


class RecommendRequest(BaseModel):
    opportunity: DealOpportunity | None = None
    mode: ScreeningMode = ScreeningMode.ASSISTED


class TemplateRecommendation(BaseModel):
    template: DealScreeningTemplate
    recommendation_score: int
    reasons: list[str]


class BenchmarkData(BaseModel):
    sector: str
    avg_irr: float
    avg_multiple: float
    avg_holding_period: float
    data_source: str
    sample_size: int


class TimeEstimateBreakdown(BaseModel):
    criteria_count: int
    avg_time_per_criterion: int
    automation_savings: int


class TimeEstimate(BaseModel):
    # Without a template only the per-mode defaults are known.
    estimated_minutes: int | None = None
    mode: ScreeningMode | None = None
    confidence: float | None = None
    breakdown: TimeEstimateBreakdown | None = None
    by_mode: dict[str, int] | None = None


class AIInsights(BaseModel):
    sector_analysis: str
    risk_factors: list[str]
    benchmark_data: BenchmarkData
    time_estimate: TimeEstimate


class CustomizationSuggestion(BaseModel):
    type: str                        # add_criterion | adjust_weight | ai_enhancement
    title: str
    description: str
    impact: str
    estimated_weight_adjustment: float | None = None
    target_criterion: str | None = None
    current_weight: float | None = None
    suggested_weight: float | None = None
    features: list[str] | None = None


class RecommendationMetadata(BaseModel):
    opportunity_id: str | None
    asset_type: str
    mode: ScreeningMode
    total_templates_analyzed: int
    recommendation_timestamp: datetime


class RecommendResponse(BaseModel):
    recommended_templates: list[TemplateRecommendation]
    ai_insights: AIInsights
    customization_suggestions: list[CustomizationSuggestion]
    metadata: RecommendationMetadata
