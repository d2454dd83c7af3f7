"""Built-in screening templates seeded into every new template repository."""

from __future__ import annotations

from datetime import datetime, timezone

from portfolio_risk.models.enums import AutomationLevel, CriterionCategory, ScoreFunction
from portfolio_risk.modules.deal_screening.schemas import (
    AssetTypeSpecific,
    AssistedModeConfig,
    AutonomousModeConfig,
    DealScreeningTemplate,
    ModeSpecificConfig,
    ScreeningCriterion,
    TemplateAnalytics,
)

_CREATED = datetime(2024, 1, 1, tzinfo=timezone.utc)
_UPDATED = datetime(2024, 1, 15, tzinfo=timezone.utc)


def _criterion(
    id: str,
    name: str,
    category: CriterionCategory,
    description: str,
    weight: float,
    score_function: ScoreFunction = ScoreFunction.LINEAR,
    min_value: float = 1,
    max_value: float = 10,
    threshold_value: float | None = None,
    is_required: bool = True,
) -> ScreeningCriterion:
    return ScreeningCriterion(
        id=id,
        name=name,
        category=category,
        description=description,
        weight=weight,
        score_function=score_function,
        min_value=min_value,
        max_value=max_value,
        threshold_value=threshold_value,
        is_required=is_required,
    )


def default_templates() -> list[DealScreeningTemplate]:
    """Fresh copies of the fund, direct and GP-led default templates."""
    fund = DealScreeningTemplate(
        id="template-fund-default",
        name="Fund Investment (Default)",
        description="Standard template for evaluating fund investment opportunities",
        criteria=[
            _criterion(
                "criterion-fund-track-record", "Fund Manager Track Record",
                CriterionCategory.OPERATIONAL,
                "Evaluate the fund manager's historical performance and experience", 0.25,
            ),
            _criterion(
                "criterion-fund-strategy", "Investment Strategy Alignment",
                CriterionCategory.STRATEGIC,
                "How well does the fund strategy align with portfolio objectives", 0.20,
            ),
            _criterion(
                "criterion-fund-financial", "Financial Metrics",
                CriterionCategory.FINANCIAL,
                "Expected IRR, multiple, and other financial returns", 0.30,
                ScoreFunction.EXPONENTIAL, 0, 100, threshold_value=15,
            ),
            _criterion(
                "criterion-fund-risk", "Risk Assessment",
                CriterionCategory.RISK,
                "Market risk, concentration risk, and operational risk factors", 0.15,
                ScoreFunction.THRESHOLD, threshold_value=7,
            ),
            _criterion(
                "criterion-fund-esg", "ESG Considerations",
                CriterionCategory.IMPACT,
                "Environmental, Social, and Governance factors", 0.10,
                is_required=False,
            ),
        ],
        created_at=_CREATED,
        updated_at=_UPDATED,
        is_default=True,
        ai_enhanced=True,
        automation_level=AutomationLevel.ASSISTED,
        asset_type_specific=AssetTypeSpecific(
            asset_type="fund",
            specific_criteria=["criterion-fund-track-record", "criterion-fund-strategy"],
        ),
        analytics=TemplateAnalytics(
            usage_count=45,
            success_rate=0.78,
            average_score=72.5,
            last_used=datetime(2024, 1, 20, 14, 30, tzinfo=timezone.utc),
            deals_closed=35,
            total_deals_evaluated=45,
            times_saved=120,
            automation_rate=0.65,
        ),
    )

    direct = DealScreeningTemplate(
        id="template-direct-default",
        name="Direct Investment (Default)",
        description="Standard template for evaluating direct investment opportunities",
        criteria=[
            _criterion(
                "criterion-direct-management", "Management Team Quality",
                CriterionCategory.OPERATIONAL,
                "Assess the quality and experience of the management team", 0.20,
            ),
            _criterion(
                "criterion-direct-market", "Market Position & Competition",
                CriterionCategory.STRATEGIC,
                "Company's competitive position and market dynamics", 0.25,
            ),
            _criterion(
                "criterion-direct-financial", "Financial Performance",
                CriterionCategory.FINANCIAL,
                "Revenue growth, profitability, and financial health", 0.30,
                ScoreFunction.EXPONENTIAL, 0, 100,
            ),
            _criterion(
                "criterion-direct-scalability", "Business Model Scalability",
                CriterionCategory.STRATEGIC,
                "Potential for scaling the business model", 0.15,
            ),
            _criterion(
                "criterion-direct-risk", "Operational & Market Risks",
                CriterionCategory.RISK,
                "Key risks that could impact investment returns", 0.10,
                ScoreFunction.THRESHOLD, threshold_value=6,
            ),
        ],
        created_at=_CREATED,
        updated_at=_UPDATED,
        is_default=True,
        ai_enhanced=True,
        automation_level=AutomationLevel.ASSISTED,
        asset_type_specific=AssetTypeSpecific(
            asset_type="direct",
            specific_criteria=[
                "criterion-direct-management",
                "criterion-direct-market",
                "criterion-direct-scalability",
            ],
        ),
        analytics=TemplateAnalytics(
            usage_count=28,
            success_rate=0.71,
            average_score=69.2,
            last_used=datetime(2024, 1, 22, 16, 45, tzinfo=timezone.utc),
            deals_closed=20,
            total_deals_evaluated=28,
            times_saved=85,
            automation_rate=0.58,
        ),
    )

    gp_led = DealScreeningTemplate(
        id="template-gp-led-default",
        name="GP-Led Transaction (Default)",
        description="Template for evaluating GP-led secondary transactions",
        criteria=[
            _criterion(
                "criterion-gp-track-record", "GP Historical Performance",
                CriterionCategory.OPERATIONAL,
                "GP's track record with similar transactions", 0.25,
            ),
            _criterion(
                "criterion-gp-assets", "Underlying Asset Quality",
                CriterionCategory.STRATEGIC,
                "Quality and performance of underlying portfolio assets", 0.30,
                ScoreFunction.EXPONENTIAL,
            ),
            _criterion(
                "criterion-gp-valuation", "Valuation & Pricing",
                CriterionCategory.FINANCIAL,
                "Attractiveness of transaction pricing relative to NAV", 0.25,
                ScoreFunction.THRESHOLD, 0.5, 1.2, threshold_value=0.85,
            ),
            _criterion(
                "criterion-gp-liquidity", "Liquidity Terms",
                CriterionCategory.RISK,
                "Expected holding period and exit opportunities", 0.20,
            ),
        ],
        created_at=_CREATED,
        updated_at=_UPDATED,
        is_default=True,
        ai_enhanced=True,
        automation_level=AutomationLevel.AUTONOMOUS,
        mode_specific_config=ModeSpecificConfig(
            assisted=AssistedModeConfig(auto_scoring=True),
            autonomous=AutonomousModeConfig(require_approval=False),
        ),
        asset_type_specific=AssetTypeSpecific(
            asset_type="gp-led",
            specific_criteria=[
                "criterion-gp-track-record",
                "criterion-gp-assets",
                "criterion-gp-liquidity",
            ],
        ),
        analytics=TemplateAnalytics(
            usage_count=12,
            success_rate=0.83,
            average_score=76.8,
            last_used=datetime(2024, 1, 19, 11, 20, tzinfo=timezone.utc),
            deals_closed=10,
            total_deals_evaluated=12,
            times_saved=95,
            automation_rate=0.75,
        ),
    )

    return [fund, direct, gp_led]
