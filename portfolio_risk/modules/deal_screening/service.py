"""Deal Screening service: template catalogue and recommendation."""

from __future__ import annotations

import uuid
from datetime import datetime

import structlog

from portfolio_risk.core.config import settings
from portfolio_risk.models.enums import AutomationLevel, ScreeningMode
from portfolio_risk.modules.deal_screening.recommender import (
    generate_ai_insights,
    generate_customization_suggestions,
    recommend_templates,
)
from portfolio_risk.modules.deal_screening.repository import TemplateRepository
from portfolio_risk.modules.deal_screening.schemas import (
    DealScreeningTemplate,
    ModeSpecificConfig,
    RecommendationMetadata,
    RecommendRequest,
    RecommendResponse,
    TemplateAnalytics,
    TemplateCreate,
    TemplateListMetadata,
    TemplateListResponse,
)

logger = structlog.get_logger()

_AUTOMATION_RANK: dict[AutomationLevel, int] = {
    AutomationLevel.AUTONOMOUS: 3,
    AutomationLevel.ASSISTED: 2,
    AutomationLevel.NONE: 1,
}


def list_templates(
    repo: TemplateRepository,
    asset_type: str | None = None,
    mode: ScreeningMode | None = None,
    ai_enhanced: bool | None = None,
) -> TemplateListResponse:
    templates = repo.list()

    if asset_type:
        templates = [t for t in templates if t.asset_type == asset_type]
    if ai_enhanced:
        templates = [t for t in templates if t.ai_enhanced]

    if mode == ScreeningMode.AUTONOMOUS:
        templates.sort(key=lambda t: _AUTOMATION_RANK[t.automation_level], reverse=True)
    elif mode is not None:
        templates.sort(
            key=lambda t: t.analytics.usage_count * t.analytics.success_rate,
            reverse=True,
        )

    return TemplateListResponse(
        templates=templates,
        metadata=TemplateListMetadata(
            total=len(templates),
            asset_type_filter=asset_type,
            mode_filter=mode,
            ai_enhanced_filter=ai_enhanced,
        ),
    )


def create_template(
    repo: TemplateRepository,
    payload: TemplateCreate,
    now: datetime,
) -> DealScreeningTemplate:
    """Validate and store a user-defined template.

    Raises ValueError when name or criteria are missing, or when the criteria
    weights do not sum to 1.0 within the configured tolerance.
    """
    if not payload.name or not payload.criteria:
        raise ValueError("Missing required fields: name, criteria")

    total_weight = sum(c.weight for c in payload.criteria)
    if abs(total_weight - 1) > settings.TEMPLATE_WEIGHT_TOLERANCE:
        raise ValueError("Criteria weights must sum to 1.0")

    template = DealScreeningTemplate(
        id=f"template-{uuid.uuid4().hex[:12]}",
        name=payload.name,
        description=payload.description,
        criteria=payload.criteria,
        created_at=now,
        updated_at=now,
        created_by=payload.created_by,
        is_default=False,
        ai_enhanced=payload.ai_enhanced,
        automation_level=payload.automation_level,
        mode_specific_config=payload.mode_specific_config or ModeSpecificConfig(),
        asset_type_specific=payload.asset_type_specific,
        analytics=TemplateAnalytics(last_used=now),
    )
    repo.create(template)

    logger.info(
        "template_created",
        template_id=template.id,
        asset_type=template.asset_type,
        criteria=len(template.criteria),
    )
    return template


def recommend(
    repo: TemplateRepository,
    body: RecommendRequest,
    now: datetime,
) -> RecommendResponse:
    """Rank templates for an opportunity and attach insights and suggestions.

    Raises ValueError when the opportunity or its asset type is missing.
    """
    opportunity = body.opportunity
    if opportunity is None or not opportunity.asset_type:
        raise ValueError("Opportunity with asset_type is required")

    templates = repo.list()
    recommendations = recommend_templates(
        templates,
        opportunity,
        body.mode,
        now,
        limit=settings.RECOMMENDATION_LIMIT,
    )
    top = recommendations[0].template if recommendations else None

    logger.info(
        "template_recommendation",
        opportunity_id=opportunity.id,
        asset_type=opportunity.asset_type,
        mode=body.mode.value,
        templates_analyzed=len(templates),
        recommended=[r.template.id for r in recommendations],
    )

    return RecommendResponse(
        recommended_templates=recommendations,
        ai_insights=generate_ai_insights(opportunity, top, body.mode, now),
        customization_suggestions=generate_customization_suggestions(
            opportunity, top, limit=settings.CUSTOMIZATION_SUGGESTION_LIMIT
        ),
        metadata=RecommendationMetadata(
            opportunity_id=opportunity.id,
            asset_type=opportunity.asset_type,
            mode=body.mode,
            total_templates_analyzed=len(templates),
            recommendation_timestamp=now,
        ),
    )
