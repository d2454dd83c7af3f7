"""Deal Screening API router."""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from portfolio_risk.models.enums import ScreeningMode
from portfolio_risk.modules.deal_screening import service
from portfolio_risk.modules.deal_screening.repository import (
    InMemoryTemplateRepository,
    TemplateRepository,
)
from portfolio_risk.modules.deal_screening.schemas import (
    RecommendRequest,
    RecommendResponse,
    TemplateCreate,
    TemplateCreateResponse,
    TemplateListResponse,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/deal-screening", tags=["deal-screening"])

_repository = InMemoryTemplateRepository()


def get_template_repository() -> TemplateRepository:
    return _repository


@router.get("/templates", response_model=TemplateListResponse)
async def list_templates(
    asset_type: str | None = Query(None),
    mode: ScreeningMode | None = Query(None),
    ai_enhanced: bool | None = Query(None),
    repo: TemplateRepository = Depends(get_template_repository),
):
    """List screening templates, optionally filtered and ordered for a mode."""
    return service.list_templates(repo, asset_type, mode, ai_enhanced)


@router.post(
    "/templates",
    response_model=TemplateCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_template(
    body: TemplateCreate,
    repo: TemplateRepository = Depends(get_template_repository),
):
    try:
        template = service.create_template(repo, body, datetime.now(timezone.utc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return TemplateCreateResponse(template=template, message="Template created successfully")


@router.post("/templates/recommend", response_model=RecommendResponse)
async def recommend_templates(
    body: RecommendRequest,
    repo: TemplateRepository = Depends(get_template_repository),
):
    """Top templates for an opportunity, with insights and customisation hints."""
    try:
        return service.recommend(repo, body, datetime.now(timezone.utc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
