"""Deal Structuring API router."""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter

from portfolio_risk.models.enums import RecommendationPriority, TaskStatus
from portfolio_risk.modules.deal_structuring import advisor
from portfolio_risk.modules.deal_structuring.schemas import (
    AutonomousTasksRequest,
    AutonomousTasksResponse,
    DealRiskAssessment,
    DealStructuringProject,
    FinancialModelSuggestion,
    RecommendationsRequest,
    RecommendationsResponse,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/deal-structuring", tags=["deal-structuring"])


@router.post("/recommendations", response_model=RecommendationsResponse)
async def get_recommendations(body: RecommendationsRequest):
    """Structuring recommendations for a deal, ordered by priority."""
    recommendations = advisor.generate_structuring_recommendations(body.deal, body.mode)
    average_confidence = (
        sum(r.confidence for r in recommendations) / len(recommendations) if recommendations else 0.0
    )

    logger.info(
        "structuring_recommendations",
        deal_id=body.deal.id,
        mode=body.mode.value,
        count=len(recommendations),
    )

    return RecommendationsResponse(
        deal_id=body.deal.id,
        mode=body.mode,
        recommendations=recommendations,
        high_priority_count=sum(
            1 for r in recommendations
            if r.priority in (RecommendationPriority.HIGH, RecommendationPriority.CRITICAL)
        ),
        average_confidence=round(average_confidence, 4),
    )


@router.post("/risk-analysis", response_model=DealRiskAssessment)
async def get_risk_analysis(body: DealStructuringProject):
    return advisor.perform_risk_assessment(body)


@router.post("/financial-model", response_model=FinancialModelSuggestion)
async def get_financial_model(body: DealStructuringProject):
    """Suggested model type, parameters and sensitivities for the deal type."""
    return advisor.generate_financial_model_suggestion(body)


@router.post("/autonomous-tasks", response_model=AutonomousTasksResponse)
async def run_autonomous_tasks(body: AutonomousTasksRequest):
    """Auto-complete high-confidence tasks and route the rest for approval."""
    results = advisor.triage_autonomous_tasks(body.deal, body.tasks, datetime.now(timezone.utc))
    completed = sum(1 for r in results if r.status == TaskStatus.COMPLETED)

    logger.info(
        "autonomous_tasks_triaged",
        deal_id=body.deal.id,
        completed=completed,
        requires_approval=len(results) - completed,
    )

    return AutonomousTasksResponse(
        deal_id=body.deal.id,
        results=results,
        completed=completed,
        requires_approval=len(results) - completed,
    )
