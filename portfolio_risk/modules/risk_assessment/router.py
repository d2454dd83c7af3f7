"""Risk Assessment API router."""

import structlog
from fastapi import APIRouter, Depends, Query

from portfolio_risk.modules.risk_assessment.aggregation import (
    calculate_risk_grade,
    determine_alert_level,
)
from portfolio_risk.modules.risk_assessment.engine import RiskAssessmentEngine
from portfolio_risk.modules.risk_assessment.schemas import (
    ComprehensiveRiskAssessment,
    ComprehensiveRiskInput,
    DomainAssessmentRequest,
    DueDiligenceRiskInput,
    GradeResponse,
    LegalRiskInput,
    MarketRiskInput,
    OperationsRiskInput,
    PortfolioRiskInput,
    RiskAssessment,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/risk-assessment", tags=["risk-assessment"])

_engine = RiskAssessmentEngine()


def get_risk_engine() -> RiskAssessmentEngine:
    return _engine


@router.post("/portfolio", response_model=RiskAssessment)
async def assess_portfolio(
    body: PortfolioRiskInput,
    engine: RiskAssessmentEngine = Depends(get_risk_engine),
):
    """Concentration, liquidity and performance risk for the main portfolio."""
    return engine.assess_portfolio_risk(body)


@router.post("/due-diligence", response_model=RiskAssessment)
async def assess_due_diligence(
    body: DueDiligenceRiskInput,
    engine: RiskAssessmentEngine = Depends(get_risk_engine),
):
    """Data completeness, timeline and red-flag risk for a deal in diligence."""
    return engine.assess_due_diligence_risk(body)


@router.post("/legal", response_model=RiskAssessment)
async def assess_legal(
    body: LegalRiskInput,
    engine: RiskAssessmentEngine = Depends(get_risk_engine),
):
    return engine.assess_legal_compliance_risk(body)


@router.post("/market", response_model=RiskAssessment)
async def assess_market(
    body: MarketRiskInput,
    engine: RiskAssessmentEngine = Depends(get_risk_engine),
):
    return engine.assess_market_risk(body)


@router.post("/operations", response_model=RiskAssessment)
async def assess_operations(
    body: OperationsRiskInput,
    engine: RiskAssessmentEngine = Depends(get_risk_engine),
):
    return engine.assess_operational_risk(body)


@router.post("/assess", response_model=RiskAssessment)
async def assess_domain(
    body: DomainAssessmentRequest,
    engine: RiskAssessmentEngine = Depends(get_risk_engine),
):
    """Assess any single domain; ``metrics.domain`` selects the evaluator."""
    return engine.assess(body.metrics)


@router.post("/comprehensive", response_model=ComprehensiveRiskAssessment)
async def assess_comprehensive(
    body: ComprehensiveRiskInput,
    engine: RiskAssessmentEngine = Depends(get_risk_engine),
):
    """Assess every supplied domain, correlate across them and roll up to the fund."""
    return engine.generate_comprehensive_risk_assessment(body)


@router.get("/grade", response_model=GradeResponse)
async def grade_score(score: float = Query(..., ge=0, le=10)):
    """Map a raw 0-10 score to its letter grade and alert level."""
    return GradeResponse(
        score=score,
        risk_grade=calculate_risk_grade(score),
        alert_level=determine_alert_level(score),
    )
