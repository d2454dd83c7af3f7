"""Fund Operations API router."""

import structlog
from fastapi import APIRouter, HTTPException

from portfolio_risk.modules.fund_operations import analytics
from portfolio_risk.modules.fund_operations.schemas import (
    CapitalCallRequest,
    CapitalCallResponse,
    ComplianceAlertList,
    FundRiskAssessment,
    FundRiskInput,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/fund-operations", tags=["fund-operations"])


@router.post("/risk", response_model=FundRiskAssessment)
async def assess_fund_risk(body: FundRiskInput):
    """Fund risk score (0-100), band, key factors and peer deltas."""
    result = analytics.assess_fund_risk(body)
    logger.info(
        "fund_risk_assessed",
        fund_id=body.fund_id,
        risk_score=result.risk_score,
        overall_risk=result.overall_risk.value,
    )
    return result


@router.post("/capital-call", response_model=CapitalCallResponse)
async def recommend_capital_call(body: CapitalCallRequest):
    if body.total_called > body.total_commitments:
        raise HTTPException(status_code=400, detail="total_called cannot exceed total_commitments")

    return CapitalCallResponse(
        remaining_commitment=body.total_commitments - body.total_called,
        recommended_amount=analytics.calculate_optimal_call_amount(
            body.total_commitments, body.total_called
        ),
        deployment_rate=analytics.DEPLOYMENT_RATE,
        cap=analytics.MAX_CALL_AMOUNT,
    )


@router.post("/compliance-alerts/prioritize", response_model=ComplianceAlertList)
async def prioritize_compliance_alerts(body: ComplianceAlertList):
    """Order alerts by severity, then by deadline."""
    return ComplianceAlertList(alerts=analytics.sort_compliance_alerts(body.alerts))
