"""Fund Operations API schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from portfolio_risk.models.enums import ComplianceAlertType, FundRiskLevel, RiskSeverity


class FundRiskInput(BaseModel):
    fund_id: str | None = None
    concentration_risk: float = Field(..., ge=0, le=100)
    liquidity_risk: float = Field(..., ge=0, le=100)
    operational_risk: float = Field(..., ge=0, le=100)
    market_risk: float = Field(..., ge=0, le=100)


class FundRiskFactor(BaseModel):
    category: str                    # MARKET | LIQUIDITY | OPERATIONAL
    name: str
    description: str
    likelihood: float                # 0-1
    impact: float                    # 0-1
    risk_score: float                # likelihood × impact
    mitigation: str


class BenchmarkPoint(BaseModel):
    average: float
    percentile: int
    delta: float                     # fund score minus peer average


class RiskBenchmark(BaseModel):
    industry: BenchmarkPoint
    vintage: BenchmarkPoint
    size: BenchmarkPoint


class FundRiskAssessment(BaseModel):
    fund_id: str | None
    overall_risk: FundRiskLevel
    risk_score: float                # 0-100
    concentration_risk: float
    liquidity_risk: float
    operational_risk: float
    market_risk: float
    key_risk_factors: list[FundRiskFactor]
    benchmark_comparison: RiskBenchmark


class CapitalCallRequest(BaseModel):
    total_commitments: float = Field(..., ge=0)
    total_called: float = Field(..., ge=0)


class CapitalCallResponse(BaseModel):
    remaining_commitment: float
    recommended_amount: float
    deployment_rate: float
    cap: float


class ComplianceAlert(BaseModel):
    id: str
    type: ComplianceAlertType
    severity: RiskSeverity
    message: str
    deadline: datetime | None = None
    action_required: str = ""
    related_entity: str = ""
    auto_remediation_available: bool = False
    previous_occurrences: int = 0


class ComplianceAlertList(BaseModel):
    alerts: list[ComplianceAlert]
