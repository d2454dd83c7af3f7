"""Fund operations analytics: deterministic fund-level risk, capital calls, compliance.

All figures on the 0-100 component scale; no I/O.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from portfolio_risk.models.enums import FundRiskLevel, RiskSeverity
from portfolio_risk.modules.fund_operations.schemas import (
    BenchmarkPoint,
    ComplianceAlert,
    FundRiskAssessment,
    FundRiskFactor,
    FundRiskInput,
    RiskBenchmark,
)

COMPONENT_WEIGHT = 0.25
KEY_RISK_THRESHOLD = 60

# Exclusive upper bounds, checked in order; anything at or above 80 is VERY_HIGH.
_RISK_BANDS: list[tuple[float, FundRiskLevel]] = [
    (20, FundRiskLevel.VERY_LOW),
    (40, FundRiskLevel.LOW),
    (60, FundRiskLevel.MEDIUM),
    (80, FundRiskLevel.HIGH),
]

# component field -> (category, name, impact 0-1, description, mitigation)
_COMPONENTS: dict[str, tuple[str, str, float, str, str]] = {
    "concentration_risk": (
        "MARKET",
        "Portfolio concentration",
        0.8,
        "Capital is concentrated in a small number of positions or sectors",
        "Rebalance new commitments toward under-weighted sectors",
    ),
    "liquidity_risk": (
        "LIQUIDITY",
        "Fund liquidity",
        0.7,
        "Cash and committed facilities may not cover upcoming calls and expenses",
        "Extend the credit facility and stagger capital call timing",
    ),
    "operational_risk": (
        "OPERATIONAL",
        "Operational resilience",
        0.6,
        "Fund administration processes show elevated error or delay rates",
        "Automate reconciliations and add a second review step",
    ),
    "market_risk": (
        "MARKET",
        "Market exposure",
        0.75,
        "Portfolio valuations are sensitive to current market volatility",
        "Stress test valuations and review hedging on listed exposures",
    ),
}

# peer group -> (average score, percentile)
PEER_BENCHMARKS: dict[str, tuple[float, int]] = {
    "industry": (50, 65),
    "vintage": (52, 60),
    "size": (48, 70),
}

DEPLOYMENT_RATE = 0.15
MAX_CALL_AMOUNT = 50_000_000

_SEVERITY_ORDER: dict[RiskSeverity, int] = {
    RiskSeverity.CRITICAL: 0,
    RiskSeverity.HIGH: 1,
    RiskSeverity.MEDIUM: 2,
    RiskSeverity.LOW: 3,
}


def categorize_risk(score: float) -> FundRiskLevel:
    for upper, level in _RISK_BANDS:
        if score < upper:
            return level
    return FundRiskLevel.VERY_HIGH


def identify_key_risk_factors(data: FundRiskInput) -> list[FundRiskFactor]:
    factors: list[FundRiskFactor] = []
    for field_name, (category, name, impact, description, mitigation) in _COMPONENTS.items():
        value = getattr(data, field_name)
        if value < KEY_RISK_THRESHOLD:
            continue
        likelihood = value / 100
        factors.append(FundRiskFactor(
            category=category,
            name=name,
            description=description,
            likelihood=likelihood,
            impact=impact,
            risk_score=round(likelihood * impact, 4),
            mitigation=mitigation,
        ))
    return sorted(factors, key=lambda f: f.risk_score, reverse=True)


def benchmark_risk(score: float) -> RiskBenchmark:
    points = {
        group: BenchmarkPoint(average=average, percentile=percentile, delta=round(score - average, 2))
        for group, (average, percentile) in PEER_BENCHMARKS.items()
    }
    return RiskBenchmark(**points)


def assess_fund_risk(data: FundRiskInput) -> FundRiskAssessment:
    """Equal-weighted fund risk score with key factors and peer comparison."""
    score = (
        data.concentration_risk * COMPONENT_WEIGHT
        + data.liquidity_risk * COMPONENT_WEIGHT
        + data.operational_risk * COMPONENT_WEIGHT
        + data.market_risk * COMPONENT_WEIGHT
    )
    return FundRiskAssessment(
        fund_id=data.fund_id,
        overall_risk=categorize_risk(score),
        risk_score=score,
        concentration_risk=data.concentration_risk,
        liquidity_risk=data.liquidity_risk,
        operational_risk=data.operational_risk,
        market_risk=data.market_risk,
        key_risk_factors=identify_key_risk_factors(data),
        benchmark_comparison=benchmark_risk(score),
    )


def calculate_optimal_call_amount(total_commitments: float, total_called: float) -> float:
    remaining = max(total_commitments - total_called, 0.0)
    return min(remaining * DEPLOYMENT_RATE, MAX_CALL_AMOUNT)


def sort_compliance_alerts(alerts: Sequence[ComplianceAlert]) -> list[ComplianceAlert]:
    """Most severe first, then earliest deadline; undated alerts trail dated ones."""
    far_future = datetime.max.replace(tzinfo=timezone.utc)

    def _key(alert: ComplianceAlert) -> tuple[int, bool, datetime]:
        deadline = alert.deadline
        if deadline is not None and deadline.tzinfo is None:
            deadline = deadline.replace(tzinfo=timezone.utc)
        return (_SEVERITY_ORDER[alert.severity], deadline is None, deadline or far_future)

    return sorted(alerts, key=_key)
