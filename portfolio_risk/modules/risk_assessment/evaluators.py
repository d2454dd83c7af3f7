"""Per-domain risk factor evaluators: pure threshold checks, no I/O.

Each evaluator compares the metrics it is given against the limit tables in
``thresholds`` and returns the list of RiskFactors that fired. A metric that
was not supplied never fires its rule.
"""

from __future__ import annotations

from datetime import datetime

from portfolio_risk.models.enums import RiskCategory, RiskSeverity, RiskStatus
from portfolio_risk.modules.risk_assessment.schemas import (
    DueDiligenceRiskInput,
    LegalRiskInput,
    MarketRiskInput,
    OperationsRiskInput,
    PortfolioRiskInput,
    RiskFactor,
)
from portfolio_risk.modules.risk_assessment.thresholds import (
    DUE_DILIGENCE_LIMITS,
    LEGAL_LIMITS,
    MARKET_LIMITS,
    OPERATIONS_LIMITS,
    PORTFOLIO_LIMITS,
)

SOURCE_PORTFOLIO = "Portfolio Management"
SOURCE_FUND_OPERATIONS = "Fund Operations"
SOURCE_DUE_DILIGENCE = "Due Diligence"
SOURCE_LEGAL = "Legal Management"
SOURCE_MARKET = "Market Intelligence"


def _pct(value: float, digits: int = 1) -> str:
    return f"{value * 100:.{digits}f}%"


def _factor(
    now: datetime,
    *,
    id: str,
    category: RiskCategory,
    severity: RiskSeverity,
    probability: float,
    impact: float,
    description: str,
    source: str,
    indicators: list[str],
    mitigation: list[str],
    status: RiskStatus,
) -> RiskFactor:
    return RiskFactor(
        id=id,
        category=category,
        severity=severity,
        probability=probability,
        impact=impact,
        description=description,
        source=source,
        indicators=indicators,
        mitigation=mitigation,
        status=status,
        detected_at=now,
        last_assessed=now,
    )


# ── Portfolio ─────────────────────────────────────────────────────────────────


def evaluate_portfolio(data: PortfolioRiskInput, now: datetime) -> list[RiskFactor]:
    risks: list[RiskFactor] = []

    if data.largest_position is not None and data.largest_position > PORTFOLIO_LIMITS["max_single_investment"]:
        risks.append(_factor(
            now,
            id="CONC-001",
            category=RiskCategory.FINANCIAL,
            severity=RiskSeverity.HIGH,
            probability=0.7,
            impact=7,
            description="Portfolio concentration exceeds prudent limits",
            source=SOURCE_PORTFOLIO,
            indicators=[f"Largest position: {_pct(data.largest_position)}"],
            mitigation=["Reduce position size", "Diversify holdings", "Implement position limits"],
            status=RiskStatus.ACTIVE,
        ))

    if data.liquidity_ratio is not None and data.liquidity_ratio < PORTFOLIO_LIMITS["min_cash_reserve"]:
        risks.append(_factor(
            now,
            id="LIQ-001",
            category=RiskCategory.LIQUIDITY,
            severity=RiskSeverity.MEDIUM,
            probability=0.6,
            impact=6,
            description="Low liquidity may constrain operational flexibility",
            source=SOURCE_FUND_OPERATIONS,
            indicators=[f"Liquidity ratio: {_pct(data.liquidity_ratio)}"],
            mitigation=["Increase cash reserves", "Establish credit facilities", "Improve asset liquidity"],
            status=RiskStatus.MONITORING,
        ))

    if data.recent_performance is not None and data.recent_performance < PORTFOLIO_LIMITS["min_irr"]:
        risks.append(_factor(
            now,
            id="PERF-001",
            category=RiskCategory.FINANCIAL,
            severity=RiskSeverity.MEDIUM,
            probability=0.5,
            impact=8,
            description="Recent performance below target thresholds",
            source=SOURCE_PORTFOLIO,
            indicators=[f"Recent IRR: {_pct(data.recent_performance)}"],
            mitigation=[
                "Review value creation strategies",
                "Accelerate portfolio improvements",
                "Consider strategic exits",
            ],
            status=RiskStatus.ACTIVE,
        ))

    return risks


# ── Due diligence ─────────────────────────────────────────────────────────────


def evaluate_due_diligence(data: DueDiligenceRiskInput, now: datetime) -> list[RiskFactor]:
    risks: list[RiskFactor] = []

    if data.data_completeness is not None and data.data_completeness < DUE_DILIGENCE_LIMITS["min_data_completeness"]:
        risks.append(_factor(
            now,
            id="DD-001",
            category=RiskCategory.OPERATIONAL,
            severity=RiskSeverity.HIGH,
            probability=0.8,
            impact=7,
            description="Incomplete due diligence data may mask critical risks",
            source=SOURCE_DUE_DILIGENCE,
            indicators=[f"Data completeness: {_pct(data.data_completeness)}"],
            mitigation=[
                "Extend due diligence period",
                "Request additional documentation",
                "Engage specialist advisors",
            ],
            status=RiskStatus.ACTIVE,
        ))

    if (
        data.days_remaining is not None
        and data.completeness is not None
        and data.days_remaining < DUE_DILIGENCE_LIMITS["min_days_remaining"]
        and data.completeness < DUE_DILIGENCE_LIMITS["min_workstream_completeness"]
    ):
        risks.append(_factor(
            now,
            id="DD-002",
            category=RiskCategory.OPERATIONAL,
            severity=RiskSeverity.HIGH,
            probability=0.9,
            impact=6,
            description="Insufficient time to complete thorough due diligence",
            source=SOURCE_DUE_DILIGENCE,
            indicators=[
                f"Days remaining: {data.days_remaining}",
                f"Completeness: {_pct(data.completeness)}",
            ],
            mitigation=[
                "Request deadline extension",
                "Prioritize critical workstreams",
                "Increase resource allocation",
            ],
            status=RiskStatus.ESCALATED,
        ))

    if data.red_flags:
        risks.append(_factor(
            now,
            id="DD-003",
            category=RiskCategory.STRATEGIC,
            severity=RiskSeverity.CRITICAL,
            probability=1.0,
            impact=9,
            description="Critical red flags identified during due diligence",
            source=SOURCE_DUE_DILIGENCE,
            indicators=list(data.red_flags),
            mitigation=[
                "Investigate thoroughly",
                "Consider deal termination",
                "Negotiate protective provisions",
            ],
            status=RiskStatus.ESCALATED,
        ))

    return risks


# ── Legal & compliance ────────────────────────────────────────────────────────


def evaluate_legal(data: LegalRiskInput, now: datetime) -> list[RiskFactor]:
    risks: list[RiskFactor] = []

    if data.compliance_score is not None and data.compliance_score < LEGAL_LIMITS["min_compliance_score"]:
        risks.append(_factor(
            now,
            id="LEGAL-001",
            category=RiskCategory.REGULATORY,
            severity=RiskSeverity.HIGH,
            probability=0.8,
            impact=8,
            description="Compliance score below acceptable threshold",
            source=SOURCE_LEGAL,
            indicators=[f"Compliance score: {data.compliance_score:g}/100"],
            mitigation=[
                "Conduct compliance audit",
                "Implement remediation plan",
                "Enhance monitoring systems",
            ],
            status=RiskStatus.ACTIVE,
        ))

    if len(data.pending_regulations) > LEGAL_LIMITS["max_pending_regulations"]:
        risks.append(_factor(
            now,
            id="LEGAL-002",
            category=RiskCategory.REGULATORY,
            severity=RiskSeverity.MEDIUM,
            probability=0.7,
            impact=6,
            description="Multiple pending regulatory changes may impact operations",
            source=SOURCE_LEGAL,
            indicators=[f"Pending regulations: {len(data.pending_regulations)}"],
            mitigation=[
                "Monitor regulatory developments",
                "Engage regulatory counsel",
                "Prepare adaptation strategies",
            ],
            status=RiskStatus.MONITORING,
        ))

    if data.legal_cost_ratio is not None and data.legal_cost_ratio > LEGAL_LIMITS["max_legal_cost_ratio"]:
        risks.append(_factor(
            now,
            id="LEGAL-003",
            category=RiskCategory.FINANCIAL,
            severity=RiskSeverity.MEDIUM,
            probability=0.6,
            impact=5,
            description="Legal costs exceeding budget parameters",
            source=SOURCE_LEGAL,
            indicators=[f"Legal cost ratio: {_pct(data.legal_cost_ratio, 2)}"],
            mitigation=["Review legal spend", "Negotiate fee arrangements", "Optimize legal processes"],
            status=RiskStatus.MONITORING,
        ))

    return risks


# ── Market ────────────────────────────────────────────────────────────────────


def evaluate_market(data: MarketRiskInput, now: datetime) -> list[RiskFactor]:
    risks: list[RiskFactor] = []
    vix_threshold = MARKET_LIMITS["vix_threshold"]

    if data.vix is not None and data.vix > vix_threshold:
        risks.append(_factor(
            now,
            id="MKT-001",
            category=RiskCategory.MARKET,
            severity=RiskSeverity.HIGH,
            probability=0.9,
            impact=7,
            description="Elevated market volatility may impact portfolio valuations",
            source=SOURCE_MARKET,
            indicators=[f"VIX: {data.vix:g}", f"Threshold: {vix_threshold:g}"],
            mitigation=[
                "Implement hedging strategies",
                "Review position sizing",
                "Prepare for market dislocations",
            ],
            status=RiskStatus.ACTIVE,
        ))

    if data.rate_change_velocity is not None and data.rate_change_velocity > MARKET_LIMITS["max_rate_change_velocity"]:
        risks.append(_factor(
            now,
            id="MKT-002",
            category=RiskCategory.MARKET,
            severity=RiskSeverity.MEDIUM,
            probability=0.7,
            impact=6,
            description="Rapid interest rate changes affecting valuation multiples",
            source=SOURCE_MARKET,
            indicators=[f"Rate change velocity: {data.rate_change_velocity:g}"],
            mitigation=[
                "Assess interest rate sensitivity",
                "Review debt financing terms",
                "Consider rate hedging",
            ],
            status=RiskStatus.MONITORING,
        ))

    if data.sector_concentration is not None and data.sector_concentration > MARKET_LIMITS["max_sector_concentration"]:
        risks.append(_factor(
            now,
            id="MKT-003",
            category=RiskCategory.STRATEGIC,
            severity=RiskSeverity.MEDIUM,
            probability=0.6,
            impact=7,
            description="High sector concentration increases correlation risk",
            source=SOURCE_MARKET,
            indicators=[f"Sector concentration: {_pct(data.sector_concentration)}"],
            mitigation=[
                "Diversify sector exposure",
                "Monitor sector-specific risks",
                "Adjust investment strategy",
            ],
            status=RiskStatus.ACTIVE,
        ))

    return risks


# ── Operations ────────────────────────────────────────────────────────────────


def evaluate_operations(data: OperationsRiskInput, now: datetime) -> list[RiskFactor]:
    risks: list[RiskFactor] = []

    if data.processing_efficiency is not None and data.processing_efficiency < OPERATIONS_LIMITS["min_processing_rate"]:
        risks.append(_factor(
            now,
            id="OPS-001",
            category=RiskCategory.OPERATIONAL,
            severity=RiskSeverity.MEDIUM,
            probability=0.7,
            impact=5,
            description="Processing efficiency below optimal levels",
            source=SOURCE_FUND_OPERATIONS,
            indicators=[f"Efficiency: {_pct(data.processing_efficiency)}"],
            mitigation=[
                "Process optimization review",
                "Automation implementation",
                "Staff training programs",
            ],
            status=RiskStatus.ACTIVE,
        ))

    if data.system_uptime is not None and data.system_uptime < OPERATIONS_LIMITS["min_system_uptime"]:
        risks.append(_factor(
            now,
            id="OPS-002",
            category=RiskCategory.TECHNOLOGY,
            severity=RiskSeverity.HIGH,
            probability=0.8,
            impact=7,
            description="System reliability issues affecting operations",
            source=SOURCE_FUND_OPERATIONS,
            indicators=[f"System uptime: {_pct(data.system_uptime, 2)}"],
            mitigation=[
                "Infrastructure upgrades",
                "Redundancy implementation",
                "Disaster recovery testing",
            ],
            status=RiskStatus.ACTIVE,
        ))

    if data.staff_turnover is not None and data.staff_turnover > OPERATIONS_LIMITS["max_staff_turnover"]:
        risks.append(_factor(
            now,
            id="OPS-003",
            category=RiskCategory.OPERATIONAL,
            severity=RiskSeverity.HIGH,
            probability=0.6,
            impact=6,
            description="High staff turnover affecting operational continuity",
            source=SOURCE_FUND_OPERATIONS,
            indicators=[f"Staff turnover: {_pct(data.staff_turnover)}"],
            mitigation=["Retention programs", "Knowledge management systems", "Succession planning"],
            status=RiskStatus.MONITORING,
        ))

    return risks
