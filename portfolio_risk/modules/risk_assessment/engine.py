"""Risk assessment engine: deterministic, rule-based, no LLM.

Wraps the per-domain evaluators into RiskAssessments and rolls them up into a
fund-level comprehensive view.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

import structlog

from portfolio_risk.models.enums import RiskEntityType
from portfolio_risk.modules.risk_assessment.aggregation import (
    analyze_risk_trends,
    calculate_aggregate_risk_score,
    calculate_overall_risk_score,
    calculate_risk_grade,
    determine_alert_level,
    generate_recommendations,
)
from portfolio_risk.modules.risk_assessment.correlation import identify_cross_module_risks
from portfolio_risk.modules.risk_assessment.evaluators import (
    evaluate_due_diligence,
    evaluate_legal,
    evaluate_market,
    evaluate_operations,
    evaluate_portfolio,
)
from portfolio_risk.modules.risk_assessment.schemas import (
    AlertSummary,
    ComprehensiveRiskAssessment,
    ComprehensiveRiskInput,
    DueDiligenceRiskInput,
    LegalRiskInput,
    MarketRiskInput,
    OperationsRiskInput,
    PortfolioRiskInput,
    RiskAssessment,
    RiskFactor,
    RiskMetrics,
    RiskTrendPoint,
)
from portfolio_risk.modules.risk_assessment.thresholds import (
    MITIGATION_EFFECTIVENESS,
    RISK_HISTORY,
)

logger = structlog.get_logger()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RiskAssessmentEngine:
    """Stateless apart from its clock and the trend history it compares against."""

    def __init__(
        self,
        clock: Callable[[], datetime] = utcnow,
        history: Sequence[dict] = RISK_HISTORY,
    ) -> None:
        self._clock = clock
        self._history = history

    # ── Domain assessments ────────────────────────────────────────────────────

    def assess_portfolio_risk(self, data: PortfolioRiskInput) -> RiskAssessment:
        now = self._clock()
        return self._build_assessment(
            "PORTFOLIO-MAIN", RiskEntityType.FUND, "portfolio", evaluate_portfolio(data, now), now
        )

    def assess_due_diligence_risk(self, data: DueDiligenceRiskInput) -> RiskAssessment:
        now = self._clock()
        return self._build_assessment(
            data.deal_id or "DD-ASSESSMENT",
            RiskEntityType.DEAL,
            "due_diligence",
            evaluate_due_diligence(data, now),
            now,
        )

    def assess_legal_compliance_risk(self, data: LegalRiskInput) -> RiskAssessment:
        now = self._clock()
        return self._build_assessment(
            "LEGAL-COMPLIANCE", RiskEntityType.FUND, "legal", evaluate_legal(data, now), now
        )

    def assess_market_risk(self, data: MarketRiskInput) -> RiskAssessment:
        now = self._clock()
        return self._build_assessment(
            "MARKET-ASSESSMENT",
            RiskEntityType.MARKET_SECTOR,
            "market",
            evaluate_market(data, now),
            now,
        )

    def assess_operational_risk(self, data: OperationsRiskInput) -> RiskAssessment:
        now = self._clock()
        return self._build_assessment(
            "OPERATIONS", RiskEntityType.FUND, "operations", evaluate_operations(data, now), now
        )

    def assess(
        self,
        data: PortfolioRiskInput
        | DueDiligenceRiskInput
        | LegalRiskInput
        | MarketRiskInput
        | OperationsRiskInput,
    ) -> RiskAssessment:
        """Dispatch a tagged domain input to its assessment."""
        if isinstance(data, PortfolioRiskInput):
            return self.assess_portfolio_risk(data)
        if isinstance(data, DueDiligenceRiskInput):
            return self.assess_due_diligence_risk(data)
        if isinstance(data, LegalRiskInput):
            return self.assess_legal_compliance_risk(data)
        if isinstance(data, MarketRiskInput):
            return self.assess_market_risk(data)
        if isinstance(data, OperationsRiskInput):
            return self.assess_operational_risk(data)
        raise ValueError(f"Unsupported risk domain: {type(data).__name__}")

    # ── Comprehensive ─────────────────────────────────────────────────────────

    def generate_comprehensive_risk_assessment(
        self, data: ComprehensiveRiskInput
    ) -> ComprehensiveRiskAssessment:
        now = self._clock()
        modules: dict[str, RiskAssessment] = {}

        if data.portfolio is not None:
            modules["portfolio"] = self.assess_portfolio_risk(data.portfolio)
        if data.due_diligence is not None:
            modules["due_diligence"] = self.assess_due_diligence_risk(data.due_diligence)
        if data.legal is not None:
            modules["legal"] = self.assess_legal_compliance_risk(data.legal)
        if data.market is not None:
            modules["market"] = self.assess_market_risk(data.market)
        if data.operations is not None:
            modules["operations"] = self.assess_operational_risk(data.operations)

        all_risks = [risk for assessment in modules.values() for risk in assessment.risks]
        cross_module_risks = identify_cross_module_risks(all_risks, modules, now)
        combined = all_risks + cross_module_risks

        overall_score = calculate_aggregate_risk_score(list(modules.values()))
        overall = RiskAssessment(
            entity_id="FUND-OVERALL",
            entity_type=RiskEntityType.FUND,
            overall_risk_score=overall_score,
            risk_grade=calculate_risk_grade(overall_score),
            risks=combined,
            risk_trends=analyze_risk_trends(overall_score, "overall", self._history),
            recommendations=generate_recommendations(combined),
            alert_level=determine_alert_level(overall_score),
            generated_at=now,
        )

        logger.info(
            "comprehensive_risk_assessment",
            modules=list(modules),
            overall_score=round(overall_score, 2),
            risk_count=len(combined),
            cross_module_risks=len(cross_module_risks),
        )

        return ComprehensiveRiskAssessment(
            overall_assessment=overall,
            module_assessments=modules,
            cross_module_risks=cross_module_risks,
            risk_metrics=self.calculate_risk_metrics(modules, combined),
        )

    def calculate_risk_metrics(
        self,
        module_assessments: dict[str, RiskAssessment],
        risks: Sequence[RiskFactor],
    ) -> RiskMetrics:
        distribution = Counter(r.category.value for r in risks)
        severities = Counter(r.severity.value.lower() for r in risks)

        trend_points = [
            RiskTrendPoint(
                date=str(row["date"]),
                overall_risk=float(row["overall"]),
                category_breakdown={
                    key: float(value)
                    for key, value in row.items()
                    if key not in ("date", "overall")
                },
            )
            for row in self._history
        ]

        return RiskMetrics(
            module_risk_scores={
                name: assessment.overall_risk_score
                for name, assessment in module_assessments.items()
            },
            portfolio_risk_distribution=dict(distribution),
            risk_trends=trend_points,
            alert_summary=AlertSummary(
                critical=severities.get("critical", 0),
                high=severities.get("high", 0),
                medium=severities.get("medium", 0),
                low=severities.get("low", 0),
            ),
            mitigation_effectiveness=dict(MITIGATION_EFFECTIVENESS),
        )

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _build_assessment(
        self,
        entity_id: str,
        entity_type: RiskEntityType,
        module: str,
        risks: list[RiskFactor],
        now: datetime,
    ) -> RiskAssessment:
        score = calculate_overall_risk_score(risks)
        logger.debug("risk_module_assessed", module=module, score=round(score, 2), risks=len(risks))
        return RiskAssessment(
            entity_id=entity_id,
            entity_type=entity_type,
            overall_risk_score=score,
            risk_grade=calculate_risk_grade(score),
            risks=risks,
            risk_trends=analyze_risk_trends(score, module, self._history),
            recommendations=generate_recommendations(risks),
            alert_level=determine_alert_level(score),
            generated_at=now,
        )
