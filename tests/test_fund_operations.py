"""Tests for the Fund Operations module: fund risk, capital calls and compliance alerts."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from httpx import AsyncClient

from portfolio_risk.models.enums import ComplianceAlertType, FundRiskLevel, RiskSeverity
from portfolio_risk.modules.fund_operations.analytics import (
    assess_fund_risk,
    calculate_optimal_call_amount,
    categorize_risk,
    identify_key_risk_factors,
    sort_compliance_alerts,
)
from portfolio_risk.modules.fund_operations.schemas import ComplianceAlert, FundRiskInput

pytestmark = pytest.mark.anyio


def _alert(id: str, severity: RiskSeverity, deadline: datetime | None = None) -> ComplianceAlert:
    return ComplianceAlert(
        id=id,
        type=ComplianceAlertType.REGULATORY,
        severity=severity,
        message=f"Alert {id}",
        deadline=deadline,
    )


class TestFundRisk:
    """Fund-level risk scoring."""

    @pytest.mark.parametrize(
        ("score", "level"),
        [
            (0, FundRiskLevel.VERY_LOW),
            (19.99, FundRiskLevel.VERY_LOW),
            (20, FundRiskLevel.LOW),
            (40, FundRiskLevel.MEDIUM),
            (60, FundRiskLevel.HIGH),
            (79.99, FundRiskLevel.HIGH),
            (80, FundRiskLevel.VERY_HIGH),
            (100, FundRiskLevel.VERY_HIGH),
        ],
    )
    def test_risk_bands(self, score: float, level: FundRiskLevel) -> None:
        assert categorize_risk(score) == level

    def test_key_factors_at_or_above_sixty_sorted(self) -> None:
        data = FundRiskInput(
            concentration_risk=70, liquidity_risk=90, operational_risk=59, market_risk=60
        )
        factors = identify_key_risk_factors(data)
        assert [f.category for f in factors] == ["LIQUIDITY", "MARKET", "MARKET"]
        assert [f.risk_score for f in factors] == [0.63, 0.56, 0.45]

    def test_assessment(self) -> None:
        result = assess_fund_risk(FundRiskInput(
            fund_id="FUND-III",
            concentration_risk=70,
            liquidity_risk=90,
            operational_risk=59,
            market_risk=60,
        ))
        assert result.risk_score == pytest.approx(69.75)
        assert result.overall_risk == FundRiskLevel.HIGH
        assert result.benchmark_comparison.industry.delta == pytest.approx(19.75)
        assert result.benchmark_comparison.size.percentile == 70

    def test_low_risk_fund_has_no_key_factors(self) -> None:
        result = assess_fund_risk(FundRiskInput(
            concentration_risk=10, liquidity_risk=10, operational_risk=10, market_risk=10
        ))
        assert result.overall_risk == FundRiskLevel.VERY_LOW
        assert result.key_risk_factors == []


class TestCapitalCalls:
    """Recommended call sizing."""

    def test_fifteen_percent_of_remaining(self) -> None:
        assert calculate_optimal_call_amount(200_000_000, 50_000_000) == pytest.approx(22_500_000)

    def test_capped_at_fifty_million(self) -> None:
        assert calculate_optimal_call_amount(1_000_000_000, 0) == 50_000_000

    def test_fully_called_fund(self) -> None:
        assert calculate_optimal_call_amount(100, 100) == 0
        assert calculate_optimal_call_amount(100, 150) == 0


class TestComplianceAlerts:
    """Alert prioritisation."""

    def test_severity_then_deadline(self) -> None:
        alerts = [
            _alert("low", RiskSeverity.LOW, datetime(2024, 1, 1, tzinfo=timezone.utc)),
            _alert("high-late", RiskSeverity.HIGH, datetime(2024, 9, 1, tzinfo=timezone.utc)),
            _alert("critical", RiskSeverity.CRITICAL),
            _alert("high-soon", RiskSeverity.HIGH, datetime(2024, 8, 1, tzinfo=timezone.utc)),
        ]
        ordered = [a.id for a in sort_compliance_alerts(alerts)]
        assert ordered == ["critical", "high-soon", "high-late", "low"]

    def test_undated_alerts_trail_within_severity(self) -> None:
        alerts = [
            _alert("undated", RiskSeverity.MEDIUM),
            _alert("dated", RiskSeverity.MEDIUM, datetime(2030, 1, 1, tzinfo=timezone.utc)),
        ]
        assert [a.id for a in sort_compliance_alerts(alerts)] == ["dated", "undated"]

    def test_naive_deadlines_compare_as_utc(self) -> None:
        alerts = [
            _alert("aware", RiskSeverity.HIGH, datetime(2024, 8, 2, tzinfo=timezone.utc)),
            _alert("naive", RiskSeverity.HIGH, datetime(2024, 8, 1)),
        ]
        assert [a.id for a in sort_compliance_alerts(alerts)] == ["naive", "aware"]


class TestFundOperationsAPI:
    """Tests for /v1/fund-operations endpoints."""

    async def test_fund_risk_endpoint(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/fund-operations/risk",
            json={"concentration_risk": 80, "liquidity_risk": 80, "operational_risk": 80, "market_risk": 80},
        )
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["overall_risk"] == "VERY_HIGH"
        assert len(body["key_risk_factors"]) == 4

    async def test_fund_risk_out_of_range_422(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/fund-operations/risk",
            json={"concentration_risk": 120, "liquidity_risk": 0, "operational_risk": 0, "market_risk": 0},
        )
        assert resp.status_code == 422

    async def test_capital_call_endpoint(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/fund-operations/capital-call",
            json={"total_commitments": 200_000_000, "total_called": 50_000_000},
        )
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["remaining_commitment"] == 150_000_000
        assert body["recommended_amount"] == pytest.approx(22_500_000)
        assert body["cap"] == 50_000_000

    async def test_capital_call_overcalled_400(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/fund-operations/capital-call",
            json={"total_commitments": 100, "total_called": 200},
        )
        assert resp.status_code == 400
        assert resp.json()["detail"] == "total_called cannot exceed total_commitments"

    async def test_prioritize_alerts_endpoint(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/fund-operations/compliance-alerts/prioritize",
            json={"alerts": [
                {"id": "a", "type": "TAX", "severity": "LOW", "message": "Filing"},
                {"id": "b", "type": "REGULATORY", "severity": "CRITICAL", "message": "Form PF"},
            ]},
        )
        assert resp.status_code == 200, resp.text
        assert [a["id"] for a in resp.json()["alerts"]] == ["b", "a"]
