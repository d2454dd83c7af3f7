"""Tests for the Deal Structuring module: recommendations, risk, models and task triage."""

from __future__ import annotations

from datetime import datetime

import pytest
from httpx import AsyncClient

from portfolio_risk.models.enums import DealType, RecommendationPriority, ScreeningMode, TaskStatus
from portfolio_risk.modules.deal_structuring.advisor import (
    calculate_overall_risk,
    calculate_risk_score,
    generate_financial_model_suggestion,
    generate_structuring_recommendations,
    perform_risk_assessment,
    triage_autonomous_tasks,
)
from portfolio_risk.modules.deal_structuring.schemas import (
    DealKeyMetrics,
    DealRiskCategory,
    DealStructuringProject,
)

pytestmark = pytest.mark.anyio


def _lbo(**metrics) -> DealStructuringProject:
    return DealStructuringProject(
        id="deal-1",
        name="Project Atlas",
        type=DealType.LBO_STRUCTURE,
        target_value=100_000_000,
        current_valuation=98_000_000,
        key_metrics=DealKeyMetrics(**metrics),
    )


def _category(risk: str, impact: float = 5.0) -> DealRiskCategory:
    return DealRiskCategory(category="financial", risk=risk, factors=[], mitigation=[], impact=impact)


class TestRecommendations:
    """Rule-based structuring recommendations."""

    def test_all_rules_fire_in_priority_order(self) -> None:
        recs = generate_structuring_recommendations(_lbo(leverage=4.5, irr=18), ScreeningMode.ASSISTED)
        assert [r.id for r in recs] == [
            "leverage-opt-deal-1",
            "pricing-opt-deal-1",
            "structure-opt-deal-1",
            "timing-opt-deal-1",
        ]
        assert [r.priority for r in recs] == [
            RecommendationPriority.HIGH,
            RecommendationPriority.MEDIUM,
            RecommendationPriority.MEDIUM,
            RecommendationPriority.LOW,
        ]
        assert recs[0].description == "Current leverage of 4.5x may be optimized for better risk-return profile"
        assert recs[1].description.startswith("Current 2.0% discount")

    def test_traditional_mode_skips_timing(self) -> None:
        recs = generate_structuring_recommendations(_lbo(leverage=4.5), ScreeningMode.TRADITIONAL)
        assert "timing-opt-deal-1" not in [r.id for r in recs]

    def test_moderate_deal_only_gets_timing(self) -> None:
        deal = DealStructuringProject(
            id="deal-2",
            name="Project Birch",
            type=DealType.MULTI_ASSET_CONTINUATION,
            target_value=100,
            current_valuation=90,
            key_metrics=DealKeyMetrics(leverage=3.0, irr=25),
        )
        recs = generate_structuring_recommendations(deal, ScreeningMode.AUTONOMOUS)
        assert [r.type for r in recs] == ["optimization"]

    def test_hybrid_structure_only_for_lbo(self) -> None:
        deal = _lbo(irr=15).model_copy(update={"type": DealType.SINGLE_ASSET_CONTINUATION})
        recs = generate_structuring_recommendations(deal, ScreeningMode.TRADITIONAL)
        assert "structure" not in [r.type for r in recs]


class TestRiskAnalysis:
    """Deal risk categories and roll-up."""

    def test_high_leverage_is_high_risk(self) -> None:
        result = perform_risk_assessment(_lbo(leverage=4.5))
        assert result.overall_risk == "high"
        assert result.categories[0].risk == "high"
        assert result.risk_score == 73
        assert [m.metric for m in result.monitoring] == [
            "Leverage Ratio", "Cash Flow Coverage", "Covenant Headroom",
        ]

    def test_moderate_leverage_is_low_overall(self) -> None:
        result = perform_risk_assessment(_lbo(leverage=3.0))
        assert result.overall_risk == "low"
        assert 55 <= result.risk_score <= 57

    @pytest.mark.parametrize(
        ("risks", "expected"),
        [
            (["high", "high"], "critical"),
            (["high", "low"], "high"),
            (["medium", "medium", "medium"], "medium"),
            (["medium", "medium"], "low"),
            ([], "low"),
        ],
    )
    def test_overall_risk_rollup(self, risks: list[str], expected: str) -> None:
        assert calculate_overall_risk([_category(r) for r in risks]) == expected

    def test_risk_score_bounds(self) -> None:
        assert calculate_risk_score([]) == 0
        assert calculate_risk_score([_category("high", impact=12)]) == 100


class TestFinancialModel:
    """Model type selection by deal type."""

    def test_lbo_model(self) -> None:
        model = generate_financial_model_suggestion(_lbo(leverage=4.2))
        assert model.model_type == "LBO"
        assert model.parameters["leverage_target"] == 4.2

    def test_other_deal_defaults_to_dcf(self) -> None:
        model = generate_financial_model_suggestion(DealStructuringProject(id="d", name="Misc"))
        assert model.model_type == "DCF"
        assert model.parameters["leverage_target"] == 3.5
        assert model.parameters["equity_contribution"] == 50_000_000


class TestTaskTriage:
    """Autonomous task confidence gate."""

    def test_confident_tasks_complete(self, now: datetime) -> None:
        results = triage_autonomous_tasks(
            _lbo(),
            ["SCHEDULE_MEETINGS", "COVENANT_ANALYSIS", "PREPARE_MATERIALS", "SOMETHING_NEW"],
            now,
        )
        assert [r.status for r in results] == [
            TaskStatus.COMPLETED,
            TaskStatus.REQUIRES_APPROVAL,
            TaskStatus.REQUIRES_APPROVAL,
            TaskStatus.REQUIRES_APPROVAL,
        ]
        assert results[0].result.timestamp == now
        assert results[0].result.details == "Completed SCHEDULE_MEETINGS for Project Atlas"
        assert results[3].confidence == 0.70
        assert results[1].result is None

    def test_confidence_above_gate_completes(self, now: datetime) -> None:
        results = triage_autonomous_tasks(_lbo(), ["GENERATE_RISK_REPORT"], now)
        assert results[0].status == TaskStatus.COMPLETED


class TestDealStructuringAPI:
    """Tests for /v1/deal-structuring endpoints."""

    async def test_recommendations_endpoint(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/deal-structuring/recommendations",
            json={
                "deal": {
                    "id": "deal-1",
                    "name": "Project Atlas",
                    "type": "LBO_STRUCTURE",
                    "key_metrics": {"leverage": 4.5},
                },
            },
        )
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["mode"] == "assisted"
        assert body["high_priority_count"] == 1
        assert body["average_confidence"] == pytest.approx((0.87 + 0.65) / 2, abs=1e-4)

    async def test_risk_analysis_endpoint(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/deal-structuring/risk-analysis",
            json={"id": "deal-1", "name": "Atlas", "key_metrics": {"leverage": 5}},
        )
        assert resp.status_code == 200, resp.text
        assert resp.json()["overall_risk"] == "high"

    async def test_financial_model_endpoint(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/deal-structuring/financial-model",
            json={"id": "deal-3", "name": "Cedar", "type": "SINGLE_ASSET_CONTINUATION"},
        )
        assert resp.status_code == 200, resp.text
        assert resp.json()["model_type"] == "NAV"

    async def test_autonomous_tasks_endpoint(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/deal-structuring/autonomous-tasks",
            json={
                "deal": {"id": "deal-1", "name": "Atlas"},
                "tasks": ["BENCHMARK_ANALYSIS", "COVENANT_ANALYSIS"],
            },
        )
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["completed"] == 1
        assert body["requires_approval"] == 1

    async def test_autonomous_tasks_empty_list_422(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/deal-structuring/autonomous-tasks",
            json={"deal": {"id": "deal-1", "name": "Atlas"}, "tasks": []},
        )
        assert resp.status_code == 422
