"""Tests for the Deal Screening module: template scoring, insights and API."""

from __future__ import annotations

from datetime import datetime

import pytest
from httpx import AsyncClient

from portfolio_risk.models.enums import AutomationLevel, ScreeningMode
from portfolio_risk.modules.deal_screening.defaults import default_templates
from portfolio_risk.modules.deal_screening.recommender import (
    estimate_screening_time,
    generate_customization_suggestions,
    identify_opportunity_risks,
    recommend_templates,
    score_template,
    sector_benchmark,
)
from portfolio_risk.modules.deal_screening.repository import InMemoryTemplateRepository
from portfolio_risk.modules.deal_screening.schemas import DealOpportunity, TemplateCreate
from portfolio_risk.modules.deal_screening import service

pytestmark = pytest.mark.anyio


def _criteria(*weights: float) -> list[dict]:
    return [
        {"id": f"c-{i}", "name": f"Criterion {i}", "category": "financial", "weight": w}
        for i, w in enumerate(weights)
    ]


def _templates_by_id() -> dict:
    return {t.id: t for t in default_templates()}


# ── Scoring ───────────────────────────────────────────────────────────────────


class TestScoreTemplate:
    """score_template components."""

    def test_fund_template_in_assisted_mode(self, now: datetime) -> None:
        fund = _templates_by_id()["template-fund-default"]
        # 40 + 0.78*30 + 45/50*15 + 10 for matching automation, nothing for recency
        assert score_template(fund, ScreeningMode.ASSISTED, now) == 87

    def test_mode_mismatch_loses_alignment_points(self, now: datetime) -> None:
        fund = _templates_by_id()["template-fund-default"]
        assert score_template(fund, ScreeningMode.AUTONOMOUS, now) == 77

    def test_recent_use_adds_recency_points(self, now: datetime) -> None:
        fund = _templates_by_id()["template-fund-default"]
        fresh = fund.model_copy(
            update={"analytics": fund.analytics.model_copy(update={"last_used": now})}
        )
        assert score_template(fresh, ScreeningMode.ASSISTED, now) == 92

    def test_never_used_template(self, now: datetime) -> None:
        fund = _templates_by_id()["template-fund-default"]
        blank = fund.model_copy(
            update={"analytics": fund.analytics.model_copy(
                update={"last_used": None, "usage_count": 0, "success_rate": 0.0}
            )}
        )
        assert score_template(blank, ScreeningMode.ASSISTED, now) == 50


class TestRecommendTemplates:
    """Ranking, filtering and fallback."""

    def test_matches_asset_type(self, now: datetime) -> None:
        opp = DealOpportunity(asset_type="fund", sector="Technology")
        recs = recommend_templates(default_templates(), opp, ScreeningMode.ASSISTED, now)
        assert [r.template.id for r in recs] == ["template-fund-default"]
        assert recs[0].reasons[0] == "Designed for fund investments"
        assert "78% historical success rate" in recs[0].reasons
        assert "Used 45 times by the team" in recs[0].reasons

    def test_autonomous_drops_manual_templates(self, now: datetime) -> None:
        manual = default_templates()[0].model_copy(
            update={"id": "manual-fund", "automation_level": AutomationLevel.NONE}
        )
        templates = [manual, *default_templates()]
        opp = DealOpportunity(asset_type="fund")
        recs = recommend_templates(templates, opp, ScreeningMode.AUTONOMOUS, now)
        assert [r.template.id for r in recs] == ["template-fund-default"]

    def test_results_sorted_and_limited(self, now: datetime) -> None:
        base = default_templates()[0]
        templates = [
            base.model_copy(update={
                "id": f"fund-{i}",
                "analytics": base.analytics.model_copy(update={"success_rate": i / 10}),
            })
            for i in range(6)
        ]
        opp = DealOpportunity(asset_type="fund")
        recs = recommend_templates(templates, opp, ScreeningMode.ASSISTED, now)
        assert len(recs) == 3
        scores = [r.recommendation_score for r in recs]
        assert scores == sorted(scores, reverse=True)
        assert recs[0].template.id == "fund-5"

    def test_fallback_when_nothing_matches(self, now: datetime) -> None:
        opp = DealOpportunity(asset_type="co-investment")
        recs = recommend_templates(default_templates(), opp, ScreeningMode.ASSISTED, now)
        assert len(recs) == 3
        assert all(r.recommendation_score == 50 for r in recs)
        assert recs[0].reasons[0] == "Generic template adaptable for co-investment investments"

    def test_deterministic(self, now: datetime) -> None:
        opp = DealOpportunity(asset_type="direct", sector="Healthcare")
        first = recommend_templates(default_templates(), opp, ScreeningMode.TRADITIONAL, now)
        second = recommend_templates(default_templates(), opp, ScreeningMode.TRADITIONAL, now)
        assert first == second


# ── Insights ──────────────────────────────────────────────────────────────────


class TestInsights:
    """Risk flags, benchmarks, time estimates and suggestions."""

    def test_risk_factors_capped_at_three(self, now: datetime) -> None:
        opp = DealOpportunity(
            asset_type="direct",
            sector="Technology",
            geography="Emerging Asia",
            ask_price=150_000_000,
            vintage="2015",
        )
        risks = identify_opportunity_risks(opp, now)
        assert risks == [
            "Currency and political risk due to emerging market exposure",
            "Technology obsolescence and competitive disruption risk",
            "Large transaction size increases execution and market impact risk",
        ]

    def test_mature_vintage(self, now: datetime) -> None:
        opp = DealOpportunity(sector="Consumer", vintage="2016")
        assert identify_opportunity_risks(opp, now) == [
            "Mature vintage may have limited upside potential"
        ]

    def test_non_numeric_vintage_ignored(self, now: datetime) -> None:
        assert identify_opportunity_risks(DealOpportunity(vintage="unknown"), now) == []

    def test_benchmarks_are_fixed_per_sector(self) -> None:
        tech = sector_benchmark("Technology")
        assert (tech.avg_irr, tech.sample_size) == (24.5, 48)
        consumer = sector_benchmark("Consumer")
        assert consumer.avg_multiple == 2.3
        other = sector_benchmark("Agriculture")
        assert (other.avg_irr, other.sample_size) == (20.0, 20)

    def test_time_estimate_for_template(self) -> None:
        fund = _templates_by_id()["template-fund-default"]
        estimate = estimate_screening_time(fund, ScreeningMode.ASSISTED)
        assert estimate.estimated_minutes == 16
        assert estimate.confidence == 0.65
        assert estimate.breakdown.criteria_count == 5
        assert estimate.breakdown.automation_savings == 24

    def test_time_estimate_traditional_has_no_savings(self) -> None:
        fund = _templates_by_id()["template-fund-default"]
        estimate = estimate_screening_time(fund, ScreeningMode.TRADITIONAL)
        assert estimate.estimated_minutes == 40
        assert estimate.breakdown.automation_savings == 0

    def test_time_estimate_without_template(self) -> None:
        estimate = estimate_screening_time(None, ScreeningMode.ASSISTED)
        assert estimate.estimated_minutes is None
        assert estimate.by_mode == {"traditional": 120, "assisted": 45, "autonomous": 15}

    def test_customization_suggestions(self) -> None:
        fund = _templates_by_id()["template-fund-default"]
        opp = DealOpportunity(
            asset_type="fund",
            sector="Technology",
            geography="Asia",
            ask_price=5_000_000,
            similar_deals=["d1", "d2"],
        )
        suggestions = generate_customization_suggestions(opp, fund)
        assert [s.type for s in suggestions] == [
            "add_criterion", "add_criterion", "adjust_weight", "ai_enhancement",
        ]
        weight = suggestions[2]
        assert weight.current_weight == 0.25
        assert weight.suggested_weight == 0.3
        assert "2 similar deals" in suggestions[3].description

    def test_no_suggestions_without_template(self) -> None:
        assert generate_customization_suggestions(DealOpportunity(sector="Technology"), None) == []


# ── Service ───────────────────────────────────────────────────────────────────


class TestService:
    """Template catalogue operations."""

    def test_create_rejects_bad_weights(self, now: datetime) -> None:
        repo = InMemoryTemplateRepository()
        payload = TemplateCreate(name="Bad", criteria=_criteria(0.5, 0.3))
        with pytest.raises(ValueError, match="Criteria weights must sum to 1.0"):
            service.create_template(repo, payload, now)

    def test_create_accepts_weights_within_tolerance(self, now: datetime) -> None:
        repo = InMemoryTemplateRepository()
        payload = TemplateCreate(
            name="Co-invest",
            criteria=_criteria(0.5, 0.495),
            asset_type_specific={"asset_type": "co-investment"},
        )
        template = service.create_template(repo, payload, now)
        assert template.id.startswith("template-")
        assert template.analytics.last_used == now
        assert repo.get(template.id) is template

    def test_create_requires_name_and_criteria(self, now: datetime) -> None:
        with pytest.raises(ValueError, match="Missing required fields"):
            service.create_template(InMemoryTemplateRepository(), TemplateCreate(name="x"), now)

    def test_list_filters_by_asset_type(self) -> None:
        result = service.list_templates(InMemoryTemplateRepository(), asset_type="gp-led")
        assert [t.id for t in result.templates] == ["template-gp-led-default"]
        assert result.metadata.total == 1

    def test_list_autonomous_orders_by_automation(self) -> None:
        result = service.list_templates(InMemoryTemplateRepository(), mode=ScreeningMode.AUTONOMOUS)
        assert result.templates[0].id == "template-gp-led-default"

    def test_list_assisted_orders_by_proven_usage(self) -> None:
        result = service.list_templates(InMemoryTemplateRepository(), mode=ScreeningMode.ASSISTED)
        assert [t.id for t in result.templates] == [
            "template-fund-default",
            "template-direct-default",
            "template-gp-led-default",
        ]

    def test_duplicate_id_rejected(self) -> None:
        repo = InMemoryTemplateRepository()
        with pytest.raises(ValueError):
            repo.create(default_templates()[0])


# ── API ───────────────────────────────────────────────────────────────────────


class TestDealScreeningAPI:
    """Tests for /v1/deal-screening endpoints."""

    async def test_list_templates(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/deal-screening/templates")
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["metadata"]["total"] == 3
        assert len(body["templates"]) == 3

    async def test_create_template_201(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/deal-screening/templates",
            json={"name": "Balanced", "criteria": _criteria(0.4, 0.6)},
        )
        assert resp.status_code == 201, resp.text
        assert resp.json()["message"] == "Template created successfully"

        listed = await client.get("/v1/deal-screening/templates")
        assert listed.json()["metadata"]["total"] == 4

    async def test_create_template_bad_weights_400(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/deal-screening/templates",
            json={"name": "Lopsided", "criteria": _criteria(0.9, 0.3)},
        )
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Criteria weights must sum to 1.0"

    async def test_create_template_missing_fields_400(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/deal-screening/templates", json={"name": "No criteria"})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Missing required fields: name, criteria"

    async def test_recommend_requires_asset_type(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/deal-screening/templates/recommend",
            json={"opportunity": {"sector": "Technology"}},
        )
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Opportunity with asset_type is required"

    async def test_recommend_requires_opportunity(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/deal-screening/templates/recommend", json={})
        assert resp.status_code == 400

    async def test_recommend_fund_autonomous(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/deal-screening/templates/recommend",
            json={
                "opportunity": {
                    "id": "opp-1",
                    "asset_type": "fund",
                    "sector": "Technology",
                    "geography": "North America",
                    "ask_price": 25_000_000,
                },
                "mode": "autonomous",
            },
        )
        assert resp.status_code == 200, resp.text
        body = resp.json()
        recs = body["recommended_templates"]
        assert 1 <= len(recs) <= 3
        assert recs[0]["template"]["id"] == "template-fund-default"
        assert body["metadata"]["mode"] == "autonomous"
        assert body["metadata"]["total_templates_analyzed"] == 3
        assert body["ai_insights"]["benchmark_data"]["sample_size"] == 48

    async def test_recommend_defaults_to_assisted(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/deal-screening/templates/recommend",
            json={"opportunity": {"asset_type": "direct"}},
        )
        assert resp.status_code == 200, resp.text
        assert resp.json()["metadata"]["mode"] == "assisted"
