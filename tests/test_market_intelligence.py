"""Tests for the Market Intelligence snapshot."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from httpx import AsyncClient

from portfolio_risk.modules.market_intelligence import data
from portfolio_risk.modules.market_intelligence.schemas import MarketIndicator
from portfolio_risk.modules.market_intelligence.service import (
    build_snapshot,
    summarize_metrics,
    trending_indicators,
)

pytestmark = pytest.mark.anyio


class TestSnapshot:
    """Stats and movers over the reference dataset."""

    def test_stats(self, now: datetime) -> None:
        stats = build_snapshot(now).stats
        assert stats.total_indicators == 6
        assert stats.active_alerts == 2
        assert stats.currency_pairs == 4
        assert stats.critical_alerts == 0
        assert stats.data_points_today == 6
        assert stats.reports_generated == 1

    def test_trending_by_absolute_percent_change(self) -> None:
        trending = trending_indicators(data.INDICATORS)
        assert [t.id for t in trending] == ["ind-002", "ind-006", "ind-001"]
        assert [t.significance for t in trending] == ["HIGH", "MEDIUM", "LOW"]
        assert [t.change.direction for t in trending] == ["UP", "DOWN", "DOWN"]

    def test_indicators_without_data_are_not_trending(self) -> None:
        pending = MarketIndicator(
            id="ind-x", name="New index", category="FINANCIAL", subcategory="Equity Index",
            region="US", unit="Points", priority="LOW",
            last_updated=datetime(2024, 7, 20, tzinfo=timezone.utc),
        )
        assert trending_indicators([pending]) == []

    def test_metric_summaries_cover_every_category(self, now: datetime) -> None:
        summaries = {s.category: s for s in summarize_metrics(data.REGIONAL_METRICS, now)}
        assert list(summaries) == ["CAPITAL_MARKETS", "BANKING", "ESG", "FINTECH"]
        assert summaries["CAPITAL_MARKETS"].metrics.total == 2
        assert summaries["ESG"].metrics.alerts == 1
        assert summaries["FINTECH"].metrics.alerts == 0
        assert summaries["ESG"].key_metrics[0].change == 35.1

    def test_updated_counts_use_seven_day_window(self) -> None:
        later = datetime(2024, 7, 25, tzinfo=timezone.utc)
        summaries = {s.category: s for s in summarize_metrics(data.REGIONAL_METRICS, later)}
        assert summaries["BANKING"].metrics.updated == 1
        assert summaries["FINTECH"].metrics.updated == 0
        assert summaries["CAPITAL_MARKETS"].metrics.updated == 0
        assert summaries["BANKING"].last_update == datetime(2024, 7, 20, tzinfo=timezone.utc)

    def test_empty_category_has_no_last_update(self, now: datetime) -> None:
        summaries = summarize_metrics([], now)
        assert all(s.metrics.total == 0 and s.last_update is None for s in summaries)


class TestMarketIntelligenceAPI:
    """Tests for GET /v1/market-intelligence."""

    async def test_snapshot_endpoint(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/market-intelligence")
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["stats"]["total_indicators"] == 6
        assert len(body["trending_indicators"]) == 3
        assert len(body["metric_summaries"]) == 4
