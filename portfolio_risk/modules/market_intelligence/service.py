"""Market intelligence snapshot: stats, movers and per-category summaries."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta

from portfolio_risk.modules.market_intelligence import data
from portfolio_risk.modules.market_intelligence.schemas import (
    CategorySummary,
    IndicatorChange,
    KeyMetric,
    MarketAlert,
    MarketIndicator,
    MarketIntelligenceSnapshot,
    MarketIntelligenceStats,
    MetricCounts,
    RegionalMetric,
    TrendingIndicator,
)

METRIC_CATEGORIES = ["CAPITAL_MARKETS", "BANKING", "ESG", "FINTECH"]
RECENT_UPDATE_WINDOW = timedelta(days=7)
METRIC_ALERT_PCT = 10
KEY_METRICS_PER_CATEGORY = 3

TRENDING_LIMIT = 3
HIGH_SIGNIFICANCE_PCT = 5
MEDIUM_SIGNIFICANCE_PCT = 1


def _significance(change_percent: float) -> str:
    magnitude = abs(change_percent)
    if magnitude >= HIGH_SIGNIFICANCE_PCT:
        return "HIGH"
    if magnitude >= MEDIUM_SIGNIFICANCE_PCT:
        return "MEDIUM"
    return "LOW"


def _direction(change_percent: float) -> str:
    if change_percent > 0:
        return "UP"
    if change_percent < 0:
        return "DOWN"
    return "FLAT"


def trending_indicators(
    indicators: Sequence[MarketIndicator],
    limit: int = TRENDING_LIMIT,
) -> list[TrendingIndicator]:
    """Largest absolute percent movers among indicators with a data point."""
    movers = [i for i in indicators if i.value is not None and i.change_percent is not None]
    movers.sort(key=lambda i: abs(i.change_percent), reverse=True)

    return [
        TrendingIndicator(
            id=i.id,
            name=i.name,
            category=i.category,
            current_value=i.value,
            change=IndicatorChange(
                absolute=i.change_absolute or 0.0,
                percent=i.change_percent,
                direction=_direction(i.change_percent),
            ),
            significance=_significance(i.change_percent),
            region=i.region,
        )
        for i in movers[:limit]
    ]


def summarize_metrics(
    metrics: Sequence[RegionalMetric],
    now: datetime,
) -> list[CategorySummary]:
    summaries: list[CategorySummary] = []
    cutoff = now - RECENT_UPDATE_WINDOW

    for category in METRIC_CATEGORIES:
        in_category = [m for m in metrics if m.category == category]
        summaries.append(CategorySummary(
            category=category,
            metrics=MetricCounts(
                total=len(in_category),
                updated=sum(1 for m in in_category if m.updated_at > cutoff),
                alerts=sum(1 for m in in_category if abs(m.change_percent or 0) > METRIC_ALERT_PCT),
            ),
            key_metrics=[
                KeyMetric(name=m.metric_name, value=m.value, change=m.change_percent or 0, unit=m.unit)
                for m in in_category[:KEY_METRICS_PER_CATEGORY]
            ],
            last_update=max((m.updated_at for m in in_category), default=None),
        ))

    return summaries


def compute_stats(
    indicators: Sequence[MarketIndicator],
    alerts: Sequence[MarketAlert],
    currency_pairs: int,
    reports: int,
) -> MarketIntelligenceStats:
    return MarketIntelligenceStats(
        total_indicators=len(indicators),
        active_alerts=sum(1 for a in alerts if a.status == "ACTIVE"),
        currency_pairs=currency_pairs,
        critical_alerts=sum(1 for a in alerts if a.severity == "CRITICAL"),
        data_points_today=sum(1 for i in indicators if i.value is not None),
        reports_generated=reports,
    )


def build_snapshot(now: datetime) -> MarketIntelligenceSnapshot:
    return MarketIntelligenceSnapshot(
        stats=compute_stats(
            data.INDICATORS,
            data.ALERTS,
            currency_pairs=len(data.CURRENCY_SNAPSHOTS),
            reports=len(data.REPORTS),
        ),
        indicators=list(data.INDICATORS),
        trending_indicators=trending_indicators(data.INDICATORS),
        currency_snapshots=list(data.CURRENCY_SNAPSHOTS),
        alerts=list(data.ALERTS),
        metric_summaries=summarize_metrics(data.REGIONAL_METRICS, now),
        reports=list(data.REPORTS),
        generated_at=now,
    )
