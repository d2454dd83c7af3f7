"""Market Intelligence API schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class MarketIndicator(BaseModel):
    id: str
    name: str
    category: str                    # FINANCIAL | COMMODITY | ...
    subcategory: str
    region: str
    unit: str
    priority: str
    value: float | None = None       # latest data point, None when no data yet
    change_absolute: float | None = None
    change_percent: float | None = None
    last_updated: datetime


class CurrencySnapshot(BaseModel):
    symbol: str
    name: str
    rate: float
    change_24h: float
    change_percent_24h: float
    volatility: float
    trend: Literal["STRENGTHENING", "WEAKENING", "STABLE"]
    alert_level: str


class MarketAlert(BaseModel):
    id: str
    title: str
    alert_type: str
    severity: Literal["LOW", "MEDIUM", "HIGH", "CRITICAL"]
    status: Literal["ACTIVE", "ACKNOWLEDGED", "RESOLVED"]
    impact: str
    triggered_at: datetime


class RegionalMetric(BaseModel):
    id: str
    metric_name: str
    category: Literal["CAPITAL_MARKETS", "BANKING", "ESG", "FINTECH"]
    subcategory: str
    value: float
    unit: str
    period: str
    region: str
    change_percent: float | None = None
    updated_at: datetime


class MarketReport(BaseModel):
    id: str
    title: str
    report_type: str
    summary: str
    key_findings: list[str]
    timeframe: str
    published_at: datetime


class IndicatorChange(BaseModel):
    absolute: float
    percent: float
    direction: Literal["UP", "DOWN", "FLAT"]


class TrendingIndicator(BaseModel):
    id: str
    name: str
    category: str
    current_value: float
    change: IndicatorChange
    significance: Literal["HIGH", "MEDIUM", "LOW"]
    region: str


class MetricCounts(BaseModel):
    total: int
    updated: int                     # updated within the lookback window
    alerts: int                      # |change| above the alert threshold


class KeyMetric(BaseModel):
    name: str
    value: float
    change: float
    unit: str


class CategorySummary(BaseModel):
    category: str
    metrics: MetricCounts
    key_metrics: list[KeyMetric]
    last_update: datetime | None


class MarketIntelligenceStats(BaseModel):
    total_indicators: int
    active_alerts: int
    currency_pairs: int
    critical_alerts: int
    data_points_today: int
    reports_generated: int


class MarketIntelligenceSnapshot(BaseModel):
    stats: MarketIntelligenceStats
    indicators: list[MarketIndicator]
    trending_indicators: list[TrendingIndicator]
    currency_snapshots: list[CurrencySnapshot]
    alerts: list[MarketAlert]
    metric_summaries: list[CategorySummary]
    reports: list[MarketReport]
    generated_at: datetime
