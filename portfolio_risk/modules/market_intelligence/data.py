"""Reference market dataset served by the market intelligence snapshot."""

from __future__ import annotations

from datetime import datetime, timezone

from portfolio_risk.modules.market_intelligence.schemas import (
    CurrencySnapshot,
    MarketAlert,
    MarketIndicator,
    MarketReport,
    RegionalMetric,
)


def _ts(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


INDICATORS: list[MarketIndicator] = [
    MarketIndicator(
        id="ind-001", name="S&P 500 Index", category="FINANCIAL", subcategory="Equity Index",
        region="US", unit="Points", priority="CRITICAL",
        value=5459.10, change_absolute=-45.90, change_percent=-0.83,
        last_updated=_ts(2024, 7, 20, 16, 0),
    ),
    MarketIndicator(
        id="ind-002", name="VIX Volatility Index", category="FINANCIAL", subcategory="Volatility",
        region="US", unit="%", priority="HIGH",
        value=15.67, change_absolute=1.44, change_percent=10.12,
        last_updated=_ts(2024, 7, 20, 16, 0),
    ),
    MarketIndicator(
        id="ind-003", name="US 10-Year Treasury Yield", category="FINANCIAL",
        subcategory="Interest Rates", region="US", unit="%", priority="CRITICAL",
        value=4.287, change_absolute=-0.014, change_percent=-0.33,
        last_updated=_ts(2024, 7, 20, 17, 0),
    ),
    MarketIndicator(
        id="ind-004", name="EU STOXX 600", category="FINANCIAL", subcategory="Equity Index",
        region="EU", unit="Points", priority="HIGH",
        value=518.45, change_absolute=-1.66, change_percent=-0.32,
        last_updated=_ts(2024, 7, 20, 17, 35),
    ),
    MarketIndicator(
        id="ind-005", name="Gold Price (London PM Fix)", category="COMMODITY",
        subcategory="Precious Metals", region="GLOBAL", unit="USD/oz", priority="MEDIUM",
        value=2401.50, change_absolute=5.75, change_percent=0.24,
        last_updated=_ts(2024, 7, 20, 15, 0),
    ),
    MarketIndicator(
        id="ind-006", name="WTI Crude Oil", category="COMMODITY", subcategory="Energy",
        region="GLOBAL", unit="USD/bbl", priority="HIGH",
        value=81.74, change_absolute=-1.11, change_percent=-1.34,
        last_updated=_ts(2024, 7, 20, 14, 30),
    ),
]

CURRENCY_SNAPSHOTS: list[CurrencySnapshot] = [
    CurrencySnapshot(
        symbol="EURUSD", name="Euro to US Dollar", rate=1.0842, change_24h=-0.0023,
        change_percent_24h=-0.21, volatility=0.0156, trend="WEAKENING", alert_level="LOW",
    ),
    CurrencySnapshot(
        symbol="GBPUSD", name="British Pound to US Dollar", rate=1.2945, change_24h=0.0078,
        change_percent_24h=0.61, volatility=0.0234, trend="STRENGTHENING", alert_level="MEDIUM",
    ),
    CurrencySnapshot(
        symbol="USDJPY", name="US Dollar to Japanese Yen", rate=157.23, change_24h=-0.45,
        change_percent_24h=-0.29, volatility=0.0187, trend="STABLE", alert_level="LOW",
    ),
    CurrencySnapshot(
        symbol="USDCHF", name="US Dollar to Swiss Franc", rate=0.8956, change_24h=-0.0012,
        change_percent_24h=-0.13, volatility=0.0098, trend="STABLE", alert_level="NONE",
    ),
]

ALERTS: list[MarketAlert] = [
    MarketAlert(
        id="alert-001", title="VIX Volatility Spike Alert", alert_type="THRESHOLD",
        severity="HIGH", status="ACTIVE",
        impact="Elevated volatility may pressure valuations of listed comparables",
        triggered_at=_ts(2024, 7, 20, 16, 5),
    ),
    MarketAlert(
        id="alert-002", title="EURUSD Trend Break Alert", alert_type="TREND",
        severity="MEDIUM", status="ACTIVE",
        impact="EUR weakness may affect European equity valuations and cross-border investments",
        triggered_at=_ts(2024, 7, 20, 14, 30),
    ),
    MarketAlert(
        id="alert-003", title="Gold Price Momentum Alert", alert_type="TREND",
        severity="LOW", status="ACKNOWLEDGED",
        impact="Precious metals strength indicates flight-to-safety sentiment",
        triggered_at=_ts(2024, 7, 20, 15, 5),
    ),
]

REGIONAL_METRICS: list[RegionalMetric] = [
    RegionalMetric(
        id="afme-001", metric_name="EU Investment Banking Revenue", category="CAPITAL_MARKETS",
        subcategory="Investment Banking", value=15.2, unit="EUR Billion", period="H1 2024",
        region="EU", change_percent=2.7, updated_at=_ts(2024, 7, 15),
    ),
    RegionalMetric(
        id="afme-002", metric_name="Corporate Bond Issuance", category="CAPITAL_MARKETS",
        subcategory="Debt Markets", value=485.7, unit="EUR Billion", period="H1 2024",
        region="EU", change_percent=-5.2, updated_at=_ts(2024, 7, 15),
    ),
    RegionalMetric(
        id="afme-003", metric_name="Sustainable Finance Volume", category="ESG",
        subcategory="Green Finance", value=128.9, unit="EUR Billion", period="H1 2024",
        region="EU", change_percent=35.1, updated_at=_ts(2024, 7, 15),
    ),
    RegionalMetric(
        id="afme-004", metric_name="EU Banking Sector ROE", category="BANKING",
        subcategory="Performance", value=8.7, unit="%", period="Q2 2024",
        region="EU", change_percent=6.1, updated_at=_ts(2024, 7, 20),
    ),
    RegionalMetric(
        id="afme-005", metric_name="FinTech Investment Volume", category="FINTECH",
        subcategory="Venture Capital", value=3.8, unit="EUR Billion", period="H1 2024",
        region="EU", change_percent=-9.5, updated_at=_ts(2024, 7, 18),
    ),
]

REPORTS: list[MarketReport] = [
    MarketReport(
        id="report-001",
        title="Weekly Market Intelligence Summary",
        report_type="WEEKLY",
        summary=(
            "Global markets showed mixed performance this week with increased "
            "volatility across major indices"
        ),
        key_findings=[
            "Volatility increased across all major markets",
            "European equities showed relative strength",
            "Currency markets experienced heightened activity",
            "Commodity prices reflected safe-haven demand",
        ],
        timeframe="July 14-20, 2024",
        published_at=_ts(2024, 7, 20, 18, 0),
    ),
]
