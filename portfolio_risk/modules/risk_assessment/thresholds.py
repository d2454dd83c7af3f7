"""Static risk model tables. No I/O, no state."""

from __future__ import annotations

from portfolio_risk.models.enums import AlertLevel, RiskGrade, RiskSeverity, TrendDirection

# ── Per-domain metric limits ──────────────────────────────────────────────────

PORTFOLIO_LIMITS: dict[str, float] = {
    "max_single_investment": 0.15,
    "max_sector_exposure": 0.35,
    "min_cash_reserve": 0.05,
    "max_illiquid_assets": 0.8,
    "min_irr": 0.12,
    "max_volatility": 0.25,
}

DUE_DILIGENCE_LIMITS: dict[str, float] = {
    "min_data_completeness": 0.85,
    "min_days_remaining": 10,
    "min_workstream_completeness": 0.8,
}

LEGAL_LIMITS: dict[str, float] = {
    "min_compliance_score": 90,
    "max_pending_regulations": 2,
    "max_legal_cost_ratio": 0.05,
}

MARKET_LIMITS: dict[str, float] = {
    "vix_threshold": 25,
    "max_rate_change_velocity": 0.5,
    "max_sector_concentration": 0.4,
}

OPERATIONS_LIMITS: dict[str, float] = {
    "min_processing_rate": 0.8,
    "min_system_uptime": 0.99,
    "max_staff_turnover": 0.15,
}

# ── Aggregation ───────────────────────────────────────────────────────────────

SEVERITY_WEIGHTS: dict[RiskSeverity, float] = {
    RiskSeverity.CRITICAL: 1.0,
    RiskSeverity.HIGH: 0.8,
    RiskSeverity.MEDIUM: 0.6,
    RiskSeverity.LOW: 0.4,
}

MAX_RISK_SCORE = 10.0

# Inclusive upper bounds, checked in order; anything above the last band is F.
GRADE_BANDS: list[tuple[float, RiskGrade]] = [
    (2.0, RiskGrade.A),
    (4.0, RiskGrade.B),
    (6.0, RiskGrade.C),
    (8.0, RiskGrade.D),
]

# Inclusive lower bounds, checked in order.
ALERT_BANDS: list[tuple[float, AlertLevel]] = [
    (8.5, AlertLevel.CRITICAL),
    (7.0, AlertLevel.HIGH),
    (5.0, AlertLevel.MEDIUM),
    (3.0, AlertLevel.LOW),
]

# Top-heavy weights for rolling module scores into one fund-level score.
AGGREGATE_WEIGHTS: list[float] = [0.4, 0.3, 0.2, 0.1]

HIGH_RISK_MODULE_SCORE = 7.0
SYSTEMIC_MODULE_COUNT = 2
LIQUIDITY_CLUSTER_COUNT = 2

# ── Trends ────────────────────────────────────────────────────────────────────

TREND_UPPER_RATIO = 1.1
TREND_LOWER_RATIO = 0.9
TREND_WINDOW = 3

TREND_DRIVERS: dict[TrendDirection, list[str]] = {
    TrendDirection.INCREASING: ["Market volatility", "Regulatory changes", "Operational stress"],
    TrendDirection.STABLE: ["Consistent operations", "Stable market conditions"],
    TrendDirection.DECREASING: ["Improved processes", "Risk mitigation success", "Market stabilization"],
}

# Monthly fund-level history. Only "overall" and "market" match a module key;
# "operational" feeds the metrics category breakdown alone.
RISK_HISTORY: list[dict[str, float | str]] = [
    {"date": "2024-01-01", "overall": 4.2, "market": 5.1, "operational": 3.8},
    {"date": "2024-02-01", "overall": 4.5, "market": 5.8, "operational": 3.6},
    {"date": "2024-03-01", "overall": 3.9, "market": 4.2, "operational": 3.4},
]

MITIGATION_EFFECTIVENESS: dict[str, float] = {
    "Process Improvement": 0.85,
    "Technology Upgrade": 0.78,
    "Policy Changes": 0.72,
}

# ── Recommendations ───────────────────────────────────────────────────────────

RECOMMENDATIONS_PER_TIER = 3

DEFAULT_RECOMMENDATIONS: dict[str, str] = {
    "immediate": "Continue monitoring risk levels",
    "short_term": "Maintain current risk controls",
    "long_term": "Regular risk assessment reviews",
}
