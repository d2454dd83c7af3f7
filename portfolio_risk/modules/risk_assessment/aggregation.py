"""Risk aggregation: scores, grades, alert levels, trends and recommendations.

All functions are pure: they take RiskFactors or scores and return plain
values or schema objects.
"""

from __future__ import annotations

from collections.abc import Sequence

from portfolio_risk.models.enums import AlertLevel, RiskGrade, RiskSeverity, TrendDirection
from portfolio_risk.modules.risk_assessment.schemas import (
    RiskAssessment,
    RiskFactor,
    RiskRecommendations,
    RiskTrend,
)
from portfolio_risk.modules.risk_assessment.thresholds import (
    AGGREGATE_WEIGHTS,
    ALERT_BANDS,
    DEFAULT_RECOMMENDATIONS,
    GRADE_BANDS,
    MAX_RISK_SCORE,
    RECOMMENDATIONS_PER_TIER,
    RISK_HISTORY,
    SEVERITY_WEIGHTS,
    TREND_DRIVERS,
    TREND_LOWER_RATIO,
    TREND_UPPER_RATIO,
    TREND_WINDOW,
)


def calculate_overall_risk_score(risks: Sequence[RiskFactor]) -> float:
    """Mean of probability × impact × severity weight, clamped to [0, 10]."""
    if not risks:
        return 0.0

    total = sum(r.probability * r.impact * SEVERITY_WEIGHTS[r.severity] for r in risks)
    return max(0.0, min(total / len(risks), MAX_RISK_SCORE))


def calculate_risk_grade(score: float) -> RiskGrade:
    for upper, grade in GRADE_BANDS:
        if score <= upper:
            return grade
    return RiskGrade.F


def determine_alert_level(score: float) -> AlertLevel:
    for lower, level in ALERT_BANDS:
        if score >= lower:
            return level
    return AlertLevel.NONE


def analyze_risk_trends(
    current_score: float,
    module: str,
    history: Sequence[dict] = RISK_HISTORY,
) -> RiskTrend:
    """Compare the current score to the mean of the module's recent history.

    Rows without a value for ``module`` count as the current score, so a
    module with no history always reads as STABLE.
    """
    recent = list(history)[-TREND_WINDOW:]
    values = [float(row.get(module, current_score)) for row in recent] or [current_score]
    average = sum(values) / len(values)

    if current_score > average * TREND_UPPER_RATIO:
        direction = TrendDirection.INCREASING
    elif current_score < average * TREND_LOWER_RATIO:
        direction = TrendDirection.DECREASING
    else:
        direction = TrendDirection.STABLE

    velocity = abs(current_score - average) / average if average else 0.0

    return RiskTrend(
        direction=direction,
        velocity=round(velocity, 4),
        driver_factors=list(TREND_DRIVERS[direction]),
    )


def generate_recommendations(risks: Sequence[RiskFactor]) -> RiskRecommendations:
    """Route each factor's primary mitigation into a tier by severity."""
    tiers: dict[RiskSeverity, list[str]] = {
        RiskSeverity.CRITICAL: [],
        RiskSeverity.HIGH: [],
        RiskSeverity.MEDIUM: [],
    }
    for risk in risks:
        bucket = tiers.get(risk.severity)
        if bucket is None or not risk.mitigation:
            continue
        if len(bucket) < RECOMMENDATIONS_PER_TIER:
            bucket.append(risk.mitigation[0])

    return RiskRecommendations(
        immediate=tiers[RiskSeverity.CRITICAL] or [DEFAULT_RECOMMENDATIONS["immediate"]],
        short_term=tiers[RiskSeverity.HIGH] or [DEFAULT_RECOMMENDATIONS["short_term"]],
        long_term=tiers[RiskSeverity.MEDIUM] or [DEFAULT_RECOMMENDATIONS["long_term"]],
    )


def calculate_aggregate_risk_score(assessments: Sequence[RiskAssessment]) -> float:
    """Top-heavy weighted mean of the highest module scores."""
    if not assessments:
        return 0.0

    scores = sorted((a.overall_risk_score for a in assessments), reverse=True)
    weighted = 0.0
    weight_used = 0.0
    for score, weight in zip(scores, AGGREGATE_WEIGHTS):
        weighted += score * weight
        weight_used += weight

    return weighted / weight_used if weight_used else 0.0
