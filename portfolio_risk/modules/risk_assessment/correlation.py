"""Cross-module risk correlation.

Synthesises fund-level factors that only show up when several modules are
looked at together.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime

from portfolio_risk.models.enums import RiskCategory, RiskSeverity, RiskStatus
from portfolio_risk.modules.risk_assessment.schemas import RiskAssessment, RiskFactor
from portfolio_risk.modules.risk_assessment.thresholds import (
    HIGH_RISK_MODULE_SCORE,
    LIQUIDITY_CLUSTER_COUNT,
    SYSTEMIC_MODULE_COUNT,
)

SOURCE_CROSS_MODULE = "Cross-Module Analysis"


def identify_cross_module_risks(
    all_risks: Sequence[RiskFactor],
    module_assessments: Mapping[str, RiskAssessment],
    now: datetime,
) -> list[RiskFactor]:
    cross: list[RiskFactor] = []

    high_risk_modules = sum(
        1
        for assessment in module_assessments.values()
        if assessment.overall_risk_score >= HIGH_RISK_MODULE_SCORE
    )
    if high_risk_modules >= SYSTEMIC_MODULE_COUNT:
        cross.append(RiskFactor(
            id="CROSS-001",
            category=RiskCategory.STRATEGIC,
            severity=RiskSeverity.HIGH,
            probability=0.8,
            impact=8,
            description="Multiple modules showing elevated risk levels indicating systemic issues",
            source=SOURCE_CROSS_MODULE,
            indicators=[f"High-risk modules: {high_risk_modules}"],
            mitigation=[
                "Comprehensive risk review",
                "Resource reallocation",
                "Executive attention required",
            ],
            status=RiskStatus.ESCALATED,
            detected_at=now,
            last_assessed=now,
        ))

    liquidity_risks = [r for r in all_risks if r.category == RiskCategory.LIQUIDITY]
    if len(liquidity_risks) >= LIQUIDITY_CLUSTER_COUNT:
        cross.append(RiskFactor(
            id="CROSS-002",
            category=RiskCategory.LIQUIDITY,
            severity=RiskSeverity.MEDIUM,
            probability=0.6,
            impact=6,
            description="Liquidity constraints affecting multiple operational areas",
            source=SOURCE_CROSS_MODULE,
            indicators=[f"Liquidity-related risks: {len(liquidity_risks)}"],
            mitigation=[
                "Liquidity management review",
                "Credit facility evaluation",
                "Asset liquidity enhancement",
            ],
            status=RiskStatus.ACTIVE,
            detected_at=now,
            last_assessed=now,
        ))

    return cross
