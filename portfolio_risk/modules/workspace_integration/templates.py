"""Industry workspace profiles with their reference assessment scores."""

from __future__ import annotations

from portfolio_risk.models.enums import IndustryTemplate, RiskRating
from portfolio_risk.modules.workspace_integration.schemas import (
    IndustryProfile,
    ManagementScores,
    OperationalScores,
)

INDUSTRY_PROFILES: list[IndustryProfile] = [
    IndustryProfile(
        name="TechCorp AI Platform Due Diligence",
        sector="Technology",
        deal_value=75_000_000,
        team_members=["Sarah Chen", "Michael Rodriguez", "Lisa Wong", "David Kim"],
        stage="due-diligence",
        geography="North America",
        risk_rating=RiskRating.MEDIUM,
        template=IndustryTemplate.TECHNOLOGY,
        metadata={
            "deal_type": "growth_equity",
            "target_irr": 25,
            "hold_period": 5,
            "competitive_process": True,
            "management_rollover": 30,
            "key_metrics": {"arr": 15_000_000, "growth_rate": 35, "gross_margin": 85, "nrr": 98},
        },
        operational=OperationalScores(
            overall_score=76, process_efficiency_score=75, digital_maturity_score=72,
        ),
        management=ManagementScores(
            overall_team_score=86, leadership_score=87, strategic_thinking_score=87,
            execution_capability_score=91, succession_readiness_score=66,
        ),
    ),
    IndustryProfile(
        name="FinanceFirst Digital Banking Acquisition",
        sector="Financial Services",
        deal_value=125_000_000,
        team_members=["Patricia Williams", "James Martinez", "Angela Chen", "Michael Thompson"],
        stage="investment-committee",
        geography="North America",
        risk_rating=RiskRating.HIGH,
        template=IndustryTemplate.FINANCIAL,
        metadata={
            "deal_type": "buyout",
            "regulatory_approval_required": True,
            "compliance_rating": "A",
            "capital_ratio": 12.5,
            "key_metrics": {
                "assets_under_management": 2_500_000_000,
                "cost_income_ratio": 58,
                "digital_adoption": 84,
                "regulatory_score": 92,
            },
        },
        operational=OperationalScores(
            overall_score=81, process_efficiency_score=78, digital_maturity_score=85,
        ),
        management=ManagementScores(
            overall_team_score=89, leadership_score=89, strategic_thinking_score=91,
            execution_capability_score=91, succession_readiness_score=78,
        ),
    ),
    IndustryProfile(
        name="HealthTech Regional Hospital Network",
        sector="Healthcare",
        deal_value=95_000_000,
        team_members=["Dr. Sarah Johnson", "Robert Martinez", "Dr. Lisa Chen", "Jennifer Thompson"],
        stage="due-diligence",
        geography="North America",
        risk_rating=RiskRating.MEDIUM,
        template=IndustryTemplate.HEALTHCARE,
        metadata={
            "deal_type": "buyout",
            "regulatory_oversight": "CMS",
            "accreditation": "Joint_Commission",
            "key_metrics": {
                "beds": 450,
                "patient_satisfaction": 87,
                "clinical_quality": 91,
                "ebitda_margin": 18,
            },
        },
        operational=OperationalScores(
            overall_score=83, process_efficiency_score=82, digital_maturity_score=76,
        ),
        management=ManagementScores(
            overall_team_score=90, leadership_score=89, strategic_thinking_score=89,
            execution_capability_score=91, succession_readiness_score=80,
        ),
    ),
    IndustryProfile(
        name="IndustrialTech Manufacturing Platform",
        sector="Manufacturing",
        deal_value=180_000_000,
        team_members=["Robert Steel", "Maria Gonzalez", "James Patterson", "Susan Clarke"],
        stage="sourcing",
        geography="Global",
        risk_rating=RiskRating.MEDIUM,
        template=IndustryTemplate.MANUFACTURING,
        metadata={
            "deal_type": "buyout",
            "geographic_presence": ["North America", "Europe", "Asia"],
            "key_metrics": {
                "revenue": 450_000_000,
                "oee": 82,
                "first_pass_yield": 88,
                "automation_level": 65,
            },
        },
        operational=OperationalScores(
            overall_score=82, process_efficiency_score=84, digital_maturity_score=71,
        ),
        management=ManagementScores(
            overall_team_score=88, leadership_score=90, strategic_thinking_score=84,
            execution_capability_score=95, succession_readiness_score=80,
        ),
    ),
]


def get_profile(template: IndustryTemplate) -> IndustryProfile:
    for profile in INDUSTRY_PROFILES:
        if profile.template == template:
            return profile
    raise LookupError(f"No industry profile for {template.value}")
