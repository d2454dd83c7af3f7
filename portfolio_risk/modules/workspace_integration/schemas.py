"""Workspace Integration API schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from portfolio_risk.models.enums import IndustryTemplate, RiskRating


class OperationalScores(BaseModel):
    overall_score: int
    process_efficiency_score: int
    digital_maturity_score: int


class ManagementScores(BaseModel):
    overall_team_score: int
    leadership_score: int
    strategic_thinking_score: int
    execution_capability_score: int
    succession_readiness_score: int


class IndustryProfile(BaseModel):
    name: str
    sector: str
    deal_value: int                  # whole currency units
    team_members: list[str]
    stage: str
    geography: str
    risk_rating: RiskRating
    template: IndustryTemplate
    metadata: dict[str, Any] = Field(default_factory=dict)
    operational: OperationalScores
    management: ManagementScores


class Workspace(BaseModel):
    id: str
    name: str
    type: str = "deal"
    status: str = "active"
    sector: str
    deal_value: int                  # cents
    stage: str
    geography: str
    risk_rating: RiskRating
    priority: str = "high"
    progress: int = 75
    team_members: list[str]
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime


class WorkProductSection(BaseModel):
    id: str
    title: str
    order: int
    content: str
    type: str = "text"
    required: bool = True
    generation_strategy: str = "assessment-informed"


class WorkProduct(BaseModel):
    id: str
    workspace_id: str
    title: str
    type: str = "IC_MEMO"
    status: str = "DRAFT"
    sections: list[WorkProductSection]
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_by: str
    created_at: datetime


class SeedRequest(BaseModel):
    industry: str | None = None
    all: bool = False


class SeedResult(BaseModel):
    workspace_id: str
    project_id: str
    operational_assessment_id: str
    management_assessment_id: str
    work_product_id: str
    industry: IndustryTemplate


class SeedResponse(BaseModel):
    message: str
    results: list[SeedResult]
