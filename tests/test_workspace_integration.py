"""Tests for workspace seeding and IC memo generation."""

from __future__ import annotations

from datetime import datetime

import pytest
from httpx import AsyncClient

from portfolio_risk.models.enums import IndustryTemplate
from portfolio_risk.modules.workspace_integration.repository import InMemoryWorkspaceRepository
from portfolio_risk.modules.workspace_integration.service import (
    executive_summary,
    investment_recommendation,
    seed_workspaces,
)
from portfolio_risk.modules.workspace_integration.templates import get_profile

pytestmark = pytest.mark.anyio


class TestMemoContent:
    """IC memo text derived from the assessment scores."""

    @pytest.mark.parametrize(
        ("ops", "team", "expected"),
        [
            (75, 80, "Proceed with investment"),
            (90, 79, "Consider with conditions"),
            (74, 95, "Consider with conditions"),
        ],
    )
    def test_investment_recommendation(self, ops: int, team: int, expected: str) -> None:
        assert investment_recommendation(ops, team) == expected

    def test_executive_summary_for_technology(self) -> None:
        profile = get_profile(IndustryTemplate.TECHNOLOGY)
        summary = executive_summary(profile, profile.deal_value * 100)
        assert "$75M growth equity investment" in summary
        assert "Overall operational score of 76/100" in summary
        assert "Proceed with investment - target IRR of 25% over 5-year hold period." in summary

    def test_executive_summary_defaults_irr_and_hold(self) -> None:
        profile = get_profile(IndustryTemplate.HEALTHCARE)
        summary = executive_summary(profile, profile.deal_value * 100)
        assert "target IRR of 20% over 5-year hold period" in summary


class TestSeeding:
    """seed_workspaces against an in-memory store."""

    def test_seed_single_industry(self, workspace_repo: InMemoryWorkspaceRepository, now: datetime) -> None:
        results = seed_workspaces(workspace_repo, "financial", False, now)
        assert len(results) == 1
        result = results[0]
        assert result.industry == IndustryTemplate.FINANCIAL
        assert result.project_id.startswith("financial-project-")

        workspace = workspace_repo.get_workspace(result.workspace_id)
        assert workspace.deal_value == 125_000_000 * 100
        assert workspace.metadata["project_id"] == result.project_id
        assert workspace.metadata["industry_template"] == "financial"

        memos = workspace_repo.list_work_products(result.workspace_id)
        assert len(memos) == 1
        memo = memos[0]
        assert memo.title == "FinanceFirst Digital Banking Acquisition - Investment Committee Memo"
        assert [s.id for s in memo.sections] == [
            "exec-summary", "investment-thesis", "management-assessment", "operational-dd",
        ]
        assert memo.created_by == "system@platform.com"
        assert memo.created_at == now

    def test_seed_all(self, workspace_repo: InMemoryWorkspaceRepository, now: datetime) -> None:
        results = seed_workspaces(workspace_repo, None, True, now)
        assert [r.industry for r in results] == list(IndustryTemplate)
        assert len(workspace_repo.list_workspaces()) == 4

    def test_invalid_industry(self, workspace_repo: InMemoryWorkspaceRepository, now: datetime) -> None:
        with pytest.raises(ValueError, match="Invalid industry template"):
            seed_workspaces(workspace_repo, "retail", False, now)
        with pytest.raises(ValueError):
            seed_workspaces(workspace_repo, None, False, now)
        assert workspace_repo.list_workspaces() == []


class TestWorkspaceIntegrationAPI:
    """Tests for /v1/workspace-integration endpoints."""

    async def test_seed_201(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/workspace-integration/seed", json={"industry": "technology"})
        assert resp.status_code == 201, resp.text
        body = resp.json()
        assert body["message"] == "Successfully created integrated workspace(s)"
        assert len(body["results"]) == 1

        workspace_id = body["results"][0]["workspace_id"]
        memos = await client.get(f"/v1/workspace-integration/workspaces/{workspace_id}/work-products")
        assert memos.status_code == 200
        assert memos.json()[0]["type"] == "IC_MEMO"

    async def test_seed_all_201(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/workspace-integration/seed", json={"all": True})
        assert resp.status_code == 201, resp.text
        listed = await client.get("/v1/workspace-integration/workspaces")
        assert len(listed.json()) == 4

    async def test_seed_invalid_industry_400(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/workspace-integration/seed", json={"industry": "retail"})
        assert resp.status_code == 400
        assert "Invalid industry template" in resp.json()["detail"]

    async def test_work_products_unknown_workspace_404(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/workspace-integration/workspaces/missing/work-products")
        assert resp.status_code == 404
