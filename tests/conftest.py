"""Shared test fixtures for the portfolio risk engine test suite."""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from portfolio_risk.main import app
from portfolio_risk.modules.deal_screening.repository import InMemoryTemplateRepository
from portfolio_risk.modules.deal_screening.router import get_template_repository
from portfolio_risk.modules.risk_assessment.engine import RiskAssessmentEngine
from portfolio_risk.modules.risk_assessment.router import get_risk_engine
from portfolio_risk.modules.workspace_integration.repository import InMemoryWorkspaceRepository
from portfolio_risk.modules.workspace_integration.router import get_workspace_repository

FIXED_NOW = datetime(2024, 7, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def engine() -> RiskAssessmentEngine:
    return RiskAssessmentEngine(clock=lambda: FIXED_NOW)


@pytest.fixture
def template_repo() -> InMemoryTemplateRepository:
    return InMemoryTemplateRepository()


@pytest.fixture
def workspace_repo() -> InMemoryWorkspaceRepository:
    return InMemoryWorkspaceRepository()


@pytest.fixture
async def client(
    engine: RiskAssessmentEngine,
    template_repo: InMemoryTemplateRepository,
    workspace_repo: InMemoryWorkspaceRepository,
) -> AsyncGenerator[AsyncClient]:
    """HTTP client with fresh in-memory stores and a frozen risk clock."""
    app.dependency_overrides[get_risk_engine] = lambda: engine
    app.dependency_overrides[get_template_repository] = lambda: template_repo
    app.dependency_overrides[get_workspace_repository] = lambda: workspace_repo
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
