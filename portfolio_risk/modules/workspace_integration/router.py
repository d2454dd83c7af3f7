"""Workspace Integration API router."""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_risk.modules.workspace_integration import service
from portfolio_risk.modules.workspace_integration.repository import (
    InMemoryWorkspaceRepository,
    WorkspaceRepository,
)
from portfolio_risk.modules.workspace_integration.schemas import (
    SeedRequest,
    SeedResponse,
    WorkProduct,
    Workspace,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/workspace-integration", tags=["workspace-integration"])

_repository = InMemoryWorkspaceRepository()


def get_workspace_repository() -> WorkspaceRepository:
    return _repository


@router.post("/seed", response_model=SeedResponse, status_code=status.HTTP_201_CREATED)
async def seed_workspaces(
    body: SeedRequest,
    repo: WorkspaceRepository = Depends(get_workspace_repository),
):
    """Create industry deal workspaces, each with a drafted IC memo."""
    try:
        results = service.seed_workspaces(repo, body.industry, body.all, datetime.now(timezone.utc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return SeedResponse(
        message="Successfully created integrated workspace(s)",
        results=results,
    )


@router.get("/workspaces", response_model=list[Workspace])
async def list_workspaces(repo: WorkspaceRepository = Depends(get_workspace_repository)):
    return repo.list_workspaces()


@router.get("/workspaces/{workspace_id}/work-products", response_model=list[WorkProduct])
async def list_work_products(
    workspace_id: str,
    repo: WorkspaceRepository = Depends(get_workspace_repository),
):
    if repo.get_workspace(workspace_id) is None:
        raise HTTPException(status_code=404, detail="Workspace not found")
    return repo.list_work_products(workspace_id)
