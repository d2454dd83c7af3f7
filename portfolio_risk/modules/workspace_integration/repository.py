"""Workspace storage interface and its in-memory implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod

from portfolio_risk.modules.workspace_integration.schemas import WorkProduct, Workspace


class WorkspaceRepository(ABC):
    @abstractmethod
    def create_workspace(self, workspace: Workspace) -> Workspace:
        ...

    @abstractmethod
    def get_workspace(self, workspace_id: str) -> Workspace | None:
        ...

    @abstractmethod
    def list_workspaces(self) -> list[Workspace]:
        ...

    @abstractmethod
    def create_work_product(self, work_product: WorkProduct) -> WorkProduct:
        ...

    @abstractmethod
    def list_work_products(self, workspace_id: str) -> list[WorkProduct]:
        ...


class InMemoryWorkspaceRepository(WorkspaceRepository):
    def __init__(self) -> None:
        self._workspaces: dict[str, Workspace] = {}
        self._work_products: dict[str, WorkProduct] = {}

    def create_workspace(self, workspace: Workspace) -> Workspace:
        self._workspaces[workspace.id] = workspace
        return workspace

    def get_workspace(self, workspace_id: str) -> Workspace | None:
        return self._workspaces.get(workspace_id)

    def list_workspaces(self) -> list[Workspace]:
        return list(self._workspaces.values())

    def create_work_product(self, work_product: WorkProduct) -> WorkProduct:
        if work_product.workspace_id not in self._workspaces:
            raise LookupError(f"Workspace {work_product.workspace_id} not found")
        self._work_products[work_product.id] = work_product
        return work_product

    def list_work_products(self, workspace_id: str) -> list[WorkProduct]:
        return [wp for wp in self._work_products.values() if wp.workspace_id == workspace_id]
