"""Template storage interface and its in-memory implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod

from portfolio_risk.modules.deal_screening.defaults import default_templates
from portfolio_risk.modules.deal_screening.schemas import DealScreeningTemplate


class TemplateRepository(ABC):
    """Storage interface for screening templates. Listing preserves insertion order."""

    @abstractmethod
    def list(self) -> list[DealScreeningTemplate]:
        ...

    @abstractmethod
    def get(self, template_id: str) -> DealScreeningTemplate | None:
        ...

    @abstractmethod
    def create(self, template: DealScreeningTemplate) -> DealScreeningTemplate:
        ...


class InMemoryTemplateRepository(TemplateRepository):
    def __init__(self, templates: list[DealScreeningTemplate] | None = None) -> None:
        seed = default_templates() if templates is None else templates
        self._templates: dict[str, DealScreeningTemplate] = {t.id: t for t in seed}

    def list(self) -> list[DealScreeningTemplate]:
        return list(self._templates.values())

    def get(self, template_id: str) -> DealScreeningTemplate | None:
        return self._templates.get(template_id)

    def create(self, template: DealScreeningTemplate) -> DealScreeningTemplate:
        if template.id in self._templates:
            raise ValueError(f"Template {template.id} already exists")
        self._templates[template.id] = template
        return template
