"""
Models - Page

Top-level form document: ordered Modules, template flag and metadata.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from form_builder.models.component import Component
from form_builder.models.component_type import ComponentType
from form_builder.models.module import Module
from form_builder.models.ordering import move_items
from form_builder.models.value import FieldValue, ValueKind

SOURCE_PAGE_KEY = "sourcePageId"
TEMPLATE_KEY = "templateId"

# Export snapshots carry values only, so import infers the component type.
_TYPE_FOR_KIND = {
    ValueKind.STRING: ComponentType.TEXT,
    ValueKind.INTEGER: ComponentType.NUMBER,
    ValueKind.FLOAT: ComponentType.NUMBER,
    ValueKind.BOOLEAN: ComponentType.TOGGLE,
    ValueKind.TIMESTAMP: ComponentType.DATE,
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(eq=False)
class Page:
    title: str
    modules: List[Module] = field(default_factory=list)
    is_template: bool = False
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    metadata: Optional[Dict[str, FieldValue]] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    is_dirty: bool = False

    @property
    def is_valid(self) -> bool:
        return all(m.is_valid for m in self.modules)

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Page) and other.id == self.id

    # ==================== MODULE MANAGEMENT ====================

    def add_module(self, module: Module) -> None:
        self.modules.append(module)
        self._touch()

    def remove_module(self, module: Module) -> None:
        self.modules[:] = [m for m in self.modules if m.id != module.id]
        self._touch()

    def move_modules(self, source: Iterable[int], destination: int) -> None:
        move_items(self.modules, source, destination)
        self._touch()

    def find_module(self, module_id: uuid.UUID) -> Optional[Module]:
        return next((m for m in self.modules if m.id == module_id), None)

    # ==================== DATA MANAGEMENT ====================

    def validate(self) -> bool:
        return all([m.validate() for m in self.modules])

    def get_all_values(self) -> Dict[str, Dict[str, Any]]:
        return {m.title: m.get_values() for m in self.modules}

    def reset_to_defaults(self) -> None:
        for module in self.modules:
            module.reset_to_defaults()
        self._touch()

    # ==================== TEMPLATES ====================

    def create_template(self, title: Optional[str] = None) -> "Page":
        """Blank deep copy flagged as a template, pointing back at this page."""
        return Page(
            title=title or f"{self.title} Template",
            modules=[m.create_template() for m in self.modules],
            is_template=True,
            metadata={SOURCE_PAGE_KEY: FieldValue.of(str(self.id))},
        )

    def create_page_from_template(self) -> "Page":
        return Page(
            title=self.title,
            modules=[m.copy_as_blank() for m in self.modules],
            is_template=False,
            metadata={TEMPLATE_KEY: FieldValue.of(str(self.id))},
        )

    # ==================== EXPORT ====================

    def export(self) -> Dict[str, Any]:
        snapshot: Dict[str, Any] = {
            "id": str(self.id),
            "title": self.title,
            "isTemplate": self.is_template,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "modules": [
                {"id": str(m.id), "title": m.title, "values": m.get_values()}
                for m in self.modules
            ],
        }
        if self.metadata is not None:
            snapshot["metadata"] = {k: v.raw for k, v in self.metadata.items()}
        return snapshot

    @classmethod
    def from_export(cls, snapshot: Dict[str, Any]) -> "Page":
        """
        Rebuild a Page from an export() snapshot.

        Page and module ids and timestamps are kept. Components get new ids
        and a type inferred from their value, so pickers come back as text.
        """
        modules = []
        for order, module_data in enumerate(snapshot.get("modules", [])):
            components = []
            for title, raw in module_data.get("values", {}).items():
                value = FieldValue.of(raw)
                components.append(
                    Component(_TYPE_FOR_KIND[value.kind], title, value=value)
                )
            modules.append(Module(
                title=module_data["title"],
                components=components,
                order=order,
                id=uuid.UUID(str(module_data["id"])),
            ))

        metadata = snapshot.get("metadata")
        return cls(
            title=snapshot["title"],
            modules=modules,
            is_template=bool(snapshot.get("isTemplate", False)),
            created_at=snapshot.get("createdAt") or _now(),
            updated_at=snapshot.get("updatedAt") or _now(),
            metadata=(
                {k: FieldValue.of(v) for k, v in metadata.items()}
                if metadata is not None else None
            ),
            id=uuid.UUID(str(snapshot["id"])),
        )

    def _touch(self) -> None:
        self.is_dirty = True
        self.updated_at = _now()
