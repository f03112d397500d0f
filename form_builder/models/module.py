"""
Models - Module

Named, ordered group of Components within a Page.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from form_builder.models.component import Component
from form_builder.models.ordering import move_items


@dataclass(eq=False)
class Module:
    title: str
    components: List[Component] = field(default_factory=list)
    order: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    is_expanded: bool = True

    @property
    def is_valid(self) -> bool:
        return all(c.is_valid for c in self.components)

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Module) and other.id == self.id

    # ==================== COMPONENT MANAGEMENT ====================

    def add_component(self, component: Component) -> None:
        self.components.append(component)

    def remove_component(self, component: Component) -> None:
        self.components[:] = [c for c in self.components if c.id != component.id]

    def move_components(self, source: Iterable[int], destination: int) -> None:
        move_items(self.components, source, destination)

    # ==================== VALIDATION ====================

    def validate(self) -> bool:
        """Revalidate every component and report whether all pass."""
        return all([c.validate_value() for c in self.components])

    # ==================== DATA MANAGEMENT ====================

    def reset_to_defaults(self) -> None:
        for component in self.components:
            component.reset_to_default()

    def get_values(self) -> Dict[str, Any]:
        """Raw values keyed by component title; a repeated title keeps the last value."""
        return {c.title: c.value.raw for c in self.components}

    # ==================== TEMPLATES ====================

    def create_template(self, title: Optional[str] = None) -> "Module":
        return Module(
            title=title or f"{self.title} Template",
            components=[c.copy_as_blank() for c in self.components],
            order=self.order,
        )

    def copy_as_blank(self) -> "Module":
        """Deep copy with fresh ids and default values, keeping the title."""
        return Module(
            title=self.title,
            components=[c.copy_as_blank() for c in self.components],
            order=self.order,
        )
