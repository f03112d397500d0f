"""
Editors - Module Editor

Working copy of a module's title and component list.
"""

import logging
from typing import Iterable, List

from form_builder.editors.base import BaseEditor
from form_builder.models import Component, Module, Page
from form_builder.models.ordering import move_items

logger = logging.getLogger(__name__)


class ModuleEditor(BaseEditor):

    def __init__(self, data_manager, module: Module, page: Page):
        super().__init__()
        self.data_manager = data_manager
        self._original = module
        self._page = page
        self.title = module.title
        self.components: List[Component] = list(module.components)
        self.component_to_delete = None

    @property
    def is_valid(self) -> bool:
        return bool(self.title) and all([c.validate_value() for c in self.components])

    def set_title(self, title: str) -> None:
        self.title = title
        self._changed()

    def add_component(self, component: Component) -> None:
        self.components.append(component)
        self._changed()
        logger.info(f"Component added to module: {component.title}")

    def update_component(self, component: Component) -> None:
        for i, existing in enumerate(self.components):
            if existing.id == component.id:
                self.components[i] = component
                self._changed()
                return

    def duplicate_component(self, component: Component) -> Component:
        copy = component.duplicate()
        self.components.append(copy)
        self._changed()
        logger.info(f"Component duplicated: {component.title}")
        return copy

    def confirm_delete_component(self, component: Component) -> None:
        self.component_to_delete = component
        self._notify()

    def delete_component(self, component: Component) -> None:
        self.components = [c for c in self.components if c.id != component.id]
        if self.component_to_delete is not None and self.component_to_delete.id == component.id:
            self.component_to_delete = None
        self._changed()

    def move_component(self, source: Iterable[int], destination: int) -> None:
        move_items(self.components, source, destination)
        self._changed()

    def reset_to_defaults(self) -> None:
        self.title = self._original.title
        self.components = list(self._original.components)
        self._changed()

    async def save(self) -> bool:
        self.is_loading = True
        try:
            module = self._original
            module.title = self.title
            module.components[:] = self.components
            await self.data_manager.save_module(module, self._page)
            self.has_unsaved_changes = False
            logger.info(f"Module edited: {self.title}")
            return True
        except Exception as e:
            self._capture(e)
            return False
        finally:
            self.is_loading = False
            self._notify()
