"""
Editors - Page Editor

Working copy of a page's title and module list.
"""

import logging
from typing import Iterable, List, Optional

from form_builder.config import get_settings
from form_builder.editors.base import BaseEditor
from form_builder.models import Module, Page
from form_builder.models.ordering import move_items

logger = logging.getLogger(__name__)


class PageEditor(BaseEditor):
    """
    Edits a page's title and modules without touching the page until save().

    Failed saves are captured in `error`/`show_error` instead of raised.
    """

    def __init__(self, data_manager, page: Page, autosave: Optional[bool] = None, settings=None):
        super().__init__()
        settings = settings or get_settings()
        self.data_manager = data_manager
        self.autosave_enabled = settings.preferences.autosave if autosave is None else autosave
        self._original = page
        self.title = page.title
        self.modules: List[Module] = list(page.modules)

    @property
    def page(self) -> Page:
        return self._original

    @property
    def is_valid(self) -> bool:
        return bool(self.title) and all([m.validate() for m in self.modules])

    def set_title(self, title: str) -> None:
        self.title = title
        self._changed()

    def add_module(self, module: Module) -> None:
        self.modules.append(module)
        self._changed()
        logger.info(f"Module added to page: {module.title}")

    def remove_module(self, index: int) -> None:
        removed = self.modules.pop(index)
        self._changed()
        logger.info(f"Module removed from page: {removed.title}")

    def move_module(self, source: Iterable[int], destination: int) -> None:
        move_items(self.modules, source, destination)
        self._changed()

    def reset_to_defaults(self) -> None:
        """Discard working changes and reload the page's title and modules."""
        self.title = self._original.title
        self.modules = list(self._original.modules)
        self._changed()

    async def save(self) -> bool:
        self.is_loading = True
        try:
            page = self._original
            page.title = self.title
            page.modules[:] = self.modules
            page.is_dirty = True
            await self.data_manager.save_page(page)
            self.has_unsaved_changes = False
            logger.info(f"Page edited: {self.title}")
            return True
        except Exception as e:
            self._capture(e)
            return False
        finally:
            self.is_loading = False
            self._notify()

    async def autosave(self) -> bool:
        """Save when autosave is on and there is something to save."""
        if not (self.autosave_enabled and self.has_unsaved_changes):
            return False
        return await self.save()
