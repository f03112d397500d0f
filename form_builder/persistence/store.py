"""
Persistence - Object Store

In-memory arena of pages, modules and components keyed by id.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from form_builder.errors import DataNotFoundError, RelationshipError
from form_builder.models import Component, Module, Page

logger = logging.getLogger(__name__)


@dataclass
class StoreIndex:
    """Committed view of the tree: every entity plus its owner."""
    pages: Dict[uuid.UUID, Page] = field(default_factory=dict)
    modules: Dict[uuid.UUID, Module] = field(default_factory=dict)
    components: Dict[uuid.UUID, Component] = field(default_factory=dict)
    module_owner: Dict[uuid.UUID, uuid.UUID] = field(default_factory=dict)
    component_owner: Dict[uuid.UUID, uuid.UUID] = field(default_factory=dict)


class ObjectStore:
    """
    Black-box object store.

    Pages are registered with insert() and become visible to fetches after
    save(), which re-indexes every module and component reachable from the
    registered pages. Deletes are explicit and recursive. A failed save
    leaves the previously committed index untouched.
    """

    def __init__(self):
        self._pending: Dict[uuid.UUID, Page] = {}
        self._index = StoreIndex()

    # ==================== WRITES ====================

    def has_changes(self, page: Page) -> bool:
        """True if page is already tracked by the store."""
        return page.id in self._pending

    def insert(self, page: Page) -> None:
        self._pending[page.id] = page

    def delete_page(self, page: Page) -> int:
        """
        Untrack page together with its modules and components.

        Returns the number of entities removed; they leave the committed
        index at the next save().
        """
        if page.id not in self._pending:
            raise DataNotFoundError(f"Page {page.id} not found")
        del self._pending[page.id]
        removed = 1
        for module in page.modules:
            removed += 1 + len(module.components)
        return removed

    def delete_component(self, component: Component) -> None:
        """Detach component from its owning module."""
        owner_id = self._index.component_owner.get(component.id)
        module = self._index.modules.get(owner_id) if owner_id else None
        if module is None:
            raise DataNotFoundError(f"Component {component.id} not found")
        module.remove_component(component)

    def delete_all(self) -> None:
        self._pending.clear()

    def save(self) -> None:
        """Commit all tracked pages; raises RelationshipError on shared ownership."""
        index = StoreIndex(pages=dict(self._pending))
        for page in index.pages.values():
            for module in page.modules:
                if module.id in index.module_owner:
                    raise RelationshipError(
                        f"Module {module.title!r} belongs to more than one page"
                    )
                index.modules[module.id] = module
                index.module_owner[module.id] = page.id
                for component in module.components:
                    if component.id in index.component_owner:
                        raise RelationshipError(
                            f"Component {component.title!r} belongs to more than one module"
                        )
                    index.components[component.id] = component
                    index.component_owner[component.id] = module.id

        removed = len(self._index.components) - len(index.components)
        if removed > 0:
            logger.debug(f"Save dropped {removed} orphaned components")
        self._index = index

    # ==================== READS ====================

    def fetch_pages(
        self,
        predicate: Optional[Callable[[Page], bool]] = None,
        sort_key: Optional[Callable[[Page], Any]] = None,
        reverse: bool = False,
    ) -> List[Page]:
        pages = [p for p in self._index.pages.values() if predicate is None or predicate(p)]
        if sort_key is not None:
            pages.sort(key=sort_key, reverse=reverse)
        return pages

    def counts(self) -> Dict[str, int]:
        return {
            "pages": len(self._index.pages),
            "modules": len(self._index.modules),
            "components": len(self._index.components),
        }
