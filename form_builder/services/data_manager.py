"""
Services - Data Manager

Async persistence collaborator: fetch, save, delete, export/import and
whole-store validation over the object store.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, List, Union

from pydantic import ValidationError

from form_builder.config import get_settings
from form_builder.errors import (
    CustomError,
    DeleteFailedError,
    FormBuilderError,
    InvalidDataError,
    LoadFailedError,
    ModelValidationFailedError,
    SaveFailedError,
)
from form_builder.models import Component, Module, Page
from form_builder.persistence import ObjectStore
from form_builder.schemas import ExportEnvelope, PageSnapshot
from form_builder.services.cache_service import CacheService

logger = logging.getLogger(__name__)

PAGES_KEY = "listing:pages"
TEMPLATES_KEY = "listing:templates"


class DataManager:
    """
    Serializes every store access through one asyncio lock.

    Each write ends in a single store save(), which commits all in-memory
    changes or fails as a whole. Failures are wrapped in the typed data
    errors and never retried.
    """

    def __init__(self, store=None, settings=None, cache=None):
        self.settings = settings or get_settings()
        self.store = store or ObjectStore()
        self.cache = cache or CacheService(self.settings)
        self._lock = asyncio.Lock()
        self._revision = 0

    # ==================== PAGES ====================

    async def fetch_pages(self) -> List[Page]:
        """Non-template pages, most recently updated first."""
        async with self._lock:
            return self._fetch_pages()

    async def save_page(self, page: Page) -> None:
        async with self._lock:
            self._save_page(page)

    async def delete_page(self, page: Page) -> None:
        logger.info(f"Deleting page: {page.title}")
        async with self._lock:
            try:
                removed = self.store.delete_page(page)
            except Exception as e:
                logger.error(f"Failed to delete page {page.title}: {e}")
                raise DeleteFailedError(e) from e
            try:
                self._commit()
            except Exception as e:
                logger.error(f"Failed to delete page {page.title}: {e}")
                self.store.insert(page)
                raise DeleteFailedError(e) from e
        logger.info(f"Deleted page {page.title} ({removed} entities)")

    # ==================== TEMPLATES ====================

    async def fetch_templates(self) -> List[Page]:
        """Template pages sorted by title."""
        async with self._lock:
            return self._fetch_templates()

    async def create_page_from_template(self, template: Page) -> Page:
        logger.info(f"Creating page from template: {template.title}")
        page = template.create_page_from_template()
        async with self._lock:
            self._save_page(page)
        return page

    # ==================== MODULES & COMPONENTS ====================

    async def save_module(self, module: Module, page: Page) -> None:
        logger.info(f"Saving module: {module.title}")
        async with self._lock:
            appended = page.find_module(module.id) is None
            if appended:
                page.add_module(module)
            inserted = not self.store.has_changes(page)
            if inserted:
                self.store.insert(page)
            try:
                self._commit()
            except Exception as e:
                logger.error(f"Failed to save module {module.title}: {e}")
                if appended:
                    page.remove_module(module)
                if inserted:
                    self.store.delete_page(page)
                raise SaveFailedError(e) from e
            page.is_dirty = False

    async def update_component(self, component: Component, value: Any) -> None:
        logger.info(f"Updating component: {component.title}")
        async with self._lock:
            component.value = value
            try:
                self._commit()
            except Exception as e:
                logger.error(f"Failed to update component {component.title}: {e}")
                raise SaveFailedError(e) from e

    async def delete_component(self, component: Component) -> None:
        logger.info(f"Deleting component: {component.title}")
        async with self._lock:
            try:
                self.store.delete_component(component)
                self._commit()
            except Exception as e:
                logger.error(f"Failed to delete component {component.title}: {e}")
                raise DeleteFailedError(e) from e

    # ==================== UTILITIES ====================

    async def clear_all_data(self) -> None:
        async with self._lock:
            self._clear_all()

    async def validate_all(self) -> None:
        """Raise ModelValidationFailedError naming every invalid page and template."""
        logger.info("Validating data")
        async with self._lock:
            pages = self._fetch_pages()
            templates = self._fetch_templates()

        errors = [f"Invalid page: {p.title}" for p in pages if not p.validate()]
        errors += [f"Invalid template: {t.title}" for t in templates if not t.validate()]
        if errors:
            logger.warning(f"Validation failed: {', '.join(errors)}")
            raise ModelValidationFailedError(errors)
        logger.info("Data validation successful")

    # ==================== EXPORT / IMPORT ====================

    async def export_data(self) -> bytes:
        """JSON envelope with `pages` and `templates` snapshot arrays."""
        logger.info("Exporting data")
        async with self._lock:
            pages = self._fetch_pages()
            templates = self._fetch_templates()

        try:
            envelope = ExportEnvelope(
                pages=[self._snapshot(p) for p in pages],
                templates=[self._snapshot(t) for t in templates],
            )
            data = envelope.model_dump_json(indent=self.settings.export.indent).encode("utf-8")
        except (ValidationError, ValueError) as e:
            logger.error(f"Failed to export data: {e}")
            raise CustomError("Failed to export data", cause=e) from e
        logger.info(f"Exported {len(pages)} pages and {len(templates)} templates")
        return data

    async def import_data(self, data: Union[bytes, str]) -> Dict[str, int]:
        """
        Replace all stored data with the contents of an export envelope.

        Templates are loaded before pages. A snapshot that fails to parse
        is logged and skipped.

        Returns:
            Count of imported pages and templates
        """
        logger.info("Importing data")
        try:
            envelope = ExportEnvelope.model_validate_json(data)
        except ValidationError as e:
            logger.error(f"Import envelope is invalid: {e}")
            raise InvalidDataError("Import data is not a valid export envelope", cause=e) from e

        async with self._lock:
            self._clear_all()
            counts = {
                "templates": self._load_snapshots(envelope.templates, is_template=True),
                "pages": self._load_snapshots(envelope.pages, is_template=False),
            }
        logger.info(f"Imported {counts['pages']} pages and {counts['templates']} templates")
        return counts

    # ==================== INTERNALS (lock held) ====================

    def _commit(self) -> None:
        self.store.save()
        self._revision += 1

    def _fetch(self, key: str, predicate: Callable[[Page], bool], sort_key, reverse=False) -> List[Page]:
        cached = self.cache.get_versioned(key, self._revision)
        if cached is not None:
            return list(cached)
        try:
            pages = self.store.fetch_pages(predicate, sort_key, reverse)
        except Exception as e:
            logger.error(f"Failed to fetch {key}: {e}")
            raise LoadFailedError(e) from e
        self.cache.set_versioned(key, pages, self._revision)
        logger.info(f"Fetched {len(pages)} entries for {key}")
        return list(pages)

    def _fetch_pages(self) -> List[Page]:
        return self._fetch(PAGES_KEY, lambda p: not p.is_template, lambda p: p.updated_at, reverse=True)

    def _fetch_templates(self) -> List[Page]:
        return self._fetch(TEMPLATES_KEY, lambda p: p.is_template, lambda p: p.title)

    def _save_page(self, page: Page) -> None:
        logger.info(f"Saving page: {page.title}")
        inserted = not self.store.has_changes(page)
        if inserted:
            self.store.insert(page)
        try:
            self._commit()
        except Exception as e:
            logger.error(f"Failed to save page {page.title}: {e}")
            if inserted:
                self.store.delete_page(page)
            raise SaveFailedError(e) from e
        page.is_dirty = False

    def _clear_all(self) -> None:
        logger.info("Clearing all data")
        try:
            self.store.delete_all()
            self._commit()
        except Exception as e:
            logger.error(f"Failed to clear data: {e}")
            raise DeleteFailedError(e) from e
        self.cache.clear_all()

    def _load_snapshots(self, entries: List[Dict[str, Any]], is_template: bool) -> int:
        loaded = 0
        for entry in entries:
            try:
                snapshot = PageSnapshot.model_validate(entry)
                page = Page.from_export(snapshot.model_dump(by_alias=True))
            except (ValidationError, ValueError, KeyError, FormBuilderError) as e:
                logger.warning(f"Skipping malformed snapshot {entry.get('id')!r}: {e}")
                continue
            page.is_template = is_template
            self.store.insert(page)
            loaded += 1
        try:
            self._commit()
        except Exception as e:
            logger.error(f"Failed to import data: {e}")
            raise SaveFailedError(e) from e
        return loaded

    @staticmethod
    def _snapshot(page: Page) -> Dict[str, Any]:
        return PageSnapshot.model_validate(page.export()).model_dump(mode="json", by_alias=True)
