"""
Unit Tests for Page and Module Editors
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from form_builder.editors import ModuleEditor, PageEditor
from form_builder.errors import SaveFailedError
from form_builder.models import Component, ComponentType, Module


class TestPageEditor:
    """Tests for PageEditor."""

    def test_changes_notify_listeners(self, manager, sample_page, settings):
        editor = PageEditor(manager, sample_page, settings=settings)
        listener = MagicMock()
        unsubscribe = editor.subscribe(listener)

        editor.add_module(Module(title="Extra"))

        assert editor.has_unsaved_changes is True
        listener.assert_called_once_with(editor)
        # page untouched until save
        assert len(sample_page.modules) == 1

        unsubscribe()
        editor.set_title("Renamed")
        listener.assert_called_once()

    def test_is_valid_requires_title(self, manager, sample_page, settings):
        editor = PageEditor(manager, sample_page, settings=settings)
        assert editor.is_valid is True

        editor.set_title("")

        assert editor.is_valid is False

    def test_reset_to_defaults(self, manager, sample_page, settings):
        editor = PageEditor(manager, sample_page, settings=settings)
        editor.set_title("Draft")
        editor.remove_module(0)

        editor.reset_to_defaults()

        assert editor.title == "Profile"
        assert editor.modules == sample_page.modules

    @pytest.mark.asyncio
    async def test_save(self, manager, sample_page, settings):
        editor = PageEditor(manager, sample_page, settings=settings)
        editor.set_title("Renamed")
        editor.add_module(Module(title="Extra"))
        editor.move_module([1], 0)

        assert await editor.save() is True

        assert editor.has_unsaved_changes is False
        assert sample_page.title == "Renamed"
        assert [m.title for m in sample_page.modules] == ["Extra", "Details"]
        assert await manager.fetch_pages() == [sample_page]

    @pytest.mark.asyncio
    async def test_save_failure_is_captured(self, sample_page, settings):
        data_manager = MagicMock()
        failure = SaveFailedError(RuntimeError("disk full"))
        data_manager.save_page = AsyncMock(side_effect=failure)
        editor = PageEditor(data_manager, sample_page, settings=settings)
        editor.set_title("Renamed")

        assert await editor.save() is False

        assert editor.error is failure
        assert editor.show_error is True
        assert editor.is_loading is False
        assert editor.has_unsaved_changes is True

        editor.dismiss_error()
        assert editor.error is None

    @pytest.mark.asyncio
    async def test_unexpected_failure_wrapped(self, sample_page, settings):
        data_manager = MagicMock()
        data_manager.save_page = AsyncMock(side_effect=RuntimeError("boom"))
        editor = PageEditor(data_manager, sample_page, settings=settings)

        await editor.save()

        assert str(editor.error) == "boom"

    @pytest.mark.asyncio
    async def test_autosave(self, manager, sample_page, settings):
        editor = PageEditor(manager, sample_page, autosave=True, settings=settings)
        assert await editor.autosave() is False

        editor.set_title("Renamed")

        assert await editor.autosave() is True
        assert sample_page.title == "Renamed"

    @pytest.mark.asyncio
    async def test_autosave_follows_preference(self, manager, sample_page, settings):
        settings.preferences.autosave = False
        editor = PageEditor(manager, sample_page, settings=settings)
        editor.set_title("Renamed")

        assert await editor.autosave() is False
        assert sample_page.title == "Profile"


class TestModuleEditor:
    """Tests for ModuleEditor."""

    def test_component_operations(self, manager, sample_page):
        module = sample_page.modules[0]
        editor = ModuleEditor(manager, module, sample_page)
        name = editor.components[0]

        copy = editor.duplicate_component(name)
        assert copy.configuration is name.configuration
        assert [c.title for c in editor.components][-1] == "Name Copy"

        editor.move_component([3], 0)
        assert editor.components[0] is copy

        editor.confirm_delete_component(copy)
        assert editor.component_to_delete is copy
        editor.delete_component(copy)
        assert editor.component_to_delete is None
        assert copy not in editor.components

    def test_update_component(self, manager, sample_page):
        module = sample_page.modules[0]
        editor = ModuleEditor(manager, module, sample_page)
        replacement = Component(ComponentType.TEXT, "Name", value="Grace", id=module.components[0].id)

        editor.update_component(replacement)

        assert editor.components[0] is replacement
        assert module.components[0] is not replacement

    def test_is_valid(self, manager, sample_page):
        editor = ModuleEditor(manager, sample_page.modules[0], sample_page)
        assert editor.is_valid is True

        editor.add_component(Component(ComponentType.TEXT, "Blank"))

        assert editor.is_valid is False

    @pytest.mark.asyncio
    async def test_save(self, manager, sample_page):
        await manager.save_page(sample_page)
        module = Module(title="New")
        editor = ModuleEditor(manager, module, sample_page)
        editor.add_component(Component(ComponentType.TOGGLE, "Agree"))
        editor.set_title("Consent")

        assert await editor.save() is True

        assert sample_page.modules[-1] is module
        assert module.title == "Consent"
        assert manager.store.counts()["components"] == 4

    def test_reset_to_defaults(self, manager, sample_page):
        module = sample_page.modules[0]
        editor = ModuleEditor(manager, module, sample_page)
        editor.delete_component(editor.components[0])

        editor.reset_to_defaults()

        assert editor.components == module.components
