"""
Unit Tests for Module and Page Aggregates
"""

import pytest
from datetime import datetime, timezone

from form_builder.models import Component, ComponentType, FieldValue, Module, Page
from form_builder.models.ordering import move_items
from form_builder.models.page import SOURCE_PAGE_KEY, TEMPLATE_KEY


class TestMoveItems:
    """Tests for block moves."""

    def test_move_first_to_end(self):
        items = ["a", "b", "c"]

        move_items(items, [0], 2)

        assert items == ["b", "c", "a"]

    def test_move_keeps_relative_order(self):
        items = ["a", "b", "c", "d", "e"]

        move_items(items, {3, 1}, 0)

        assert items == ["b", "d", "a", "c", "e"]

    def test_destination_clamped(self):
        items = ["a", "b", "c"]

        move_items(items, [1], 10)

        assert items == ["a", "c", "b"]

    def test_out_of_range_source(self):
        with pytest.raises(IndexError):
            move_items(["a"], [3], 0)


class TestModule:
    """Tests for Module."""

    def test_add_remove_move(self):
        module = Module(title="Fields")
        first = Component(ComponentType.TEXT, "First", value="1")
        second = Component(ComponentType.TEXT, "Second", value="2")
        third = Component(ComponentType.TEXT, "Third", value="3")
        for component in (first, second, third):
            module.add_component(component)

        module.move_components([0], 2)
        assert [c.title for c in module.components] == ["Second", "Third", "First"]

        module.remove_component(third)
        assert [c.title for c in module.components] == ["Second", "First"]

    def test_is_valid_tracks_children(self):
        component = Component(ComponentType.TEXT, "Name", value="Ada")
        module = Module(title="Fields", components=[component])
        assert module.is_valid is True

        component.value = ""
        assert module.is_valid is False

        component.value = "Grace"
        assert module.is_valid is True

    def test_reset_to_defaults(self):
        text = Component(ComponentType.TEXT, "Greeting", value="hello")
        toggle = Component(ComponentType.TOGGLE, "Flag", value=True)
        ids = [text.id, toggle.id]
        configs = [text.configuration, toggle.configuration]
        module = Module(title="Fields", components=[text, toggle])

        module.reset_to_defaults()

        assert text.value == FieldValue.of("")
        assert toggle.value == FieldValue.of(False)
        assert [c.id for c in module.components] == ids
        assert [c.configuration for c in module.components] == configs

    def test_get_values_last_title_wins(self):
        module = Module(title="Fields", components=[
            Component(ComponentType.TEXT, "Name", value="first"),
            Component(ComponentType.TEXT, "Name", value="second"),
            Component(ComponentType.NUMBER, "Age", value=3),
        ])

        assert module.get_values() == {"Name": "second", "Age": 3}

    def test_create_template(self):
        component = Component(ComponentType.TEXT, "Name", value="Ada")
        module = Module(title="Fields", components=[component])

        template = module.create_template()

        assert template.title == "Fields Template"
        assert template.id != module.id
        assert template.components[0].id != component.id
        assert template.components[0].value == FieldValue.of("")
        assert template.components[0].configuration is not component.configuration


class TestPage:
    """Tests for Page."""

    def test_mutations_mark_dirty(self):
        page = Page(title="Form", updated_at=datetime(2020, 1, 1, tzinfo=timezone.utc))

        page.add_module(Module(title="A"))

        assert page.is_dirty is True
        assert page.updated_at.year > 2020

    def test_move_and_remove_modules(self):
        a, b, c = Module(title="A"), Module(title="B"), Module(title="C")
        page = Page(title="Form", modules=[a, b, c])

        page.move_modules([0], 2)
        assert [m.title for m in page.modules] == ["B", "C", "A"]

        page.remove_module(c)
        assert [m.title for m in page.modules] == ["B", "A"]

    def test_is_valid(self, sample_page):
        assert sample_page.is_valid is True

        sample_page.modules[0].components[0].value = ""

        assert sample_page.is_valid is False
        assert sample_page.validate() is False

    def test_create_template(self):
        component = Component(ComponentType.TEXT, "Name", value="X")
        module = Module(title="Fields", components=[component])
        page = Page(title="Form", modules=[module])

        template = page.create_template()

        assert template.is_template is True
        assert template.id != page.id
        assert template.title == "Form Template"
        assert template.modules[0].id != module.id
        assert template.modules[0].title == "Fields Template"
        copied = template.modules[0].components[0]
        assert copied.id != component.id
        assert copied.value == FieldValue.of("")
        assert template.metadata[SOURCE_PAGE_KEY].raw == str(page.id)
        # source untouched
        assert component.value == FieldValue.of("X")

    def test_create_page_from_template(self, sample_page):
        template = sample_page.create_template(title="Profile Blueprint")

        page = template.create_page_from_template()

        assert page.is_template is False
        assert page.title == "Profile Blueprint"
        assert page.metadata[TEMPLATE_KEY] == FieldValue.of(str(template.id))
        assert page.modules[0].id != template.modules[0].id
        assert page.get_all_values() == {
            "Details Template": {"Name": "", "Age": 0.0, "Subscribed": False},
        }

    def test_reset_to_defaults(self, sample_page):
        sample_page.reset_to_defaults()

        assert sample_page.get_all_values() == {
            "Details": {"Name": "", "Age": 0.0, "Subscribed": False},
        }
        assert sample_page.is_dirty is True

    def test_export(self, sample_page):
        snapshot = sample_page.export()

        assert snapshot["id"] == str(sample_page.id)
        assert snapshot["isTemplate"] is False
        assert snapshot["createdAt"] == sample_page.created_at
        assert snapshot["modules"] == [{
            "id": str(sample_page.modules[0].id),
            "title": "Details",
            "values": {"Name": "Ada", "Age": 36, "Subscribed": True},
        }]
        assert "metadata" not in snapshot

    def test_from_export_infers_types(self, sample_page):
        when = datetime(2024, 3, 1, tzinfo=timezone.utc)
        sample_page.modules[0].add_component(Component(ComponentType.DATE, "Joined", value=when))

        restored = Page.from_export(sample_page.export())

        assert restored.id == sample_page.id
        assert restored.modules[0].id == sample_page.modules[0].id
        types = {c.title: c.component_type for c in restored.modules[0].components}
        assert types == {
            "Name": ComponentType.TEXT,
            "Age": ComponentType.NUMBER,
            "Subscribed": ComponentType.TOGGLE,
            "Joined": ComponentType.DATE,
        }
        assert restored.get_all_values() == sample_page.get_all_values()
