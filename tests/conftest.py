"""
Shared fixtures for form_builder tests.
"""

import pytest

from form_builder.config import Settings
from form_builder.models import Component, ComponentType, Module, Page
from form_builder.services import DataManager


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def manager(settings):
    return DataManager(settings=settings)


@pytest.fixture
def sample_page():
    module = Module(title="Details", components=[
        Component(ComponentType.TEXT, "Name", value="Ada"),
        Component(ComponentType.NUMBER, "Age", value=36),
        Component(ComponentType.TOGGLE, "Subscribed", value=True),
    ])
    return Page(title="Profile", modules=[module])
