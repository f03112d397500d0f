"""
Form Builder - Default Data

Starter templates and a welcome page for an empty store.
"""

import logging
from datetime import datetime, timezone
from typing import List

from form_builder.models import Component, ComponentConfiguration, ComponentType, Module, Page

logger = logging.getLogger(__name__)


def _personal_module() -> Module:
    return Module(title="Personal Information", components=[
        Component(ComponentType.TEXT, "Full Name", value="", configuration=ComponentConfiguration(
            is_required=True,
            placeholder="Enter your full name",
            helper_text="Your legal full name",
        )),
        Component(ComponentType.DATE, "Date of Birth", value=datetime.now(timezone.utc),
                  configuration=ComponentConfiguration(
                      is_required=True,
                      helper_text="Your date of birth",
                  )),
        Component(ComponentType.PICKER, "Gender", value="Prefer not to say",
                  configuration=ComponentConfiguration(
                      picker_options=["Male", "Female", "Non-binary", "Prefer not to say"],
                  )),
    ])


def _contact_module() -> Module:
    return Module(title="Contact Information", components=[
        Component(ComponentType.TEXT, "Email", value="", configuration=ComponentConfiguration(
            is_required=True,
            placeholder="Enter your email",
            helper_text="Your primary email address",
        )),
        Component(ComponentType.TEXT, "Phone", value="", configuration=ComponentConfiguration(
            placeholder="Enter your phone number",
            helper_text="Your contact phone number",
        )),
        Component(ComponentType.PICKER, "Preferred Contact", value="Email",
                  configuration=ComponentConfiguration(
                      picker_options=["Email", "Phone", "Either"],
                  )),
    ])


def _preferences_module() -> Module:
    return Module(title="Preferences", components=[
        Component(ComponentType.TOGGLE, "Receive Newsletter", value=False,
                  configuration=ComponentConfiguration(helper_text="Subscribe to our newsletter")),
        Component(ComponentType.TOGGLE, "Email Notifications", value=True,
                  configuration=ComponentConfiguration(helper_text="Receive email notifications")),
    ])


def build_default_templates() -> List[Page]:
    """Each template gets its own module instances; modules are never shared."""
    return [
        Page(title="Basic Profile", modules=[_personal_module()], is_template=True),
        Page(
            title="Full Profile",
            modules=[_personal_module(), _contact_module(), _preferences_module()],
            is_template=True,
        ),
        Page(title="Contact Form", modules=[_contact_module()], is_template=True),
    ]


def build_default_pages() -> List[Page]:
    sample = Module(title="Sample Module", components=[
        Component(ComponentType.TEXT, "Sample Text", value="Sample Value",
                  configuration=ComponentConfiguration(
                      is_required=True,
                      placeholder="Enter text",
                      helper_text="This is a sample text field",
                  )),
        Component(ComponentType.NUMBER, "Sample Number", value=42,
                  configuration=ComponentConfiguration(placeholder="Enter number")),
    ])
    return [Page(title="Welcome Page", modules=[sample])]


async def seed_default_data(data_manager) -> int:
    """Save the default templates and pages; returns how many were saved."""
    pages = build_default_templates() + build_default_pages()
    for page in pages:
        await data_manager.save_page(page)
    logger.info(f"Seeded {len(pages)} default pages and templates")
    return len(pages)
