"""
Editors Module - Working-Copy Editors

Page and module editors with explicit change notifications.
"""

from form_builder.editors.base import BaseEditor
from form_builder.editors.page_editor import PageEditor
from form_builder.editors.module_editor import ModuleEditor

__all__ = [
    "BaseEditor",
    "PageEditor",
    "ModuleEditor",
]
