"""
Schemas Module - Pydantic Models

Data models for the export/import format.
"""

from form_builder.schemas.export import ModuleSnapshot, PageSnapshot, ExportEnvelope

__all__ = [
    "ModuleSnapshot",
    "PageSnapshot",
    "ExportEnvelope",
]
