"""
Schemas - Export Models

Pydantic models for the export/import JSON envelope.
"""

from pydantic import BaseModel, Field, field_serializer, field_validator
from typing import List, Optional, Dict, Any
from datetime import datetime

from form_builder.errors import DecodeError
from form_builder.models.value import FieldValue


def _decode_values(values: Dict[str, Any]) -> Dict[str, Any]:
    """Turn wire-form values ({"timestamp": iso}) back into raw values."""
    decoded = {}
    for key, value in values.items():
        if isinstance(value, dict):
            try:
                value = FieldValue.from_json(value).raw
            except DecodeError as e:
                raise ValueError(str(e))
        decoded[key] = value
    return decoded


def _encode_values(values: Dict[str, Any]) -> Dict[str, Any]:
    return {key: FieldValue.of(value).to_json() for key, value in values.items()}


class ModuleSnapshot(BaseModel):
    """A module's id, title and title-keyed component values."""
    id: str
    title: str
    values: Dict[str, Any] = {}

    @field_validator("values", mode="before")
    @classmethod
    def decode_values(cls, v):
        return _decode_values(v) if isinstance(v, dict) else v

    @field_serializer("values", when_used="json")
    def encode_values(self, v: Dict[str, Any]) -> Dict[str, Any]:
        return _encode_values(v)


class PageSnapshot(BaseModel):
    """Export snapshot of one page or template."""
    id: str
    title: str
    is_template: bool = Field(False, alias="isTemplate")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
    modules: List[ModuleSnapshot] = []
    metadata: Optional[Dict[str, Any]] = None

    model_config = {"populate_by_name": True}

    @field_validator("metadata", mode="before")
    @classmethod
    def decode_metadata(cls, v):
        return _decode_values(v) if isinstance(v, dict) else v

    @field_serializer("metadata", when_used="json")
    def encode_metadata(self, v: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        return _encode_values(v) if v is not None else None


class ExportEnvelope(BaseModel):
    """
    Top-level export document.

    Entries stay plain dicts so import can validate them one by one and
    skip a malformed snapshot without rejecting the whole file.
    """
    pages: List[Dict[str, Any]] = []
    templates: List[Dict[str, Any]] = []
