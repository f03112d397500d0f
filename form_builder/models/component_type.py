"""
Models - Component Type

Supported component types with their default values and rule sets.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List

from form_builder.models.configuration import (
    DateRange,
    MaxLength,
    MinLength,
    Range,
    Required,
    ValidationRule,
)
from form_builder.models.value import FieldValue


class ValidationCategory(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"

    def default_rules(self) -> List[ValidationRule]:
        if self == ValidationCategory.TEXT:
            return [Required(), MinLength(1), MaxLength(1000)]
        if self == ValidationCategory.NUMBER:
            return [Required(), Range()]
        if self == ValidationCategory.DATE:
            return [Required(), DateRange()]
        return [Required()]


class ComponentType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    TOGGLE = "toggle"
    PICKER = "picker"

    @property
    def display_name(self) -> str:
        return {
            ComponentType.TEXT: "Text Input",
            ComponentType.NUMBER: "Number Input",
            ComponentType.DATE: "Date Input",
            ComponentType.TOGGLE: "Toggle Switch",
            ComponentType.PICKER: "Picker Select",
        }[self]

    def default_value(self) -> FieldValue:
        """Fresh default; date defaults to the current UTC time."""
        if self == ComponentType.TEXT:
            return FieldValue.of("")
        if self == ComponentType.NUMBER:
            return FieldValue.of(0.0)
        if self == ComponentType.DATE:
            return FieldValue.of(datetime.now(timezone.utc))
        if self == ComponentType.TOGGLE:
            return FieldValue.of(False)
        return FieldValue.of("Option 1")

    @property
    def validation_category(self) -> ValidationCategory:
        return {
            ComponentType.TEXT: ValidationCategory.TEXT,
            ComponentType.NUMBER: ValidationCategory.NUMBER,
            ComponentType.DATE: ValidationCategory.DATE,
            ComponentType.TOGGLE: ValidationCategory.BOOLEAN,
            ComponentType.PICKER: ValidationCategory.TEXT,
        }[self]
