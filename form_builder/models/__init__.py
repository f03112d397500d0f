"""
Models Module - Form Tree

Pages, Modules, Components, their typed values and validation rules.
"""

from form_builder.models.value import FieldValue, ValueKind
from form_builder.models.configuration import (
    ComponentConfiguration,
    Custom,
    DateRange,
    MaxLength,
    MinLength,
    Range,
    Regex,
    Required,
    ValidationRule,
    rule_from_dict,
    rule_to_dict,
)
from form_builder.models.component_type import ComponentType, ValidationCategory
from form_builder.models.component import Component
from form_builder.models.module import Module
from form_builder.models.page import Page

__all__ = [
    "FieldValue",
    "ValueKind",
    "ComponentConfiguration",
    "ValidationRule",
    "Required",
    "MinLength",
    "MaxLength",
    "Range",
    "DateRange",
    "Regex",
    "Custom",
    "rule_to_dict",
    "rule_from_dict",
    "ComponentType",
    "ValidationCategory",
    "Component",
    "Module",
    "Page",
]
