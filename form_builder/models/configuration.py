"""
Models - Component Configuration

Validation rules and the per-component configuration that evaluates them.
"""

import copy
import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Union

from form_builder.errors import InvalidFormatError
from form_builder.models.value import FieldValue

DEFAULT_PICKER_OPTIONS = ["Option 1", "Option 2", "Option 3"]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_utc(value: datetime) -> datetime:
    # naive datetimes are read as UTC
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


# ==================== RULES ====================


@dataclass(frozen=True)
class Required:
    """Strings must be non-empty; any other value passes."""

    def check(self, value: Any) -> bool:
        if isinstance(value, str):
            return value != ""
        return True


@dataclass(frozen=True)
class MinLength:
    length: int

    def check(self, value: Any) -> bool:
        return isinstance(value, str) and len(value) >= self.length


@dataclass(frozen=True)
class MaxLength:
    length: int

    def check(self, value: Any) -> bool:
        return isinstance(value, str) and len(value) <= self.length


@dataclass(frozen=True)
class Range:
    """Inclusive numeric bounds; a missing bound is unbounded."""
    min: Optional[float] = None
    max: Optional[float] = None

    def check(self, value: Any) -> bool:
        if not _is_number(value):
            return False
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True


@dataclass(frozen=True)
class DateRange:
    """Inclusive datetime bounds; a missing bound is unbounded."""
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    def __post_init__(self):
        if self.start is not None:
            object.__setattr__(self, "start", _as_utc(self.start))
        if self.end is not None:
            object.__setattr__(self, "end", _as_utc(self.end))

    def check(self, value: Any) -> bool:
        if not isinstance(value, datetime):
            return False
        value = _as_utc(value)
        if self.start is not None and value < self.start:
            return False
        if self.end is not None and value > self.end:
            return False
        return True


@dataclass(frozen=True)
class Regex:
    """Matches when the pattern is found anywhere in the string."""
    pattern: str

    def check(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        try:
            return re.search(self.pattern, value) is not None
        except re.error:
            return False


@dataclass(frozen=True)
class Custom:
    """Arbitrary predicate. Cannot be persisted; attach it in code."""
    predicate: Callable[[Any], bool]

    def check(self, value: Any) -> bool:
        return bool(self.predicate(value))


ValidationRule = Union[Required, MinLength, MaxLength, Range, DateRange, Regex, Custom]


def rule_to_dict(rule: ValidationRule) -> Dict[str, Any]:
    """Data form of a rule. Custom rules raise InvalidFormatError."""
    if isinstance(rule, Required):
        return {"type": "required"}
    if isinstance(rule, MinLength):
        return {"type": "minLength", "length": rule.length}
    if isinstance(rule, MaxLength):
        return {"type": "maxLength", "length": rule.length}
    if isinstance(rule, Range):
        return {"type": "range", "min": rule.min, "max": rule.max}
    if isinstance(rule, DateRange):
        return {
            "type": "dateRange",
            "from": rule.start.isoformat() if rule.start else None,
            "to": rule.end.isoformat() if rule.end else None,
        }
    if isinstance(rule, Regex):
        return {"type": "regex", "pattern": rule.pattern}
    raise InvalidFormatError(f"{type(rule).__name__} rules cannot be serialized")


def rule_from_dict(data: Dict[str, Any]) -> ValidationRule:
    kind = data.get("type")
    try:
        if kind == "required":
            return Required()
        if kind == "minLength":
            return MinLength(int(data["length"]))
        if kind == "maxLength":
            return MaxLength(int(data["length"]))
        if kind == "range":
            return Range(data.get("min"), data.get("max"))
        if kind == "dateRange":
            start, end = data.get("from"), data.get("to")
            return DateRange(
                datetime.fromisoformat(start) if start else None,
                datetime.fromisoformat(end) if end else None,
            )
        if kind == "regex":
            return Regex(str(data["pattern"]))
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidFormatError(f"malformed {kind} rule: {e}")
    raise InvalidFormatError(f"unknown rule type {kind!r}")


# ==================== CONFIGURATION ====================


@dataclass(eq=False)
class ComponentConfiguration:
    """Display hints and validation rules for one Component."""
    is_required: bool = False
    placeholder: Optional[str] = None
    helper_text: Optional[str] = None
    validation_rules: Optional[List[ValidationRule]] = None
    picker_options: List[str] = field(default_factory=lambda: list(DEFAULT_PICKER_OPTIONS))
    error_message: Optional[str] = None
    default_value: Optional[FieldValue] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def validate(self, value: Any) -> bool:
        """True when every rule accepts value; stops at the first failure."""
        if self.validation_rules is None:
            return True
        for rule in self.validation_rules:
            if not rule.check(value):
                return False
        return True

    def copy(self) -> "ComponentConfiguration":
        """Independent copy with a fresh id."""
        clone = copy.copy(self)
        clone.id = uuid.uuid4()
        clone.validation_rules = (
            list(self.validation_rules) if self.validation_rules is not None else None
        )
        clone.picker_options = list(self.picker_options)
        return clone
