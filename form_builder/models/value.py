"""
Models - Field Value

Closed tagged union over the five value kinds a Component can hold.
"""

import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

from form_builder.errors import DecodeError

TIMESTAMP_KEY = "timestamp"


class ValueKind(str, Enum):
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class FieldValue:
    """
    A single serialization-stable value.

    Equality compares kind and raw value, so FieldValue.of(5) is not
    equal to FieldValue.of("5") or FieldValue.of(5.0).
    """
    kind: ValueKind
    raw: Any

    @classmethod
    def of(cls, value: Any) -> "FieldValue":
        """
        Wrap an arbitrary value.

        Unsupported types are stored as their string description.
        """
        if isinstance(value, FieldValue):
            return value
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            return cls(ValueKind.BOOLEAN, value)
        if isinstance(value, int):
            return cls(ValueKind.INTEGER, value)
        if isinstance(value, float):
            return cls(ValueKind.FLOAT, value)
        if isinstance(value, str):
            return cls(ValueKind.STRING, value)
        if isinstance(value, datetime):
            return cls(ValueKind.TIMESTAMP, value)
        return cls(ValueKind.STRING, str(value))

    # ==================== SERIALIZATION ====================

    def to_json(self) -> Any:
        """JSON-compatible form; timestamps become {"timestamp": iso}."""
        if self.kind == ValueKind.TIMESTAMP:
            return {TIMESTAMP_KEY: self.raw.isoformat()}
        return self.raw

    @classmethod
    def from_json(cls, data: Any) -> "FieldValue":
        """
        Decode a JSON-compatible value.

        Tries integer, float, string, boolean, then timestamp; the first
        representation that matches wins.
        """
        if isinstance(data, int) and not isinstance(data, bool):
            return cls(ValueKind.INTEGER, data)
        if isinstance(data, float):
            return cls(ValueKind.FLOAT, data)
        if isinstance(data, str):
            return cls(ValueKind.STRING, data)
        if isinstance(data, bool):
            return cls(ValueKind.BOOLEAN, data)
        if isinstance(data, dict) and set(data) == {TIMESTAMP_KEY}:
            try:
                return cls(ValueKind.TIMESTAMP, datetime.fromisoformat(data[TIMESTAMP_KEY]))
            except (TypeError, ValueError) as e:
                raise DecodeError(f"Invalid timestamp: {data[TIMESTAMP_KEY]!r}", cause=e)
        raise DecodeError(f"Value cannot be decoded: {data!r}")

    def encode(self) -> bytes:
        """Encode as UTF-8 JSON. Raises ValueError for NaN/infinity."""
        return json.dumps(self.to_json(), allow_nan=False).encode("utf-8")

    @classmethod
    def decode(cls, data: Union[bytes, str]) -> "FieldValue":
        try:
            parsed = json.loads(data)
        except (TypeError, ValueError) as e:
            raise DecodeError("Value is not valid JSON", cause=e)
        return cls.from_json(parsed)

    # ==================== ACCESSORS ====================

    @property
    def as_string(self) -> Optional[str]:
        return self.raw if self.kind == ValueKind.STRING else None

    @property
    def as_int(self) -> Optional[int]:
        return self.raw if self.kind == ValueKind.INTEGER else None

    @property
    def as_number(self) -> Optional[float]:
        if self.kind == ValueKind.FLOAT:
            return self.raw
        if self.kind == ValueKind.INTEGER:
            return float(self.raw)
        return None

    @property
    def as_bool(self) -> Optional[bool]:
        return self.raw if self.kind == ValueKind.BOOLEAN else None

    @property
    def as_date(self) -> Optional[datetime]:
        return self.raw if self.kind == ValueKind.TIMESTAMP else None
