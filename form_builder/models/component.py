"""
Models - Component

A single typed input field: type, title, encoded value and configuration.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List, Optional

from form_builder.errors import DecodeError
from form_builder.models.component_type import ComponentType
from form_builder.models.configuration import DEFAULT_PICKER_OPTIONS, ComponentConfiguration
from form_builder.models.value import FieldValue

logger = logging.getLogger(__name__)


class Component:
    """
    Typed form field.

    The value is kept as encoded JSON bytes and decoded on access; a
    value that cannot be decoded reads back as the type default. The
    `is_valid` flag is refreshed whenever the value is assigned.
    """

    def __init__(
        self,
        component_type: ComponentType,
        title: str,
        value: Any = None,
        configuration: Optional[ComponentConfiguration] = None,
        id: Optional[uuid.UUID] = None,
    ):
        self.id = id or uuid.uuid4()
        self.component_type = ComponentType(component_type)
        self.title = title
        self.is_valid = True

        if configuration is None:
            configuration = ComponentConfiguration(
                is_required=False,
                placeholder=f"Enter {title.lower()}",
                validation_rules=self.component_type.validation_category.default_rules(),
            )
        self.configuration: Optional[ComponentConfiguration] = configuration

        self._value_data = b""
        self.value = value if value is not None else self.component_type.default_value()

    def __repr__(self) -> str:
        return f"Component(id={self.id}, type={self.component_type.value}, title={self.title!r})"

    # ==================== VALUE ====================

    @property
    def value(self) -> FieldValue:
        try:
            return FieldValue.decode(self._value_data)
        except DecodeError:
            return self.component_type.default_value()

    @value.setter
    def value(self, new_value: Any) -> None:
        try:
            self._value_data = FieldValue.of(new_value).encode()
        except (TypeError, ValueError):
            logger.debug(f"Could not encode value for {self.title!r}, using default")
            self._value_data = self.component_type.default_value().encode()
        self.validate_value()

    def validate_value(self) -> bool:
        """Validate the current value and cache the result in is_valid."""
        if self.configuration is None:
            self.is_valid = True
        else:
            self.is_valid = self.configuration.validate(self.value.raw)
        return self.is_valid

    def reset_to_default(self) -> None:
        self.value = self.component_type.default_value()

    # ==================== COPIES ====================

    def duplicate(self) -> "Component":
        """Copy with a new id and " Copy" title; the configuration is shared."""
        return Component(
            component_type=self.component_type,
            title=f"{self.title} Copy",
            value=self.value,
            configuration=self.configuration,
        )

    def copy_as_blank(self) -> "Component":
        """Deep copy with a new id, default value and its own configuration."""
        return Component(
            component_type=self.component_type,
            title=self.title,
            value=self.component_type.default_value(),
            configuration=self.configuration.copy() if self.configuration else None,
        )

    # ==================== TYPED ACCESSORS ====================

    @property
    def string_value(self) -> str:
        result = self.value.as_string
        return result if result is not None else ""

    @string_value.setter
    def string_value(self, new_value: str) -> None:
        self.value = FieldValue.of(new_value)

    @property
    def number_value(self) -> float:
        result = self.value.as_number
        return result if result is not None else 0.0

    @number_value.setter
    def number_value(self, new_value: float) -> None:
        self.value = FieldValue.of(float(new_value))

    @property
    def date_value(self) -> datetime:
        result = self.value.as_date
        return result if result is not None else datetime.now(timezone.utc)

    @date_value.setter
    def date_value(self, new_value: datetime) -> None:
        self.value = FieldValue.of(new_value)

    @property
    def bool_value(self) -> bool:
        result = self.value.as_bool
        return result if result is not None else False

    @bool_value.setter
    def bool_value(self, new_value: bool) -> None:
        self.value = FieldValue.of(bool(new_value))

    @property
    def picker_options(self) -> List[str]:
        if self.configuration is None:
            return list(DEFAULT_PICKER_OPTIONS)
        return self.configuration.picker_options
