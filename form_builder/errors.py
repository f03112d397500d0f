"""
Form Builder - Errors

Exception hierarchy for data, validation and model-consistency failures.
"""

from typing import List, Optional


class FormBuilderError(Exception):
    """Base class for every error raised by form_builder."""

    default_message = "An unexpected error occurred"
    recovery_suggestion = "Please try again or contact support if the issue persists"

    def __init__(self, message: Optional[str] = None, *, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message or self.default_message)

    @property
    def failure_reason(self) -> Optional[str]:
        return str(self.cause) if self.cause is not None else None


# ==================== DATA ERRORS ====================


class DataError(FormBuilderError):
    """Failure while reading or writing stored data."""


class DataNotFoundError(DataError):
    default_message = "The requested data could not be found"
    recovery_suggestion = "Please check if the data exists and try again"


class InvalidDataError(DataError):
    default_message = "The data is invalid or corrupted"
    recovery_suggestion = "Please ensure the data is in the correct format"


class DecodeError(InvalidDataError):
    """A stored value matched none of the supported representations."""
    default_message = "Value cannot be decoded"


class _WrappedDataError(DataError):
    action = "process"

    def __init__(self, cause: BaseException):
        super().__init__(f"Failed to {self.action} data: {cause}", cause=cause)


class SaveFailedError(_WrappedDataError):
    action = "save"
    recovery_suggestion = "Please try saving again"


class LoadFailedError(_WrappedDataError):
    action = "load"
    recovery_suggestion = "Please check your connection and try again"


class DeleteFailedError(_WrappedDataError):
    action = "delete"
    recovery_suggestion = "Please try deleting again"


# ==================== VALIDATION ERRORS ====================


class FieldValidationError(FormBuilderError):
    """A user-supplied value does not satisfy its field."""


class InvalidValueError(FieldValidationError):
    recovery_suggestion = "Please check the input value and try again"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Invalid value provided for {field}")


class RequiredFieldMissingError(FieldValidationError):
    recovery_suggestion = "Please fill in all required fields"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is required")


class InvalidFormatError(FieldValidationError):
    recovery_suggestion = "Please check the format and try again"

    def __init__(self, message: str):
        super().__init__(f"Invalid format: {message}")


class OutOfRangeError(FieldValidationError):
    recovery_suggestion = "Please enter a value within the allowed range"

    def __init__(self, message: str):
        super().__init__(f"Value out of range: {message}")


# ==================== MODEL ERRORS ====================


class ModelError(FormBuilderError):
    """The page/module/component tree is inconsistent."""


class ContextMissingError(ModelError):
    default_message = "Persistence context is missing"
    recovery_suggestion = "Please ensure the app is properly initialized"


class ModelValidationFailedError(ModelError):
    recovery_suggestion = "Please check the input values and try again"

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__(f"Validation failed: {', '.join(self.messages)}")


class RelationshipError(ModelError):
    recovery_suggestion = "Please check the related items and try again"

    def __init__(self, message: str):
        super().__init__(f"Relationship error: {message}")


# ==================== GENERAL ERRORS ====================


class UnknownError(FormBuilderError):
    recovery_suggestion = "Please try the operation again"

    def __init__(self, cause: BaseException):
        super().__init__(str(cause), cause=cause)


class CustomError(FormBuilderError):
    pass


def as_form_error(exc: BaseException) -> FormBuilderError:
    """Return exc unchanged if it is a FormBuilderError, else wrap it."""
    if isinstance(exc, FormBuilderError):
        return exc
    return UnknownError(exc)
