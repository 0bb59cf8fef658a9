"""Base classes for validation system following OOP and SRP principles"""
from abc import ABC, abstractmethod
import math
from typing import Any, Dict, List, Optional
from route_validator.core.enums import ResponseKey
from route_validator.validation.enums import ValidationErrorType


def _json_safe(value: Any) -> Any:
    """Replace non-finite floats, which have no JSON representation, with None"""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    return value


class ValidationError(Exception):
    """Validation error attributed to a request field and, where relevant, an index"""

    def __init__(
        self,
        error_type: ValidationErrorType,
        message: str,
        parameter_name: Optional[str] = None,
        index: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize validation error.

        Args:
            error_type: Type of validation error (enum)
            message: Human-readable error message
            parameter_name: Name of the request field that failed validation
            index: 0-based position of the offending element, if any
            details: Extra values describing the failure (expected/actual counts, coordinates)
        """
        self.error_type = error_type
        self.parameter_name = parameter_name
        self.index = index
        self.details = details or {}
        super().__init__(message)

    @property
    def message(self) -> str:
        """Human-readable error message"""
        return str(self)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to a JSON-serializable dictionary.

        Returns:
            Dictionary with type, message, field, index and details;
            non-finite floats in details become None
        """
        return {
            ResponseKey.TYPE.value: self.error_type.value,
            ResponseKey.MESSAGE.value: self.message,
            ResponseKey.FIELD.value: self.parameter_name,
            ResponseKey.INDEX.value: self.index,
            ResponseKey.DETAILS.value: _json_safe(self.details),
        }

    def __repr__(self) -> str:
        return (
            f"ValidationError({self.error_type.value}, {self.message!r}, "
            f"field={self.parameter_name!r}, index={self.index!r})"
        )


class ValidationResult:
    """Result of a validation operation"""

    def __init__(self, is_valid: bool = True, errors: Optional[List[ValidationError]] = None):
        """
        Initialize validation result.

        Args:
            is_valid: Whether validation passed
            errors: List of validation errors if validation failed
        """
        self._errors = list(errors) if errors else []
        self._is_valid = is_valid and not self._errors

    @property
    def is_valid(self) -> bool:
        """Check if validation passed"""
        return self._is_valid

    @property
    def errors(self) -> List[ValidationError]:
        """Get list of validation errors in the order they were found"""
        return self._errors

    def add_error(self, error: ValidationError) -> None:
        """
        Add a validation error.

        Args:
            error: Validation error to add
        """
        self._errors.append(error)
        self._is_valid = False

    def merge(self, other: "ValidationResult") -> None:
        """Append the errors of another result, keeping their order"""
        for error in other.errors:
            self.add_error(error)

    @property
    def messages(self) -> List[str]:
        """Error messages in order"""
        return [error.message for error in self._errors]


class BaseValidator(ABC):
    """Abstract base class for all validators (Interface)"""

    @abstractmethod
    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate a value.

        Args:
            value: Value to validate
            context: Optional context dictionary with additional information

        Returns:
            ValidationResult with validation status and errors
        """
        pass
