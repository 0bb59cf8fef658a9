"""Validator for curbside values (SRP: validates only a single curbside directive)"""
from typing import Any, Dict, Optional
from route_validator.core.enums import Curbside, RequestField
from route_validator.validation.base import BaseValidator, ValidationResult, ValidationError
from route_validator.validation.enums import ValidationErrorType, ContextKey


class CurbsideValidator(BaseValidator):
    """Validates that a curbside directive belongs to the Curbside vocabulary"""

    def __init__(self, parameter_name: str = RequestField.CURBSIDES.value):
        """
        Initialize curbside validator.

        Args:
            parameter_name: Name of the request field holding the curbsides
        """
        self._parameter_name = parameter_name
        self._valid_values = set(Curbside.values())

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate curbside value.

        Args:
            value: Curbside enum member or its string value
            context: Optional context holding the element index under ContextKey.INDEX

        Returns:
            ValidationResult with validation status
        """
        result = ValidationResult()

        if isinstance(value, Curbside) or (isinstance(value, str) and value in self._valid_values):
            return result

        index = (context or {}).get(ContextKey.INDEX.value)
        error = ValidationError(
            error_type=ValidationErrorType.INVALID_CURBSIDE_VALUE,
            message=(
                f"Curbside at index {index} must be one of {', '.join(Curbside.values())}, "
                f"got {value!r}"
            ),
            parameter_name=self._parameter_name,
            index=index,
            details={"value": value}
        )
        result.add_error(error)

        return result
