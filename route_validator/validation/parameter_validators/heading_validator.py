"""Validator for heading values (SRP: validates only a single azimuth)"""
from typing import Any, Dict, Optional
import math
from route_validator.core.enums import RequestField, HEADING_MIN_DEGREES, HEADING_MAX_DEGREES
from route_validator.validation.base import BaseValidator, ValidationResult, ValidationError
from route_validator.validation.enums import ValidationErrorType, ContextKey


class HeadingValidator(BaseValidator):
    """Validates a heading in degrees: NaN (no preference) or within [0, 360)"""

    def __init__(self, parameter_name: str = RequestField.HEADINGS.value):
        """
        Initialize heading validator.

        Args:
            parameter_name: Name of the request field holding the headings
        """
        self._parameter_name = parameter_name
        self._min_value = HEADING_MIN_DEGREES
        self._max_value = HEADING_MAX_DEGREES

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate heading value.

        Args:
            value: Heading in degrees
            context: Optional context holding the element index under ContextKey.INDEX

        Returns:
            ValidationResult with validation status
        """
        result = ValidationResult()
        index = (context or {}).get(ContextKey.INDEX.value)

        # Type check
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            error = ValidationError(
                error_type=ValidationErrorType.INVALID_TYPE,
                message=f"Heading at index {index} must be a number, got {type(value).__name__}",
                parameter_name=self._parameter_name,
                index=index
            )
            result.add_error(error)
            return result

        # ints are compared exactly, huge ones never go through float()
        if isinstance(value, float) and math.isnan(value):
            return result

        # Range check, upper bound exclusive
        if not (self._min_value <= value < self._max_value):
            error = ValidationError(
                error_type=ValidationErrorType.HEADING_OUT_OF_RANGE,
                message=(
                    f"Heading at index {index} must be in range [{self._min_value:g}, {self._max_value:g}) "
                    f"degrees or NaN, got {value}"
                ),
                parameter_name=self._parameter_name,
                index=index,
                details={"value": value}
            )
            result.add_error(error)

        return result
