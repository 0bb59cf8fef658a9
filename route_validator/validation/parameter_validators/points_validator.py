"""Validator for the waypoint list structure (SRP: validates only point presence)"""
from typing import Any, Dict, Optional
from route_validator.core.enums import RequestField
from route_validator.validation.base import BaseValidator, ValidationResult, ValidationError
from route_validator.validation.enums import ValidationErrorType


class PointsValidator(BaseValidator):
    """
    Validates that a request has at least one point and no null point slots.

    An empty list yields a single error. Otherwise every null slot is reported
    with its index, not only the first one.
    """

    def __init__(self, parameter_name: str = RequestField.POINTS.value):
        """
        Initialize points validator.

        Args:
            parameter_name: Name of the request field holding the points
        """
        self._parameter_name = parameter_name

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate waypoint list structure.

        Args:
            value: Sequence of waypoints, possibly containing None
            context: Optional context (unused)

        Returns:
            ValidationResult with validation status
        """
        result = ValidationResult()

        if not value:
            error = ValidationError(
                error_type=ValidationErrorType.MISSING_POINTS,
                message="Request must contain at least one point",
                parameter_name=self._parameter_name
            )
            result.add_error(error)
            return result

        for i, point in enumerate(value):
            if point is None:
                error = ValidationError(
                    error_type=ValidationErrorType.NULL_POINT,
                    message=f"Point at index {i} is null",
                    parameter_name=self._parameter_name,
                    index=i
                )
                result.add_error(error)

        return result
