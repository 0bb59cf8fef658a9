"""Validator for point containment (SRP: validates only that points lie inside the graph extent)"""
from typing import Any, Dict, Optional
from route_validator.core.enums import RequestField
from route_validator.geometry import GeographicExtent
from route_validator.validation.base import BaseValidator, ValidationResult, ValidationError
from route_validator.validation.enums import ValidationErrorType, ContextKey


class BoundsValidator(BaseValidator):
    """Validates that every point lies within the geographic extent passed in the context"""

    def __init__(self, parameter_name: str = RequestField.POINTS.value):
        """
        Initialize bounds validator.

        Args:
            parameter_name: Name of the request field holding the points
        """
        self._parameter_name = parameter_name

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate that points are inside the extent.

        Null slots are skipped; they are reported by PointsValidator. Points
        with NaN or infinite coordinates are never inside.

        Args:
            value: Sequence of waypoints
            context: Must hold the GeographicExtent under ContextKey.EXTENT

        Returns:
            ValidationResult with one error per point outside the extent

        Raises:
            ValueError: If no extent is given in the context
        """
        extent = (context or {}).get(ContextKey.EXTENT.value)
        if not isinstance(extent, GeographicExtent):
            raise ValueError(
                f"BoundsValidator requires a GeographicExtent under context key '{ContextKey.EXTENT.value}'"
            )

        result = ValidationResult()

        for i, point in enumerate(value or []):
            if point is None:
                continue
            if not point.is_finite:
                message = f"Point {i} has non-finite coordinates {point} and cannot lie within the graph bounds"
            elif not extent.contains(point.lat, point.lon):
                message = f"Point {i} {point} is outside the graph bounds: {extent}"
            else:
                continue

            error = ValidationError(
                error_type=ValidationErrorType.OUT_OF_BOUNDS,
                message=message,
                parameter_name=self._parameter_name,
                index=i,
                details={"lat": point.lat, "lon": point.lon}
            )
            result.add_error(error)

        return result
