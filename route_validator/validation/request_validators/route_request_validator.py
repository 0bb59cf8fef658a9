"""Validator for route requests (SRP: validates a route request against a graph extent)"""
from typing import Any, Dict, Optional
from route_validator.core.enums import HeadingPolicy
from route_validator.geometry import GeographicExtent
from route_validator.models.route_request import RouteRequest
from route_validator.validation.base import BaseValidator, ValidationResult, ValidationError
from route_validator.validation.enums import ValidationErrorType, ContextKey
from route_validator.validation.parameter_validators import (
    PointsValidator,
    BoundsValidator,
    headings_validator,
    curbsides_validator,
    point_hints_validator,
)


class RouteRequestValidator(BaseValidator):
    """
    Validates a route request before any path computation.

    Checks run in a fixed order and errors keep that order:

    1. points present
    2. no null point slot (every null slot is reported)
    3. every point inside the extent
    4. headings count and range
    5. curbsides count and vocabulary
    6. point hints count

    Steps 1-2 are structural: if they fail nothing else runs. Steps 3-6 always
    run together and their errors accumulate.

    The validator keeps no state between calls and can be shared across threads.
    """

    def __init__(self, heading_policy: HeadingPolicy = HeadingPolicy.SINGLE_OR_PER_POINT):
        """
        Initialize route request validator.

        Args:
            heading_policy: Whether a single heading is accepted for several points
        """
        self._heading_policy = heading_policy
        self._points_validator = PointsValidator()
        self._bounds_validator = BoundsValidator()
        self._attribute_validators = [
            headings_validator(heading_policy),
            curbsides_validator(),
            point_hints_validator(),
        ]

    @property
    def heading_policy(self) -> HeadingPolicy:
        return self._heading_policy

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate route request.

        Args:
            value: RouteRequest to validate
            context: Must hold the graph GeographicExtent under ContextKey.EXTENT

        Returns:
            ValidationResult with validation status and ordered errors

        Raises:
            ValueError: If no extent is given in the context
        """
        result = ValidationResult()

        if not isinstance(value, RouteRequest):
            error = ValidationError(
                error_type=ValidationErrorType.INVALID_TYPE,
                message=f"Request must be a RouteRequest, got {type(value).__name__}",
                parameter_name="request"
            )
            result.add_error(error)
            return result

        # Structural checks end the pass: nothing below is defined over missing points
        structural_result = self._points_validator.validate(value.points)
        if not structural_result.is_valid:
            return structural_result

        result.merge(self._bounds_validator.validate(value.points, context))

        attribute_context = {ContextKey.POINT_COUNT.value: value.point_count}
        attribute_values = [value.headings, value.curbsides, value.point_hints]
        for validator, attribute in zip(self._attribute_validators, attribute_values):
            result.merge(validator.validate(attribute, attribute_context))

        return result


def validate_route_request(
    request: RouteRequest,
    extent: GeographicExtent,
    heading_policy: HeadingPolicy = HeadingPolicy.SINGLE_OR_PER_POINT
) -> ValidationResult:
    """
    Validate a route request against a graph extent.

    Args:
        request: Route request to validate
        extent: Geographic extent of the graph
        heading_policy: Accepted heading count policy

    Returns:
        ValidationResult with validation status and ordered errors
    """
    validator = RouteRequestValidator(heading_policy)
    return validator.validate(request, {ContextKey.EXTENT.value: extent})
