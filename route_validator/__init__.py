"""Validation of route requests against the geographic extent of a routing graph"""
from route_validator.core import Curbside, HeadingPolicy, Settings
from route_validator.geometry import Waypoint, GeographicExtent, NodeAccess, NodeCoordinateStore
from route_validator.models import RouteRequest, RouteResponse
from route_validator.validation import (
    ValidationError,
    ValidationResult,
    ValidationErrorType,
    RouteRequestValidator,
    validate_route_request,
)
from route_validator.routing import RouteValidationService

__all__ = [
    "Curbside",
    "HeadingPolicy",
    "Settings",
    "Waypoint",
    "GeographicExtent",
    "NodeAccess",
    "NodeCoordinateStore",
    "RouteRequest",
    "RouteResponse",
    "ValidationError",
    "ValidationResult",
    "ValidationErrorType",
    "RouteRequestValidator",
    "validate_route_request",
    "RouteValidationService",
]
