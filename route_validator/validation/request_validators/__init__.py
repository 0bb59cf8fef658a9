"""Request validators"""
from route_validator.validation.request_validators.route_request_validator import (
    RouteRequestValidator,
    validate_route_request,
)

__all__ = [
    "RouteRequestValidator",
    "validate_route_request",
]
