"""Validation module for route request validation"""
from route_validator.validation.base import BaseValidator, ValidationResult, ValidationError
from route_validator.validation.enums import ValidationErrorType, ContextKey
from route_validator.validation.request_validators import RouteRequestValidator, validate_route_request

__all__ = [
    "BaseValidator",
    "ValidationResult",
    "ValidationError",
    "ValidationErrorType",
    "ContextKey",
    "RouteRequestValidator",
    "validate_route_request",
]
