"""Server module initialization"""
from route_validator.server.application import ServerApplication
from route_validator.server.launcher import ServerLauncher
from route_validator.server.decorators import endpoint_error_handler
from route_validator.server.schemas import (
    RouteRequestSchema,
    ValidationErrorSchema,
    RouteValidationResponse,
    ExtentResponse,
    ErrorResponse,
)

__all__ = [
    "ServerApplication",
    "ServerLauncher",
    "endpoint_error_handler",
    "RouteRequestSchema",
    "ValidationErrorSchema",
    "RouteValidationResponse",
    "ExtentResponse",
    "ErrorResponse",
]
