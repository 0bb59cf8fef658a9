from route_validator.core.enums import (
    Curbside,
    HeadingPolicy,
    ServiceStatus,
    RequestField,
    CoordinateKey,
    ResponseKey,
    ExtentKey,
    HEADING_MIN_DEGREES,
    HEADING_MAX_DEGREES,
)
from route_validator.core.exceptions import (
    RouteValidatorException,
    GeographicExtentError,
    EmptyGraphError,
    InvalidExtentError,
    RequestParsingError,
    ConfigurationError,
)
from route_validator.core.settings import Settings, EnvVar

__all__ = [
    "Curbside",
    "HeadingPolicy",
    "ServiceStatus",
    "RequestField",
    "CoordinateKey",
    "ResponseKey",
    "ExtentKey",
    "HEADING_MIN_DEGREES",
    "HEADING_MAX_DEGREES",
    "RouteValidatorException",
    "GeographicExtentError",
    "EmptyGraphError",
    "InvalidExtentError",
    "RequestParsingError",
    "ConfigurationError",
    "Settings",
    "EnvVar",
]
