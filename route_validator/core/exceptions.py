"""
Custom exceptions for the route validator.

Invalid route requests are never reported through exceptions: they produce
validation errors. The classes below cover precondition violations by the
caller (an extent built from an empty graph, an inverted bounding box, a
payload that cannot be read as a route request, bad configuration).
"""

from typing import Optional


class RouteValidatorException(Exception):
    """Base exception class for all route validator errors"""
    pass


class GeographicExtentError(RouteValidatorException):
    """Base exception for geographic extent errors"""
    pass


class EmptyGraphError(GeographicExtentError):
    """
    Exception raised when an extent is requested for a graph without nodes.

    Containment is undefined for such a graph, so callers must not build an
    extent from it.
    """

    def __init__(self, node_count: int = 0):
        """
        Initialize EmptyGraphError.

        Args:
            node_count: Number of nodes reported by the graph
        """
        self.node_count = node_count
        super().__init__(
            f"Cannot compute geographic extent of a graph with {node_count} nodes"
        )


class InvalidExtentError(GeographicExtentError):
    """Exception raised when extent bounds are inverted or not finite"""

    def __init__(self, min_lat: float, max_lat: float, min_lon: float, max_lon: float):
        """
        Initialize InvalidExtentError.

        Args:
            min_lat: Minimum latitude
            max_lat: Maximum latitude
            min_lon: Minimum longitude
            max_lon: Maximum longitude
        """
        self.min_lat = min_lat
        self.max_lat = max_lat
        self.min_lon = min_lon
        self.max_lon = max_lon

        message = (
            f"Invalid geographic extent: lat [{min_lat}, {max_lat}], "
            f"lon [{min_lon}, {max_lon}]. "
            f"Bounds must be finite with min <= max on both axes."
        )
        super().__init__(message)


class RequestParsingError(RouteValidatorException, ValueError):
    """Exception raised when a raw payload cannot be read as a route request"""

    def __init__(self, field_name: str, details: Optional[str] = None):
        """
        Initialize RequestParsingError.

        Args:
            field_name: Name of the field that could not be parsed
            details: Additional details about the parsing failure
        """
        self.field_name = field_name
        self.details = details

        message = f"Cannot parse '{field_name}'"
        if details:
            message += f": {details}"

        super().__init__(message)


class ConfigurationError(RouteValidatorException):
    """Exception raised when settings are missing or invalid"""

    def __init__(self, setting_name: str, details: str):
        """
        Initialize ConfigurationError.

        Args:
            setting_name: Name of the offending setting
            details: Details about the problem
        """
        self.setting_name = setting_name
        self.details = details
        super().__init__(f"Invalid setting '{setting_name}': {details}")
