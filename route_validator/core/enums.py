from enum import Enum


class Curbside(Enum):
    """Side of the road a waypoint must be approached from"""
    LEFT = "left"
    RIGHT = "right"
    ANY = "any"
    UNSPECIFIED = "unspecified"

    @classmethod
    def values(cls) -> list:
        return [curbside.value for curbside in cls]


class ServiceStatus(Enum):
    """Status of a validation service"""
    READY = "ready"


class HeadingPolicy(Enum):
    """Accepted number of headings relative to the number of points"""
    SINGLE_OR_PER_POINT = "single_or_per_point"
    PER_POINT = "per_point"


class RequestField(Enum):
    """Route request field names"""
    POINTS = "points"
    HEADINGS = "headings"
    CURBSIDES = "curbsides"
    POINT_HINTS = "point_hints"


class CoordinateKey(Enum):
    """Keys of a coordinate object in request payloads"""
    LAT = "lat"
    LON = "lon"


class ResponseKey(Enum):
    """API response keys"""
    ERROR = "error"
    ERROR_TYPE = "error_type"
    ERRORS = "errors"
    VALID = "valid"
    TYPE = "type"
    MESSAGE = "message"
    FIELD = "field"
    INDEX = "index"
    DETAILS = "details"
    STATUS = "status"
    SERVICES = "services"
    EXTENT = "extent"


class ExtentKey(Enum):
    """Geographic extent keys"""
    MIN_LAT = "min_lat"
    MAX_LAT = "max_lat"
    MIN_LON = "min_lon"
    MAX_LON = "max_lon"


# Azimuth range in degrees, lower bound inclusive, upper bound exclusive
HEADING_MIN_DEGREES = 0.0
HEADING_MAX_DEGREES = 360.0
