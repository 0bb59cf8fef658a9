"""
Route Request Model

Represents a route request: an ordered list of waypoint slots plus optional
per-point headings, curbsides and point hints. Slots and lists are kept as
received; checking them is the job of RouteRequestValidator.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
from route_validator.core.enums import Curbside, RequestField, CoordinateKey
from route_validator.core.exceptions import RequestParsingError
from route_validator.geometry import Waypoint


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_point(value: Any, index: int) -> Optional[Waypoint]:
    """
    Parse a single point slot.

    Accepts None, a [lat, lon] pair or a {"lat": .., "lon": ..} object.
    """
    field_name = f"{RequestField.POINTS.value}[{index}]"

    if value is None:
        return None

    if isinstance(value, Waypoint):
        return value

    if isinstance(value, dict):
        lat_key, lon_key = CoordinateKey.LAT.value, CoordinateKey.LON.value
        if lat_key not in value or lon_key not in value:
            raise RequestParsingError(field_name, f"point object must have '{lat_key}' and '{lon_key}'")
        lat, lon = value[lat_key], value[lon_key]
    elif isinstance(value, (list, tuple)):
        if len(value) != 2:
            raise RequestParsingError(field_name, f"point must be a [lat, lon] pair, got {len(value)} values")
        lat, lon = value
    else:
        raise RequestParsingError(field_name, f"point must be a [lat, lon] pair or an object, got {type(value).__name__}")

    if not (_is_number(lat) and _is_number(lon)):
        raise RequestParsingError(field_name, f"coordinates must be numbers, got ({lat!r}, {lon!r})")

    try:
        return Waypoint(lat=float(lat), lon=float(lon))
    except OverflowError:
        raise RequestParsingError(field_name, "coordinates are too large to represent as floats")


def _parse_heading(value: Any) -> Any:
    # null means "no preference"; anything non-numeric is left for the validator to report
    if value is None:
        return math.nan
    if _is_number(value):
        try:
            return float(value)
        except OverflowError:
            # integers past the float range are out of [0, 360) either way
            return math.inf if value > 0 else -math.inf
    return value


def _optional_list(data: Dict[str, Any], field_name: str) -> Optional[List[Any]]:
    value = data.get(field_name)
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise RequestParsingError(field_name, f"must be a list, got {type(value).__name__}")
    return list(value)


@dataclass
class RouteRequest:
    """
    Route request from API

    Each point slot may be None. Optional attribute lists are None when absent.
    Headings are in degrees clockwise from north, NaN meaning no preference.
    """
    points: List[Optional[Waypoint]] = field(default_factory=list)
    headings: Optional[List[float]] = None
    curbsides: Optional[List[Union[str, Curbside]]] = None
    point_hints: Optional[List[str]] = None

    @property
    def point_count(self) -> int:
        """Number of point slots, including null ones"""
        return len(self.points)

    def add_point(self, lat: float, lon: float) -> "RouteRequest":
        """Append a waypoint and return self for chaining"""
        self.points.append(Waypoint(lat=lat, lon=lon))
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to JSON-serializable dictionary

        Returns:
            Dictionary in the same shape accepted by from_dict
        """
        result: Dict[str, Any] = {
            RequestField.POINTS.value: [
                None if point is None else [point.lat, point.lon]
                for point in self.points
            ]
        }

        if self.headings is not None:
            result[RequestField.HEADINGS.value] = [
                None if _is_number(heading) and math.isnan(heading) else heading
                for heading in self.headings
            ]
        if self.curbsides is not None:
            result[RequestField.CURBSIDES.value] = [
                curbside.value if isinstance(curbside, Curbside) else curbside
                for curbside in self.curbsides
            ]
        if self.point_hints is not None:
            result[RequestField.POINT_HINTS.value] = list(self.point_hints)

        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RouteRequest":
        """
        Parse raw request dictionary into RouteRequest

        Args:
            data: Raw API request dictionary

        Returns:
            RouteRequest instance

        Raises:
            RequestParsingError: If the payload shape cannot be read as a route request
        """
        if not isinstance(data, dict):
            raise RequestParsingError("request", f"must be an object, got {type(data).__name__}")

        raw_points = _optional_list(data, RequestField.POINTS.value) or []
        points = [_parse_point(value, i) for i, value in enumerate(raw_points)]

        headings = _optional_list(data, RequestField.HEADINGS.value)
        if headings is not None:
            headings = [_parse_heading(value) for value in headings]

        return cls(
            points=points,
            headings=headings,
            curbsides=_optional_list(data, RequestField.CURBSIDES.value),
            point_hints=_optional_list(data, RequestField.POINT_HINTS.value),
        )
