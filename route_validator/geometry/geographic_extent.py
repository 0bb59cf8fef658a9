"""
Geographic extent of a routing graph.

The extent is the axis-aligned bounding box of all node coordinates. It is
computed once per graph and never mutated, so a single instance can be shared
between threads.
"""
import math
from dataclasses import dataclass
from typing import Dict, Iterable
import logging
import numpy as np

from route_validator.core.enums import ExtentKey
from route_validator.core.exceptions import EmptyGraphError, InvalidExtentError
from route_validator.geometry.node_access import NodeAccess
from route_validator.geometry.waypoint import Waypoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeographicExtent:
    """Immutable bounding box in decimal degrees, inclusive on every side"""
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def __post_init__(self):
        bounds = (self.min_lat, self.max_lat, self.min_lon, self.max_lon)
        if not all(math.isfinite(b) for b in bounds):
            raise InvalidExtentError(*bounds)
        if self.min_lat > self.max_lat or self.min_lon > self.max_lon:
            raise InvalidExtentError(*bounds)

    def contains(self, lat: float, lon: float) -> bool:
        """
        Check whether a coordinate lies inside the extent.

        Points exactly on the boundary are inside. NaN coordinates are never
        inside since every comparison with NaN is false.

        Args:
            lat: Latitude in degrees
            lon: Longitude in degrees

        Returns:
            True if min_lat <= lat <= max_lat and min_lon <= lon <= max_lon
        """
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon

    def contains_point(self, point: Waypoint) -> bool:
        """Check whether a waypoint lies inside the extent"""
        return self.contains(point.lat, point.lon)

    @classmethod
    def from_node_access(cls, node_access: NodeAccess) -> "GeographicExtent":
        """
        Compute the extent of a graph from its node coordinates.

        Nodes without finite coordinates are ignored.

        Args:
            node_access: Graph node coordinate accessor

        Returns:
            GeographicExtent covering every node

        Raises:
            EmptyGraphError: If the graph has no node with finite coordinates
        """
        node_count = node_access.get_nodes()
        if node_count <= 0:
            raise EmptyGraphError(node_count)

        lats = np.fromiter(
            (node_access.get_lat(node) for node in range(node_count)), dtype=np.float64, count=node_count
        )
        lons = np.fromiter(
            (node_access.get_lon(node) for node in range(node_count)), dtype=np.float64, count=node_count
        )
        finite = np.isfinite(lats) & np.isfinite(lons)
        if not finite.any():
            raise EmptyGraphError(node_count)

        extent = cls(
            min_lat=float(lats[finite].min()),
            max_lat=float(lats[finite].max()),
            min_lon=float(lons[finite].min()),
            max_lon=float(lons[finite].max()),
        )
        logger.info(f"Computed geographic extent from {node_count} nodes: {extent}")
        return extent

    @classmethod
    def from_points(cls, points: Iterable[Waypoint]) -> "GeographicExtent":
        """
        Compute the smallest extent containing all given waypoints.

        Raises:
            EmptyGraphError: If no points are given
        """
        coords = np.array([point.to_tuple() for point in points], dtype=np.float64).reshape(-1, 2)
        if coords.shape[0] == 0:
            raise EmptyGraphError(0)
        return cls(
            min_lat=float(coords[:, 0].min()),
            max_lat=float(coords[:, 0].max()),
            min_lon=float(coords[:, 1].min()),
            max_lon=float(coords[:, 1].max()),
        )

    @classmethod
    def from_bounds(cls, min_lat: float, min_lon: float, max_lat: float, max_lon: float) -> "GeographicExtent":
        """Create extent from corner coordinates (south-west, north-east)"""
        return cls(min_lat=min_lat, max_lat=max_lat, min_lon=min_lon, max_lon=max_lon)

    def to_dict(self) -> Dict[str, float]:
        return {
            ExtentKey.MIN_LAT.value: self.min_lat,
            ExtentKey.MAX_LAT.value: self.max_lat,
            ExtentKey.MIN_LON.value: self.min_lon,
            ExtentKey.MAX_LON.value: self.max_lon,
        }

    def __str__(self) -> str:
        return f"lat [{self.min_lat}, {self.max_lat}], lon [{self.min_lon}, {self.max_lon}]"
