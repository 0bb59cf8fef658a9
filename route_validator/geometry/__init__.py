from route_validator.geometry.waypoint import Waypoint
from route_validator.geometry.node_access import NodeAccess, NodeCoordinateStore
from route_validator.geometry.geographic_extent import GeographicExtent

__all__ = [
    "Waypoint",
    "NodeAccess",
    "NodeCoordinateStore",
    "GeographicExtent",
]
