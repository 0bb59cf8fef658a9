from route_validator.models.route_request import RouteRequest
from route_validator.models.route_response import RouteResponse

__all__ = [
    "RouteRequest",
    "RouteResponse",
]
