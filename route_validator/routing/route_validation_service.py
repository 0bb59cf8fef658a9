from typing import Any, Dict
import logging

from route_validator.core.enums import HeadingPolicy, ResponseKey, ServiceStatus
from route_validator.geometry import GeographicExtent, NodeAccess
from route_validator.models import RouteRequest, RouteResponse
from route_validator.validation import RouteRequestValidator, ContextKey

logger = logging.getLogger(__name__)


class RouteValidationService:
    """
    Gate between inbound route requests and the routing engine of one graph

    Holds the graph extent, computed once, and a stateless request validator.
    Follows Dependency Injection and Single Responsibility principles.
    """

    def __init__(
        self,
        extent: GeographicExtent,
        heading_policy: HeadingPolicy = HeadingPolicy.SINGLE_OR_PER_POINT
    ):
        """
        Initialize route validation service

        Args:
            extent: Geographic extent of the graph
            heading_policy: Accepted heading count policy
        """
        self._extent = extent
        self._validator = RouteRequestValidator(heading_policy)

    @classmethod
    def from_graph(
        cls,
        node_access: NodeAccess,
        heading_policy: HeadingPolicy = HeadingPolicy.SINGLE_OR_PER_POINT
    ) -> "RouteValidationService":
        """
        Create service for a graph, computing its extent from the node coordinates

        Raises:
            EmptyGraphError: If the graph has no nodes
        """
        return cls(GeographicExtent.from_node_access(node_access), heading_policy)

    @property
    def extent(self) -> GeographicExtent:
        return self._extent

    @property
    def heading_policy(self) -> HeadingPolicy:
        return self._validator.heading_policy

    def parse_request(self, data: Dict[str, Any]) -> RouteRequest:
        """
        Parse raw request dictionary into typed RouteRequest

        Args:
            data: Raw API request dictionary

        Returns:
            Parsed RouteRequest

        Raises:
            RequestParsingError: If the payload cannot be read as a route request
        """
        request = RouteRequest.from_dict(data)
        logger.info(
            f"Parsed route request: points={request.point_count}, "
            f"headings={self._count(request.headings)}, curbsides={self._count(request.curbsides)}, "
            f"point_hints={self._count(request.point_hints)}"
        )
        return request

    def validate(self, request: RouteRequest) -> RouteResponse:
        """
        Validate a route request against the graph extent

        Args:
            request: Route request to validate

        Returns:
            RouteResponse carrying the ordered validation errors, if any
        """
        result = self._validator.validate(request, {ContextKey.EXTENT.value: self._extent})
        response = RouteResponse.from_validation_result(result)

        if response.has_errors():
            logger.warning(
                f"Route request rejected with {len(response.errors)} error(s): "
                f"{'; '.join(error.message for error in response.errors)}"
            )
        else:
            logger.debug("Route request accepted")

        return response

    def validate_payload(self, data: Dict[str, Any]) -> RouteResponse:
        """
        Parse and validate a raw request dictionary

        Raises:
            RequestParsingError: If the payload cannot be read as a route request
        """
        return self.validate(self.parse_request(data))

    def get_status(self) -> Dict[str, Any]:
        return {
            ResponseKey.STATUS.value: ServiceStatus.READY.value,
            ResponseKey.EXTENT.value: self._extent.to_dict(),
        }

    @staticmethod
    def _count(values) -> int:
        return 0 if values is None else len(values)
