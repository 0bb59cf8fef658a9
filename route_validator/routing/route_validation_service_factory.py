import logging

from route_validator.core import ConfigurationError, EnvVar, GeographicExtentError, Settings
from route_validator.geometry import GeographicExtent, NodeCoordinateStore
from route_validator.routing.route_validation_service import RouteValidationService

logger = logging.getLogger(__name__)


class RouteValidationServiceFactory:
    """Factory for creating route validation services from settings"""

    @staticmethod
    def create(settings: Settings) -> RouteValidationService:
        """
        Create route validation service for the graph described by the settings

        Explicit extent bounds take precedence over a node coordinate file.

        Args:
            settings: Application settings

        Returns:
            RouteValidationService instance

        Raises:
            ConfigurationError: If neither bounds nor a node file are configured,
                or the configured values do not describe a valid extent
        """
        try:
            if settings.extent is not None:
                min_lat, min_lon, max_lat, max_lon = settings.extent
                extent = GeographicExtent.from_bounds(min_lat, min_lon, max_lat, max_lon)
                logger.info(f"Using configured geographic extent: {extent}")
                return RouteValidationService(extent, settings.heading_policy)

            if settings.nodes_file is not None:
                logger.info(f"Loading node coordinates from {settings.nodes_file}")
                store = NodeCoordinateStore.from_csv(settings.nodes_file)
                return RouteValidationService.from_graph(store, settings.heading_policy)
        except (GeographicExtentError, ValueError, OSError) as e:
            raise ConfigurationError("extent", str(e))

        raise ConfigurationError(
            "extent",
            f"set {EnvVar.EXTENT} (min_lat,min_lon,max_lat,max_lon) or {EnvVar.NODES_FILE}"
        )
