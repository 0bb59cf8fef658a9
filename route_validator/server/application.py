"""Server application implementation"""
from typing import Optional
from flask import Flask, jsonify
from flask_cors import CORS
import logging

from route_validator.core import Settings
from route_validator.routing import RouteValidationService, RouteValidationServiceFactory
from route_validator.server.enums import HTTPStatus, Endpoint, ServiceName
from route_validator.server.controllers import ServerController
from route_validator.server.decorators import endpoint_error_handler
from route_validator.server.schemas import RouteRequestSchema, RouteValidationResponse, ExtentResponse


logger = logging.getLogger(__name__)


class ServerApplication:
    """Main application class implementing dependency injection and OOP principles"""

    def __init__(
        self,
        service: Optional[RouteValidationService] = None,
        settings: Optional[Settings] = None,
        app_name: str = "Route Validator"
    ) -> None:
        """
        Initialize the Flask application with dependencies.

        Args:
            service: Route validation service; built from settings when omitted
            settings: Application settings; read from the environment when omitted
            app_name: Name of the Flask application
        """
        self._app: Flask = Flask(app_name)
        CORS(self._app)
        self._settings = settings
        self._service = service
        self._controller: ServerController | None = None
        self._setup_dependencies()
        self._setup_routes()

    def _setup_dependencies(self) -> None:
        """Setup all dependencies using dependency injection"""
        if self._service is None:
            if self._settings is None:
                self._settings = Settings.from_env()
            self._service = RouteValidationServiceFactory.create(self._settings)

        services = {
            ServiceName.ROUTE_VALIDATION_SERVICE.value: self._service,
        }

        self._controller = ServerController(services=services)
        self._controller.initialize()

    def _setup_routes(self) -> None:
        """Setup Flask routes"""
        self._app.add_url_rule("/", "get_status", self._get_status, methods=["GET"])
        self._app.add_url_rule("/extent", "get_extent", self._get_extent, methods=["GET"])
        self._app.add_url_rule("/validate", "validate_route", self._validate_route, methods=["POST"])

    def _get_status(self):
        """
        Get server status endpoint.

        Returns:
            JSON response with server status information
        """
        return jsonify(self._controller.get_status())

    def _get_extent(self):
        """
        Get geographic extent of the served graph.

        Returns:
            JSON response with min/max latitude and longitude
        """
        extent = ExtentResponse(**self._service.extent.to_dict())
        return jsonify(extent.model_dump()), HTTPStatus.OK.value

    @endpoint_error_handler(Endpoint.VALIDATE, RouteRequestSchema)
    def _validate_route(self, data: RouteRequestSchema) -> tuple:
        """
        Validate a route request against the graph extent.

        Expected JSON payload:
        {
            "points": [[lat, lon], {"lat": lat, "lon": lon}, ...],
            "headings": [90.0, null, ...] (optional),
            "curbsides": ["right", "any", ...] (optional),
            "point_hints": ["Main Street", "", ...] (optional)
        }

        Returns:
            tuple: (response, status_code); 200 with valid=true, or 400 with the
            ordered validation errors
        """
        response = self._service.validate_payload(data.to_payload())
        body = RouteValidationResponse(**response.to_dict())

        if response.has_errors():
            logger.info(f"Route validation failed - error_count: {len(response.errors)}")
            return jsonify(body.model_dump()), HTTPStatus.BAD_REQUEST.value

        logger.info(f"Route validation successful - point_count: {len(data.points)}")
        return jsonify(body.model_dump()), HTTPStatus.OK.value

    @property
    def service(self) -> RouteValidationService:
        return self._service

    @property
    def app(self) -> Flask:
        """
        Get Flask application instance.

        Returns:
            Flask: The Flask application object
        """
        return self._app
