from route_validator.routing.route_validation_service import RouteValidationService
from route_validator.routing.route_validation_service_factory import RouteValidationServiceFactory

__all__ = [
    "RouteValidationService",
    "RouteValidationServiceFactory",
]
