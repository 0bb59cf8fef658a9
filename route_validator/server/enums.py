from enum import Enum


class ServerStatus(Enum):
    STARTING = "starting"
    RUNNING = "running"
    ERROR = "error"


class HTTPStatus(Enum):
    OK = 200
    BAD_REQUEST = 400
    INTERNAL_SERVER_ERROR = 500


class ServiceName(Enum):
    """Service names for dependency injection"""
    ROUTE_VALIDATION_SERVICE = "route_validation_service"


class Endpoint(Enum):
    """Names of endpoints wrapped by endpoint_error_handler"""
    VALIDATE = "validate"
