from route_validator.server.controllers.base_controller import ServerController

__all__ = [
    "ServerController",
]
