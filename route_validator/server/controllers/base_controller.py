from typing import Dict, Any, Optional
import logging

from route_validator.core.enums import ResponseKey
from route_validator.server.enums import ServerStatus
logger = logging.getLogger(__name__)


class ServerController:
    """Server controller holding the registered services and the server status"""

    def __init__(
        self,
        services: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the controller with dependencies

        Args:
            services: Optional dictionary of service name -> service instance;
                each service must provide get_status()
        """
        self._services = services or {}
        self._status = ServerStatus.STARTING

    def initialize(self) -> None:
        """
        Check every registered service by querying its status

        Raises:
            Exception: Whatever a service raises while reporting its status
        """
        logger.info("Initializing server controller")
        try:
            for service_name, service in self._services.items():
                service_status = service.get_status()
                logger.info(f"Service {service_name}: {service_status[ResponseKey.STATUS.value]}")

            self._status = ServerStatus.RUNNING
            logger.info("Server controller initialized successfully")
        except Exception as e:
            self._status = ServerStatus.ERROR
            logger.error(f"Failed to initialize server controller: {str(e)}")
            raise

    def get_service(self, service_name: str) -> Any:
        """
        Get a registered service

        Raises:
            KeyError: If no service is registered under that name
        """
        return self._services[service_name]

    @property
    def status(self) -> ServerStatus:
        return self._status

    def get_status(self) -> Dict[str, Any]:
        """
        Get current server status

        Returns:
            Dictionary containing status information
        """
        return {
            ResponseKey.STATUS.value: self._status.value,
            ResponseKey.SERVICES.value: {
                service_name: service.get_status()
                for service_name, service in self._services.items()
            }
        }
