"""Development server launcher"""
import logging
from typing import Optional

from route_validator.core import Settings
from route_validator.server.application import ServerApplication


logger = logging.getLogger(__name__)


class ServerLauncher:
    """Builds the application for one set of settings and serves it with the Flask development server"""

    def __init__(self, settings: Optional[Settings] = None):
        """
        Args:
            settings: Application settings (default: read from environment)
        """
        self._settings = settings if settings is not None else Settings.from_env()
        self._application: Optional[ServerApplication] = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def application(self) -> ServerApplication:
        """Application for the configured graph, created on first access"""
        if self._application is None:
            self._application = ServerApplication(settings=self._settings)
        return self._application

    def run(self) -> None:
        """Serve the application on the configured host and port"""
        flask_app = self.application.app
        settings = self._settings
        logger.info(
            f"Serving '{flask_app.name}' on {settings.host}:{settings.port} "
            f"(debug={settings.debug}, heading policy={settings.heading_policy.value}, "
            f"extent={self.application.service.extent})"
        )
        flask_app.run(host=settings.host, port=settings.port, debug=settings.debug, use_reloader=False)
