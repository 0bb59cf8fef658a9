import logging

from route_validator.core import Settings
from route_validator.server import ServerApplication, ServerLauncher


def configure_logging(settings: Settings) -> None:
    """Configure root logger from settings"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def main() -> None:
    """Main entry point"""
    settings = Settings.from_env()
    configure_logging(settings)
    ServerLauncher(settings).run()


def create_app():
    """Factory function for creating the Flask app (for gunicorn)"""
    settings = Settings.from_env()
    configure_logging(settings)
    return ServerApplication(settings=settings).app


if __name__ == "__main__":
    main()
