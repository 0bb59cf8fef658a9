"""Application settings read from environment variables"""
import os
from typing import Any, Dict, Mapping, Optional, Tuple
from pydantic import BaseModel, Field, ValidationError, field_validator

from route_validator.core.enums import HeadingPolicy
from route_validator.core.exceptions import ConfigurationError


class EnvVar:
    """Environment variable names"""
    HOST = "ROUTE_VALIDATOR_HOST"
    PORT = "PORT"
    DEBUG = "ROUTE_VALIDATOR_DEBUG"
    LOG_LEVEL = "ROUTE_VALIDATOR_LOG_LEVEL"
    HEADING_POLICY = "ROUTE_VALIDATOR_HEADING_POLICY"
    EXTENT = "ROUTE_VALIDATOR_EXTENT"
    NODES_FILE = "ROUTE_VALIDATOR_NODES_FILE"


_TRUE_VALUES = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    """
    Runtime configuration of the validation service.

    The graph extent comes either from explicit bounds
    (min_lat, min_lon, max_lat, max_lon) or from a CSV file of node
    coordinates. Explicit bounds win when both are given.
    """
    host: str = "0.0.0.0"
    port: int = Field(default=8080, gt=0, le=65535)
    debug: bool = False
    log_level: str = "INFO"
    heading_policy: HeadingPolicy = HeadingPolicy.SINGLE_OR_PER_POINT
    extent: Optional[Tuple[float, float, float, float]] = None
    nodes_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}, got {v}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}

        if EnvVar.HOST in env:
            values["host"] = env[EnvVar.HOST]
        if EnvVar.PORT in env:
            values["port"] = env[EnvVar.PORT]
        if EnvVar.DEBUG in env:
            values["debug"] = env[EnvVar.DEBUG].strip().lower() in _TRUE_VALUES
        if EnvVar.LOG_LEVEL in env:
            values["log_level"] = env[EnvVar.LOG_LEVEL]
        if EnvVar.HEADING_POLICY in env:
            values["heading_policy"] = cls._parse_heading_policy(env[EnvVar.HEADING_POLICY])
        if env.get(EnvVar.EXTENT):
            values["extent"] = cls._parse_extent(env[EnvVar.EXTENT])
        if env.get(EnvVar.NODES_FILE):
            values["nodes_file"] = env[EnvVar.NODES_FILE]

        try:
            return cls(**values)
        except ValidationError as e:
            error = e.errors()[0]
            raise ConfigurationError(str(error["loc"][0]), error["msg"])

    @staticmethod
    def _parse_heading_policy(raw: str) -> HeadingPolicy:
        try:
            return HeadingPolicy(raw.strip().lower())
        except ValueError:
            valid = ", ".join(policy.value for policy in HeadingPolicy)
            raise ConfigurationError(EnvVar.HEADING_POLICY, f"expected one of {valid}, got '{raw}'")

    @staticmethod
    def _parse_extent(raw: str) -> Tuple[float, float, float, float]:
        parts = [part.strip() for part in raw.split(",")]
        if len(parts) != 4:
            raise ConfigurationError(
                EnvVar.EXTENT,
                f"expected 'min_lat,min_lon,max_lat,max_lon', got '{raw}'"
            )
        try:
            min_lat, min_lon, max_lat, max_lon = (float(part) for part in parts)
        except ValueError:
            raise ConfigurationError(EnvVar.EXTENT, f"bounds must be numbers, got '{raw}'")
        return min_lat, min_lon, max_lat, max_lon
