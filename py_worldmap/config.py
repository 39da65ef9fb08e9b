"""Configuration management."""

import logging
from typing import Optional

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from WORLDMAP_* environment variables."""

    # Map Generation Configuration
    dimensions: int = Field(default=20, description="Grid side length in cells")
    square_dims: float = Field(default=40.0, description="Tile size in canvas units")
    connect_dist: float = Field(default=50.0, description="Proximity connection threshold")
    point_radius: float = Field(default=8.0, description="Point marker radius for renderers")
    jitter_divisor: float = Field(default=1.5, description="Divisor applied to tile size for jitter span")
    occupancy_probability: float = Field(default=0.5, description="Chance that a grid cell holds a point")
    seed: Optional[str] = Field(default=None, description="Default seed, random when unset")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    class Config:
        env_prefix = "WORLDMAP_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def configure_logging(level: str = "INFO", log_format: str = "json") -> None:
    """
    Configure structlog on top of the standard library logger.

    Args:
        level: Log level name, e.g. "DEBUG" or "INFO"
        log_format: "json" for machine readable output, anything else for console
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(format="%(message)s", level=numeric_level, force=True)

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Instantiate singleton settings object
settings = Settings()
