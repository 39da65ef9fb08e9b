"""Map configuration shared by every stage of graph generation."""

import math
from dataclasses import dataclass


class InvalidConfigurationError(ValueError):
    """Raised when a map configuration value cannot produce a valid graph."""


def _require_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfigurationError(f"{name} must be a positive finite number, got {value!r}")


@dataclass(frozen=True)
class MapConfig:
    """Configuration for grid sampling and graph connection.

    Replaces the DIMENSIONS / SQUARE_DIMS / CONNECT_DIST / POINT_RADIUS
    constants so several maps can be built side by side.
    """

    dimensions: int = 20
    square_dims: float = 40.0
    connect_dist: float = 50.0
    point_radius: float = 8.0
    jitter_divisor: float = 1.5
    occupancy_probability: float = 0.5

    def __post_init__(self):
        if isinstance(self.dimensions, bool) or not isinstance(self.dimensions, int) or self.dimensions <= 0:
            raise InvalidConfigurationError(
                f"dimensions must be a positive integer, got {self.dimensions!r}"
            )
        _require_positive("square_dims", self.square_dims)
        _require_positive("connect_dist", self.connect_dist)
        _require_positive("point_radius", self.point_radius)

        # k <= 1 lets the jitter span reach the far edge of the cell
        if not math.isfinite(self.jitter_divisor) or self.jitter_divisor <= 1:
            raise InvalidConfigurationError(
                f"jitter_divisor must be greater than 1, got {self.jitter_divisor!r}"
            )
        if not 0.0 <= self.occupancy_probability <= 1.0:
            raise InvalidConfigurationError(
                f"occupancy_probability must be within [0, 1], got {self.occupancy_probability!r}"
            )

    @property
    def cell_count(self) -> int:
        return self.dimensions ** 2

    @property
    def canvas_size(self) -> float:
        """Side length of the square area covered by the grid."""
        return self.dimensions * self.square_dims

    @property
    def jitter_span(self) -> float:
        return self.square_dims / self.jitter_divisor

    @classmethod
    def from_settings(cls, settings) -> "MapConfig":
        """Build a config from application settings."""
        return cls(
            dimensions=settings.dimensions,
            square_dims=settings.square_dims,
            connect_dist=settings.connect_dist,
            point_radius=settings.point_radius,
            jitter_divisor=settings.jitter_divisor,
            occupancy_probability=settings.occupancy_probability,
        )
