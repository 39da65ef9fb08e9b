"""Occupancy grid generation and jittered point sampling."""

import numpy as np
import structlog

from .map_config import MapConfig
from ..utils.alea_prng import AleaPRNG

logger = structlog.get_logger()


def generate_occupancy_grid(config: MapConfig, prng: AleaPRNG) -> np.ndarray:
    """
    Generate a random occupancy grid.

    One draw is taken per cell in row-major order; a cell is occupied when
    its draw falls below config.occupancy_probability.

    Args:
        config: Map configuration
        prng: Random source

    Returns:
        Flat boolean array of config.cell_count cells
    """
    grid = np.array(
        [prng.chance(config.occupancy_probability) for _ in range(config.cell_count)],
        dtype=bool,
    )

    logger.debug("Occupancy grid generated",
                 dimensions=config.dimensions,
                 occupied=int(grid.sum()))
    return grid


def sample_points(grid, config: MapConfig, prng: AleaPRNG) -> np.ndarray:
    """
    Turn occupied grid cells into jittered points.

    Each occupied cell at (row, col) yields one point placed at
    ``col * square_dims + span - jitter`` horizontally (rows likewise),
    where span is square_dims / jitter_divisor and jitter is drawn from
    [0, span). The x jitter is drawn before the y jitter.

    Args:
        grid: Flat sequence of config.cell_count truthy/falsy cells
        config: Map configuration
        prng: Random source

    Returns:
        Array of [x, y] point coordinates in row-major cell order
    """
    cells = np.asarray(grid, dtype=bool).ravel()
    if len(cells) != config.cell_count:
        raise ValueError(
            f"Grid has {len(cells)} cells, expected {config.cell_count} "
            f"for dimensions={config.dimensions}"
        )

    span = config.jitter_span
    points = []

    for index in np.flatnonzero(cells):
        row, col = divmod(int(index), config.dimensions)

        x_offset = prng.uniform(0.0, span)
        y_offset = prng.uniform(0.0, span)

        x = col * config.square_dims + span - x_offset
        y = row * config.square_dims + span - y_offset
        points.append([x, y])

    logger.debug("Points sampled", points=len(points), jitter_span=span)

    if not points:
        return np.empty((0, 2), dtype=float)
    return np.array(points, dtype=float)
