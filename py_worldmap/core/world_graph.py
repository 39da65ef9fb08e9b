"""World map graph generation: grid, points and connections in one pass."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np
import structlog

from .distance import Connection, Point, as_point_array
from .grid_sampler import generate_occupancy_grid, sample_points
from .map_config import MapConfig
from .proximity import connect_close_points
from .spanning_tree import kruskal_mst
from ..utils.alea_prng import AleaPRNG
from ..utils.random import create_prng

logger = structlog.get_logger()


@dataclass
class WorldGraph:
    """Everything generated for one map.

    ``connections`` is what a renderer draws: the spanning tree followed by
    the proximity connections, duplicates included.
    """
    config: MapConfig
    seed: str
    grid: np.ndarray
    points: np.ndarray
    tree_connections: List[Connection]
    proximity_connections: List[Connection]
    connections: List[Connection]

    def should_regenerate(self, config: MapConfig, seed: Optional[str]) -> bool:
        """Check if the graph needs to be rebuilt for new parameters.

        A missing seed always asks for a fresh random map.
        """
        if seed is None:
            return True
        return not (self.config == config and self.seed == seed)

    def point_list(self) -> List[Point]:
        return [Point(float(x), float(y)) for x, y in self.points]

    def to_dict(self) -> Dict:
        """Plain dict form for renderers and JSON output."""
        return {
            "seed": self.seed,
            "canvas_size": self.config.canvas_size,
            "point_radius": self.config.point_radius,
            "points": [point._asdict() for point in self.point_list()],
            "connections": [connection._asdict() for connection in self.connections],
        }


def compose_connections(tree: List[Connection],
                        proximity: List[Connection]) -> List[Connection]:
    """Spanning tree connections first, then proximity connections, no dedup."""
    return list(tree) + list(proximity)


def _connect(points: np.ndarray, config: MapConfig) -> Tuple[List[Connection], List[Connection]]:
    tree = kruskal_mst(points)
    proximity = connect_close_points(points, config.connect_dist)
    return tree, proximity


def build_graph(grid, config: MapConfig, prng: AleaPRNG) -> Tuple[np.ndarray, List[Connection]]:
    """
    Build points and connections for an existing occupancy grid.

    Args:
        grid: Flat sequence of config.cell_count cells
        config: Map configuration
        prng: Random source for point jitter

    Returns:
        Tuple of (points array, composed connections)
    """
    points = sample_points(grid, config, prng)
    tree, proximity = _connect(points, config)
    return points, compose_connections(tree, proximity)


def connect_points(points, config: MapConfig) -> List[Connection]:
    """Connect already placed points, skipping grid sampling."""
    array = as_point_array(points)
    tree, proximity = _connect(array, config)
    return compose_connections(tree, proximity)


def generate_world_graph(config: MapConfig, seed: Optional[str] = None) -> WorldGraph:
    """
    Generate a complete world graph.

    Args:
        config: Map configuration
        seed: Random seed for reproducibility, random when omitted

    Returns:
        WorldGraph with grid, points and connections
    """
    prng, seed = create_prng(seed)

    logger.info("Generating world graph",
                dimensions=config.dimensions,
                square_dims=config.square_dims,
                connect_dist=config.connect_dist,
                seed=seed)

    grid = generate_occupancy_grid(config, prng)
    points = sample_points(grid, config, prng)
    tree, proximity = _connect(points, config)
    connections = compose_connections(tree, proximity)

    logger.info("World graph generated",
                points=len(points),
                tree_connections=len(tree),
                proximity_connections=len(proximity),
                connections=len(connections))

    return WorldGraph(
        config=config,
        seed=seed,
        grid=grid,
        points=points,
        tree_connections=tree,
        proximity_connections=proximity,
        connections=connections,
    )


def generate_or_reuse_world_graph(existing: Optional[WorldGraph],
                                  config: MapConfig,
                                  seed: Optional[str] = None) -> WorldGraph:
    """
    Generate a new graph or hand back the existing one.

    Args:
        existing: Previously generated graph (can be None)
        config: Map configuration
        seed: Random seed

    Returns:
        WorldGraph - either new or reused
    """
    if existing is None or existing.should_regenerate(config, seed):
        logger.info("Generating new world graph")
        return generate_world_graph(config, seed)

    logger.info("Reusing existing world graph",
                seed=existing.seed,
                points=len(existing.points))
    return existing
