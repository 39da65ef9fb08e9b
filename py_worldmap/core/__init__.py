"""
Core world map graph generation functionality.
"""

from .map_config import MapConfig, InvalidConfigurationError
from .distance import Point, Connection, distance, pairwise_distances
from .disjoint_set import DisjointSet
from .grid_sampler import generate_occupancy_grid, sample_points
from .spanning_tree import WeightedEdge, candidate_edges, kruskal_mst
from .proximity import connect_close_points
from .world_graph import (WorldGraph, build_graph, compose_connections, connect_points,
                          generate_world_graph, generate_or_reuse_world_graph)

__all__ = ['MapConfig', 'InvalidConfigurationError', 'Point', 'Connection', 'distance',
           'pairwise_distances', 'DisjointSet', 'generate_occupancy_grid', 'sample_points',
           'WeightedEdge', 'candidate_edges', 'kruskal_mst', 'connect_close_points',
           'WorldGraph', 'build_graph', 'compose_connections', 'connect_points',
           'generate_world_graph', 'generate_or_reuse_world_graph']
