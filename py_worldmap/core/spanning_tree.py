"""Minimum spanning tree construction with Kruskal's algorithm."""

from typing import List, NamedTuple

import numpy as np
import structlog

from .disjoint_set import DisjointSet
from .distance import Connection, as_point_array, pairwise_distances

logger = structlog.get_logger()


class WeightedEdge(NamedTuple):
    """Candidate edge between two point indices."""
    source: int
    target: int
    weight: float


def candidate_edges(points) -> List[WeightedEdge]:
    """
    List every unordered point pair as a weighted edge, lightest first.

    The sort is stable, so equal weights keep their enumeration order
    (0-1, 0-2, ..., 1-2, ...).

    Args:
        points: Sequence of (x, y) pairs or an (N, 2) array

    Returns:
        Edges sorted ascending by Euclidean length
    """
    rows, cols, weights = pairwise_distances(points)
    order = np.argsort(weights, kind="stable")

    return [
        WeightedEdge(int(rows[i]), int(cols[i]), float(weights[i]))
        for i in order
    ]


def kruskal_mst(points) -> List[Connection]:
    """
    Connect all points with a minimum spanning tree.

    Edges are scanned from lightest to heaviest and kept when their
    endpoints are still in different components. Scanning stops once
    N - 1 edges are kept since every remaining edge would close a cycle.

    Args:
        points: Sequence of (x, y) pairs or an (N, 2) array

    Returns:
        N - 1 connections for N >= 1 points, in acceptance order
    """
    array = as_point_array(points)
    n_points = len(array)
    if n_points <= 1:
        return []

    components = DisjointSet(n_points)
    tree: List[WeightedEdge] = []

    for edge in candidate_edges(array):
        if components.union(edge.source, edge.target):
            tree.append(edge)
            if len(tree) == n_points - 1:
                break

    logger.debug("Spanning tree built",
                 points=n_points,
                 edges=len(tree),
                 total_weight=round(sum(edge.weight for edge in tree), 3))

    return [Connection.between(array[edge.source], array[edge.target]) for edge in tree]
