"""Extra connections between points that sit close together."""

from typing import List

import numpy as np
import structlog

from .distance import Connection, as_point_array, pairwise_distances

logger = structlog.get_logger()


def connect_close_points(points, connect_dist: float) -> List[Connection]:
    """
    Connect every pair of points closer than connect_dist.

    Pairs are emitted in index order (0-1, 0-2, ..., 1-2, ...). The
    comparison is strict, so pairs exactly connect_dist apart are skipped.

    Args:
        points: Sequence of (x, y) pairs or an (N, 2) array
        connect_dist: Distance threshold

    Returns:
        List of connections, independent of any spanning tree
    """
    array = as_point_array(points)
    rows, cols, weights = pairwise_distances(array)
    close = np.flatnonzero(weights < connect_dist)

    logger.debug("Proximity scan complete",
                 points=len(array),
                 pairs=len(weights),
                 connections=len(close),
                 connect_dist=connect_dist)

    return [Connection.between(array[rows[i]], array[cols[i]]) for i in close]
