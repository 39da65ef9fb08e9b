"""Points, connection segments and Euclidean distance."""

import math
from typing import NamedTuple, Sequence, Tuple

import numpy as np


class Point(NamedTuple):
    """A sampled map point."""
    x: float
    y: float


class Connection(NamedTuple):
    """A line segment between two points, as handed to renderers."""
    x1: float
    y1: float
    x2: float
    y2: float

    @classmethod
    def between(cls, p1: Sequence[float], p2: Sequence[float]) -> "Connection":
        return cls(float(p1[0]), float(p1[1]), float(p2[0]), float(p2[1]))

    def length(self) -> float:
        return distance((self.x1, self.y1), (self.x2, self.y2))


def distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Euclidean distance between two (x, y) points."""
    return math.sqrt((p1[0] - p2[0]) ** 2 + (p1[1] - p2[1]) ** 2)


def as_point_array(points) -> np.ndarray:
    """
    Coerce a sequence of (x, y) pairs into an (N, 2) float array.

    Raises:
        ValueError: If the input cannot be read as a list of 2-D points
    """
    array = np.asarray(points, dtype=float)
    if array.size == 0:
        return np.empty((0, 2), dtype=float)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(f"Points must have shape (N, 2), got {array.shape}")
    return array


def pairwise_distances(points) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Compute distances for every unordered pair of points.

    Pairs are enumerated with the first index ascending, then the second
    (0-1, 0-2, ..., 1-2, ...). The formula matches distance() term for
    term so both produce identical floats.

    Args:
        points: Sequence of (x, y) pairs or an (N, 2) array

    Returns:
        Tuple of (first indices, second indices, distances)
    """
    array = as_point_array(points)
    rows, cols = np.triu_indices(len(array), k=1)

    dx = array[rows, 0] - array[cols, 0]
    dy = array[rows, 1] - array[cols, 1]
    weights = np.sqrt(dx ** 2 + dy ** 2)

    return rows, cols, weights
