"""Tests for distance helpers and geometric types."""

import itertools

import numpy as np
import pytest

from py_worldmap.core import Connection, Point, distance, pairwise_distances
from py_worldmap.utils import AleaPRNG


def random_points(count, seed="points", scale=100.0):
    prng = AleaPRNG(seed)
    return [(prng.random() * scale, prng.random() * scale) for _ in range(count)]


class TestDistance:
    """Test the Euclidean distance function."""

    def test_known_values(self):
        """Test classic right triangle distances."""
        assert distance((0, 0), (3, 4)) == 5.0
        assert distance((1, 1), (1, 1)) == 0.0
        assert distance((-2, 0), (2, 0)) == 4.0

    def test_symmetry(self):
        """Test that distance(a, b) == distance(b, a)."""
        for a, b in itertools.combinations(random_points(20), 2):
            assert distance(a, b) == distance(b, a)

    def test_zero_iff_equal(self):
        """Test that distance is zero only for coincident points."""
        points = random_points(20)
        for a, b in itertools.product(points, repeat=2):
            assert (distance(a, b) == 0.0) == (a == b)
            assert distance(a, b) >= 0.0

    def test_accepts_points(self):
        """Test that Point tuples and numpy rows are accepted."""
        assert distance(Point(0.0, 0.0), Point(6.0, 8.0)) == 10.0
        assert distance(np.array([0.0, 0.0]), np.array([6.0, 8.0])) == 10.0


class TestPairwiseDistances:
    """Test vectorised pairwise distances."""

    def test_enumeration_order(self):
        """Test that pairs come out as 0-1, 0-2, ..., 1-2, ..."""
        rows, cols, _ = pairwise_distances([(0, 0), (1, 0), (2, 0), (3, 0)])

        assert list(zip(rows.tolist(), cols.tolist())) == [
            (0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)
        ]

    def test_matches_scalar_distance(self):
        """Test that vectorised weights equal the scalar function exactly."""
        points = random_points(25)
        rows, cols, weights = pairwise_distances(points)

        for i, j, weight in zip(rows, cols, weights):
            assert weight == distance(points[i], points[j])

    @pytest.mark.parametrize("points", [[], [(5.0, 5.0)]])
    def test_fewer_than_two_points(self, points):
        """Test that no pairs exist for zero or one point."""
        rows, cols, weights = pairwise_distances(points)

        assert len(rows) == len(cols) == len(weights) == 0

    def test_bad_shape(self):
        """Test that non 2-D input is rejected."""
        with pytest.raises(ValueError):
            pairwise_distances([(1.0, 2.0, 3.0)])


class TestConnection:
    """Test connection segments."""

    def test_between(self):
        """Test building a connection from two points."""
        connection = Connection.between((1, 2), np.array([4.0, 6.0]))

        assert connection == Connection(1.0, 2.0, 4.0, 6.0)
        assert connection.length() == 5.0

    def test_as_dict(self):
        """Test the renderer facing field names."""
        assert Connection(0, 1, 2, 3)._asdict() == {"x1": 0, "y1": 1, "x2": 2, "y2": 3}
