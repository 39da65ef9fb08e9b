"""Tests for the Alea PRNG and seed handling."""

from py_worldmap.utils import AleaPRNG, create_prng


class TestAleaPRNG:
    """Test Alea random number generation."""

    def test_range(self):
        """Test that values fall within [0, 1)."""
        prng = AleaPRNG("range_seed")
        values = [prng.random() for _ in range(1000)]

        assert all(0.0 <= value < 1.0 for value in values)

    def test_same_seed_same_sequence(self):
        """Test that the same seed reproduces the sequence."""
        prng1 = AleaPRNG("test_seed")
        prng2 = AleaPRNG("test_seed")

        assert [prng1.random() for _ in range(50)] == [prng2.random() for _ in range(50)]

    def test_different_seeds(self):
        """Test that different seeds produce different sequences."""
        prng1 = AleaPRNG("seed1")
        prng2 = AleaPRNG("seed2")

        assert [prng1.random() for _ in range(10)] != [prng2.random() for _ in range(10)]

    def test_numeric_and_iterable_seeds(self):
        """Test that numbers and lists of parts are accepted as seeds."""
        assert AleaPRNG(42).random() == AleaPRNG("42").random()
        assert AleaPRNG(["a", "b"]).random() != AleaPRNG("a").random()

    def test_call_count(self):
        """Test that every draw is counted."""
        prng = AleaPRNG("count")
        prng.random()
        prng.uniform(0, 10)
        prng.chance(0.5)

        assert prng.call_count == 3

    def test_uniform_bounds(self):
        """Test uniform draws stay within [low, high)."""
        prng = AleaPRNG("uniform")
        values = [prng.uniform(2.0, 5.0) for _ in range(500)]

        assert all(2.0 <= value < 5.0 for value in values)

    def test_chance_extremes(self):
        """Test that probability 0 never and 1 always succeeds."""
        prng = AleaPRNG("chance")

        assert not any(prng.chance(0.0) for _ in range(200))
        assert all(prng.chance(1.0) for _ in range(200))


class TestCreatePrng:
    """Test PRNG factory."""

    def test_explicit_seed(self):
        """Test that an explicit seed is kept."""
        prng, seed = create_prng("fixed")

        assert seed == "fixed"
        assert prng.random() == AleaPRNG("fixed").random()

    def test_random_seed_is_recorded(self):
        """Test that an omitted seed is generated and reproducible."""
        prng, seed = create_prng()

        assert isinstance(seed, str) and seed
        assert prng.random() == AleaPRNG(seed).random()

    def test_random_seeds_differ(self):
        """Test that two unseeded generators get different seeds."""
        _, seed1 = create_prng()
        _, seed2 = create_prng()

        assert seed1 != seed2
