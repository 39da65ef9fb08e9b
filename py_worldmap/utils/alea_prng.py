"""
Alea pseudo random number generator.

Based on Johannes Baagøe's Alea algorithm. A seeded instance is passed
into every stage that needs randomness, so a map is fully reproducible
from its seed string.
"""

_TWO_POW_32 = 0x100000000
_TWO_POW_NEG_32 = 2.3283064365386963e-10


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class _Mash:
    """String hashing used to derive the generator state from a seed."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data):
        for char in str(data):
            self.n += ord(char)
            h = 0.02519603282416938 * self.n
            self.n = _uint32(h)
            h -= self.n
            h *= self.n
            self.n = _uint32(h)
            h -= self.n
            self.n += h * _TWO_POW_32
        return _uint32(self.n) * _TWO_POW_NEG_32


class AleaPRNG:
    """
    Alea PRNG producing floats in [0, 1).

    Accepts a seed string, a number, or an iterable of either.
    """

    def __init__(self, seed):
        self.seed = seed
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            parts = list(seed)
        else:
            parts = [seed]

        mash = _Mash()
        state = [mash(" "), mash(" "), mash(" ")]
        self.c = 1

        for part in parts:
            for i in range(3):
                state[i] -= mash(part)
                if state[i] < 0:
                    state[i] += 1

        self.s0, self.s1, self.s2 = state

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * _TWO_POW_NEG_32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def uniform(self, low: float, high: float) -> float:
        """Random float in [low, high)."""
        return low + self.random() * (high - low)

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        return self.random() < probability
