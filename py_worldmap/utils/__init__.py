"""
Shared utilities.
"""

from .alea_prng import AleaPRNG
from .random import create_prng

__all__ = ["AleaPRNG", "create_prng"]
