"""
Random number generation utilities.

Map generation never uses Python's random or NumPy's random module:
every stage receives an AleaPRNG built here, so the seed recorded with
a map is enough to rebuild it.
"""

import uuid
from typing import Optional, Tuple

import structlog

from .alea_prng import AleaPRNG

logger = structlog.get_logger()


def create_prng(seed: Optional[str] = None) -> Tuple[AleaPRNG, str]:
    """
    Create a fresh Alea PRNG.

    Args:
        seed: Seed string. A random one is generated when omitted.

    Returns:
        Tuple of (prng, seed actually used)
    """
    if seed is None:
        seed = uuid.uuid4().hex
        logger.debug("Generated random seed", seed=seed)

    return AleaPRNG(seed), seed
