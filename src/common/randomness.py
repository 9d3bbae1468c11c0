"""
Seedable random sources
"""

import random
from typing import Optional


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a Random instance from seed (or system entropy)."""
    rng = random.Random()
    if seed is not None:
        rng.seed(int(seed))
    else:
        rng.seed()
    return rng
