"""Seeded random generators for dealing.

Every deal in the project draws from an explicit ``numpy.random.Generator``.
The scripts build one here so the seed can be printed and replayed.
"""

from typing import Optional, Tuple

import numpy as np

# Seeds are drawn from [0, 2**32) so they stay short enough to type back in
SEED_BOUND = 2**32


def make_rng(seed: Optional[int] = None) -> Tuple[int, np.random.Generator]:
    """Build a dealing generator, drawing a fresh seed if none is given.

    Args:
        seed: The seed value to use. If None, one is drawn from OS entropy
              and returned for later reproducibility.

    Returns:
        Tuple of (seed used, generator seeded with it)

    Example:
        >>> from holdem_rank import make_rng
        >>> seed, rng = make_rng(42)
        >>> seed
        42
    """
    if seed is None:
        seed = int(np.random.SeedSequence().entropy % SEED_BOUND)

    return seed, np.random.default_rng(seed)
