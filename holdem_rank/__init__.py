"""holdem_rank - Poker hand classification and ranking.

Classifies a Texas Hold'em table plus a two-card hand into the best poker
hand category and orders hands so the strongest can be picked.
"""

__version__ = "0.1.0"

from holdem_rank.utils.seeding import make_rng

__all__ = ["__version__", "make_rng"]
