#!/usr/bin/env python3
"""Constants and configuration values for mtalign.

This module defines constants used throughout the mtalign package including:
- N-gram order and smoothing for the overlap score
- Rung (move) types tried by the alignment solver
- Sentinel values for the dynamic programming tables
"""

from enum import Enum
from typing import Dict, Tuple

# Type alias for a move: (source sentences consumed, target sentences consumed)
RungType = Tuple[int, int]

# Overlap score configuration
MAX_NGRAM_ORDER = 4
STATS_PER_ORDER = 3  # common, candidate, reference
STATS_SIZE = MAX_NGRAM_ORDER * STATS_PER_ORDER
SMOOTHING = 1.0

# Dynamic programming sentinels. Cumulative scores are never negative.
UNSEEN = -1.0
NO_MOVE = -1

# Score printed in ladder output for pure insertion/deletion rungs
LADDER_GAP_SCORE = -1


class MoveSet(str, Enum):
    """Move lattice used by the solver."""

    FULL = "full"
    FAST = "fast"


# Order matters: ties keep the first-listed move with the maximal score.
FULL_RUNG_TYPES: Tuple[RungType, ...] = (
    (0, 1),
    (1, 0),
    (1, 1),
    (1, 2),
    (2, 1),
    (2, 2),
    (1, 3),
    (3, 1),
    (1, 4),
    (4, 1),
)

# First-pass lattice producing 1-1 alignments plus insertions/deletions
FAST_RUNG_TYPES: Tuple[RungType, ...] = FULL_RUNG_TYPES[:3]

RUNG_TYPES: Dict[MoveSet, Tuple[RungType, ...]] = {
    MoveSet.FULL: FULL_RUNG_TYPES,
    MoveSet.FAST: FAST_RUNG_TYPES,
}
