#!/usr/bin/env python3
"""Sorted n-gram indices for sentence views.

An order-k n-gram is a window of exactly k consecutive tokens. Its key is
the text of the window as it appears in the corpus buffer (tokens joined by
single spaces), so two n-grams are equal when their text is equal,
regardless of where they occur. Each order is kept as a sorted tuple so
that the common n-grams of two sentences can be counted with a single
merge pass.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from mtalign import constants

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class NGramIndex:
    """N-grams of one sentence view for orders 1..MAX_NGRAM_ORDER."""

    by_order: Tuple[Tuple[str, ...], ...]

    def __post_init__(self) -> None:
        if len(self.by_order) != constants.MAX_NGRAM_ORDER:
            raise ValueError(
                f"len(by_order) ({len(self.by_order)}) must match "
                f"MAX_NGRAM_ORDER ({constants.MAX_NGRAM_ORDER})"
            )

    def __getitem__(self, order: int) -> Tuple[str, ...]:
        """Return the sorted n-grams of ``order`` (1-based)."""
        if not 1 <= order <= constants.MAX_NGRAM_ORDER:
            raise IndexError(f"N-gram order out of range: {order}")
        return self.by_order[order - 1]

    def count(self, order: int) -> int:
        """Number of n-grams of ``order``, duplicates included."""
        return len(self[order])

    @classmethod
    def from_spans(
        cls, buffer: str, starts: Sequence[int], ends: Sequence[int]
    ) -> "NGramIndex":
        """Build the index from per-token ``[start, end)`` buffer offsets.

        A view of ``L`` tokens yields ``max(0, L - k + 1)`` n-grams of
        order ``k``.
        """
        if len(starts) != len(ends):
            raise ValueError(
                f"len(starts) ({len(starts)}) must match len(ends) "
                f"({len(ends)})"
            )
        n_tokens = len(starts)
        by_order = []
        for order in range(1, constants.MAX_NGRAM_ORDER + 1):
            grams = sorted(
                buffer[starts[first] : ends[first + order - 1]]
                for first in range(n_tokens - order + 1)
            )
            by_order.append(tuple(grams))
        return cls(by_order=tuple(by_order))


def count_common(first: Sequence[str], second: Sequence[str]) -> int:
    """Size of the multiset intersection of two sorted n-gram sequences.

    Advances the smaller side; on equality counts once and advances both.
    """
    it1 = 0
    it2 = 0
    common = 0
    while it1 < len(first) and it2 < len(second):
        if first[it1] < second[it2]:
            it1 += 1
        else:
            if not second[it2] < first[it1]:
                common += 1
                it1 += 1
            it2 += 1
    return common
