#!/usr/bin/env python3
"""Smoothed, symmetric n-gram overlap score between two sentence views.

The score is a BLEU-like geometric mean of n-gram precisions up to order
four, computed in both directions (candidate against reference and the
reverse) and averaged in log space:

    logP_c = 1/4 * sum_k [ln(common_k + s) - ln(candidate_k + s)]
    logP_r = 1/4 * sum_k [ln(common_k + s) - ln(reference_k + s)]
    score  = exp((logP_c + logP_r) / 2)

Each direction receives a brevity penalty ``1 - other_len / own_len`` when
the other side is longer. The score is 1.0 for identical token sequences
and exactly 0.0 when either side is empty.
"""

import math
from typing import Union

import numpy as np

from mtalign import constants
from mtalign.corpus import SentenceView
from mtalign.ngrams import count_common


class Stats:
    """Sufficient statistics of the overlap score.

    A vector of ``MAX_NGRAM_ORDER * 3`` floats holding, for each order,
    the common n-gram count, the candidate n-gram count and the reference
    n-gram count.
    """

    def __init__(self, values: Union[np.ndarray, list, None] = None) -> None:
        if values is None:
            values = np.zeros(constants.STATS_SIZE, dtype=np.float64)
        values = np.array(values, dtype=np.float64)
        if values.shape != (constants.STATS_SIZE,):
            raise ValueError(
                f"Stats must have {constants.STATS_SIZE} values; "
                f"got shape {values.shape}"
            )
        self.values = values

    def __getitem__(self, i: int) -> float:
        return float(self.values[i])

    def __setitem__(self, i: int, value: float) -> None:
        self.values[i] = value

    def __len__(self) -> int:
        return len(self.values)

    def __iadd__(self, other: "Stats") -> "Stats":
        self.values += other.values
        return self

    def __add__(self, other: "Stats") -> "Stats":
        return Stats(self.values + other.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stats):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    def __str__(self) -> str:
        return " ".join(format(v, "g") for v in self.values.tolist())

    def __repr__(self) -> str:
        return f"Stats({self})"

    def _slot(self, order: int, offset: int) -> float:
        if not 1 <= order <= constants.MAX_NGRAM_ORDER:
            raise IndexError(f"N-gram order out of range: {order}")
        return self[(order - 1) * constants.STATS_PER_ORDER + offset]

    def common(self, order: int) -> float:
        return self._slot(order, 0)

    def candidate_count(self, order: int) -> float:
        return self._slot(order, 1)

    def reference_count(self, order: int) -> float:
        return self._slot(order, 2)


def compute_stats(candidate: SentenceView, reference: SentenceView) -> Stats:
    """Count common and total n-grams of both views for every order.

    Common n-grams of order k are only counted when order k-1 had any;
    otherwise they are recorded as zero.
    """
    cgrams = candidate.ngrams
    rgrams = reference.ngrams
    stats = Stats()
    for order in range(1, constants.MAX_NGRAM_ORDER + 1):
        base = (order - 1) * constants.STATS_PER_ORDER
        correct = 0
        # if there were common (k-1)-grams there can be common k-grams
        if order == 1 or stats[base - constants.STATS_PER_ORDER] > 0:
            correct = count_common(cgrams[order], rgrams[order])
        stats[base] = correct
        stats[base + 1] = cgrams.count(order)
        stats[base + 2] = rgrams.count(order)
    return stats


def bleu_from_stats(
    stats: Stats, smoothing: float = constants.SMOOTHING
) -> float:
    """Turn accumulated statistics into the symmetric overlap score."""
    if len(stats) != constants.STATS_SIZE:
        raise ValueError(
            f"Stats must have {constants.STATS_SIZE} values; got {len(stats)}"
        )
    candidate_length = stats.candidate_count(1)
    reference_length = stats.reference_count(1)
    if candidate_length == 0 or reference_length == 0:
        return 0.0

    log_candidate = 0.0
    log_reference = 0.0
    for order in range(1, constants.MAX_NGRAM_ORDER + 1):
        common = math.log(stats.common(order) + smoothing)
        log_candidate += common - math.log(
            stats.candidate_count(order) + smoothing
        )
        log_reference += common - math.log(
            stats.reference_count(order) + smoothing
        )
    log_candidate /= constants.MAX_NGRAM_ORDER
    log_reference /= constants.MAX_NGRAM_ORDER

    brevity_candidate = 1.0 - reference_length / candidate_length
    if brevity_candidate < 0.0:
        log_candidate += brevity_candidate
    brevity_reference = 1.0 - candidate_length / reference_length
    if brevity_reference < 0.0:
        log_reference += brevity_reference

    return math.exp((log_candidate + log_reference) / 2)


def score(
    candidate: SentenceView,
    reference: SentenceView,
    smoothing: float = constants.SMOOTHING,
) -> float:
    """Overlap score of two views in ``[0, 1]``; 0.0 if either is empty."""
    if len(candidate) == 0 or len(reference) == 0:
        return 0.0
    return bleu_from_stats(compute_stats(candidate, reference), smoothing)
