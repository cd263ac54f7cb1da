#!/usr/bin/env python3
"""Monotonic sentence alignment by dynamic programming.

The solver fills two tables indexed by prefix lengths ``(i, j)``:

- ``best[i, j]``: best cumulative overlap score aligning the first ``i``
  source sentences with the first ``j`` target sentences.
- ``moves[i, j]``: the rung type ``(a, b)`` that achieved it.

For every interior cell each move ``(a, b)`` of the configured lattice with
``i >= a`` and ``j >= b`` is tried in order; its value is
``best[i - a, j - b]`` plus, when both ``a`` and ``b`` are positive, the
overlap score of source sentences ``i-a..i-1`` against target sentences
``j-b..j-1``. Only a strictly better later move replaces the incumbent, so
ties go to the first-listed move. Row 0 and column 0 score 0 and are
reached by pure insertions and deletions respectively.

Cells only depend on cells with smaller indices, so the tables are filled
row by row instead of recursing.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from mtalign import constants, scorer
from mtalign.config import AlignerConfig
from mtalign.corpus import Corpus
from mtalign.types import AlignmentOutput, Rung

LOGGER = logging.getLogger(__name__)


class AlignmentSolver:
    """Best monotonic rung sequence between a source and a target corpus."""

    def __init__(
        self,
        source: Corpus,
        target: Corpus,
        config: Optional[AlignerConfig] = None,
    ) -> None:
        self.source = source
        self.target = target
        self.config = config if config is not None else AlignerConfig()
        self.source_size = source.size()
        self.target_size = target.size()

        shape = (self.source_size + 1, self.target_size + 1)
        self._best = np.full(shape, constants.UNSEEN, dtype=np.float64)
        self._moves = np.full(shape + (2,), constants.NO_MOVE, dtype=np.int8)
        self._best[0, :] = 0.0
        self._best[:, 0] = 0.0
        self._moves[0, 1:] = (0, 1)
        self._moves[1:, 0] = (1, 0)
        self._filled_rows = 0

        LOGGER.info(
            f"Initialized solver with table shape {shape} and "
            f"{len(self.config.moves)} rung types ({self.config.move_set.value})"
        )

    def _check_cell(self, i: int, j: int) -> None:
        if not (0 <= i <= self.source_size and 0 <= j <= self.target_size):
            raise IndexError(
                f"Cell ({i}, {j}) outside table of shape "
                f"({self.source_size + 1}, {self.target_size + 1})"
            )

    def _fill_rows(self, last_row: int) -> None:
        """Compute every cell of rows up to ``last_row``."""
        for i in range(self._filled_rows + 1, last_row + 1):
            for j in range(1, self.target_size + 1):
                self._fill_cell(i, j)
            self._filled_rows = i

    def _fill_cell(self, i: int, j: int) -> None:
        best_score = None
        best_move = None
        for a, b in self.config.moves:
            if i < a or j < b:
                continue
            value = float(self._best[i - a, j - b])
            if a and b:
                value += scorer.score(
                    self.source.range(i - a, i - 1),
                    self.target.range(j - b, j - 1),
                    self.config.smoothing,
                )
            if best_score is None or value > best_score:
                best_score = value
                best_move = (a, b)
        self._best[i, j] = best_score
        self._moves[i, j] = best_move

    def best(self, i: int, j: int) -> float:
        """Best cumulative score of the prefix pair ``(i, j)``."""
        self._check_cell(i, j)
        if self._best[i, j] == constants.UNSEEN:
            self._fill_rows(i)
        return float(self._best[i, j])

    def move(self, i: int, j: int) -> Tuple[int, int]:
        """Rung type chosen for cell ``(i, j)``; ``(-1, -1)`` at the origin."""
        self.best(i, j)
        a, b = self._moves[i, j]
        return int(a), int(b)

    def backtrack(self) -> List[Rung]:
        """Walk the stored moves from the full prefix pair back to (0, 0)."""
        rungs = []
        i, j = self.source_size, self.target_size
        while i > 0 or j > 0:
            a, b = self.move(i, j)
            rungs.append(Rung(i=i, j=j, i_type=a, j_type=b))
            i -= a
            j -= b
        rungs.reverse()
        return rungs

    def solve(self) -> AlignmentOutput:
        """Fill the tables and return the best rung sequence."""
        total = self.best(self.source_size, self.target_size)
        rungs = self.backtrack()
        LOGGER.info(
            f"Alignment complete: {len(rungs)} rungs, total score={total:g}"
        )
        return AlignmentOutput(
            rungs=rungs,
            score=total,
            source_size=self.source_size,
            target_size=self.target_size,
        )


def align(
    source: Corpus, target: Corpus, config: Optional[AlignerConfig] = None
) -> AlignmentOutput:
    """Align two corpora with a fresh solver and return the result."""
    return AlignmentSolver(source, target, config).solve()
