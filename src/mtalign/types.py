#!/usr/bin/env python3

import logging
from dataclasses import dataclass
from typing import List, Tuple

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rung:
    """One alignment unit pairing a run of source and target sentences.

    ``i`` and ``j`` are the 1-based inclusive end indices of the source and
    target prefixes after the rung; ``i_type`` and ``j_type`` are the number
    of sentences it consumes on each side.
    """

    i: int
    j: int
    i_type: int
    j_type: int

    def __post_init__(self) -> None:
        if self.i_type < 0 or self.j_type < 0:
            raise ValueError(
                f"Rung types must be non-negative; got "
                f"({self.i_type}, {self.j_type})"
            )
        if self.i_type == 0 and self.j_type == 0:
            raise ValueError(f"Rung at ({self.i}, {self.j}) consumes nothing")
        if self.i < self.i_type or self.j < self.j_type:
            raise ValueError(
                f"Rung ({self.i}, {self.j}) cannot consume "
                f"({self.i_type}, {self.j_type}) sentences"
            )

    @property
    def is_kept(self) -> bool:
        """True unless the rung is a pure insertion or deletion."""
        return self.i_type > 0 and self.j_type > 0

    @property
    def label(self) -> str:
        return f"{self.i_type}-{self.j_type}"

    @property
    def source_span(self) -> Tuple[int, int]:
        """0-based inclusive source sentence range (empty when end < start)."""
        return self.i - self.i_type, self.i - 1

    @property
    def target_span(self) -> Tuple[int, int]:
        """0-based inclusive target sentence range (empty when end < start)."""
        return self.j - self.j_type, self.j - 1


@dataclass(frozen=True)
class AlignmentOutput:
    """Best rung sequence plus its total score."""

    rungs: List[Rung]
    score: float
    source_size: int
    target_size: int

    def __post_init__(self) -> None:
        consumed_source = sum(r.i_type for r in self.rungs)
        consumed_target = sum(r.j_type for r in self.rungs)
        if consumed_source != self.source_size:
            raise ValueError(
                f"rungs consume {consumed_source} source sentences; "
                f"source_size is {self.source_size}"
            )
        if consumed_target != self.target_size:
            raise ValueError(
                f"rungs consume {consumed_target} target sentences; "
                f"target_size is {self.target_size}"
            )
        LOGGER.debug(
            f"Created AlignmentOutput with {len(self.rungs)} rungs, "
            f"score={self.score}"
        )

    @property
    def kept_rungs(self) -> List[Rung]:
        return [r for r in self.rungs if r.is_kept]
