#!/usr/bin/env python3
"""Rendering of alignment results.

Two layouts are supported:

- ladder: ``<i offset>\\t<j offset>\\t<score>`` for every rung, where the
  offsets count the sentences consumed before the rung and pure insertion
  or deletion rungs carry the score ``-1``;
- plain: ``<iType>-<jType>\\t<score>\\t<source text>\\t<target text>`` for
  every rung that pairs at least one sentence on each side.

Scores are printed with ``format(value, "g")`` (six significant digits).
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from mtalign import constants, scorer
from mtalign.corpus import Corpus
from mtalign.types import AlignmentOutput, Rung

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredRung:
    """A rung and its overlap score (None for insertions and deletions)."""

    rung: Rung
    score: Optional[float]


def format_score(value: Union[int, float]) -> str:
    return format(value, "g")


def score_rungs(
    output: AlignmentOutput,
    source: Corpus,
    target: Corpus,
    smoothing: float = constants.SMOOTHING,
) -> List[ScoredRung]:
    """Score every kept rung against the processed corpora.

    The solver already scored these ranges during the fill; this second
    pass is served from the merged-range and n-gram caches.
    """
    scored = []
    for rung in output.rungs:
        value = None
        if rung.is_kept:
            value = scorer.score(
                source.range(*rung.source_span),
                target.range(*rung.target_span),
                smoothing,
            )
        scored.append(ScoredRung(rung=rung, score=value))
    return scored


def format_ladder(scored: List[ScoredRung]) -> Iterator[str]:
    """Yield one ladder row per rung."""
    i_ladder = 0
    j_ladder = 0
    for item in scored:
        value = (
            item.score if item.rung.is_kept else constants.LADDER_GAP_SCORE
        )
        yield f"{i_ladder}\t{j_ladder}\t{format_score(value)}"
        i_ladder += item.rung.i_type
        j_ladder += item.rung.j_type


def format_plain(
    scored: List[ScoredRung], source: Corpus, target: Corpus
) -> Iterator[str]:
    """Yield one row per kept rung with the text of both sides.

    ``source`` and ``target`` are the corpora whose text is displayed,
    usually the original (unprocessed) files.
    """
    for item in scored:
        rung = item.rung
        if not rung.is_kept:
            continue
        source_text = source.range(*rung.source_span).text
        target_text = target.range(*rung.target_span).text
        yield (
            f"{rung.label}\t{format_score(item.score)}\t"
            f"{source_text}\t{target_text}"
        )


@dataclass(frozen=True)
class QualitySummary:
    """Mean overlap score over kept rungs and over all rungs."""

    total: float
    kept: int
    rungs: int

    @property
    def mean_kept(self) -> Optional[float]:
        return self.total / self.kept if self.kept else None

    @property
    def mean_all(self) -> Optional[float]:
        return self.total / self.rungs if self.rungs else None

    def __str__(self) -> str:
        if not self.kept:
            return "Quality: no alignments found"
        return (
            f"Quality {format_score(self.mean_kept)}/"
            f"{format_score(self.mean_all)}"
        )


def summarize_quality(scored: List[ScoredRung]) -> QualitySummary:
    kept = [item.score for item in scored if item.rung.is_kept]
    summary = QualitySummary(
        total=float(sum(kept)), kept=len(kept), rungs=len(scored)
    )
    LOGGER.info(
        f"Kept {summary.kept} of {summary.rungs} rungs "
        f"(total score {summary.total:g})"
    )
    return summary
