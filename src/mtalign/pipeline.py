#!/usr/bin/env python3
"""Alignment pipeline for programmatic access.

Key functions:
- run_alignment: load the corpora named by a PipelineConfig, validate the
  original corpora against the processed ones and solve the alignment.

Example usage:
    from mtalign.config import IOConfig, PipelineConfig
    from mtalign import pipeline

    result = pipeline.run_alignment(
        PipelineConfig(io=IOConfig(source="doc.de", target="doc.en"))
    )
    for rung in result.output.rungs:
        print(rung.label)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from mtalign import corpus, solver
from mtalign.config import PipelineConfig
from mtalign.corpus import Corpus
from mtalign.types import AlignmentOutput

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Result of an alignment run.

    Attributes:
        output: Best rung sequence and total score.
        source: Processed source corpus.
        target: Processed target corpus.
        source_original: Corpus used to display source text.
        target_original: Corpus used to display target text.
    """

    output: AlignmentOutput
    source: Corpus
    target: Corpus
    source_original: Corpus
    target_original: Corpus


def _load_original(
    path: Optional[str], processed: Corpus, encoding: str
) -> Corpus:
    """Load a display corpus, falling back to the processed corpus."""
    if not path:
        return processed
    original = Corpus.load(path, encoding=encoding)
    corpus.check_parallel(processed, original)
    return original


def run_alignment(config: PipelineConfig) -> PipelineResult:
    """Load the configured corpora and align them.

    Raises:
        CorpusLoadError: If a corpus file cannot be read.
        CorpusMismatchError: If an original corpus has a different number
            of sentences than its processed counterpart.
    """
    io = config.io
    LOGGER.info(
        f"Starting alignment with source={io.source} target={io.target} "
        f"moves={config.aligner.move_set.value}"
    )
    source = Corpus.load(io.source, encoding=io.encoding)
    target = Corpus.load(io.target, encoding=io.encoding)
    source_original = _load_original(io.source_original, source, io.encoding)
    target_original = _load_original(io.target_original, target, io.encoding)

    output = solver.align(source, target, config.aligner)
    return PipelineResult(
        output=output,
        source=source,
        target=target,
        source_original=source_original,
        target_original=target_original,
    )
