"""Shared test fixtures and utilities for mtalign tests."""

from pathlib import Path
from typing import List

import pytest

from mtalign.corpus import Corpus


def write_corpus(path: Path, lines: List[str]) -> Path:
    """Write ``lines`` to ``path``, one sentence per line."""
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


def make_corpus(lines: List[str], name: str = "<test>") -> Corpus:
    return Corpus.from_lines(lines, name=name)


@pytest.fixture
def corpus_pair(tmp_path):
    """Processed source and target files with identical sentences."""
    source = write_corpus(tmp_path / "source.txt", ["a b c", "d e"])
    target = write_corpus(tmp_path / "target.txt", ["a b c", "d e"])
    return source, target
