#!/usr/bin/env python3
"""Tokenized corpora and zero-copy sentence views.

A ``Corpus`` reads one sentence per line, splits each line on ASCII
whitespace and stores every token in a single text buffer, tokens separated
by one space. Sentences and merged runs of consecutive sentences are
``SentenceView`` objects holding offsets into that buffer; no token text is
copied until ``text`` or ``tokens`` is requested.

Because sentences are stored in file order, the run of sentences ``i..j``
is the hull of the views of sentence ``i`` and sentence ``j``, which makes
merging O(1). Merged views are memoized per ``(i, j)`` pair for the lifetime
of the corpus.
"""

import logging
import re
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple, Union

import numpy as np

from mtalign import errors
from mtalign.ngrams import NGramIndex

LOGGER = logging.getLogger(__name__)

# Tokens are separated by ASCII whitespace only
_WHITESPACE = re.compile(r"[ \t\n\r\f\v]+")


def tokenize(line: str) -> List[str]:
    """Split ``line`` on ASCII whitespace, dropping empty pieces."""
    return [token for token in _WHITESPACE.split(line) if token]


@dataclass(frozen=True, eq=False)
class SentenceView:
    """A contiguous run of tokens in a corpus buffer.

    Attributes:
        corpus: Corpus owning the buffer.
        start: Character offset of the first token in the buffer.
        length: Number of characters spanned (separating spaces included).
        token_start: Index of the first token in the corpus token table.
        token_count: Number of tokens in the view.
    """

    corpus: "Corpus" = field(repr=False)
    start: int
    length: int
    token_start: int
    token_count: int

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def token_end(self) -> int:
        return self.token_start + self.token_count

    def __len__(self) -> int:
        return self.token_count

    def __str__(self) -> str:
        return self.text

    def __add__(self, other: "SentenceView") -> "SentenceView":
        """Concatenate two views of the same corpus without copying.

        The result spans from the smaller start to the larger end of both
        operands, so it is only meaningful for views in file order.
        """
        if other.corpus is not self.corpus:
            raise ValueError("Cannot concatenate views of different corpora")
        token_start = min(self.token_start, other.token_start)
        token_end = max(self.token_end, other.token_end)
        return self.corpus._view(token_start, token_end - token_start)

    @property
    def text(self) -> str:
        """Materialized text of the view."""
        return self.corpus.buffer[self.start : self.end]

    @property
    def tokens(self) -> List[str]:
        buffer = self.corpus.buffer
        starts = self.corpus.token_starts[self.token_start : self.token_end]
        ends = self.corpus.token_ends[self.token_start : self.token_end]
        return [buffer[s:e] for s, e in zip(starts.tolist(), ends.tolist())]

    @cached_property
    def ngrams(self) -> NGramIndex:
        """N-gram index of the view, built on first use."""
        index = NGramIndex.from_spans(
            self.corpus.buffer,
            self.corpus.token_starts[self.token_start : self.token_end].tolist(),
            self.corpus.token_ends[self.token_start : self.token_end].tolist(),
        )
        LOGGER.debug(
            f"Built n-gram index for tokens [{self.token_start}, "
            f"{self.token_end}) of {self.corpus.name}"
        )
        return index


class Corpus:
    """One sentence per line, tokenized on whitespace.

    The corpus is immutable after construction apart from the cache of
    merged sentence ranges.
    """

    def __init__(
        self, sentences: Iterable[Sequence[str]], name: str = "<memory>"
    ) -> None:
        """Build a corpus from already tokenized sentences."""
        self.name = name
        tokens: List[str] = []
        bounds: List[Tuple[int, int]] = []
        for sentence in sentences:
            first = len(tokens)
            tokens.extend(sentence)
            bounds.append((first, len(tokens) - first))

        self.buffer = " ".join(tokens)
        lengths = np.fromiter(
            (len(token) for token in tokens), dtype=np.int64, count=len(tokens)
        )
        # Each token is followed by one separating space in the buffer
        self.token_starts = np.cumsum(lengths + 1) - (lengths + 1)
        self.token_ends = self.token_starts + lengths
        self.token_starts.setflags(write=False)
        self.token_ends.setflags(write=False)

        self._sentences = [self._view(start, count) for start, count in bounds]
        self._ranges: Dict[Tuple[int, int], SentenceView] = {}
        self.empty = self._view(0, 0)

        LOGGER.info(
            f"Loaded corpus {self.name} with {len(self._sentences)} "
            f"sentences and {len(tokens)} tokens"
        )

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], name: str = "<memory>"
    ) -> "Corpus":
        """Build a corpus from raw lines, one sentence per line."""
        return cls((tokenize(line) for line in lines), name=name)

    @classmethod
    def load(
        cls, path: Union[str, Path], encoding: str = "utf-8"
    ) -> "Corpus":
        """Read a corpus file line by line.

        Only LF ends a sentence; a stray CR inside a line is whitespace.

        Raises:
            CorpusLoadError: If the file cannot be opened or decoded.
        """
        LOGGER.info(f"Reading corpus from {path}")
        try:
            with open(path, encoding=encoding, newline="\n") as handle:
                return cls.from_lines(handle, name=str(path))
        except (OSError, UnicodeDecodeError) as e:
            raise errors.CorpusLoadError(str(path), str(e)) from e

    def _view(self, token_start: int, token_count: int) -> SentenceView:
        """Create a view over ``token_count`` tokens from ``token_start``."""
        if token_count > 0:
            start = int(self.token_starts[token_start])
            end = int(self.token_ends[token_start + token_count - 1])
        elif token_start < len(self.token_starts):
            start = end = int(self.token_starts[token_start])
        else:
            start = end = len(self.buffer)
        return SentenceView(
            corpus=self,
            start=start,
            length=end - start,
            token_start=token_start,
            token_count=token_count,
        )

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._sentences):
            raise IndexError(
                f"Sentence index {i} out of range for {self.name} "
                f"({len(self._sentences)} sentences)"
            )

    def sentence(self, i: int) -> SentenceView:
        """Return sentence ``i`` (0-based)."""
        self._check_index(i)
        return self._sentences[i]

    def range(self, i: int, j: int) -> SentenceView:
        """Return sentences ``i..j`` inclusive (0-based) as one view.

        ``i == j`` is the sentence itself and ``j < i`` is the empty view.
        """
        if j < i:
            return self.empty
        if i == j:
            return self.sentence(i)
        key = (i, j)
        view = self._ranges.get(key)
        if view is None:
            self._check_index(i)
            self._check_index(j)
            view = self._sentences[i] + self._sentences[j]
            self._ranges[key] = view
            LOGGER.debug(
                f"Merged sentences {i}..{j} of {self.name} "
                f"({view.token_count} tokens)"
            )
        return view

    def size(self) -> int:
        """Number of physical sentences."""
        return len(self._sentences)

    @property
    def num_tokens(self) -> int:
        return len(self.token_starts)

    @property
    def cache_size(self) -> int:
        """Number of memoized merged ranges, at most size*(size-1)/2."""
        return len(self._ranges)

    def __len__(self) -> int:
        return len(self._sentences)

    def __getitem__(self, i: int) -> SentenceView:
        return self.sentence(i)

    def __iter__(self) -> Iterator[SentenceView]:
        return iter(self._sentences)

    def __repr__(self) -> str:
        return f"Corpus(name={self.name!r}, sentences={len(self._sentences)})"


def check_parallel(processed: Corpus, original: Corpus) -> None:
    """Ensure an original corpus has one sentence per processed sentence.

    Raises:
        CorpusMismatchError: If the sentence counts differ.
    """
    if processed.size() != original.size():
        raise errors.CorpusMismatchError(
            processed.name, processed.size(), original.name, original.size()
        )
