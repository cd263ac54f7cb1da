"""Custom exceptions for mtalign.

Every error raised deliberately by the package derives from
``MTAlignError``. The concrete classes also inherit from the matching
builtin so callers can keep catching ``OSError`` or ``ValueError``.
"""

from typing import Optional


class MTAlignError(Exception):
    """Base exception for all mtalign errors."""


class CorpusLoadError(MTAlignError, OSError):
    """A corpus file could not be opened or decoded.

    Args:
        path: Path of the corpus file.
        reason: Short description of the failure.
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Error opening file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class CorpusMismatchError(MTAlignError, ValueError):
    """An original corpus does not line up with its processed counterpart.

    Args:
        processed_name: Name of the processed corpus.
        processed_size: Sentence count of the processed corpus.
        original_name: Name of the original (display) corpus.
        original_size: Sentence count of the original corpus.
    """

    def __init__(
        self,
        processed_name: str,
        processed_size: int,
        original_name: str,
        original_size: int,
    ):
        self.processed_name = processed_name
        self.processed_size = processed_size
        self.original_name = original_name
        self.original_size = original_size
        super().__init__(
            f"Original corpus {original_name} has {original_size} sentences "
            f"but processed corpus {processed_name} has {processed_size}"
        )
