#!/usr/bin/env python3
"""Configuration dataclasses for the mtalign pipeline.

This module provides configuration dataclasses that consolidate
pipeline parameters, making it easier to manage and pass configuration
throughout the application.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from mtalign import constants


@dataclass(frozen=True)
class AlignerConfig:
    """Configuration for the alignment solver.

    Attributes:
        move_set: Which move lattice to search (full or fast first pass).
        smoothing: Additive smoothing constant of the overlap score.
    """

    move_set: constants.MoveSet = constants.MoveSet.FULL
    smoothing: float = constants.SMOOTHING

    def __post_init__(self) -> None:
        if self.smoothing <= 0:
            raise ValueError(
                f"smoothing must be positive. Got: {self.smoothing}"
            )

    @property
    def moves(self) -> Tuple[constants.RungType, ...]:
        """Ordered move tuple for the configured move set."""
        return constants.RUNG_TYPES[self.move_set]


@dataclass(frozen=True)
class IOConfig:
    """Configuration for input files.

    Attributes:
        source: Path to the processed source corpus.
        target: Path to the processed target corpus.
        source_original: Optional original source corpus used for display.
        target_original: Optional original target corpus used for display.
        encoding: Text encoding of all corpus files.
    """

    source: str
    target: str
    source_original: Optional[str] = None
    target_original: Optional[str] = None
    encoding: str = "utf-8"


@dataclass(frozen=True)
class PipelineConfig:
    """Complete configuration for an alignment run.

    Example:
        config = PipelineConfig(
            io=IOConfig(source="corpus.de", target="corpus.en"),
            ladder=True,
        )
    """

    io: IOConfig
    aligner: AlignerConfig = field(default_factory=AlignerConfig)
    ladder: bool = False
    verbose: bool = False

    @classmethod
    def from_cli_args(
        cls,
        source: str,
        target: str,
        source_original: Optional[str] = None,
        target_original: Optional[str] = None,
        ladder: bool = False,
        move_set: str = "full",
        verbose: bool = False,
    ) -> "PipelineConfig":
        """Create a PipelineConfig from CLI arguments.

        This factory method translates CLI argument values into the
        appropriate configuration objects.
        """
        return cls(
            io=IOConfig(
                source=source,
                target=target,
                source_original=source_original,
                target_original=target_original,
            ),
            aligner=AlignerConfig(move_set=constants.MoveSet(move_set)),
            ladder=ladder,
            verbose=verbose,
        )
