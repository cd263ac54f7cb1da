#!/usr/bin/env python3
"""Command-line interface for mtalign sentence alignment.

This module provides the CLI entry point. It runs the full pipeline:

1. Load the processed source and target corpora (one sentence per line)
2. Optionally load original corpora used only for display
3. Align the corpora with the n-gram overlap dynamic program
4. Print the rungs as plain rows or in ladder format
5. Report the mean overlap score on stderr

Usage:
    mtalign -s corpus.de -t corpus.en
    mtalign -s corpus.tok.de -t corpus.tok.en -S corpus.de -T corpus.en
    mtalign -s corpus.de -t corpus.en --ladder
"""

import logging
from typing import Optional

import click

from mtalign import constants, errors, formatter, pipeline, util
from mtalign.config import PipelineConfig

LOGGER = logging.getLogger(__name__)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "Align two parallel documents sentence by sentence using n-gram "
        "overlap. Each input file holds one tokenized sentence per line."
    ),
)
@click.option(
    "-s",
    "--source",
    "source",
    required=True,
    type=click.Path(dir_okay=False, path_type=str),
    help="Source language file (processed).",
)
@click.option(
    "-t",
    "--target",
    "target",
    required=True,
    type=click.Path(dir_okay=False, path_type=str),
    help="Target language file (processed).",
)
@click.option(
    "-S",
    "--Source",
    "source_original",
    default=None,
    type=click.Path(dir_okay=False, path_type=str),
    help=(
        "Source language file (original). If given, its sentences replace "
        "the processed source text in the output."
    ),
)
@click.option(
    "-T",
    "--Target",
    "target_original",
    default=None,
    type=click.Path(dir_okay=False, path_type=str),
    help=(
        "Target language file (original). If given, its sentences replace "
        "the processed target text in the output."
    ),
)
@click.option(
    "-l",
    "--ladder",
    is_flag=True,
    help="Output in hunalign ladder format.",
)
@click.option(
    "-m",
    "--moves",
    "move_set",
    type=click.Choice([m.value for m in constants.MoveSet], case_sensitive=False),
    default=constants.MoveSet.FULL.value,
    show_default=True,
    help=(
        "Rung types to search. 'full' allows merges of up to four "
        "sentences; 'fast' only allows 1-1 rungs, insertions and deletions."
    ),
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose logging.",
)
def main(
    source: str,
    target: str,
    source_original: Optional[str],
    target_original: Optional[str],
    ladder: bool,
    move_set: str,
    verbose: bool,
) -> None:
    """Run the command-line workflow for aligning two corpora."""
    config = PipelineConfig.from_cli_args(
        source=source,
        target=target,
        source_original=source_original,
        target_original=target_original,
        ladder=ladder,
        move_set=move_set,
        verbose=verbose,
    )
    util.configure_logging(config.verbose)

    try:
        result = pipeline.run_alignment(config)
    except errors.MTAlignError as e:
        raise click.ClickException(str(e)) from e

    scored = formatter.score_rungs(
        result.output,
        result.source,
        result.target,
        config.aligner.smoothing,
    )
    if config.ladder:
        rows = formatter.format_ladder(scored)
    else:
        rows = formatter.format_plain(
            scored, result.source_original, result.target_original
        )
    for row in rows:
        click.echo(row)

    click.echo(str(formatter.summarize_quality(scored)), err=True)
    LOGGER.info("Finished alignment")


if __name__ == "__main__":
    main()
