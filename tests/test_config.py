from dataclasses import FrozenInstanceError

import pytest

from mtalign import constants
from mtalign.config import AlignerConfig, IOConfig, PipelineConfig


def test_aligner_config_defaults():
    config = AlignerConfig()

    assert config.move_set == constants.MoveSet.FULL
    assert config.smoothing == constants.SMOOTHING
    assert config.moves == constants.FULL_RUNG_TYPES


def test_aligner_config_fast_moves():
    config = AlignerConfig(move_set=constants.MoveSet.FAST)
    assert config.moves == constants.FAST_RUNG_TYPES


def test_aligner_config_rejects_non_positive_smoothing():
    with pytest.raises(ValueError, match="smoothing must be positive"):
        AlignerConfig(smoothing=0.0)


def test_pipeline_config_from_cli_args():
    config = PipelineConfig.from_cli_args(
        source="src.txt",
        target="tgt.txt",
        target_original="tgt.orig.txt",
        ladder=True,
        move_set="fast",
        verbose=True,
    )

    assert config.io == IOConfig(
        source="src.txt", target="tgt.txt", target_original="tgt.orig.txt"
    )
    assert config.io.source_original is None
    assert config.io.encoding == "utf-8"
    assert config.aligner.move_set == constants.MoveSet.FAST
    assert config.ladder
    assert config.verbose


def test_pipeline_config_defaults():
    config = PipelineConfig(io=IOConfig(source="a", target="b"))

    assert config.aligner == AlignerConfig()
    assert not config.ladder
    assert not config.verbose


def test_pipeline_config_unknown_move_set():
    with pytest.raises(ValueError):
        PipelineConfig.from_cli_args(source="a", target="b", move_set="slow")


def test_configs_are_frozen():
    config = AlignerConfig()
    with pytest.raises(FrozenInstanceError):
        config.smoothing = 2.0
