import math

import pytest

from mtalign import constants, scorer
from mtalign.scorer import Stats, bleu_from_stats, compute_stats
from tests.conftest import make_corpus

PAIRS = [
    ("a b c", "a b d"),
    ("a b", "a b c d"),
    ("the cat sat on the mat", "the cat sat"),
    ("x", "y"),
    ("a a a b", "a b b"),
]


@pytest.mark.parametrize("text", ["a", "a b", "the cat sat on the mat", "a a a"])
def test_self_similarity_is_one(text):
    view = make_corpus([text]).sentence(0)
    assert scorer.score(view, view) == 1.0


def test_identical_text_in_different_sentences_scores_one():
    corpus = make_corpus(["a b c d e", "a b c d e"])
    assert scorer.score(corpus.sentence(0), corpus.sentence(1)) == 1.0


def test_empty_view_scores_zero():
    corpus = make_corpus(["a b", ""])
    full, empty = corpus.sentence(0), corpus.sentence(1)

    assert scorer.score(empty, full) == 0.0
    assert scorer.score(full, empty) == 0.0
    assert scorer.score(empty, empty) == 0.0
    assert scorer.score(corpus.empty, full) == 0.0


@pytest.mark.parametrize(("first", "second"), PAIRS)
def test_score_is_symmetric(first, second):
    corpus = make_corpus([first, second])
    a, b = corpus.sentence(0), corpus.sentence(1)

    assert scorer.score(a, b) == scorer.score(b, a)


@pytest.mark.parametrize(("first", "second"), PAIRS)
def test_score_is_bounded(first, second):
    corpus = make_corpus([first, second])
    value = scorer.score(corpus.sentence(0), corpus.sentence(1))
    assert 0.0 < value < 1.0


def test_disjoint_single_tokens_score_from_smoothing_only():
    corpus = make_corpus(["x", "y"])
    value = scorer.score(corpus.sentence(0), corpus.sentence(1))

    # ln(1/2) in both directions on order 1, higher orders are empty
    assert value == pytest.approx(2 ** -0.25)


def test_brevity_penalty_for_shorter_side():
    corpus = make_corpus(["a b", "a b c d"])
    value = scorer.score(corpus.sentence(0), corpus.sentence(1))

    # candidate precisions are all 1 but it is half as long as the reference
    log_candidate = 0.0 + (1.0 - 4 / 2)
    log_reference = (
        math.log(3 / 5) + math.log(2 / 4) + math.log(1 / 3) + math.log(1 / 2)
    ) / 4
    assert value == pytest.approx(math.exp((log_candidate + log_reference) / 2))


def test_compute_stats_counts_all_orders():
    corpus = make_corpus(["a b c", "a b d"])
    stats = compute_stats(corpus.sentence(0), corpus.sentence(1))

    assert stats.values.tolist() == [2, 3, 3, 1, 2, 2, 0, 1, 1, 0, 0, 0]
    assert stats.common(1) == 2
    assert stats.candidate_count(2) == 2
    assert stats.reference_count(3) == 1


def test_compute_stats_skips_orders_after_zero_overlap(monkeypatch):
    calls = []
    original = scorer.count_common

    def counting(first, second):
        calls.append(len(first))
        return original(first, second)

    monkeypatch.setattr(scorer, "count_common", counting)
    corpus = make_corpus(["a b c", "d e f"])
    stats = compute_stats(corpus.sentence(0), corpus.sentence(1))

    assert calls == [3]
    assert stats.candidate_count(2) == 2
    assert stats.reference_count(3) == 1


def test_compute_stats_stops_at_first_empty_order(monkeypatch):
    calls = []
    original = scorer.count_common

    def counting(first, second):
        calls.append(len(first))
        return original(first, second)

    monkeypatch.setattr(scorer, "count_common", counting)
    corpus = make_corpus(["a x b y", "a b"])
    stats = compute_stats(corpus.sentence(0), corpus.sentence(1))

    assert stats.common(1) == 2
    assert stats.common(2) == 0
    assert len(calls) == 2


def test_stats_default_is_zero_vector():
    stats = Stats()
    assert len(stats) == constants.STATS_SIZE
    assert stats.values.tolist() == [0.0] * constants.STATS_SIZE


def test_stats_addition_is_elementwise():
    first = Stats(list(range(12)))
    second = Stats([1] * 12)

    total = first + second
    assert total.values.tolist() == [float(v + 1) for v in range(12)]
    assert first.values.tolist() == [float(v) for v in range(12)]

    first += second
    assert first == total


def test_stats_string_is_space_separated():
    assert str(Stats([1, 2.5] + [0] * 10)) == "1 2.5 0 0 0 0 0 0 0 0 0 0"


def test_stats_rejects_wrong_size():
    with pytest.raises(ValueError, match="12 values"):
        Stats([1, 2, 3])


def test_stats_order_out_of_range():
    with pytest.raises(IndexError):
        Stats().common(5)


def test_bleu_from_stats_with_empty_side_is_zero():
    stats = Stats([0, 0, 3] + [0] * 9)
    assert bleu_from_stats(stats) == 0.0


def test_bleu_from_stats_smoothing_changes_score():
    corpus = make_corpus(["a b c", "a b d"])
    stats = compute_stats(corpus.sentence(0), corpus.sentence(1))

    default = bleu_from_stats(stats)
    heavier = bleu_from_stats(stats, smoothing=10.0)
    assert default == scorer.score(corpus.sentence(0), corpus.sentence(1))
    assert heavier > default
