# src/e2e/test_accumulator_add.py
from collections import Counter
import pytest

from wordy.accumulator import NGramAccumulator
from wordy.models import Grouping

TACOS = ["i", "love", "tacos", "they", "are", "so", "yum", "they", "are", "so", "delicious"]
WORDS = ["to", "be", "or", "not", "to", "be", "that", "is", "the", "question", "to", "be"]


def _fill(g: int, tokens: list[str]) -> NGramAccumulator:
    acc = NGramAccumulator(g)
    for t in tokens:
        acc.add(t)
    return acc


def test_accumulator_add_tacos():
    acc = _fill(3, TACOS)
    for key in ("i love tacos", "love tacos they", "tacos they are"):
        assert key in acc.groupings, f"collection is missing key: {key} -- {dict(acc.groupings)}"
    assert acc.groupings["they are so"] == 2
    assert acc.completed == len(TACOS) - 3 + 1


@pytest.mark.parametrize("g", [1, 2, 3, 4, 5])
def test_groupings_are_every_contiguous_window(g):
    acc = _fill(g, WORDS)
    expected = Counter(" ".join(WORDS[i:i + g]) for i in range(len(WORDS) - g + 1))
    assert acc.completed == len(WORDS) - g + 1
    assert Counter(dict(acc.groupings)) == expected
    for key in acc.groupings:
        assert len(key.split(" ")) == g


def test_group_size_equal_to_token_count_gives_one_grouping():
    acc = _fill(len(TACOS), TACOS)
    assert acc.completed == 1
    assert acc.report() == [Grouping(" ".join(TACOS), 1)]


def test_group_size_larger_than_token_count_gives_nothing():
    acc = _fill(len(TACOS) + 1, TACOS)
    assert acc.completed == 0
    assert acc.report() == []


def test_windows_stay_within_bounds():
    acc = NGramAccumulator(4)
    for t in WORDS:
        acc.add(t)
        windows = acc.windows
        assert len(windows) == 4
        assert all(0 <= len(w) < 4 for w in windows)
        assert 0 <= acc.next_slot < 4


def test_report_sorted_with_first_seen_ties():
    acc = _fill(2, ["a", "b", "a", "b", "c"])
    assert acc.report() == [Grouping("a b", 2), Grouping("b a", 1), Grouping("b c", 1)]


def test_report_is_idempotent_and_does_not_mutate():
    acc = _fill(2, WORDS)
    first = acc.report()
    second = acc.report()
    assert first == second
    assert all(a.count >= b.count for a, b in zip(first, first[1:]))
    assert sum(r.count for r in first) == acc.completed


def test_groupings_view_is_read_only():
    acc = _fill(2, ["a", "b"])
    with pytest.raises(TypeError):
        acc.groupings["a b"] = 10  # type: ignore[index]
    assert acc.groupings["a b"] == 1


def test_zero_group_size_is_degenerate_but_harmless():
    acc = _fill(0, ["a", "b"])
    assert acc.report() == []
    assert len(acc) == 0
