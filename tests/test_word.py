"""Tests for locating a fricative inside its word."""

import pytest

from fricatives.errors import AlignmentAssumptionViolation
from fricatives.types import Interval
from fricatives.word import locate_in_word, phonemes_in_word

from conftest import make_grid


def test_fricative_at_word_end(example_grid):
    placement = locate_in_word(example_grid, Interval("s", 0.2, 0.3))
    assert placement.word == "bas"
    assert placement.length == 3
    assert placement.position == 3


def test_leading_pause_not_counted(example_grid):
    """'atS' spans the pause before 'a'; the pause is not one of its phonemes."""
    placement = locate_in_word(example_grid, Interval("S", 0.6, 0.7))
    assert placement.word == "atS"
    assert placement.length == 3
    assert placement.position == 3


def test_phonemes_in_word(example_grid):
    word = example_grid.interval_at("words", 1)
    labels = [p.label for p in phonemes_in_word(example_grid, word)]
    assert labels == ["b", "a", "s"]


def test_repeated_symbol_resolved_by_timing():
    grid = make_grid(
        [("sas", 0.0, 0.3)],
        [("s", 0.0, 0.1), ("a", 0.1, 0.2), ("s", 0.2, 0.3)],
    )
    assert locate_in_word(grid, Interval("s", 0.0, 0.1)).position == 1
    assert locate_in_word(grid, Interval("s", 0.2, 0.3)).position == 3


def test_position_within_bounds_for_every_fricative():
    grid = make_grid(
        [("fa", 0.0, 0.2), ("<p:>", 0.2, 0.3), ("vazS", 0.3, 0.7)],
        [
            ("f", 0.0, 0.1), ("a", 0.1, 0.2), ("<p:>", 0.2, 0.3),
            ("v", 0.3, 0.4), ("a", 0.4, 0.5), ("z", 0.5, 0.6), ("S", 0.6, 0.7),
        ],
    )
    for phoneme in grid.phonemes:
        if phoneme.label in {"f", "v", "z", "S"}:
            placement = locate_in_word(grid, phoneme)
            assert 1 <= placement.position <= placement.length
    assert locate_in_word(grid, Interval("z", 0.5, 0.6)).position == 3
    assert locate_in_word(grid, Interval("v", 0.3, 0.4)).length == 4


def test_midpoint_on_word_boundary_uses_following_word():
    """A fricative straddling a word boundary belongs to the word starting there."""
    grid = make_grid(
        [("as", 0.0, 0.2), ("sa", 0.2, 0.4)],
        [("a", 0.0, 0.1), ("s", 0.1, 0.3), ("a", 0.3, 0.4)],
    )
    with pytest.raises(AlignmentAssumptionViolation, match="'sa'"):
        locate_in_word(grid, Interval("s", 0.1, 0.3))


def test_fricative_not_in_grid():
    grid = make_grid([("sa", 0.0, 0.2)], [("s", 0.0, 0.1), ("a", 0.1, 0.2)])
    with pytest.raises(AlignmentAssumptionViolation):
        locate_in_word(grid, Interval("z", 0.0, 0.1))


def test_pause_inside_word_is_violation():
    grid = make_grid(
        [("asa", 0.0, 0.4)],
        [("a", 0.0, 0.1), ("s", 0.1, 0.2), ("<p:>", 0.2, 0.3), ("a", 0.3, 0.4)],
    )
    with pytest.raises(AlignmentAssumptionViolation, match="pause"):
        locate_in_word(grid, Interval("s", 0.1, 0.2))


def test_boundary_time_resolves_to_following_word(example_grid):
    """0.3 ends 'bas' and starts 'atS'; lookup lands in 'atS' without error."""
    index = example_grid.interval_containing_time("words", 0.3)
    assert example_grid.interval_at("words", index).label == "atS"

    grid = make_grid(
        [("as", 0.0, 0.2), ("sa", 0.2, 0.4)],
        [("a", 0.0, 0.1), ("s", 0.1, 0.2), ("s", 0.2, 0.3), ("a", 0.3, 0.4)],
    )
    assert locate_in_word(grid, Interval("s", 0.2, 0.3)).word == "sa"
    assert locate_in_word(grid, Interval("s", 0.2, 0.3)).position == 1
    assert locate_in_word(grid, Interval("s", 0.1, 0.2)).word == "as"
