"""Integration-style tests for the top-level generation interface."""

from datetime import date

import pytest

from engine import generate_daily, generate_puzzle
from src.core.seeds import DAILY_SIZES, daily_seed, infer_kind
from src.queens import QueensPuzzle
from src.tango import TangoPuzzle
from src.zip import ZipPuzzle


def test_dispatch_by_kind_is_case_insensitive():
    assert isinstance(generate_puzzle("Queens", 4, "x"), QueensPuzzle)
    assert isinstance(generate_puzzle("tango", 4, "x"), TangoPuzzle)
    assert isinstance(generate_puzzle(" ZIP ", 3, "x"), ZipPuzzle)


def test_unknown_kind():
    with pytest.raises(KeyError):
        generate_puzzle("sudoku", 4)
    with pytest.raises(TypeError):
        generate_puzzle(None, 4)


@pytest.mark.parametrize("kind,size", [("queens", 5), ("tango", 6), ("zip", 6)])
def test_identical_inputs_give_identical_puzzles(kind, size):
    first = generate_puzzle(kind, size, "same-seed")
    second = generate_puzzle(kind, size, "same-seed")
    assert first == second
    assert first.to_dict(include_solution=True) == second.to_dict(include_solution=True)


def test_default_sizes_apply():
    assert generate_puzzle("tango", seed="defaults").size == 6
    assert generate_puzzle("zip", seed="defaults").size == 7


def test_daily_seed_formats():
    assert daily_seed("queens", "2024-06-01") == "2024-06-01"
    assert daily_seed("tango", date(2024, 6, 1)) == "tango-2024-06-01"
    assert daily_seed("zip", "2024-06-01") == "zip-2024-06-01"
    assert daily_seed("zip", "2024-06-01", version=3) == "zip-2024-06-01-v3"
    # Only zip has admin rerolls.
    assert daily_seed("tango", "2024-06-01", version=3) == "tango-2024-06-01"


def test_daily_seed_rejects_bad_input():
    with pytest.raises(ValueError):
        daily_seed("zip", "2024-13-01")
    with pytest.raises(ValueError):
        daily_seed("zip", "2024-06-01", version=-1)
    with pytest.raises(KeyError):
        daily_seed("sudoku", "2024-06-01")


def test_generate_daily_uses_daily_size_and_seed():
    puzzle = generate_daily("tango", "2024-01-01")
    assert puzzle.size == DAILY_SIZES["tango"]
    assert puzzle == generate_puzzle("tango", 6, "tango-2024-01-01")

    rerolled = generate_daily("zip", "2024-01-01", version=1, size=5)
    assert rerolled == generate_puzzle("zip", 5, "zip-2024-01-01-v1")


def test_infer_kind_from_prefix():
    assert infer_kind("tango-2024-01-01") == "tango"
    assert infer_kind("zip-2024-01-01-v2") == "zip"
    assert infer_kind("2024-01-01") == "queens"
