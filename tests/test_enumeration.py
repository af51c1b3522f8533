# tests/test_enumeration.py
from __future__ import annotations

from itertools import combinations

import pytest

from combinum import combination_count, combination_key, get_combination, sorted_combinations
from combinum.enumeration import combination_of_two, combination_of_two_array

# ---------- helpers -----------------------------------------------------------


def _assert_well_formed(result: dict, n: int, k: int) -> None:
    seen: set[frozenset[int]] = set()
    for key, comb in result.items():
        assert key == combination_key(comb)
        assert len(comb) == k
        assert len(set(comb)) == k
        assert list(comb) == sorted(comb)
        assert all(1 <= x <= n for x in comb)
        assert frozenset(comb) not in seen
        seen.add(frozenset(comb))


# ---------- base pairs --------------------------------------------------------


def test_combination_key_format():
    assert combination_key((1, 3, 4)) == "1-3-4"
    assert combination_key(()) == ""


def test_combination_of_two_four():
    pairs = combination_of_two(4)
    assert set(pairs) == {"1-2", "1-3", "1-4", "2-3", "2-4", "3-4"}
    assert pairs["2-4"] == (2, 4)


@pytest.mark.parametrize("n", [0, 1])
def test_combination_of_two_too_small(n):
    assert combination_of_two(n) == {}


# ---------- merge step --------------------------------------------------------


def test_merge_keeps_only_expected_size():
    first = {"1-2": (1, 2), "3-4": (3, 4)}
    second = {"1-2": (1, 2), "2-3": (2, 3), "3-4": (3, 4)}
    merged = combination_of_two_array(first, second, 3)
    assert merged == {"1-2-3": (1, 2, 3), "2-3-4": (2, 3, 4)}


def test_merge_skips_identical_combinations():
    same = {"1-2": (1, 2)}
    assert combination_of_two_array(same, same, 2) == {}


def test_merge_does_not_mutate_inputs():
    base = combination_of_two(4)
    snapshot = dict(base)
    combination_of_two_array(base, base, 3)
    assert base == snapshot


# ---------- get_combination ---------------------------------------------------


def test_four_choose_two():
    assert sorted_combinations(get_combination(4, 2)) == [
        (1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4),
    ]


def test_four_choose_three():
    assert sorted_combinations(get_combination(4, 3)) == [
        (1, 2, 3), (1, 2, 4), (1, 3, 4), (2, 3, 4),
    ]


GRID = [(n, k) for n in range(2, 8) for k in range(2, n + 1)]


@pytest.mark.parametrize("n,k", GRID, ids=[f"C({n},{k})" for n, k in GRID])
def test_size_matches_count_and_itertools(n, k):
    result = get_combination(n, k)
    assert len(result) == combination_count(n, k, backend="native")
    _assert_well_formed(result, n, k)
    assert sorted_combinations(result) == list(combinations(range(1, n + 1), k))


@pytest.mark.parametrize("k", [0, 1])
def test_small_sizes_return_pair_set(k):
    # sizes below 2 fall back to the 2-combinations
    assert get_combination(4, k) == get_combination(4, 2)


def test_size_above_count_is_empty():
    assert get_combination(3, 4) == {}
    assert get_combination(3, 6) == {}
