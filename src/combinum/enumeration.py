# -----------------------------------------------------------------------------
#  enumeration.py
#  All k-combinations of {1..n}, grown by merging pairs.
# -----------------------------------------------------------------------------
"""
Combinations are built from the set of all 2-combinations: each step merges
every combination of the current size with every pair, deduplicates through
a canonical key and keeps only the results of the next size. This is easy to
follow but quadratic per step; duplicates are produced and discarded rather
than avoided.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from combinum.logging_utils import get_logger

log = get_logger(__name__)

Combination = tuple[int, ...]
CombinationSet = dict[str, Combination]

KEY_SEPARATOR = "-"


def combination_key(combination: Iterable[int]) -> str:
    """Dedup key of a sorted combination, e.g. (1, 3, 4) -> '1-3-4'."""
    return KEY_SEPARATOR.join(str(x) for x in combination)


def combination_of_two(n: int) -> CombinationSet:
    """Every unordered pair of distinct values from 1..n, once each."""
    values = range(1, n + 1)
    results: CombinationSet = {}
    for first in values:
        for second in values:
            if second == first:
                continue
            pair = tuple(sorted((first, second)))
            results[combination_key(pair)] = pair
    return results


def combination_of_two_array(
    first_set: Mapping[str, Combination],
    second_set: Mapping[str, Combination],
    expecting_size: int,
) -> CombinationSet:
    """
    Merge every combination of `first_set` with every one of `second_set`
    and keep the merged combinations holding exactly `expecting_size` values.
    """
    results: CombinationSet = {}
    for first in first_set.values():
        for second in second_set.values():
            if second == first:
                continue
            merged = tuple(sorted(set(first) | set(second)))
            results[combination_key(merged)] = merged

    return {key: comb for key, comb in results.items() if len(comb) == expecting_size}


def get_combination(item_count: int, combination_size: int) -> CombinationSet:
    """
    All combinations of `combination_size` values among 1..item_count.

    Sizes below 3 return the pair set unchanged, so 0 and 1 yield
    2-combinations as well.
    """
    base = combination_of_two(item_count)

    growing = base
    for size in range(3, combination_size + 1):
        growing = combination_of_two_array(growing, base, size)
        log.debug("grown to size %d: %d combinations", size, len(growing))

    return growing


def sorted_combinations(combinations: Mapping[str, Combination]) -> list[Combination]:
    """Combinations in lexicographic order; set iteration order is not defined."""
    return sorted(combinations.values())
