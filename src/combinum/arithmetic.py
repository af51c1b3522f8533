# -----------------------------------------------------------------------------
#  arithmetic.py
#  Exact factorials and binomial coefficients.
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Any

from combinum.backends import ArithmeticBackend, select_backend
from combinum.cache import FactorialCache, default_cache
from combinum.fmt import abbr_int_fast
from combinum.logging_utils import get_logger
from combinum.utility import as_integer, validate_operand

log = get_logger(__name__)


def factorial(
    wanted: Any,
    *,
    backend: str | ArithmeticBackend | None = None,
    cache: FactorialCache | None = None,
) -> int:
    """
    Return wanted! as an exact int.

    With the gmpy2 backend its factorial primitive is used and the cache is
    neither read nor written. Other backends consult the cache, then multiply
    upward from the largest cached factorial below `wanted`, storing every
    intermediate value on the way.

    Raises InvalidArgument if `wanted` is not a number or is negative; the
    cache is untouched in that case.
    """
    n = validate_operand(wanted, "wanted")
    be = select_backend(backend)

    if be.has_factorial:
        return be.to_int(be.factorial(n))

    store = cache if cache is not None else default_cache()
    with store.lock():
        hit = store.get(n)
        if hit is not None:
            return hit

        if n <= 1:
            store.store(n, 1)
            return 1

        start = store.nearest_below(n)
        if start is None:
            start = (1, 1)
            store.store(1, 1)
        k, value = start

        acc = be.from_int(value)
        for i in range(k + 1, n + 1):
            acc = be.multiply(be.from_int(i), acc)
            store.store(i, be.to_int(acc))

    result = be.to_int(acc)
    log.debug("factorial(%d) via %s from %d! = %s", n, be.name, k, abbr_int_fast(result))
    return result


def empty_factorial_cache(cache: FactorialCache | None = None) -> None:
    """Empty the factorial cache (less memory, slower factorials afterwards)."""
    store = cache if cache is not None else default_cache()
    dropped = len(store)
    store.clear()
    log.debug("factorial cache emptied (%d entries dropped)", dropped)


def combination_count(
    item_count: Any,
    combination_size: Any,
    *,
    backend: str | ArithmeticBackend | None = None,
    cache: FactorialCache | None = None,
) -> int:
    """
    Number of unordered, non-repeating combinations of `combination_size`
    elements among `item_count`: n! / (k! * (n - k)!).

    combination_size > item_count is not checked up front; (n - k)! then
    receives a negative operand and raises InvalidArgument.
    """
    be = select_backend(backend)

    n_fact = factorial(item_count, backend=be, cache=cache)
    k_fact = factorial(combination_size, backend=be, cache=cache)
    rest = as_integer(item_count, "wanted") - as_integer(combination_size, "wanted")
    rest_fact = factorial(rest, backend=be, cache=cache)

    denominator = be.multiply(be.from_int(k_fact), be.from_int(rest_fact))
    result = be.to_int(be.divide(be.from_int(n_fact), denominator))
    log.debug("C(%s, %s) via %s = %s", item_count, combination_size, be.name, abbr_int_fast(result))
    return result
