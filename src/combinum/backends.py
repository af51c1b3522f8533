# -----------------------------------------------------------------------------
#  backends.py
#  Arithmetic strategies used by factorial and combination counting.
# -----------------------------------------------------------------------------
"""
Three interchangeable arithmetic backends, in priority order:

  gmpy2    GMP big integers (mpz); exact mul/div and a built-in factorial.
  decimal  Decimal-string arithmetic (bcmath style): every value is an exact
           base-10 string, computed in a local context wide enough to be exact.
  native   Host operators on Python int.

Python's int never overflows, so unlike fixed-width native arithmetic the
"native" tier is exact too; it is simply the slowest for very large n.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal, Inexact, localcontext
from importlib.util import find_spec
from typing import Any

from combinum.logging_utils import get_logger
from combinum.runtime import current as _rt_current
from combinum.utility import InvalidArgument

log = get_logger(__name__)

BACKEND_PRIORITY: tuple[str, ...] = ("gmpy2", "decimal", "native")
AUTO = "auto"


class ArithmeticBackend(ABC):
    name: str = ""
    has_factorial: bool = False

    @abstractmethod
    def from_int(self, value: int) -> Any: ...

    @abstractmethod
    def to_int(self, value: Any) -> int: ...

    @abstractmethod
    def multiply(self, a: Any, b: Any) -> Any: ...

    @abstractmethod
    def divide(self, a: Any, b: Any) -> Any:
        """Exact division; b must divide a."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class Gmpy2Backend(ArithmeticBackend):
    name = "gmpy2"
    has_factorial = True

    def __init__(self) -> None:
        import gmpy2  # noqa: PLC0415
        self._gmpy2 = gmpy2

    def from_int(self, value: int):
        return self._gmpy2.mpz(value)

    def to_int(self, value) -> int:
        return int(value)

    def multiply(self, a, b):
        return self._gmpy2.mul(self._gmpy2.mpz(a), self._gmpy2.mpz(b))

    def divide(self, a, b):
        return self._gmpy2.divexact(self._gmpy2.mpz(a), self._gmpy2.mpz(b))

    def factorial(self, n: int):
        return self._gmpy2.fac(n)


class DecimalStringBackend(ArithmeticBackend):
    name = "decimal"

    @staticmethod
    def _digits(*values: str) -> int:
        return sum(len(v) for v in values) + 2

    def from_int(self, value: int) -> str:
        return str(int(value))

    def to_int(self, value: str) -> int:
        return int(value)

    def multiply(self, a: str, b: str) -> str:
        a, b = str(a), str(b)
        with localcontext() as ctx:
            ctx.prec = self._digits(a, b)
            ctx.traps[Inexact] = True
            return format(Decimal(a) * Decimal(b), "f")

    def divide(self, a: str, b: str) -> str:
        a, b = str(a), str(b)
        with localcontext() as ctx:
            ctx.prec = self._digits(a, b)
            ctx.traps[Inexact] = True
            return format(Decimal(a) // Decimal(b), "f")


class NativeBackend(ArithmeticBackend):
    name = "native"

    def from_int(self, value: int) -> int:
        return int(value)

    def to_int(self, value: int) -> int:
        return int(value)

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def divide(self, a: int, b: int) -> int:
        return a // b


_FACTORIES: dict[str, type[ArithmeticBackend]] = {
    "gmpy2": Gmpy2Backend,
    "decimal": DecimalStringBackend,
    "native": NativeBackend,
}
_INSTANCES: dict[str, ArithmeticBackend] = {}


def is_available(name: str) -> bool:
    if name == "gmpy2":
        return find_spec("gmpy2") is not None
    return name in _FACTORIES


def available_backends() -> list[str]:
    """Backend names usable in this interpreter, highest precision first."""
    return [name for name in BACKEND_PRIORITY if is_available(name)]


def get_backend(name: str) -> ArithmeticBackend:
    key = name.strip().lower()
    if key not in _FACTORIES:
        raise InvalidArgument(
            f"Unknown arithmetic backend {name!r}; expected one of {', '.join((AUTO, *BACKEND_PRIORITY))}"
        )
    if not is_available(key):
        raise InvalidArgument(f"Arithmetic backend {key!r} is not available (pip install {key})")
    inst = _INSTANCES.get(key)
    if inst is None:
        inst = _FACTORIES[key]()
        _INSTANCES[key] = inst
    return inst


def select_backend(name: str | ArithmeticBackend | None = None) -> ArithmeticBackend:
    """
    Resolve the backend for one operation.

    None reads ARITHMETIC.BACKEND from the active runtime ("auto" by default);
    "auto" takes the first available entry of BACKEND_PRIORITY.
    """
    if isinstance(name, ArithmeticBackend):
        return name
    wanted = (name or _rt_current().backend or AUTO).strip().lower()
    if wanted != AUTO:
        return get_backend(wanted)
    for cand in BACKEND_PRIORITY:
        if is_available(cand):
            return get_backend(cand)
    raise InvalidArgument("No arithmetic backend available")
