from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("combinum")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .arithmetic import combination_count, empty_factorial_cache, factorial
from .backends import ArithmeticBackend, available_backends, select_backend
from .cache import FactorialCache, default_cache
from .config import apply_profile, load_settings
from .enumeration import (
    Combination,
    CombinationSet,
    combination_key,
    get_combination,
    sorted_combinations,
)
from .runtime import APPLY, CFG
from .utility import InvalidArgument, UserInputError

__all__ = [
    "APPLY",
    "CFG",
    "ArithmeticBackend",
    "Combination",
    "CombinationSet",
    "FactorialCache",
    "InvalidArgument",
    "UserInputError",
    "__version__",
    "apply_profile",
    "available_backends",
    "combination_count",
    "combination_key",
    "default_cache",
    "empty_factorial_cache",
    "factorial",
    "get_combination",
    "load_settings",
    "select_backend",
    "sorted_combinations",
]
