from __future__ import annotations

import tomllib as toml
from dataclasses import dataclass
from importlib.resources import files as pkg_files
from pathlib import Path
from typing import Any

from combinum.backends import AUTO, BACKEND_PRIORITY
from combinum.logging_utils import configure_logging
from combinum.runtime import APPLY, ensure_runtime_deps
from combinum.runtime import current as _rt_current
from combinum.utility import UserInputError

DEFAULT_PROFILE = "default.toml"


@dataclass
class Settings:
    """
    Wrap the full TOML dict (without the [_PROFILE_] section).
    .as_dict() feeds runtime.APPLY().

      - name:        resolved profile name (file stem if not given in [_PROFILE_])
      - description: one-line description from [_PROFILE_] or "(no description)"
    """
    data: dict[str, Any]
    name: str
    description: str
    _source: Path | None = None

    def as_dict(self) -> dict[str, Any]:
        return self.data


# --- I/O -------------------------------------------------------------------


def _parse_toml(text: str, label: str) -> dict[str, Any]:
    try:
        return toml.loads(text)
    except toml.TOMLDecodeError as e:
        lineno = getattr(e, "lineno", None)
        colno = getattr(e, "colno", None)
        msg = getattr(e, "msg", str(e))
        where = []
        if lineno is not None:
            where.append(f"line {lineno}")
        if colno is not None:
            where.append(f"column {colno}")
        loc = f" (at {', '.join(where)})" if where else ""
        # No traceback chaining
        raise UserInputError(f"reading {label}: {msg}{loc}.") from None


# --- Metadata handling -----------------------------------------------------


def _sanitize_oneline(s: str) -> str:
    return " ".join(str(s).split()) or "(no description)"


def _split_profile_data(raw: dict[str, Any], fallback_name: str) -> tuple[dict[str, Any], str, str]:
    """
    Extract [_PROFILE_] meta (name, description) and return:
      (settings_without_profile, resolved_name, resolved_description)
    """
    meta = raw.get("_PROFILE_") or {}
    data = {k: v for k, v in raw.items() if k != "_PROFILE_"}

    name = str(meta.get("name") or fallback_name)
    description = _sanitize_oneline(str(meta.get("description") or ""))
    return data, name, description


# --- Public API ------------------------------------------------------------


def load_settings(path: Path | str | None = None) -> Settings:
    """
    Load a TOML profile. Without a path the packaged profiles/default.toml is used.
    """
    if path is None:
        text = (pkg_files("combinum") / "profiles" / DEFAULT_PROFILE).read_text(encoding="utf-8")
        raw = _parse_toml(text, DEFAULT_PROFILE)
        stem, source = Path(DEFAULT_PROFILE).stem, None
    else:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Profile not found at {p}")
        raw = _parse_toml(p.read_text(encoding="utf-8"), p.name)
        stem, source = p.stem, p

    data, resolved_name, description = _split_profile_data(raw, stem)

    section = data.get("ARITHMETIC", {})
    if not isinstance(section, dict):
        raise UserInputError(f"ARITHMETIC must be a table, got {section!r}.")
    backend = section.get("BACKEND")
    if backend is not None:
        if not isinstance(backend, str):
            raise UserInputError(f"ARITHMETIC.BACKEND must be a string, got {backend!r}.")
        known = (AUTO, *BACKEND_PRIORITY)
        if backend.strip().lower() not in known:
            raise UserInputError(
                f"ARITHMETIC.BACKEND must be one of {', '.join(known)}, got {backend!r}."
            )

    return Settings(
        data=data,
        name=resolved_name,
        description=description,
        _source=source,
    )


def apply_profile(path: Path | str | None = None) -> Settings:
    """Load a profile, make it the active runtime and sync the log level."""
    settings = load_settings(path)
    APPLY(settings)
    configure_logging()

    if _rt_current().backend == "gmpy2" and not ensure_runtime_deps(strict=True):
        raise UserInputError("profile requests the gmpy2 backend but gmpy2 is not installed.")
    return settings
