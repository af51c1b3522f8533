# tests/test_config.py
from __future__ import annotations

import logging

import pytest

from combinum import UserInputError, apply_profile, load_settings, select_backend
from combinum import runtime
from combinum.logging_utils import get_logger


def _write(tmp_path, name: str, body: str):
    p = tmp_path / name
    p.write_text(body, encoding="utf-8")
    return p


def test_packaged_default_profile():
    s = load_settings()
    assert s.name == "default"
    assert s.as_dict()["ARITHMETIC"]["BACKEND"] == "auto"
    assert "_PROFILE_" not in s.as_dict()


def test_profile_metadata_and_fallback_name(tmp_path):
    p = _write(tmp_path, "exact.toml", '[ARITHMETIC]\nBACKEND = "decimal"\n')
    s = load_settings(p)
    assert s.name == "exact"
    assert s.description == "(no description)"


def test_apply_profile_switches_backend_and_debug(tmp_path):
    p = _write(
        tmp_path,
        "dbg.toml",
        '[_PROFILE_]\nname = "dbg"\ndescription = "native  ints,   verbose"\n'
        '[ARITHMETIC]\nBACKEND = "native"\n[BEHAVIOUR]\nDEBUG = true\n',
    )
    try:
        s = apply_profile(p)
        assert s.name == "dbg"
        assert s.description == "native ints, verbose"
        assert runtime.current().profile_name == "dbg"
        assert select_backend().name == "native"
        assert get_logger().level == logging.DEBUG
    finally:
        runtime.reset()
        apply_profile()
    assert get_logger().level == logging.INFO


def test_bad_toml_reports_location(tmp_path):
    p = _write(tmp_path, "broken.toml", "[ARITHMETIC\nBACKEND = 1\n")
    with pytest.raises(UserInputError, match=r"broken\.toml.*line 1"):
        load_settings(p)


def test_backend_must_be_string(tmp_path):
    p = _write(tmp_path, "num.toml", "[ARITHMETIC]\nBACKEND = 3\n")
    with pytest.raises(UserInputError, match="must be a string"):
        load_settings(p)


def test_arithmetic_must_be_table(tmp_path):
    p = _write(tmp_path, "flat.toml", 'ARITHMETIC = "native"\n')
    with pytest.raises(UserInputError, match="ARITHMETIC must be a table"):
        load_settings(p)


@pytest.mark.parametrize("name", ["bcmath", "gmp", ""])
def test_unknown_backend_rejected_at_load(tmp_path, name):
    p = _write(tmp_path, "odd.toml", f'[ARITHMETIC]\nBACKEND = "{name}"\n')
    with pytest.raises(UserInputError, match="must be one of"):
        load_settings(p)
    with pytest.raises(UserInputError):
        apply_profile(p)


@pytest.mark.parametrize("name", ["auto", "Native", " decimal "])
def test_known_backend_names_accepted(tmp_path, name):
    p = _write(tmp_path, "ok.toml", f'[ARITHMETIC]\nBACKEND = "{name}"\n')
    assert load_settings(p).as_dict()["ARITHMETIC"]["BACKEND"] == name


def test_missing_profile(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.toml")
