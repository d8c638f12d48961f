"""Tests for the shared CLI helpers."""

import argparse
import sys

import pytest

from vtcolor.core.deficiency import Deficiency
from vtcolor.core.errors import InvalidSpecifier, OutOfRange, sanitize_for_log
from vtcolor.shared.logger import log, log_color_error
from vtcolor.shared.preview import get_visible_len
from vtcolor.shared.sanitizer import INPUT_HANDLERS
from vtcolor.shared.truecolor import ensure_truecolor, supports_truecolor


def test_log_routes_by_level(capsys):
    log("info", "hello")
    log("error", "broken")
    captured = capsys.readouterr()
    assert "[info]" in captured.out and "hello" in captured.out
    assert "[error]" in captured.err and "broken" in captured.err


def test_log_color_error_hints_accepted_forms(capsys):
    log_color_error(InvalidSpecifier("1;2"))
    err = capsys.readouterr().err
    assert "'1;2'" in err
    assert "#RRGGBB" in err


def test_log_color_error_without_hint_for_range_errors(capsys):
    log_color_error(OutOfRange("severity", 2.0, 0.0, 1.0))
    err = capsys.readouterr().err
    assert "severity" in err
    assert "#RRGGBB" not in err


@pytest.mark.parametrize(
    "environ, expected",
    [({"COLORTERM": "truecolor"}, True), ({"COLORTERM": "24bit"}, True), ({"COLORTERM": "256"}, False), ({}, False)],
)
def test_supports_truecolor(environ, expected):
    assert supports_truecolor(environ) is expected


@pytest.mark.skipif(sys.platform == "win32", reason="COLORTERM is left alone on Windows")
def test_ensure_truecolor_sets_variable(monkeypatch):
    monkeypatch.delenv("COLORTERM", raising=False)
    assert ensure_truecolor() is True
    assert supports_truecolor()


def test_visible_len_ignores_escapes():
    assert get_visible_len("\x1b[1;37mprotan\x1b[0m") == 6


def test_specifier_handler():
    assert INPUT_HANDLERS["specifier"]("18") == "18"
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["specifier"]("256")


def test_deficiency_handler():
    assert INPUT_HANDLERS["deficiency"]("Deuteranopia") is Deficiency.DEUTAN
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["deficiency"]("green")


@pytest.mark.parametrize("raw, expected", [("0", 0.0), ("1", 1.0), ("0.25", 0.25), (".5", 0.5)])
def test_severity_handler(raw, expected):
    assert INPUT_HANDLERS["severity"](raw) == expected


@pytest.mark.parametrize("raw", ["1.5", "-0.1", "abc", "1e-1"])
def test_severity_handler_rejects(raw):
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["severity"](raw)


def test_sanitize_for_log_collapses_and_truncates():
    assert sanitize_for_log(None) == ""
    assert sanitize_for_log("  a \n\t b ") == "a b"
    long_text = sanitize_for_log("x" * 500)
    assert len(long_text) == 200
    assert long_text.endswith("...")


def test_handler_messages_are_truncated():
    with pytest.raises(argparse.ArgumentTypeError) as excinfo:
        INPUT_HANDLERS["deficiency"]("q" * 500)
    assert len(str(excinfo.value)) < 260
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["deficiency"]("protest")
