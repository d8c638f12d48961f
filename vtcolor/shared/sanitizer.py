#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/shared/sanitizer.py

import argparse
import re

from vtcolor.core import config as c
from vtcolor.core.color import parse_specifier
from vtcolor.core.deficiency import Deficiency
from vtcolor.core.errors import ColorSeqError, sanitize_for_log


def _extract_alpha_only(value: str) -> str:
    """
    Extracts only alphabetical characters from a string, lowercasing them.
    Useful for cleaning up deficiency names or format identifiers.
    """
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


def _extract_float(value: str):
    """
    Parses a float written with digits, an optional sign and a single
    decimal point. Anything else yields None.
    """
    if value is None:
        return None
    s = str(value).replace(" ", "")
    if not re.fullmatch(r"[-+]?(\d+\.?\d*|\.\d+)", s):
        return None
    return float(s)


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_specifier(v: str) -> str:
    """Validator for color specifiers; returns the raw text once it parses."""
    try:
        parse_specifier(v)
    except ColorSeqError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return v


def handle_deficiency(v: str) -> Deficiency:
    """Validator for deficiency names (protan, deuteranopia, ...)."""
    cleaned = _extract_alpha_only(v)
    try:
        return Deficiency.parse(cleaned)
    except ValueError:
        raw = sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid color deficiency: '{raw}'")


def handle_string_clean(v: str) -> str:
    """Validator for pure alphabetical string options (e.g., format names)."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raw = sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that rejects floats
    outside the [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_float(v)

        if val is None:
            raw = sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v or val > max_v:
            raise argparse.ArgumentTypeError(
                f"value out of range: '{val}' (expected {min_v} to {max_v})"
            )
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "specifier": handle_specifier,
    "deficiency": handle_deficiency,
    "list_format": handle_string_clean,
    "brightness_model": handle_string_clean,
    "severity": handle_float_range(c.SEVERITY_MIN, c.SEVERITY_MAX),
}
