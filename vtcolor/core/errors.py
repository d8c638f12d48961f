#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/core/errors.py


def sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    s = " ".join(str(value).split())
    if len(s) > 200:
        s = s[:197] + "..."
    return s


class ColorSeqError(ValueError):
    """Base class for every color resolution failure."""


class InvalidSpecifier(ColorSeqError):
    """The specifier matches none of the accepted shapes, or a field is out of range."""

    def __init__(self, specifier, reason: str = "unrecognized color specifier"):
        self.specifier = specifier
        self.reason = reason
        super().__init__(f"{reason}: '{sanitize_for_log(specifier)}'")


class OutOfRange(ColorSeqError):
    """A channel, palette id or severity lies outside its valid interval."""

    def __init__(self, name: str, value, low, high):
        self.name = name
        self.value = value
        self.low = low
        self.high = high
        super().__init__(
            f"{name} out of range: '{sanitize_for_log(value)}' (expected {low} to {high})"
        )
