#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/core/luminance.py

from typing import Tuple

from . import config as c


def get_luma(r: int, g: int, b: int, model: str = c.BRIGHTNESS_ADDITIVE) -> float:
    if model == c.BRIGHTNESS_WEIGHTED:
        return c.LUMA_R * r + c.LUMA_G * g + c.LUMA_B * b
    # Legacy arithmetic: coefficients are summed with the channels, not multiplied.
    return float(r) + c.LUMA_R + float(g) + c.LUMA_G + float(b) + c.LUMA_B


def classify_brightness(r: int, g: int, b: int, model: str = c.BRIGHTNESS_ADDITIVE) -> Tuple[bool, bool]:
    """Return (is_bright, is_dark); a luma exactly at the midpoint is neither."""
    luma = get_luma(r, g, b, model)
    return luma > c.BRIGHTNESS_THRESHOLD, luma < c.BRIGHTNESS_THRESHOLD
