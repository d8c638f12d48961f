#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/core/gamma.py

from . import config as c


def to_linear(channel: int) -> float:
    """Linearize an 8-bit sRGB component (IEC 61966-2-1)."""
    c_norm = channel / c.RGB_MAX
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def linear_to_srgb_float(l_val: float) -> float:
    """Apply sRGB gamma to a linear component, result in 0..1."""
    l_val = min(max(l_val, 0.0), 1.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (1.0 / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def to_srgb(l_val: float) -> int:
    """
    Encode a linear component back to an 8-bit sRGB channel.

    Values outside 0..1 clamp to 0 or 255. The linear toe rounds half up;
    the power segment truncates, which is how the reference simulation
    tables were generated, so results stay bit-compatible with them.
    """
    if l_val <= 0.0:
        return c.CHANNEL_MIN
    if l_val >= 1.0:
        return c.CHANNEL_MAX
    if l_val < c.LINEAR_TO_SRGB_TH:
        return int(c.ROUND_HALF + l_val * c.SRGB_SLOPE * c.RGB_MAX)
    return int(c.RGB_MAX * (c.SRGB_DIVISOR * (l_val ** (1.0 / c.SRGB_GAMMA)) - c.SRGB_OFFSET))
