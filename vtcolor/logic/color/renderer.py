#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/logic/color/renderer.py

import argparse
from typing import Any, Dict

from vtcolor.core import config as c
from vtcolor.core.color import Color
from vtcolor.shared.preview import print_color_block


def _draw_bar(val: float, max_val: float, r_c: int, g_c: int, b_c: int) -> str:
    """Draw a ANSI-colored bar representation of a value."""
    total_len = 16
    abs_val = min(abs(val), max_val)
    percent = abs_val / max_val
    filled = max(0, min(total_len, int(total_len * percent)))
    empty = total_len - filled

    color_ansi = f"{c.ESC}[38;2;{r_c};{g_c};{b_c}m"
    empty_ansi = f"{c.ESC}[90m"

    return (
        f"{color_ansi}{'█' * filled}{c.RESET}"
        f"{empty_ansi}{'░' * empty}{c.RESET}"
    )


def _field(label: str, value: str) -> str:
    return f"{c.MSG_BOLD_COLORS['info']}{label:<18}{c.RESET}{c.BOLD_WHITE}: {value}{c.RESET}"


def render_color_info(color: Color, data: Dict[str, Any], args: argparse.Namespace) -> None:
    """Strictly prints color information. Data must be pre-calculated by the engine."""
    hide_bars = getattr(args, "hide_bars", False)
    r, g, b = color.rgb

    print()
    title = data.get("name") or "color"
    print_color_block(color, f"{c.BOLD_WHITE}{title}{c.RESET}")

    if "original" in data:
        print(_field("original", data["original"]))

    print()
    print(_field("hex", color.hex))
    print(_field("rgb", f"rgb({r}, {g}, {b})"))
    if not hide_bars:
        print(f"                    {c.BOLD_WHITE}R{c.RESET} {_draw_bar(r, 255, 255, 60, 60)}")
        print(f"                    {c.BOLD_WHITE}G{c.RESET} {_draw_bar(g, 255, 60, 255, 60)}")
        print(f"                    {c.BOLD_WHITE}B{c.RESET} {_draw_bar(b, 255, 60, 80, 255)}")

    print(_field("type", data["kind"]))
    print(_field("sequence", color.plain_sequence_enclosed))
    print(_field("foreground", repr(color.foreground_escape)))
    print(_field("background", repr(color.background_escape)))
    print(_field("brightness", f"{data['brightness']} (luma {data['luma']:.4f})"))
    print()
