#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/shared/preview.py

import re

from vtcolor.core import config as c
from vtcolor.core.color import Color

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def print_color_block(color: Color, title: str = "color", end: str = "\n") -> None:
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)

    print(
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   "
        f"{color.background_escape}                {c.RESET}  "
        f"{c.BOLD_WHITE}{color.hex}{c.RESET}",
        end=end,
    )
