#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/__init__.py

__version__ = "0.1.0"

from vtcolor.core.color import (
    Color,
    ColorType,
    build,
    empty,
    from_hex,
    from_index,
    from_name,
    from_rgb,
    resolve,
)
from vtcolor.core.deficiency import (
    Deficiency,
    DeficiencyConfig,
    brettel1997,
    simulate,
    vienot1999,
)
from vtcolor.core.errors import ColorSeqError, InvalidSpecifier, OutOfRange
from vtcolor.core.gamma import to_linear, to_srgb
from vtcolor.core.palette import PaletteEntry, lookup, lookup_name

__all__ = [
    "Color",
    "ColorSeqError",
    "ColorType",
    "Deficiency",
    "DeficiencyConfig",
    "InvalidSpecifier",
    "OutOfRange",
    "PaletteEntry",
    "brettel1997",
    "build",
    "empty",
    "from_hex",
    "from_index",
    "from_name",
    "from_rgb",
    "lookup",
    "lookup_name",
    "resolve",
    "simulate",
    "to_linear",
    "to_srgb",
    "vienot1999",
]
