#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/core/color.py

import dataclasses
import enum
import functools
import re
from typing import Optional, Tuple, Union

from . import config as c
from .deficiency import DeficiencyConfig, simulate
from .errors import InvalidSpecifier, OutOfRange
from .luminance import classify_brightness
from .palette import PaletteEntry, lookup, lookup_name

_DECIMAL_RE = re.compile(r"[0-9]+")
_HEX_RE = re.compile(r"#[0-9A-Fa-f]{6}")


class ColorType(enum.Enum):
    INDEXED16 = "16"
    INDEXED255 = "255"
    TRUE_COLOR = "truecolor"


@dataclasses.dataclass(frozen=True)
class Color:
    """An immutable resolved color with its terminal sequences."""

    r: int
    g: int
    b: int
    kind: ColorType
    plain_sequence: str
    plain_sequence_enclosed: str
    foreground_escape: str
    background_escape: str
    hex: str
    is_bright: bool
    is_dark: bool
    indexed255_id: Optional[int] = None
    index16_id: Optional[int] = None

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b

    @property
    def color_id(self) -> Optional[int]:
        return self.index16_id if self.index16_id is not None else self.indexed255_id

    def __str__(self) -> str:
        return self.plain_sequence


# --- Specifier shapes ---

@dataclasses.dataclass(frozen=True)
class TripletSpec:
    r: int
    g: int
    b: int


@dataclasses.dataclass(frozen=True)
class IndexSpec:
    entry: PaletteEntry


@dataclasses.dataclass(frozen=True)
class HexSpec:
    r: int
    g: int
    b: int


Spec = Union[TripletSpec, IndexSpec, HexSpec]


def _strip_quotes(value: str) -> str:
    return str(value).strip().strip(c.QUOTE)


def _parse_channel(field: str, raw) -> int:
    field = field.strip()
    if not _DECIMAL_RE.fullmatch(field):
        raise InvalidSpecifier(raw, "channel is not a non-negative integer")
    value = int(field)
    if value > c.CHANNEL_MAX:
        raise InvalidSpecifier(raw, f"channel {value} is out of range 0 to {c.CHANNEL_MAX}")
    return value


def _index_spec(color_id: int, raw) -> IndexSpec:
    try:
        return IndexSpec(lookup(color_id))
    except OutOfRange as e:
        raise InvalidSpecifier(raw, str(e)) from e


def parse_specifier(specifier) -> Spec:
    """
    Classify a raw specifier into one of the accepted shapes.

    Shapes are tried in order: "R;G;B" triplet, palette id or name,
    then "#RRGGBB". Surrounding double quotes are ignored.
    """
    if isinstance(specifier, bool):
        raise InvalidSpecifier(specifier)
    if isinstance(specifier, int):
        return _index_spec(specifier, specifier)
    if not isinstance(specifier, str):
        raise InvalidSpecifier(specifier, "specifier must be a string or an integer")

    text = _strip_quotes(specifier)
    if not text:
        raise InvalidSpecifier(specifier, "empty color specifier")

    if c.TRIPLET_SEPARATOR in text:
        fields = text.split(c.TRIPLET_SEPARATOR)
        if len(fields) != 3:
            raise InvalidSpecifier(specifier, "expected exactly three fields <R>;<G>;<B>")
        r, g, b = (_parse_channel(field, specifier) for field in fields)
        return TripletSpec(r, g, b)

    if _DECIMAL_RE.fullmatch(text):
        return _index_spec(int(text), specifier)

    if not text.startswith(c.HEX_PREFIX):
        entry = lookup_name(text)
        if entry is not None:
            return IndexSpec(entry)
        raise InvalidSpecifier(specifier)

    if not _HEX_RE.fullmatch(text):
        raise InvalidSpecifier(specifier, f"expected {c.HEX_PREFIX} followed by {c.HEX_DIGITS} hex digits")
    value = int(text[1:], 16)
    return HexSpec((value & 0xFF0000) >> 16, (value & 0x00FF00) >> 8, value & 0x0000FF)


# --- Formatting ---

def format_hex(r: int, g: int, b: int) -> str:
    return f"{c.HEX_PREFIX}{r:02X}{g:02X}{b:02X}"


def format_escape(selector: int, kind: ColorType, plain_sequence: str) -> str:
    mode = c.TRUECOLOR_MODE if kind is ColorType.TRUE_COLOR else c.INDEXED_MODE
    return f"{c.ESC}[{selector};{mode};{plain_sequence}m"


def build(spec: Spec, config: Optional[DeficiencyConfig] = None) -> Color:
    """Assemble a Color from an already parsed specifier."""
    config = config or DeficiencyConfig.DISABLED
    entry = spec.entry if isinstance(spec, IndexSpec) else None
    r, g, b = entry.rgb if entry is not None else (spec.r, spec.g, spec.b)

    if config.transform_enabled:
        r, g, b = simulate(r, g, b, config)
        # A simulated color is no longer a palette slot
        entry = None

    if entry is not None:
        kind = ColorType.INDEXED16 if entry.color_id < c.SYSTEM_COLORS else ColorType.INDEXED255
        plain = str(entry.color_id)
        enclosed = plain
        if config.brightness_model == c.BRIGHTNESS_ADDITIVE:
            is_bright, is_dark = entry.is_bright, entry.is_dark
        else:
            is_bright, is_dark = classify_brightness(r, g, b, config.brightness_model)
    else:
        kind = ColorType.TRUE_COLOR
        plain = f"{r}{c.TRIPLET_SEPARATOR}{g}{c.TRIPLET_SEPARATOR}{b}"
        enclosed = f"{c.QUOTE}{plain}{c.QUOTE}"
        is_bright, is_dark = classify_brightness(r, g, b, config.brightness_model)

    return Color(
        r=r,
        g=g,
        b=b,
        kind=kind,
        plain_sequence=plain,
        plain_sequence_enclosed=enclosed,
        foreground_escape=format_escape(c.FG_SELECTOR, kind, plain),
        background_escape=format_escape(c.BG_SELECTOR, kind, plain),
        hex=format_hex(r, g, b),
        is_bright=is_bright,
        is_dark=is_dark,
        indexed255_id=entry.color_id if kind is ColorType.INDEXED255 else None,
        index16_id=entry.color_id if kind is ColorType.INDEXED16 else None,
    )


# --- Public entry points ---

def resolve(specifier, config: Optional[DeficiencyConfig] = None) -> Color:
    """Resolve a palette id, palette name, "R;G;B" or "#RRGGBB" into a Color."""
    return build(parse_specifier(specifier), config)


def from_rgb(r: int, g: int, b: int, config: Optional[DeficiencyConfig] = None) -> Color:
    for value in (r, g, b):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidSpecifier((r, g, b), "channels must be integers")
        if value < c.CHANNEL_MIN or value > c.CHANNEL_MAX:
            raise InvalidSpecifier((r, g, b), f"channel {value} is out of range 0 to {c.CHANNEL_MAX}")
    return build(TripletSpec(r, g, b), config)


def from_index(color_id: int, config: Optional[DeficiencyConfig] = None) -> Color:
    if isinstance(color_id, bool) or not isinstance(color_id, int):
        raise InvalidSpecifier(color_id, "palette id must be an integer")
    return build(_index_spec(color_id, color_id), config)


def from_name(name: str, config: Optional[DeficiencyConfig] = None) -> Color:
    entry = lookup_name(name)
    if entry is None:
        raise InvalidSpecifier(name, "unknown palette color name")
    return build(IndexSpec(entry), config)


def from_hex(hex_code: str, config: Optional[DeficiencyConfig] = None) -> Color:
    text = _strip_quotes(hex_code)
    if not text.startswith(c.HEX_PREFIX):
        text = c.HEX_PREFIX + text
    spec = parse_specifier(text)
    if not isinstance(spec, HexSpec):
        raise InvalidSpecifier(hex_code, "not a hex color")
    return build(spec, config)


@functools.lru_cache(maxsize=None)
def empty() -> Color:
    """Shared black (palette id 0) color, created on first use."""
    return resolve(0)
