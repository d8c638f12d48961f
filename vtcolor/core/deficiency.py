#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/core/deficiency.py

import dataclasses
import enum
from typing import Callable, Dict, Sequence, Tuple

from . import config as c
from .errors import OutOfRange
from .gamma import to_linear, to_srgb

RGB = Tuple[int, int, int]
Matrix = Sequence[Sequence[float]]


class Deficiency(enum.Enum):
    PROTAN = "protan"
    DEUTAN = "deutan"
    TRITAN = "tritan"

    @classmethod
    def parse(cls, text: str) -> "Deficiency":
        """Accept 'protan', 'Protanopia', 'DEUTAN', 'tritanomaly', ..."""
        key = str(text).strip().lower()
        for member in cls:
            if key in c.DEFICIENCY_ALIASES[member.value]:
                return member
        raise ValueError(f"unknown color deficiency: '{text}'")


@dataclasses.dataclass(frozen=True)
class DeficiencyConfig:
    """Settings read while constructing a color."""

    transform_enabled: bool = False
    use_simple_algorithm: bool = False
    deficiency: Deficiency = Deficiency.PROTAN
    severity: float = c.DEFAULT_SEVERITY
    brightness_model: str = c.BRIGHTNESS_ADDITIVE

    def __post_init__(self):
        _check_severity(self.severity)
        if self.brightness_model not in c.BRIGHTNESS_MODELS:
            raise ValueError(f"unknown brightness model: '{self.brightness_model}'")

    def with_changes(self, **changes) -> "DeficiencyConfig":
        return dataclasses.replace(self, **changes)


def _check_channels(r: int, g: int, b: int) -> None:
    for name, value in (("red", r), ("green", g), ("blue", b)):
        if value < c.CHANNEL_MIN or value > c.CHANNEL_MAX:
            raise OutOfRange(name, value, c.CHANNEL_MIN, c.CHANNEL_MAX)


def _check_severity(severity: float) -> None:
    if not (c.SEVERITY_MIN <= severity <= c.SEVERITY_MAX):
        raise OutOfRange("severity", severity, c.SEVERITY_MIN, c.SEVERITY_MAX)


def _apply(matrix: Matrix, vec: Sequence[float]) -> Tuple[float, float, float]:
    return (
        matrix[0][0] * vec[0] + matrix[0][1] * vec[1] + matrix[0][2] * vec[2],
        matrix[1][0] * vec[0] + matrix[1][1] * vec[1] + matrix[1][2] * vec[2],
        matrix[2][0] * vec[0] + matrix[2][1] * vec[1] + matrix[2][2] * vec[2],
    )


def _blend_to_srgb(simulated: Sequence[float], linears: Sequence[float], severity: float) -> RGB:
    """Mix the fully simulated and original linear colors, then re-encode."""
    return tuple(
        to_srgb(sim * severity + orig * (1.0 - severity))
        for sim, orig in zip(simulated, linears)
    )


def brettel1997(r: int, g: int, b: int, deficiency: Deficiency, severity: float) -> RGB:
    """
    Simulate a dichromat's view of an sRGB color with the two half-plane
    projection of Brettel, Vienot & Mollon (1997).

    Linear RGB space is split by a plane through the origin. Colors on the
    positive side of the separation normal use one projection matrix, the
    rest use the other.
    """
    _check_channels(r, g, b)
    _check_severity(severity)

    params = c.BRETTEL_PARAMS[deficiency.value]
    linears = (to_linear(r), to_linear(g), to_linear(b))

    normal = params["normal"]
    projection = linears[0] * normal[0] + linears[1] * normal[1] + linears[2] * normal[2]
    plane = params["plane_a"] if projection >= 0 else params["plane_b"]

    return _blend_to_srgb(_apply(plane, linears), linears, severity)


def vienot1999(r: int, g: int, b: int, deficiency: Deficiency, severity: float) -> RGB:
    """Simulate a dichromat's view with a single linear RGB matrix (Vienot 1999)."""
    _check_channels(r, g, b)
    _check_severity(severity)

    matrix = c.VIENOT_MATRICES[deficiency.value]
    linears = (to_linear(r), to_linear(g), to_linear(b))
    return _blend_to_srgb(_apply(matrix, linears), linears, severity)


Simulator = Callable[[int, int, int, Deficiency, float], RGB]

SIMULATORS: Dict[str, Simulator] = {
    "brettel": brettel1997,
    "vienot": vienot1999,
}


def get_simulator(config: DeficiencyConfig) -> Simulator:
    return SIMULATORS["vienot" if config.use_simple_algorithm else "brettel"]


def simulate(r: int, g: int, b: int, config: DeficiencyConfig) -> RGB:
    """Run the simulator selected by the config, ignoring transform_enabled."""
    simulator = get_simulator(config)
    return simulator(r, g, b, config.deficiency, config.severity)


DeficiencyConfig.DISABLED = DeficiencyConfig()
