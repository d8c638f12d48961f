#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/logic/color/engine.py

import argparse
import sys
from typing import Any, Dict, Optional

from vtcolor.core import config as c
from vtcolor.core.color import Color, IndexSpec, build, format_hex, parse_specifier
from vtcolor.core.deficiency import DeficiencyConfig, get_simulator
from vtcolor.core.errors import ColorSeqError
from vtcolor.core.luminance import get_luma
from vtcolor.shared.logger import log, log_color_error
from .renderer import render_color_info


def build_config(args: argparse.Namespace) -> DeficiencyConfig:
    """Translate CLI flags into the deficiency configuration."""
    deficiency = getattr(args, "simulate", None)
    changes = {
        "use_simple_algorithm": bool(getattr(args, "simple", False)),
        "brightness_model": getattr(args, "brightness", None) or c.BRIGHTNESS_ADDITIVE,
    }
    severity = getattr(args, "severity", None)
    if severity is not None:
        changes["severity"] = severity
    if deficiency is not None:
        changes["transform_enabled"] = True
        changes["deficiency"] = deficiency
    return DeficiencyConfig.DISABLED.with_changes(**changes)


def run(args: argparse.Namespace, parser: Optional[argparse.ArgumentParser] = None) -> None:
    """Main execution engine for the color command"""
    try:
        config = build_config(args)
        spec = parse_specifier(args.specifier)
        color = build(spec, config)
    except ColorSeqError as e:
        log_color_error(e)
        sys.exit(2)

    if getattr(args, "verbose", False):
        log("info", f"matched {type(spec).__name__} for '{args.specifier}'")
        if config.transform_enabled:
            simulator = get_simulator(config)
            log("info", f"simulated {config.deficiency.value} at severity {config.severity} with {simulator.__name__}")

    render_color_info(color, get_color_data(color, spec, config), args)


def get_color_data(color: Color, spec, config: DeficiencyConfig) -> Dict[str, Any]:
    """Helper to collect the informational fields with flat logic."""
    data = {
        "kind": color.kind.value,
        "luma": get_luma(color.r, color.g, color.b, config.brightness_model),
        "brightness": "bright" if color.is_bright else "dark" if color.is_dark else "neutral",
    }

    source_rgb = spec.entry.rgb if isinstance(spec, IndexSpec) else (spec.r, spec.g, spec.b)
    if isinstance(spec, IndexSpec):
        data["name"] = spec.entry.name
    if config.transform_enabled:
        data["original"] = format_hex(*source_rgb)

    return data
