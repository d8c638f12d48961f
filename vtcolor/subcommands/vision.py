#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/subcommands/vision.py

import argparse
import sys

from vtcolor.core import config as c
from vtcolor.core.color import resolve
from vtcolor.core.deficiency import Deficiency, DeficiencyConfig
from vtcolor.core.errors import ColorSeqError
from vtcolor.shared.logger import log_color_error, VtcolorArgumentParser
from vtcolor.shared.preview import print_color_block
from vtcolor.shared.sanitizer import INPUT_HANDLERS
from vtcolor.shared.truecolor import ensure_truecolor


def handle_vision_command(args: argparse.Namespace) -> None:
    if args.all_simulates:
        for key in c.SIMULATE_KEYS:
            setattr(args, key, True)

    base_config = DeficiencyConfig.DISABLED.with_changes(
        use_simple_algorithm=args.simple,
        severity=args.severity,
    )

    try:
        base = resolve(args.specifier)
    except ColorSeqError as e:
        log_color_error(e)
        sys.exit(2)

    print()
    print_color_block(base, f"{c.BOLD_WHITE}base color{c.RESET}")

    selected = [key for key in c.SIMULATE_KEYS if getattr(args, key, False)]
    if not selected:
        print()
        return

    print()
    perc_str = f"{args.severity * 100:.0f}%"
    for key in selected:
        config = base_config.with_changes(transform_enabled=True, deficiency=Deficiency(key))
        simulated = resolve(args.specifier, config)
        label = f"{c.MSG_BOLD_COLORS['info']}{key}{perc_str:>{16 - len(key)}}{c.RESET}"
        print_color_block(simulated, label)

    print()


def get_vision_parser() -> argparse.ArgumentParser:
    parser = VtcolorArgumentParser(
        prog="vtcolor vision",
        description="vtcolor vision: simulate color vision deficiency",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "specifier",
        type=INPUT_HANDLERS["specifier"],
        help=c.SPECIFIER_HELP
    )
    parser.add_argument(
        "-s", "--severity",
        type=INPUT_HANDLERS["severity"],
        default=1.0,
        help="simulation severity: 0.0 to 1.0 (default: 1.0)"
    )
    parser.add_argument(
        "--simple",
        action="store_true",
        help="use the single-matrix Vienot 1999 method instead of Brettel 1997"
    )
    simulate_group = parser.add_argument_group("simulation types")
    simulate_group.add_argument(
        '-all', '--all-simulates',
        action="store_true",
        help="show all simulation types"
    )
    simulate_group.add_argument(
        '-p', '--protan',
        action="store_true",
        help="simulate protanopia red-blind"
    )
    simulate_group.add_argument(
        '-d', '--deutan',
        action="store_true",
        help="simulate deuteranopia green-blind"
    )
    simulate_group.add_argument(
        '-t', '--tritan',
        action="store_true",
        help="simulate tritanopia blue-blind"
    )
    return parser


def main() -> None:
    parser = get_vision_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_vision_command(args)


if __name__ == "__main__":
    main()
