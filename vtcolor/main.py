#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/main.py

import argparse
import json
import sys

from vtcolor import __version__
from vtcolor.core import config as c
from vtcolor.core.palette import color_names
from vtcolor.logic.color import engine
from vtcolor.subcommands.command_registry import SUBCOMMANDS
from vtcolor.shared.logger import log, VtcolorArgumentParser
from vtcolor.shared.sanitizer import INPUT_HANDLERS
from vtcolor.shared.truecolor import ensure_truecolor


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main color (inspector) command."""
    parser = VtcolorArgumentParser(
        prog="vtcolor",
        description="vtcolor: resolve terminal color specifiers and simulate color vision deficiency",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"vtcolor {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "--list-color-names",
        nargs="?",
        const="text",
        default=None,
        choices=["text", "json"],
        type=INPUT_HANDLERS["list_format"],
        help="list palette color names and exit",
    )
    parser.add_argument(
        "specifier",
        nargs="?",
        type=INPUT_HANDLERS["specifier"],
        help=c.SPECIFIER_HELP,
    )

    # Deficiency Simulation Group
    sim_group = parser.add_argument_group("color vision deficiency")
    sim_group.add_argument(
        "-S",
        "--simulate",
        type=INPUT_HANDLERS["deficiency"],
        default=None,
        help="simulate protan, deutan or tritan vision",
    )
    sim_group.add_argument(
        "-s",
        "--severity",
        type=INPUT_HANDLERS["severity"],
        default=None,
        help=f"simulation severity: 0.0 to 1.0 (default: {c.DEFAULT_SEVERITY})",
    )
    sim_group.add_argument(
        "--simple",
        action="store_true",
        help="use the single-matrix Vienot 1999 method instead of Brettel 1997",
    )

    # Output Flags
    info_group = parser.add_argument_group("output flags")
    info_group.add_argument(
        "-b",
        "--brightness",
        type=INPUT_HANDLERS["brightness_model"],
        choices=list(c.BRIGHTNESS_MODELS),
        default=c.BRIGHTNESS_ADDITIVE,
        help="brightness classification model (default: additive)",
    )
    info_group.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide visual color bars",
    )
    info_group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log how the specifier was resolved",
    )
    return parser


def handle_list_color_names_action(fmt: str) -> None:
    names = color_names()
    if fmt == "json":
        print(json.dumps(names, indent=2))
        return
    for name, color_id in names.items():
        print(f"{color_id:>3}  {name}")


def handle_color_command(args: argparse.Namespace) -> None:
    """Entry point for the core color command."""
    parser = get_color_parser()

    if args.list_color_names:
        handle_list_color_names_action(args.list_color_names)
        sys.exit(0)

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    if args.specifier is None:
        log("error", "a color specifier is required")
        log("warning", "use 'vtcolor --help' for more information")
        sys.exit(2)

    engine.run(args, parser)


def main() -> None:
    """Main entry point for vtcolor CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_color_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_color_command(args)


if __name__ == "__main__":
    main()
