#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/shared/logger.py

import sys
import argparse

from vtcolor.core import config as c
from vtcolor.core.errors import ColorSeqError, InvalidSpecifier


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


def log_color_error(err: ColorSeqError) -> None:
    """Report a resolution failure, with the accepted forms for bad specifiers."""
    log("error", str(err))
    if isinstance(err, InvalidSpecifier):
        log("warning", f"expected {c.SPECIFIER_HELP}")


class VtcolorArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Log the argparse failure through the colored logger, point at
        --help and exit with status 2.
        """
        log('error', message)
        log('warning', f"use '{self.prog} --help' for more information")
        sys.exit(2)
