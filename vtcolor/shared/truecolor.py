#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/shared/truecolor.py

import os
import sys
from typing import Mapping, Optional

from vtcolor.core import config as c


def supports_truecolor(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when COLORTERM already advertises 24-bit color."""
    env = os.environ if environ is None else environ
    return env.get(c.COLORTERM_VAR, "").strip().lower() in c.TRUECOLOR_TERMS


def ensure_truecolor() -> bool:
    """
    Advertise 24-bit color to child processes and renderers that consult
    COLORTERM. Returns False on Windows, where the variable is left alone.
    """
    if sys.platform == "win32":
        return False
    if not supports_truecolor():
        os.environ[c.COLORTERM_VAR] = c.TRUECOLOR_TERMS[0]
    return True
