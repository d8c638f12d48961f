#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/subcommands/command_registry.py

from . import vision

SUBCOMMANDS = {
    'vision': vision,
}
