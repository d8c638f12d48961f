#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: vtcolor/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

RGB_MAX = 255.0                    # 8-bit color depth limit
CHANNEL_MIN = 0                    # Lowest valid 8-bit channel value
CHANNEL_MAX = 255                  # Highest valid 8-bit channel value
SEVERITY_MIN = 0.0                 # No simulated deficiency
SEVERITY_MAX = 1.0                 # Complete (dichromatic) deficiency

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space
ROUND_HALF = 0.5                   # Offset used when rounding the linear segment

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to luma
LUMA_G = 0.7152                    # Green component contribution to luma
LUMA_B = 0.0722                    # Blue component contribution to luma
BRIGHTNESS_THRESHOLD = RGB_MAX / 2.0  # Midpoint: above is bright, below is dark

# Brightness models
BRIGHTNESS_ADDITIVE = "additive"   # r + LUMA_R + g + LUMA_G + b + LUMA_B (legacy arithmetic)
BRIGHTNESS_WEIGHTED = "weighted"   # r * LUMA_R + g * LUMA_G + b * LUMA_B
BRIGHTNESS_MODELS = (BRIGHTNESS_ADDITIVE, BRIGHTNESS_WEIGHTED)

# ==========================================
# Color Vision Deficiency Simulation
# ==========================================

DEFAULT_SEVERITY = 0.6             # Severity used when none is given

# Accepted spellings per deficiency, matched case-insensitively
DEFICIENCY_ALIASES = {
    "protan": ("protan", "protanopia", "protanomaly", "protanope"),
    "deutan": ("deutan", "deuteranopia", "deuteranomaly", "deuteranope"),
    "tritan": ("tritan", "tritanopia", "tritanomaly", "tritanope"),
}

# Brettel, Vienot & Mollon (1997), "Computerized simulation of color appearance
# for dichromats", J. Opt. Soc. Am. A 14, 2647-2655. Linear RGB, row-major.
# plane_a applies where dot(linear_rgb, normal) >= 0, plane_b elsewhere.
BRETTEL_PARAMS = {
    "protan": {
        "plane_a": (
            (0.14980, 1.19548, -0.34528),
            (0.10764, 0.84864, 0.04372),
            (0.00384, -0.00540, 1.00156),
        ),
        "plane_b": (
            (0.14570, 1.16172, -0.30742),
            (0.10816, 0.85291, 0.03892),
            (0.00386, -0.00524, 1.00139),
        ),
        "normal": (0.00048, 0.00393, -0.00441),
    },
    "deutan": {
        "plane_a": (
            (0.36477, 0.86381, -0.22858),
            (0.26294, 0.64245, 0.09462),
            (-0.02006, 0.02728, 0.99278),
        ),
        "plane_b": (
            (0.37298, 0.88166, -0.25464),
            (0.25954, 0.63506, 0.10540),
            (-0.01980, 0.02784, 0.99196),
        ),
        "normal": (-0.00281, -0.00611, 0.00892),
    },
    "tritan": {
        "plane_a": (
            (1.01277, 0.13548, -0.14826),
            (-0.01243, 0.86812, 0.14431),
            (0.07589, 0.80500, 0.11911),
        ),
        "plane_b": (
            (0.93678, 0.18979, -0.12657),
            (0.06154, 0.81526, 0.12320),
            (-0.37562, 1.12767, 0.24796),
        ),
        "normal": (0.03901, -0.02788, -0.01113),
    },
}

# Vienot, Brettel & Mollon (1999), "Digital video colourmaps for checking the
# legibility of displays by dichromats". One linear RGB matrix per deficiency.
VIENOT_MATRICES = {
    "protan": (
        (0.11238, 0.88762, 0.00000),
        (0.11238, 0.88762, -0.00000),
        (0.00401, -0.00401, 1.00000),
    ),
    "deutan": (
        (0.29275, 0.70725, 0.00000),
        (0.29275, 0.70725, -0.00000),
        (-0.02234, 0.02234, 1.00000),
    ),
    "tritan": (
        (1.00000, 0.14461, -0.14461),
        (0.00000, 0.85924, 0.14076),
        (-0.00000, 0.85924, 0.14076),
    ),
}

# ==========================================
# Terminal Sequences & Palette Layout
# ==========================================

ESC = "\x1b"                       # Control character introducing VT sequences
FG_SELECTOR = 38                   # SGR parameter selecting the foreground color
BG_SELECTOR = 48                   # SGR parameter selecting the background color
INDEXED_MODE = 5                   # SGR sub-parameter for 256-color palette indices
TRUECOLOR_MODE = 2                 # SGR sub-parameter for 24-bit RGB
TRIPLET_SEPARATOR = ";"            # Separator of "R;G;B" specifiers
HEX_PREFIX = "#"                   # Prefix of "#RRGGBB" specifiers
HEX_DIGITS = 6                     # Number of hex digits after the prefix
QUOTE = '"'                        # Stripped from both ends of a specifier

PALETTE_SIZE = 256                 # Number of indexed colors
SYSTEM_COLORS = 16                 # Ids below this are the 16-color set
CUBE_START = 16                    # First id of the 6x6x6 color cube
CUBE_SIZE = 6                      # Steps per axis of the color cube
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)  # Channel value of each cube step
GRAY_START = 232                   # First id of the grayscale ramp
GRAY_BASE = 8                      # Channel value of the first ramp step
GRAY_STEP = 10                     # Channel increment per ramp step

# xterm system colors 0-15
SYSTEM_RGB = (
    (0, 0, 0), (128, 0, 0), (0, 128, 0), (128, 128, 0),
    (0, 0, 128), (128, 0, 128), (0, 128, 128), (192, 192, 192),
    (128, 128, 128), (255, 0, 0), (0, 255, 0), (255, 255, 0),
    (0, 0, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
)

# ==========================================
# CLI UI & Data Structures
# ==========================================

SIMULATE_KEYS = ['protan', 'deutan', 'tritan']

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"

SPECIFIER_HELP = "palette id (0-255), palette name, R;G;B or #RRGGBB"

COLORTERM_VAR = "COLORTERM"
TRUECOLOR_TERMS = ("truecolor", "24bit")   # COLORTERM values that already mean 24-bit
