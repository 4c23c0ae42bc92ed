#!/usr/bin/env python3
"""
Color codec for the Kwaxel editor
Converts between color text, packed 0xAARRGGBB integers and RGBA sample arrays
"""

# Standard library imports
import re
from typing import NamedTuple, Union

# Third-party imports
import numpy as np

from .kwaxel_constants import ALPHA_MASK, ARGB_MASK, OPAQUE_BLACK

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")

ColorValue = Union[int, str]


class ColorChannels(NamedTuple):
    """Unpacked color channels, each in [0, 255]"""

    a: int
    r: int
    g: int
    b: int


def pack(channels) -> int:
    """Pack (a, r, g, b) channels into a 0xAARRGGBB integer"""
    a, r, g, b = channels
    return (
        ((int(a) & 0xFF) << 24)
        | ((int(r) & 0xFF) << 16)
        | ((int(g) & 0xFF) << 8)
        | (int(b) & 0xFF)
    )


def unpack(value: int) -> ColorChannels:
    """Split a packed 0xAARRGGBB integer into its channels"""
    value = int(value) & ARGB_MASK
    return ColorChannels(
        (value >> 24) & 0xFF,
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
    )


def parse_color(value: ColorValue) -> int:
    """
    Parse a color into packed ARGB.

    Accepts packed integers and the text forms #rgb, #rrggbb and #aarrggbb.
    Anything else yields opaque black; this never raises.
    """
    if isinstance(value, bool):
        return OPAQUE_BLACK
    if isinstance(value, (int, np.integer)):
        return int(value) & ARGB_MASK
    if not isinstance(value, str):
        return OPAQUE_BLACK

    text = value.strip()
    if text.startswith("#"):
        text = text[1:]
    if not _HEX_DIGITS.match(text):
        return OPAQUE_BLACK

    if len(text) == 3:
        r, g, b = (int(c * 2, 16) for c in text)
        return pack((0xFF, r, g, b))
    if len(text) == 6:
        return ALPHA_MASK | int(text, 16)
    if len(text) == 8:
        return int(text, 16)
    return OPAQUE_BLACK


def opaque(value: int) -> int:
    """Force a packed color to full alpha"""
    return (int(value) | ALPHA_MASK) & ARGB_MASK


def format_hex(value: int, include_alpha: bool = False) -> str:
    """Format a packed color as #rrggbb (or #aarrggbb)"""
    a, r, g, b = unpack(value)
    if include_alpha:
        return f"#{a:02x}{r:02x}{g:02x}{b:02x}"
    return f"#{r:02x}{g:02x}{b:02x}"


def rgba_to_argb(samples) -> np.ndarray:
    """Convert RGBA byte samples (flat or (..., 4)) into a flat uint32 ARGB array"""
    if isinstance(samples, (bytes, bytearray, memoryview)):
        samples = np.frombuffer(samples, dtype=np.uint8)
    rgba = np.asarray(samples, dtype=np.uint8).reshape(-1, 4).astype(np.uint32)
    packed = (rgba[:, 3] << 24) | (rgba[:, 0] << 16) | (rgba[:, 1] << 8) | rgba[:, 2]
    return packed.astype(np.uint32)


def argb_to_rgba(values) -> np.ndarray:
    """Convert packed ARGB values into an (N, 4) uint8 RGBA array"""
    argb = np.asarray(values, dtype=np.uint32).reshape(-1)
    rgba = np.empty((argb.size, 4), dtype=np.uint8)
    rgba[:, 0] = (argb >> 16) & 0xFF
    rgba[:, 1] = (argb >> 8) & 0xFF
    rgba[:, 2] = argb & 0xFF
    rgba[:, 3] = (argb >> 24) & 0xFF
    return rgba
