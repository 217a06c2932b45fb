from __future__ import annotations

import string
from typing import Literal

import numpy as np

Hex = str
RGB = tuple[int, int, int]
TextColor = Literal["white", "black"]

HEX_DIGITS = "0123456789ABCDEF"

# Rec. 601 luma weights, scaled by 1000 so the threshold test stays exact.
_LUMA_WEIGHTS = (299, 587, 114)
DARK_THRESHOLD = 128

_default_rng = np.random.default_rng()


def canon_hex(s: str) -> Hex:
    """Normalize to '#RRGGBB'; accept 3- or 6-digit hex, any case, '#' optional."""
    if not isinstance(s, str):
        raise ValueError(f"hex colour must be a string, not {type(s).__name__}")
    raw = s.strip().lstrip("#")
    if len(raw) == 3 and all(c in string.hexdigits for c in raw):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise ValueError(f"invalid hex colour: {s!r}")
    return "#" + raw.upper()


def random_hex(rng: np.random.Generator | None = None) -> Hex:
    """Six independent uniform picks from 0-9A-F, prefixed with '#'."""
    picks = (rng or _default_rng).integers(0, 16, size=6)
    return "#" + "".join(HEX_DIGITS[int(i)] for i in picks)


def hex_to_rgb(hex_str: str) -> RGB:
    raw = canon_hex(hex_str)[1:]
    r, g, b = (int(raw[i : i + 2], 16) for i in (0, 2, 4))
    return r, g, b


def luma(hex_str: str) -> float:
    r, g, b = hex_to_rgb(hex_str)
    wr, wg, wb = _LUMA_WEIGHTS
    return (wr * r + wg * g + wb * b) / 1000.0


def is_color_dark(hex_str: str) -> bool:
    """True when Y = 0.299R + 0.587G + 0.114B is below 128.

    Evaluated in integers; Y == 128 is not dark.
    """
    r, g, b = hex_to_rgb(hex_str)
    wr, wg, wb = _LUMA_WEIGHTS
    return wr * r + wg * g + wb * b < DARK_THRESHOLD * 1000


def text_color(hex_str: str) -> TextColor:
    return "white" if is_color_dark(hex_str) else "black"


__all__ = [
    "HEX_DIGITS",
    "canon_hex",
    "hex_to_rgb",
    "is_color_dark",
    "luma",
    "random_hex",
    "text_color",
]
