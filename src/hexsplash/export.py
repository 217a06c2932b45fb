from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

from coloraide import Color

from .color_util import Hex, canon_hex

# format name -> (ColorAide space, to_string options); "hex" is the canonical form itself
FORMAT_MAP: Mapping[str, tuple[str, dict[str, Any]]] = {
    "rgb": ("srgb", {"comma": True}),
    "hsl": ("hsl", {"comma": True, "precision": 3}),
    "oklch": ("oklch", {"precision": 4}),
}


def supported_formats() -> tuple[str, ...]:
    return ("hex",) + tuple(FORMAT_MAP.keys())


def format_color(hex_str: str, fmt: str = "hex") -> str:
    """Render one palette colour in a CSS notation."""
    if fmt not in supported_formats():
        raise ValueError(f"unknown export format '{fmt}'")
    h = canon_hex(hex_str)
    if fmt == "hex":
        return h
    space, opts = FORMAT_MAP[fmt]
    return Color(h).convert(space).to_string(**opts)


def export_palette(colors: Iterable[str], fmt: str = "hex") -> list[str]:
    """Ordered export; position i always describes cell i."""
    return [format_color(c, fmt) for c in colors]


def share_payload(colors: Iterable[str], fmt: str = "hex") -> dict[str, Any]:
    """What the share action hands over: the list plus its JSON encoding."""
    exported = export_palette(colors, fmt)
    return {
        "format": fmt,
        "colors": exported,
        "payload": json.dumps(exported),
    }


def contrast_ratio(background: Hex, foreground: str) -> float:
    """WCAG 2.1 contrast between a cell colour and its label colour."""
    return float(Color(canon_hex(background)).contrast(foreground))


__all__ = [
    "FORMAT_MAP",
    "contrast_ratio",
    "export_palette",
    "format_color",
    "share_payload",
    "supported_formats",
]
