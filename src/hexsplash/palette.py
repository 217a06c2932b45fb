from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List

from .color_util import Hex, canon_hex, is_color_dark, random_hex, text_color
from .export import contrast_ratio

log = logging.getLogger(__name__)

PALETTE_SIZE = 5

ColorSource = Callable[[], Hex]


@dataclass
class Cell:
    color: Hex
    locked: bool = False


class PaletteState:
    """Five (colour, lock) cells and the transitions a palette screen applies.

    Locked cells are never regenerated, neither by ``regenerate_one`` nor by
    ``regenerate_all``. The palette length never changes.
    """

    def __init__(
        self,
        colors: Iterable[str] | None = None,
        *,
        locks: Iterable[bool] | None = None,
        generate: ColorSource = random_hex,
    ) -> None:
        self._generate = generate
        if colors is None:
            self._colors: List[Hex] = [generate() for _ in range(PALETTE_SIZE)]
        else:
            self._colors = [canon_hex(c) for c in colors]
        self._locks: List[bool] = (
            [False] * PALETTE_SIZE if locks is None else [bool(x) for x in locks]
        )
        if len(self._colors) != PALETTE_SIZE or len(self._locks) != PALETTE_SIZE:
            raise ValueError(f"a palette holds exactly {PALETTE_SIZE} cells")

    def __len__(self) -> int:
        return len(self._colors)

    def __repr__(self) -> str:
        cells = ", ".join(
            f"{c}{'*' if locked else ''}" for c, locked in zip(self._colors, self._locks)
        )
        return f"PaletteState([{cells}])"

    @property
    def colors(self) -> tuple[Hex, ...]:
        return tuple(self._colors)

    @property
    def locks(self) -> tuple[bool, ...]:
        return tuple(self._locks)

    @property
    def cells(self) -> List[Cell]:
        return [Cell(c, locked) for c, locked in zip(self._colors, self._locks)]

    def _check_index(self, i: int) -> None:
        # No negative wrap-around: cell indices are positional.
        if not 0 <= i < len(self._colors):
            raise IndexError(f"cell index {i} out of range 0..{len(self._colors) - 1}")

    def regenerate_one(self, i: int) -> None:
        self._check_index(i)
        if self._locks[i]:
            log.debug("cell %d is locked; not regenerated", i)
            return
        self._colors[i] = self._generate()
        log.debug("cell %d -> %s", i, self._colors[i])

    def regenerate_all(self) -> None:
        for i, locked in enumerate(self._locks):
            if not locked:
                self._colors[i] = self._generate()
        log.debug("regenerated unlocked cells: %s", self)

    def toggle_lock(self, i: int) -> None:
        self._check_index(i)
        self._locks[i] = not self._locks[i]
        log.debug("cell %d locked=%s", i, self._locks[i])

    def unlock_all(self) -> None:
        self._locks = [False] * len(self._colors)
        log.debug("all cells unlocked")

    def snapshot(self) -> dict[str, Any]:
        """JSON-ready view of the palette, including label contrast per cell."""
        cells = []
        for i, (color, locked) in enumerate(zip(self._colors, self._locks)):
            label = text_color(color)
            cells.append(
                {
                    "index": i,
                    "color": color,
                    "locked": locked,
                    "dark": is_color_dark(color),
                    "text_color": label,
                    "contrast": round(contrast_ratio(color, label), 2),
                }
            )
        return {"colors": list(self._colors), "locks": list(self._locks), "cells": cells}


__all__ = ["Cell", "PALETTE_SIZE", "PaletteState"]
