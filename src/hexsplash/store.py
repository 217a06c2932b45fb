from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict
from functools import partial
from typing import Iterable

import numpy as np

from .color_util import random_hex
from .palette import ColorSource, PaletteState

log = logging.getLogger(__name__)

DEFAULT_MAX_PALETTES = 256


class PaletteNotFound(KeyError):
    pass


def color_source(seed: int | None = None) -> ColorSource:
    """Random colour generator; a seed makes the sequence reproducible."""
    if seed is None:
        return random_hex
    return partial(random_hex, np.random.default_rng(seed))


class PaletteStore:
    """One PaletteState per open palette screen, keyed by an opaque id.

    Oldest palettes are discarded once ``max_palettes`` is reached.
    """

    def __init__(
        self,
        *,
        max_palettes: int = DEFAULT_MAX_PALETTES,
        generate: ColorSource = random_hex,
    ) -> None:
        if max_palettes < 1:
            raise ValueError("max_palettes must be ≥ 1")
        self.max_palettes = max_palettes
        self._generate = generate
        self._palettes: OrderedDict[str, PaletteState] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._palettes)

    def __contains__(self, pid: object) -> bool:
        with self._lock:
            return pid in self._palettes

    def create(self, colors: Iterable[str] | None = None) -> tuple[str, PaletteState]:
        state = PaletteState(colors, generate=self._generate)
        pid = uuid.uuid4().hex
        with self._lock:
            self._palettes[pid] = state
            while len(self._palettes) > self.max_palettes:
                old, _ = self._palettes.popitem(last=False)
                log.info("palette %s evicted", old)
        log.info("palette %s created", pid)
        return pid, state

    def get(self, pid: str) -> PaletteState:
        with self._lock:
            try:
                state = self._palettes[pid]
            except KeyError:
                raise PaletteNotFound(pid) from None
            # eviction drops the least recently used screen
            self._palettes.move_to_end(pid)
            return state

    def discard(self, pid: str) -> None:
        with self._lock:
            if self._palettes.pop(pid, None) is None:
                raise PaletteNotFound(pid)
        log.info("palette %s discarded", pid)


__all__ = ["PaletteNotFound", "PaletteStore", "color_source"]
