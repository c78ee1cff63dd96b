from __future__ import annotations

import os
import random

import pytest

# pygame sem janela de verdade
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class FixedMetrics:
    """Métricas fixas, sem depender das fontes instaladas."""

    def __init__(self, line_height: float = 20.0, glyph_width: float = 12.0):
        self._line_height = line_height
        self._glyph_width = glyph_width

    def line_height(self, size: int) -> float:
        return self._line_height

    def glyph_width(self, size: int) -> float:
        return self._glyph_width


class ManualClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, dt: float) -> float:
        self.now += dt
        return self.now


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def metrics():
    return FixedMetrics()


@pytest.fixture
def clock():
    return ManualClock()
