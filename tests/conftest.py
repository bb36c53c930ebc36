"""Shared fixtures: a scripted random source and ball placement helpers."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from arkanoid.engine import ArkanoidEngine  # noqa: E402


class ScriptedRng:
    """Stands in for ``numpy.random.Generator`` with a fixed fraction.

    Every draw lands at the same relative point of its range, so bursts
    are fully predictable.
    """

    def __init__(self, fraction: float = 0.0) -> None:
        self.fraction = fraction
        self.calls = 0

    def uniform(self, low: float, high: float) -> float:
        self.calls += 1
        return low + self.fraction * (high - low)

    def integers(self, low: int, high: int) -> int:
        self.calls += 1
        return low + int(self.fraction * (high - low))


def place_ball(engine: ArkanoidEngine, x: float, y: float, dx: float, dy: float) -> None:
    """Teleport the engine's ball; tests only."""
    engine._ball.serve(x, y, dx, dy)


@pytest.fixture
def rng() -> ScriptedRng:
    return ScriptedRng()


@pytest.fixture
def engine(rng: ScriptedRng) -> ArkanoidEngine:
    return ArkanoidEngine(rng=rng)
