"""
Pytest fixtures for tests.

Provides a seeded random source, a helper that runs a wheel until it is idle,
and a session-wide QCoreApplication for the Qt store/driver tests.
"""
from typing import Callable

import numpy as np
import pytest
from PySide6.QtCore import QCoreApplication

from wheelpicker.model.items import Item, WheelData
from wheelpicker.model.wheel import WheelController

TEST_SEED = 20240601
"""Seed used by every deterministic spin test."""

MAX_TICKS = 100_000


class FixedRng:
    """Random source that always returns a fixed point of the requested range."""

    def __init__(self, position: float = 0.0) -> None:
        self.position = position
        self.calls = 0

    def uniform(self, low: float, high: float) -> float:
        self.calls += 1
        return low + (high - low) * self.position


@pytest.fixture(scope="session")
def qapp():
    """Qt objects with timers need an application instance."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(TEST_SEED)


@pytest.fixture
def fixed_rng() -> FixedRng:
    return FixedRng()


@pytest.fixture
def make_wheel(rng) -> Callable[..., WheelController]:
    """Build a controller from (name, weight) pairs, seeded for reproducibility."""
    def _make(*pairs: tuple, name: str = "Test wheel", **flags) -> WheelController:
        data = WheelData(name=name, items=[Item(name=n, weight=w) for n, w in pairs], **flags)
        return WheelController(data, rng=rng)
    return _make


@pytest.fixture
def run_until_idle() -> Callable[[WheelController, float], int]:
    """Tick a wheel until it stops spinning; returns how many ticks finalized a winner."""
    def _run(wheel: WheelController, dt: float = 1.0) -> int:
        finalized = 0
        for _ in range(MAX_TICKS):
            if not wheel.is_spinning():
                return finalized
            if wheel.tick(dt):
                finalized += 1
        raise AssertionError("Wheel never stopped spinning")
    return _run
