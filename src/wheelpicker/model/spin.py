"""
Spin Simulation
===============
A small per-wheel state machine that drives the rotation angle.

    IDLE --spin()--> DECELERATING --velocity < STOP_VELOCITY--> SETTLING
      ^                                                            |
      +------------------ settle delay elapsed -------------------+

The deceleration step is applied once per tick, not per second: the animation
runs at the shell's frame rate. The settle phase uses real elapsed time so the
pointer visibly rests for SETTLE_DELAY_SECONDS before a winner is committed.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import Optional, Protocol

import numpy as np

from wheelpicker.config import (
    INITIAL_VELOCITY_RANGE,
    VELOCITY_DECAY,
    STOP_VELOCITY,
    SETTLE_DELAY_SECONDS,
)

logger = logging.getLogger(__name__)

_DEFAULT_RNG = np.random.default_rng()


class RandomSource(Protocol):
    """Anything that can draw a uniform float (numpy Generator, random.Random)."""
    def uniform(self, low: float, high: float) -> float: ...


class SpinPhase(StrEnum):
    IDLE = "idle"
    DECELERATING = "decelerating"
    SETTLING = "settling"


@dataclass
class SpinState:
    """Ephemeral animation state. Never persisted."""
    rotation: float = 0.0
    velocity: float = 0.0
    is_spinning: bool = False
    has_stopped: bool = False
    stop_delay_elapsed: float = 0.0

    @property
    def phase(self) -> SpinPhase:
        if not self.is_spinning:
            return SpinPhase.IDLE
        if self.has_stopped:
            return SpinPhase.SETTLING
        return SpinPhase.DECELERATING


class SpinSimulator:
    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng: RandomSource = rng if rng is not None else _DEFAULT_RNG
        self.state = SpinState()

    @property
    def phase(self) -> SpinPhase:
        return self.state.phase

    @property
    def is_spinning(self) -> bool:
        return self.state.is_spinning

    @property
    def rotation(self) -> float:
        return self.state.rotation

    def spin(self, rng: Optional[RandomSource] = None) -> None:
        """
        Start a new spin with a random initial velocity.

        Args:
            rng: Optional random source. When given it replaces the current one,
                so chained spins keep drawing from it.
        """
        if rng is not None:
            self.rng = rng
        low, high = INITIAL_VELOCITY_RANGE
        velocity = float(self.rng.uniform(low, high))
        self.state = SpinState(rotation=0.0, velocity=velocity, is_spinning=True)
        logger.debug(f"Spin started with velocity {velocity:.4f} rad/tick.")

    def tick(self, dt: float) -> bool:
        """
        Advance the animation by one frame.

        Args:
            dt: Seconds elapsed since the previous frame (only used while settling).

        Returns:
            True exactly on the tick where the settle delay completes.
        """
        state = self.state
        if not state.is_spinning:
            return False

        if not state.has_stopped:
            state.rotation += state.velocity
            state.velocity *= VELOCITY_DECAY
            if state.velocity < STOP_VELOCITY:
                state.has_stopped = True
                logger.debug(f"Wheel came to rest at rotation {state.rotation:.4f} rad.")
            return False

        state.stop_delay_elapsed += dt
        if state.stop_delay_elapsed >= SETTLE_DELAY_SECONDS:
            state.is_spinning = False
            return True
        return False
