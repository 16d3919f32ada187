"""
Configuration & Global Constants
================================
This module serves as the central registry for engine constants and the few
settings that can be overridden from the environment.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (decay factor, settle delay, ...)
   scattered throughout the model.
2. Deployment: The save file location and log level can be changed without
   touching the code (WHEELPICKER_SAVE_PATH, WHEELPICKER_LOG_LEVEL).

Exports:
    SAVE_PATH (str): Path of the JSON file holding all wheels.
    LOG_LEVEL (str): Logging level name used by the entry point.
"""
import os
from typing import Tuple


# Spin physics (applied once per rendered frame)
INITIAL_VELOCITY_RANGE: Tuple[float, float] = (0.5, 0.8)
VELOCITY_DECAY: float = 0.975
STOP_VELOCITY: float = 0.001
SETTLE_DELAY_SECONDS: float = 1.0

# A spin needs at least two candidates to be meaningful
MIN_SPIN_ITEMS: int = 2

# Shell frame timer (~60 FPS)
FRAME_INTERVAL_MS: int = 16

DEFAULT_WHEEL_NAME: str = "Wheel 1"
DEFAULT_WHEEL_ITEMS: Tuple[str, ...] = (
    "Pizza",
    "Sushi",
    "Tacos",
    "Curry",
    "Burgers",
    "Salad",
)

SAVE_PATH: str = os.getenv("WHEELPICKER_SAVE_PATH", "wheels.json")
LOG_LEVEL: str = os.getenv("WHEELPICKER_LOG_LEVEL", "INFO")
