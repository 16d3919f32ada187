"""
Frame Driver
============
Calls Store.tick(dt) once per frame while a spin is running.

Why is this file needed?
------------------------
1. Timing: The engine is frame driven. A QTimer provides the frames and a
   QElapsedTimer measures the real time between them (used by the settle delay).
2. Signals: The shell redraws on `frame_advanced` and stops animating on `idle`.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, QElapsedTimer, Signal

from wheelpicker.app.state import Store
from wheelpicker.config import FRAME_INTERVAL_MS

logger = logging.getLogger(__name__)


class SpinDriver(QObject):
    frame_advanced = Signal(float)  # current rotation in radians
    idle = Signal()

    def __init__(self, store: Store, interval_ms: int = FRAME_INTERVAL_MS) -> None:
        super().__init__()
        self.store = store
        self._clock = QElapsedTimer()
        self.timer = QTimer(self)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self._on_timeout)
        self.store.spin_started.connect(self.start)
        self.store.wheel_changed.connect(self._on_wheel_changed)

    def is_running(self) -> bool:
        return self.timer.isActive()

    def start(self) -> None:
        if self.timer.isActive():
            return
        self._clock.start()
        self.timer.start()
        logger.debug("Frame driver started.")

    def stop(self) -> None:
        if not self.timer.isActive():
            return
        self.timer.stop()
        self._clock.invalidate()
        logger.debug("Frame driver stopped.")

    def _on_wheel_changed(self, wheel) -> None:
        # A spin left running on another wheel resumes when it is shown again
        if self.store.is_spinning():
            self.start()

    def _on_timeout(self) -> None:
        dt = self._clock.restart() / 1000.0
        self.step(dt)

    def step(self, dt: float) -> None:
        """Advance the current wheel by one frame of `dt` seconds."""
        self.store.tick(dt)
        self.frame_advanced.emit(self.store.wheel.current_rotation())
        if not self.store.is_spinning():
            self.stop()
            self.idle.emit()
