"""
Run with: python -m wheelpicker
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from wheelpicker.app.application import create_app
from wheelpicker.app.driver import SpinDriver
from wheelpicker.app.state import Store
from wheelpicker.config import SAVE_PATH, LOG_LEVEL
from wheelpicker.logging_config import setup_logging
from wheelpicker.model.io import IOManager

logger = logging.getLogger(__name__)


def main(save_path: Optional[str] = None) -> int:
    """Spin the selected wheel once (or until auto-spin finishes) and report the winner."""
    setup_logging(level=LOG_LEVEL)
    path = save_path or SAVE_PATH

    app = create_app()
    store = Store(IOManager.load_collection(path), save_path=path)
    driver = SpinDriver(store)

    wheel = store.wheel
    if not store.spin():
        logger.warning(f"Wheel '{wheel.name}' needs at least two items to spin.")
        return 1

    driver.idle.connect(app.quit)
    app.exec()

    winner = wheel.latest_winner()
    print(f"{wheel.name}: {winner}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
