"""
Application State (Data Model)
==============================
This module defines the top-level structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds every wheel and the index of the selected one
   in one place.
2. Persistence: This object is what gets serialized when saving.
3. Decoupling: The Qt store reads from this object; only controllers write
   to the wheels themselves.

Classes:
    WheelCollection: The list of wheels plus the current selection.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Dict, Any, List, Optional

from wheelpicker.config import DEFAULT_WHEEL_NAME, DEFAULT_WHEEL_ITEMS
from wheelpicker.model.items import WheelData
from wheelpicker.model.wheel import WheelController

logger = logging.getLogger(__name__)


def new_wheel(name: str) -> WheelController:
    """A fresh wheel seeded with the default items."""
    return WheelController.with_items(name, DEFAULT_WHEEL_ITEMS)


@dataclass
class WheelCollection:
    wheels: List[WheelController] = field(default_factory=list)
    current: int = 0

    @staticmethod
    def default() -> WheelCollection:
        return WheelCollection(wheels=[new_wheel(DEFAULT_WHEEL_NAME)], current=0)

    @property
    def current_wheel(self) -> WheelController:
        return self.wheels[self.current]

    def select(self, index: int) -> None:
        if not 0 <= index < len(self.wheels):
            raise IndexError(f"No wheel at index {index} (have {len(self.wheels)}).")
        self.current = index

    def add_wheel(self, name: Optional[str] = None) -> WheelController:
        """Append a seeded wheel and make it current."""
        if name is None or not name.strip():
            name = f"Wheel {len(self.wheels) + 1}"
        wheel = new_wheel(name.strip())
        self.wheels.append(wheel)
        self.current = len(self.wheels) - 1
        logger.info(f"Created wheel '{wheel.name}'.")
        return wheel

    def delete_current(self) -> bool:
        """Delete the selected wheel. The last remaining wheel cannot be deleted."""
        if len(self.wheels) <= 1:
            return False
        removed = self.wheels.pop(self.current)
        if self.current >= len(self.wheels):
            self.current = len(self.wheels) - 1
        logger.info(f"Deleted wheel '{removed.name}'.")
        return True

    def rename_current(self, name: str) -> bool:
        name = name.strip()
        if not name:
            return False
        self.current_wheel.data.name = name
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wheels": [wheel.data.to_dict() for wheel in self.wheels],
            "current": self.current,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> WheelCollection:
        """
        Rebuild the collection from its saved form.

        Raises:
            KeyError, TypeError, ValueError: the record is malformed or has no wheels.
        """
        wheels = [WheelController(WheelData.from_dict(d)) for d in data["wheels"]]
        if not wheels:
            raise ValueError("Saved collection contains no wheels.")
        current = int(data.get("current", 0))
        current = min(max(current, 0), len(wheels) - 1)
        return WheelCollection(wheels=wheels, current=current)
