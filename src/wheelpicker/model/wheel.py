"""
Wheel Controller
================
The façade the shell talks to for one wheel.

Why is this file needed?
------------------------
1. Composition: It ties together the persisted WheelData, the WeightModel,
   the SpinSimulator and the selection resolver.
2. Single entry point: Every mutation of a wheel goes through here, so the
   percentage display cache can never drift out of step with the items.
3. Finalization: When a spin settles it records the winner, optionally sets it
   aside and, in auto-spin mode, chains the next spin.

Classes:
    WheelController: Commands, lifecycle and read accessors for one wheel.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from wheelpicker.config import MIN_SPIN_ITEMS
from wheelpicker.model.items import Item, WheelData
from wheelpicker.model.selection import resolve
from wheelpicker.model.spin import SpinSimulator, SpinPhase, RandomSource
from wheelpicker.model.weights import WeightModel

logger = logging.getLogger(__name__)


class WheelController:
    def __init__(self, data: WheelData, rng: Optional[RandomSource] = None) -> None:
        self.data = data
        self.weights = WeightModel(data)
        self.simulator = SpinSimulator(rng)
        # Lazily filled percentage strings, one slot per item
        self._percent_cache: List[Optional[str]] = [None] * len(data.items)
        self.last_winner_index: Optional[int] = None

    @classmethod
    def with_items(cls, name: str, item_names: Sequence[str], rng: Optional[RandomSource] = None) -> WheelController:
        data = WheelData(name=name, items=[Item(name=n) for n in item_names])
        return cls(data, rng=rng)

    # ---- READ ACCESSORS ----

    @property
    def name(self) -> str:
        return self.data.name

    def items(self) -> List[Item]:
        return self.data.items

    def removed_items(self) -> List[Item]:
        return self.data.removed_items

    def winner_history(self) -> List[str]:
        return self.data.winner_history

    def latest_winner(self) -> Optional[str]:
        return self.data.winner_history[0] if self.data.winner_history else None

    def item_count(self) -> int:
        return len(self.data.items)

    def is_spinning(self) -> bool:
        return self.simulator.is_spinning

    def phase(self) -> SpinPhase:
        return self.simulator.phase

    def current_rotation(self) -> float:
        return self.simulator.rotation

    def can_spin(self) -> bool:
        return not self.is_spinning() and self.item_count() >= MIN_SPIN_ITEMS

    def total_weight(self) -> int:
        return self.weights.total_weight()

    def probability(self, index: int) -> float:
        return self.weights.probability(index)

    def percent_label(self, index: int) -> str:
        """Rounded percentage of item `index` as display text (cached)."""
        self._sync_cache()
        label = self._percent_cache[index]
        if label is None:
            label = self.weights.percent_label(index)
            self._percent_cache[index] = label
        return label

    # ---- CACHE HELPERS ----

    def _sync_cache(self) -> None:
        n = len(self.data.items)
        if len(self._percent_cache) > n:
            del self._percent_cache[n:]
        elif len(self._percent_cache) < n:
            self._percent_cache.extend([None] * (n - len(self._percent_cache)))

    def _invalidate_cache(self) -> None:
        self._percent_cache = [None] * len(self.data.items)

    # ---- MUTATION COMMANDS ----

    def add_item(self, name: str) -> bool:
        """Append a new item weighted at the current average weight."""
        name = name.strip()
        if not name:
            return False
        weight = self.weights.average_weight()
        self.data.items.append(Item(name=name, weight=weight))
        self._invalidate_cache()
        logger.debug(f"[{self.name}] Added '{name}' with weight {weight}.")
        return True

    def rename(self, index: int, new_name: str) -> bool:
        item = self.data.items[index]
        new_name = new_name.strip()
        if not new_name:
            return False
        item.name = new_name
        return True

    def remove_permanently(self, index: int) -> Item:
        item = self.data.items.pop(index)
        self._invalidate_cache()
        logger.debug(f"[{self.name}] Deleted '{item.name}'.")
        return item

    def remove_temporarily(self, index: int) -> Item:
        item = self.data.items.pop(index)
        self.data.removed_items.append(item)
        self._invalidate_cache()
        logger.debug(f"[{self.name}] Set aside '{item.name}'.")
        return item

    def restore_all_removed(self) -> int:
        count = len(self.data.removed_items)
        if count == 0:
            return 0
        self.data.items.extend(self.data.removed_items)
        self.data.removed_items.clear()
        self._invalidate_cache()
        logger.debug(f"[{self.name}] Restored {count} item(s).")
        return count

    def clear_all(self) -> None:
        """Drop all items and the winner history. Removed items are kept."""
        self.data.items.clear()
        self.data.winner_history.clear()
        self._invalidate_cache()

    def clear_history(self) -> None:
        self.data.winner_history.clear()

    def set_remove_winner(self, enabled: bool) -> None:
        self.data.remove_winner = bool(enabled)

    def set_auto_spin(self, enabled: bool) -> None:
        self.data.auto_spin = bool(enabled)

    def apply_percentage(self, index: int, text: str) -> bool:
        if not self.weights.apply_percentage(index, text):
            return False
        self._invalidate_cache()
        return True

    # ---- LIFECYCLE ----

    def spin(self, rng: Optional[RandomSource] = None) -> None:
        """Start a spin. Callers check `can_spin()` first."""
        self.simulator.spin(rng)
        logger.info(f"[{self.name}] Spinning with {self.item_count()} item(s).")

    def tick(self, dt: float) -> bool:
        """
        Advance one frame.

        Returns:
            True on the tick where a winner is finalized (the caller should persist).
        """
        if not self.simulator.tick(dt):
            return False
        if not self.data.items:
            logger.warning(f"[{self.name}] Spin settled on an empty wheel; no winner recorded.")
            return False
        self._finalize()
        return True

    def _finalize(self) -> None:
        index = resolve(self.simulator.rotation, self.data.items)
        self.last_winner_index = index
        winner = self.data.items[index].name
        self.data.winner_history.insert(0, winner)
        logger.info(f"[{self.name}] Winner: '{winner}'.")

        if self.data.remove_winner:
            self.remove_temporarily(index)

        if self.data.auto_spin and self.data.remove_winner and len(self.data.items) > 1:
            self.spin()
