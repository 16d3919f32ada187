from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from wheelpicker.model.io import IOManager
from wheelpicker.model.spin import RandomSource
from wheelpicker.model.state import WheelCollection
from wheelpicker.model.wheel import WheelController

logger = logging.getLogger(__name__)


@dataclass
class EditState:
    """UI-only scratch buffers for the current wheel. Never persisted."""
    input_text: str = ""
    editing_index: Optional[int] = None
    edit_buffer: str = ""
    percent_buffers: dict[int, str] = field(default_factory=dict)

    def reset(self) -> None:
        self.input_text = ""
        self.cancel_rename()
        self.percent_buffers.clear()

    def begin_rename(self, index: int, current_name: str) -> None:
        self.editing_index = index
        self.edit_buffer = current_name

    def drop_row(self, index: int) -> None:
        """Forget the percentage buffer of a removed row; later rows move up."""
        self.percent_buffers = {
            (i if i < index else i - 1): text
            for i, text in self.percent_buffers.items()
            if i != index
        }

    def cancel_rename(self) -> None:
        self.editing_index = None
        self.edit_buffer = ""


class Store(QObject):
    """Central state store with signals for the shell."""
    wheel_changed = Signal(object)
    wheels_changed = Signal()
    data_changed = Signal()
    spin_started = Signal()
    spin_finished = Signal(str)

    def __init__(self, collection: WheelCollection, save_path: Optional[str] = None) -> None:
        super().__init__()
        self.collection = collection
        self.edit = EditState()
        self.save_path = save_path
        if save_path:
            self.data_changed.connect(self.save)

    @property
    def wheel(self) -> WheelController:
        return self.collection.current_wheel

    def is_spinning(self) -> bool:
        return self.wheel.is_spinning()

    def save(self) -> None:
        if not self.save_path:
            return
        try:
            IOManager.save_collection(self.collection, self.save_path)
        except OSError as e:
            logger.error(f"Wheels were not saved: {e}")

    def _changed(self, changed: bool = True) -> bool:
        if changed:
            self.data_changed.emit()
        return changed

    # ---- ITEM COMMANDS ----

    def submit_input(self) -> bool:
        """Add an item from the input buffer; the buffer is cleared on success."""
        if not self.wheel.add_item(self.edit.input_text):
            return False
        self.edit.input_text = ""
        self.edit.percent_buffers.clear()
        return self._changed()

    def commit_rename(self) -> bool:
        index = self.edit.editing_index
        changed = False
        if index is not None and index < self.wheel.item_count():
            changed = self.wheel.rename(index, self.edit.edit_buffer)
        self.edit.cancel_rename()
        return self._changed(changed)

    def submit_percentage(self, index: int) -> bool:
        """Apply the typed percentage; on failure the text is kept for correction."""
        text = self.edit.percent_buffers.get(index, "")
        if not self.wheel.apply_percentage(index, text):
            return False
        self.edit.percent_buffers.clear()
        return self._changed()

    def _forget_row(self, index: int) -> None:
        if self.edit.editing_index == index:
            self.edit.cancel_rename()
        self.edit.percent_buffers.clear()

    def remove_permanently(self, index: int) -> bool:
        self._forget_row(index)
        self.wheel.remove_permanently(index)
        return self._changed()

    def remove_temporarily(self, index: int) -> bool:
        self._forget_row(index)
        self.wheel.remove_temporarily(index)
        return self._changed()

    def restore_all_removed(self) -> bool:
        self.edit.percent_buffers.clear()
        return self._changed(self.wheel.restore_all_removed() > 0)

    def clear_all(self) -> bool:
        self.wheel.clear_all()
        self.edit.cancel_rename()
        self.edit.percent_buffers.clear()
        return self._changed()

    def clear_history(self) -> bool:
        self.wheel.clear_history()
        return self._changed()

    def set_remove_winner(self, enabled: bool) -> bool:
        self.wheel.set_remove_winner(enabled)
        return self._changed()

    def set_auto_spin(self, enabled: bool) -> bool:
        self.wheel.set_auto_spin(enabled)
        return self._changed()

    # ---- SPIN LIFECYCLE ----

    def spin(self, rng: Optional[RandomSource] = None) -> bool:
        if not self.wheel.can_spin():
            return False
        self.edit.cancel_rename()
        self.wheel.spin(rng)
        self.spin_started.emit()
        return True

    def tick(self, dt: float) -> bool:
        if not self.wheel.tick(dt):
            return False
        wheel = self.wheel
        if wheel.data.remove_winner and wheel.last_winner_index is not None:
            self.edit.drop_row(wheel.last_winner_index)
        self.spin_finished.emit(wheel.latest_winner() or "")
        if wheel.is_spinning():
            # Auto-spin chained the next round
            self.spin_started.emit()
        return self._changed()

    # ---- WHEEL MANAGEMENT ----

    def _wheel_switched(self) -> None:
        self.edit.reset()
        self.wheels_changed.emit()
        self.wheel_changed.emit(self.wheel)

    def select_wheel(self, index: int) -> None:
        if index == self.collection.current:
            return
        self.collection.select(index)
        self._wheel_switched()

    def add_wheel(self, name: Optional[str] = None) -> WheelController:
        wheel = self.collection.add_wheel(name)
        self._wheel_switched()
        self._changed()
        return wheel

    def delete_wheel(self) -> bool:
        if not self.collection.delete_current():
            return False
        self._wheel_switched()
        return self._changed()

    def rename_wheel(self, name: str) -> bool:
        if not self.collection.rename_current(name):
            return False
        self.wheels_changed.emit()
        return self._changed()
