"""
Weight Bookkeeping
==================
Derives totals and per-item probabilities from the item weights and performs
the percentage -> weight inverse transform used when a user types a share.

All divisions are protected: totals that would be 0 are floored to 1.
"""
from __future__ import annotations

import logging
import math
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from wheelpicker.model.items import WheelData

logger = logging.getLogger(__name__)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def parse_percentage(text: str) -> Optional[float]:
    """
    Parse a user-typed percentage such as "40", " 12.5 " or "75%".

    Only the text around the whole entry is trimmed: "40 %" is rejected.
    "inf" and "nan" parse; the caller clamps them.

    Returns:
        The parsed value, or None when the text is not a number.
    """
    cleaned = text.strip().rstrip("%")
    if not cleaned or cleaned != cleaned.strip() or "_" in cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


class WeightModel:
    """Weight arithmetic over the items of one wheel."""

    def __init__(self, data: WheelData) -> None:
        self.data = data

    def total_weight(self) -> int:
        return max(1, sum(item.weight for item in self.data.items))

    def probability(self, index: int) -> float:
        return self.data.items[index].weight / self.total_weight()

    def percentage(self, index: int) -> float:
        return self.probability(index) * 100.0

    def percent_label(self, index: int) -> str:
        return str(round_half_away(self.percentage(index)))

    def average_weight(self) -> int:
        """Integer mean weight (min 1); 1 for an empty wheel."""
        if not self.data.items:
            return 1
        return max(1, self.total_weight() // len(self.data.items))

    def others_weight(self, index: int) -> int:
        return max(1, sum(item.weight for i, item in enumerate(self.data.items) if i != index))

    def apply_percentage(self, index: int, text: str) -> bool:
        """
        Set item `index` so that it takes the requested share of the wheel.

        The requested percentage is clamped to [1, max(1, 100 - (N - 1))] so
        every other item keeps at least 1%. Only the edited item changes; the
        ratios among the other items stay fixed.

        Returns:
            False (and nothing changes) when `text` is not a number.
        """
        item = self.data.items[index]
        requested = parse_percentage(text)
        if requested is None:
            logger.debug(f"Rejected percentage input {text!r} for item {index}.")
            return False

        n = len(self.data.items)
        ceiling = max(1.0, 100.0 - (n - 1))
        clamped = min(max(requested, 1.0), ceiling)

        if clamped >= 100.0:
            # A lone item always holds the whole wheel, whatever its weight.
            logger.debug(f"Item '{item.name}' is alone on the wheel; weight kept at {item.weight}.")
            return True

        others = self.others_weight(index)
        if math.isnan(clamped):
            new_weight = 1
        else:
            new_weight = max(1, round_half_away(clamped / (100.0 - clamped) * others))
        logger.debug(
            f"Item '{item.name}': {requested}% requested, {clamped}% applied, "
            f"weight {item.weight} -> {new_weight}."
        )
        item.weight = new_weight
        return True
