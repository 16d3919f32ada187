"""
Winner selection: maps a final rotation angle to an item index.

Angular convention matches the drawn wheel: slice 0 starts at -pi/2 (pointing
up) and slices follow clockwise, each spanning 2*pi * weight / total.
"""
from __future__ import annotations

from math import pi
from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from wheelpicker.model.items import Item

TWO_PI = 2.0 * pi


def rotation_to_fraction(rotation: float) -> float:
    """Position under the pointer as a fraction of a full turn, in [0, 1)."""
    normalized = ((-pi / 2.0 + rotation) % TWO_PI + TWO_PI) % TWO_PI
    return normalized / TWO_PI


def resolve(rotation: float, items: Sequence[Item]) -> int:
    """
    Return the index of the item under the pointer.

    If accumulated float error keeps the cumulative share just below 1.0, the
    last item wins. An empty sequence resolves to 0.
    """
    if not items:
        return 0

    total = float(max(1, sum(item.weight for item in items)))
    fraction = rotation_to_fraction(rotation)

    cumulative = 0.0
    for i, item in enumerate(items):
        cumulative += item.weight / total
        if fraction < cumulative:
            return i
    return len(items) - 1
