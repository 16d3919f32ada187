"""
Wheel Items
===========
Defines the persisted records of a single wheel.

Classes:
    Item: A named, weighted candidate.
    WheelData: Everything that is saved for one wheel.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any

_MISSING = object()


def _expect(data: Dict[str, Any], key: str, kind: type, default: Any = _MISSING) -> Any:
    """Fetch `key`, falling back to `default` when absent; wrong types raise TypeError."""
    if key not in data:
        if default is _MISSING:
            raise KeyError(key)
        return default
    value = data[key]
    if not isinstance(value, kind):
        raise TypeError(f"Field '{key}' must be {kind.__name__}, got {type(value).__name__}")
    return value


@dataclass
class Item:
    """A candidate on the wheel. Weight is never allowed below 1."""
    name: str
    weight: int = 1

    def __post_init__(self) -> None:
        self.weight = max(1, int(self.weight))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Item:
        name = data["name"]
        if not isinstance(name, str):
            raise TypeError(f"Item name must be a string, got {type(name).__name__}")
        weight = data.get("weight", 1)
        if not isinstance(weight, int) or isinstance(weight, bool):
            raise TypeError(f"Item weight must be an integer, got {type(weight).__name__}")
        return Item(name=name, weight=weight)


@dataclass
class WheelData:
    """
    Aggregate root of one wheel.

    `items` is both the draw order and the order walked when resolving a winner.
    `winner_history` is most-recent-first.
    """
    name: str
    items: List[Item] = field(default_factory=list)
    removed_items: List[Item] = field(default_factory=list)
    winner_history: List[str] = field(default_factory=list)
    remove_winner: bool = False
    auto_spin: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "items": [item.to_dict() for item in self.items],
            "removed_items": [item.to_dict() for item in self.removed_items],
            "winner_history": list(self.winner_history),
            "remove_winner": self.remove_winner,
            "auto_spin": self.auto_spin,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> WheelData:
        """Deserialize a wheel; optional fields fall back to their defaults."""
        name = data["name"]
        if not isinstance(name, str):
            raise TypeError(f"Wheel name must be a string, got {type(name).__name__}")

        winner_history = _expect(data, "winner_history", list, [])
        if not all(isinstance(w, str) for w in winner_history):
            raise TypeError("Winner history must hold only strings")

        return WheelData(
            name=name,
            items=[Item.from_dict(d) for d in _expect(data, "items", list)],
            removed_items=[Item.from_dict(d) for d in _expect(data, "removed_items", list, [])],
            winner_history=list(winner_history),
            remove_winner=_expect(data, "remove_winner", bool, False),
            auto_spin=_expect(data, "auto_spin", bool, False),
        )
