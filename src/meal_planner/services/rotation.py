"""Sliding windows of recently used catalog items."""

from collections import deque
from dataclasses import dataclass, field


@dataclass
class UsageWindow:
    """Recently used item ids for one category, oldest evicted first."""

    capacity: int
    _ids: deque[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._ids = deque(maxlen=self.capacity)

    def record(self, *item_ids: str) -> None:
        """Remember item ids, skipping repeats within one call."""
        seen: set[str] = set()
        for item_id in item_ids:
            if item_id in seen:
                continue
            seen.add(item_id)
            self._ids.append(item_id)

    def snapshot(self) -> frozenset[str]:
        """Return the ids currently excluded from selection."""
        return frozenset(self._ids)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)


@dataclass
class RotationState:
    """Usage windows for every category during one generation."""

    protein: UsageWindow
    carb: UsageWindow
    vegetable: UsageWindow

    @classmethod
    def create(
        cls, protein_window: int, carb_window: int, vegetable_window: int
    ) -> "RotationState":
        return cls(
            protein=UsageWindow(protein_window),
            carb=UsageWindow(carb_window),
            vegetable=UsageWindow(vegetable_window),
        )
