from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Slot:
    day: str
    period: str

    @property
    def label(self) -> str:
        return f"{self.day} {self.period}"


def canonical_slots(days: List[str], periods: List[str]) -> List[Slot]:
    """All slots in allocation order: each day in turn, each period within it."""
    return [Slot(day, period) for day in days for period in periods]
