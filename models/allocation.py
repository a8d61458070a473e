from dataclasses import dataclass, field
from typing import Dict, Optional, Set

from models.slot import Slot


@dataclass
class Assignment:
    item: Optional[str]
    votes: int
    total_ballots: int
    reason: str
    violated: bool = False

    def to_dict(self) -> dict:
        return {
            "item": self.item,
            "votes": self.votes,
            "totalBallots": self.total_ballots,
            "reason": self.reason,
            "violated": self.violated,
        }


@dataclass
class Violation:
    day: str
    period: str
    item: str
    reason: str
    votes: int

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "period": self.period,
            "item": self.item,
            "reason": self.reason,
            "votes": self.votes,
        }


@dataclass
class UsageState:
    """Running state for one allocation pass. Never shared between passes."""
    counts: Dict[str, int] = field(default_factory=dict)
    day_items: Dict[str, Set[str]] = field(default_factory=dict)

    def used(self, item: str) -> int:
        return self.counts.get(item, 0)

    def items_on(self, day: str) -> Set[str]:
        return self.day_items.get(day, set())

    def record(self, slot: Slot, item: str):
        self.counts[item] = self.counts.get(item, 0) + 1
        self.day_items.setdefault(slot.day, set()).add(item)


# Slot -> Assignment, built in canonical slot order
Plan = Dict[Slot, Assignment]
