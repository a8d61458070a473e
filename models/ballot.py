from dataclasses import dataclass, field
from typing import Dict, Optional

from models.slot import Slot


@dataclass
class Ballot:
    participant: str
    selections: Dict[Slot, Optional[str]] = field(default_factory=dict)  # missing or None = no vote

    def get(self, day: str, period: str) -> Optional[str]:
        return self.selections.get(Slot(day, period)) or None

    def set(self, day: str, period: str, item: Optional[str]):
        self.selections[Slot(day, period)] = item or None

    @property
    def vote_count(self) -> int:
        return sum(1 for item in self.selections.values() if item)

    def copy(self) -> "Ballot":
        return Ballot(self.participant, dict(self.selections))
