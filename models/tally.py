from dataclasses import dataclass, field
from typing import Dict, List

from models.slot import Slot


@dataclass
class VoteTally:
    """Per-slot vote counts. Each slot maps every catalog item (in catalog order) to its count."""
    counts: Dict[Slot, Dict[str, int]] = field(default_factory=dict)
    ballot_count: int = 0
    catalog: List[str] = field(default_factory=list)

    def for_slot(self, slot: Slot) -> Dict[str, int]:
        return self.counts.get(slot, {})

    def votes(self, slot: Slot, item: str) -> int:
        return self.counts.get(slot, {}).get(item, 0)
