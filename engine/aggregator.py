"""Vote aggregation: sums participant ballots into per-slot tallies."""

from typing import Iterable, List, Optional

from models.ballot import Ballot
from models.slot import canonical_slots
from models.tally import VoteTally
from config.defaults import CATALOG, DAYS, PERIODS


def aggregate(
    ballots: Iterable[Ballot],
    catalog: Optional[List[str]] = None,
    days: Optional[List[str]] = None,
    periods: Optional[List[str]] = None,
) -> VoteTally:
    """Count, for every slot, how many ballots chose each catalog item.

    Unset selections contribute nothing. Every slot gets an entry holding every
    catalog item in catalog order, so ties can later be broken by that order.
    """
    catalog = list(catalog or CATALOG)
    days = list(days or DAYS)
    periods = list(periods or PERIODS)

    slots = canonical_slots(days, periods)
    counts = {slot: {item: 0 for item in catalog} for slot in slots}

    ballot_count = 0
    for ballot in ballots:
        ballot_count += 1
        for slot in slots:
            item = ballot.get(slot.day, slot.period)
            if item:
                counts[slot][item] += 1

    return VoteTally(counts=counts, ballot_count=ballot_count, catalog=catalog)


def total_votes(ballots: Iterable[Ballot]) -> int:
    """Number of non-empty selections across all ballots."""
    return sum(b.vote_count for b in ballots)
