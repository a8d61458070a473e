"""Hard constraint checks shared by the scheduler and the ballot editor."""

from typing import Dict, Iterable, List, Optional, Set, Tuple

from models.ballot import Ballot
from models.slot import Slot
from data.validator import BallotValidationError
from config.defaults import (
    CATALOG, DAYS, PERIODS, USAGE_CAP,
    ADJACENCY_PREVIOUS, ADJACENCY_PREVIOUS_AND_NEXT, ADJACENCY_SCOPES,
    EDITING_ADJACENCY_SCOPE,
    RULE_SAME_DAY, RULE_CONSECUTIVE_DAYS, RULE_USAGE_CAP,
)


def adjacent_days(day: str, days: List[str], scope: str = ADJACENCY_PREVIOUS) -> List[str]:
    """Days linked to `day` for the adjacency rule, in day order."""
    if scope not in ADJACENCY_SCOPES:
        raise ValueError(f"Unknown adjacency scope: {scope!r}. Expected one of {ADJACENCY_SCOPES}.")

    idx = days.index(day)
    linked = []
    if idx > 0:
        linked.append(days[idx - 1])
    if scope == ADJACENCY_PREVIOUS_AND_NEXT and idx < len(days) - 1:
        linked.append(days[idx + 1])
    return linked


def is_legal(
    candidate: str,
    slot: Slot,
    usage_counts: Dict[str, int],
    same_day_items: Iterable[str],
    adjacent_day_items: Iterable[str],
    cap: int = USAGE_CAP,
) -> Tuple[bool, Optional[str]]:
    """Check a candidate item for a slot against the three hard rules.

    Rules are checked in precedence order and the first failure is reported:
    same-day exclusivity, adjacency exclusivity, then the usage cap.
    Returns (True, None) when the candidate is legal.
    """
    if candidate in same_day_items:
        return False, RULE_SAME_DAY

    if candidate in adjacent_day_items:
        return False, RULE_CONSECUTIVE_DAYS

    if usage_counts.get(candidate, 0) >= cap:
        return False, RULE_USAGE_CAP.format(cap=cap)

    return True, None


def available_items(
    ballots: Dict[str, Ballot],
    participant: str,
    day: str,
    period: str,
    rule_config: Optional[dict] = None,
) -> List[str]:
    """Items a participant may still pick for one slot of their own ballot.

    Applies the same rules as the scheduler, but only against this participant's
    other selections. The slot being edited is ignored, so a current choice stays
    selectable.
    """
    cfg = rule_config or {}
    catalog = cfg.get("catalog", CATALOG)
    days = cfg.get("days", DAYS)
    periods = cfg.get("periods", PERIODS)
    cap = cfg.get("usage_cap", USAGE_CAP)
    scope = cfg.get("editing_adjacency_scope", EDITING_ADJACENCY_SCOPE)

    if participant not in ballots:
        raise BallotValidationError([f"Unknown participant: {participant}"])
    if day not in days or period not in periods:
        raise BallotValidationError([f"Unknown slot {day} {period}"])
    ballot = ballots[participant]
    target = Slot(day, period)

    usage: Dict[str, int] = {}
    for d in days:
        for p in periods:
            if (d, p) == (day, period):
                continue
            item = ballot.get(d, p)
            if item:
                usage[item] = usage.get(item, 0) + 1

    same_day = _items_on(ballot, day, periods, exclude=period)
    adjacent: Set[str] = set()
    for linked_day in adjacent_days(day, days, scope):
        adjacent |= _items_on(ballot, linked_day, periods)

    return [
        item for item in catalog
        if is_legal(item, target, usage, same_day, adjacent, cap)[0]
    ]


def _items_on(ballot: Ballot, day: str, periods: List[str], exclude: Optional[str] = None) -> Set[str]:
    items = set()
    for p in periods:
        if p == exclude:
            continue
        item = ballot.get(day, p)
        if item:
            items.add(item)
    return items
