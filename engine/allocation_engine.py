"""Rule-based slot allocation — the core business engine."""

import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union

from models.ballot import Ballot
from models.slot import Slot
from models.tally import VoteTally
from models.allocation import Assignment, Plan, UsageState, Violation
from models.diagnostics import AllocationResult
from engine.aggregator import aggregate
from engine.constraints import adjacent_days, is_legal
from engine.explainer import summarize
from data.validator import BallotValidationError, validate_ballots, validate_rule_config
from config.defaults import (
    CATALOG, DAYS, PERIODS, USAGE_CAP, SCHEDULER_ADJACENCY_SCOPE,
)

logger = logging.getLogger(__name__)


def rank_candidates(tally_for_slot: Dict[str, int], catalog: List[str]) -> List[Tuple[str, int]]:
    """Items with at least one vote, most votes first; equal counts keep catalog order."""
    ordered = [(item, tally_for_slot.get(item, 0)) for item in catalog]
    ranked = sorted(ordered, key=lambda pair: -pair[1])
    return [(item, votes) for item, votes in ranked if votes > 0]


def select_for_slot(
    slot: Slot,
    candidates: List[Tuple[str, int]],
    usage: UsageState,
    linked_days: List[str],
    total_ballots: int,
    cap: int,
) -> Tuple[Assignment, List[Violation]]:
    """Pick the first legal candidate for one slot, or force the top one.

    Returns the assignment and the violations logged for candidates rejected
    before the winner (all of them when the selection is forced).
    """
    same_day = usage.items_on(slot.day)
    adjacent = set()
    for day in linked_days:
        adjacent |= usage.items_on(day)

    rejected = []
    for item, votes in candidates:
        legal, reason = is_legal(item, slot, usage.counts, same_day, adjacent, cap)
        if legal:
            return Assignment(
                item=item,
                votes=votes,
                total_ballots=total_ballots,
                reason=f"{votes} votes, no violations",
            ), rejected
        logger.debug("%s: %s rejected (%s, %d votes)", slot.label, item, reason, votes)
        rejected.append(Violation(slot.day, slot.period, item, reason, votes))

    if candidates:
        item, votes = candidates[0]
        logger.info("%s: no legal candidate, forcing %s (%d votes)", slot.label, item, votes)
        return Assignment(
            item=item,
            votes=votes,
            total_ballots=total_ballots,
            reason=f"Forced selection ({votes} votes)",
            violated=True,
        ), rejected

    return Assignment(
        item=None,
        votes=0,
        total_ballots=total_ballots,
        reason="No selection",
    ), rejected


def allocate(
    tally: VoteTally,
    days: Optional[List[str]] = None,
    periods: Optional[List[str]] = None,
    cap: Optional[int] = None,
    rule_config: Optional[dict] = None,
) -> Tuple[Plan, List[Violation], UsageState]:
    """Walk every slot in day/period order and assign one item per slot.

    Usage state is created here and only lives for this call, so repeated calls
    on the same tally give identical plans and violation logs.
    """
    cfg = rule_config or {}
    days = list(days or cfg.get("days", DAYS))
    periods = list(periods or cfg.get("periods", PERIODS))
    if cap is None:
        cap = cfg.get("usage_cap", USAGE_CAP)
    if cap < 0:
        raise ValueError(f"Usage cap must be non-negative, got {cap}")
    scope = cfg.get("scheduler_adjacency_scope", SCHEDULER_ADJACENCY_SCOPE)
    catalog = tally.catalog or cfg.get("catalog", CATALOG)

    usage = UsageState()
    plan: Plan = {}
    violations: List[Violation] = []

    for day in days:
        linked_days = adjacent_days(day, days, scope)
        for period in periods:
            slot = Slot(day, period)
            candidates = rank_candidates(tally.for_slot(slot), catalog)
            assignment, rejected = select_for_slot(
                slot, candidates, usage, linked_days, tally.ballot_count, cap,
            )
            violations.extend(rejected)
            if assignment.item is not None:
                usage.record(slot, assignment.item)
            plan[slot] = assignment

    return plan, violations, usage


def recompute(
    ballots: Union[Dict[str, Ballot], Iterable[Ballot]],
    rule_config: Optional[dict] = None,
) -> AllocationResult:
    """Full pipeline: validate ballots, tally them, allocate, then summarize.

    Call after every ballot change; nothing is cached between calls.
    """
    cfg = rule_config or {}
    ballot_list = list(ballots.values()) if isinstance(ballots, dict) else list(ballots)

    config_check = validate_rule_config(cfg)
    ballot_check = validate_ballots(ballots if isinstance(ballots, dict) else ballot_list, cfg)
    check = config_check.merge(ballot_check)
    if not check.is_valid:
        raise BallotValidationError(check.errors)

    cap = cfg.get("usage_cap", USAGE_CAP)
    tally = aggregate(
        ballot_list,
        catalog=cfg.get("catalog", CATALOG),
        days=cfg.get("days", DAYS),
        periods=cfg.get("periods", PERIODS),
    )
    plan, violations, usage = allocate(tally, cap=cap, rule_config=cfg)
    summary = summarize(plan, usage, violations, cap=cap, catalog=tally.catalog)

    logger.debug(
        "Allocated %d slots from %d ballots: %s", len(plan), tally.ballot_count, summary.status,
    )
    return AllocationResult(plan=plan, violations=violations, usage=usage, summary=summary)
