"""Constraint diagnostics and human-readable explanations for a meal plan."""

from typing import Dict, Iterable, List, Optional

from models.allocation import Assignment, Plan, UsageState, Violation
from models.ballot import Ballot
from models.diagnostics import ConstraintSummary
from models.slot import Slot
from config.defaults import CATALOG, PERIODS, USAGE_CAP


def summarize(
    plan: Plan,
    usage: UsageState,
    violations: List[Violation],
    cap: int = USAGE_CAP,
    catalog: Optional[List[str]] = None,
) -> ConstraintSummary:
    """Count conflicts and list items used more often than the cap allows."""
    catalog = list(catalog or CATALOG)
    usage_by_item = {item: usage.used(item) for item in catalog}
    over_used = [item for item in catalog if usage_by_item[item] > cap]

    return ConstraintSummary(
        violation_count=len(violations),
        over_used=over_used,
        status=f"{len(violations)} constraint conflicts, {len(over_used)} items over-used",
        usage_by_item=usage_by_item,
    )


def describe_violation(violation: Violation) -> str:
    return (
        f"{violation.day} {violation.period}: {violation.item} "
        f"({violation.votes} votes) - blocked by {violation.reason}"
    )


def explain_assignment(
    slot: Slot,
    assignment: Assignment,
    violations: Iterable[Violation],
) -> List[str]:
    """Produce a step-by-step explanation of how one slot was decided."""
    rejected = [v for v in violations if v.day == slot.day and v.period == slot.period]
    steps = []

    if assignment.item is None:
        steps.append(f"{slot.label}: no participant voted for this slot.")
        return steps

    steps.append(
        f"Step 1 - Votes: {assignment.votes} of {assignment.total_ballots} ballots "
        f"chose {assignment.item}"
    )

    if rejected:
        blocked = ", ".join(f"{v.item} ({v.reason})" for v in rejected)
        steps.append(f"Step 2 - Rejected higher-ranked candidates: {blocked}")
    else:
        steps.append("Step 2 - Top-voted candidate passed every rule")

    if assignment.violated:
        steps.append(
            f"Note: No candidate satisfied every rule => {assignment.item} was forced in"
        )

    steps.append(f"Step 3 - Result: {assignment.reason}")
    return steps


def satisfaction_score(ballots: Iterable[Ballot], plan: Plan) -> int:
    """Percentage of cast votes that match the item finally chosen for their slot."""
    cast = 0
    satisfied = 0
    for ballot in ballots:
        for slot, item in ballot.selections.items():
            if not item:
                continue
            cast += 1
            assignment = plan.get(slot)
            if assignment is not None and assignment.item == item:
                satisfied += 1
    return int(satisfied * 100 / cast + 0.5) if cast > 0 else 0


def usage_status(count: int, cap: int = USAGE_CAP) -> str:
    """Bucket an item's usage: over, at, under the cap, or unused."""
    if count > cap:
        return "over"
    if count == cap:
        return "at"
    if count > 0:
        return "under"
    return "unused"


def usage_chart_rows(
    plan: Plan,
    catalog: Optional[List[str]] = None,
    periods: Optional[List[str]] = None,
) -> List[Dict]:
    """Per-item win counts split by period, for items that won at least once."""
    catalog = list(catalog or CATALOG)
    periods = list(periods or PERIODS)

    rows = []
    for item in catalog:
        row = {"item": item}
        for period in periods:
            row[period] = sum(
                1 for slot, a in plan.items() if slot.period == period and a.item == item
            )
        row["total"] = sum(row[p] for p in periods)
        if row["total"] > 0:
            rows.append(row)
    return rows
