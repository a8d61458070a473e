"""Ballot import/export — CSV/XLSX tables to typed ballots and plans to DataFrames."""

import pandas as pd
from typing import Dict, List, Optional

from models.ballot import Ballot
from models.slot import Slot
from models.allocation import Plan, Violation
from models.tally import VoteTally
from config.defaults import DAYS, PERIODS


def parse_ballots(df: pd.DataFrame) -> Dict[str, Ballot]:
    """Convert a long-format ballot DataFrame into Ballot objects keyed by participant.

    Participants keep their first-seen order; blank items are stored as no vote.
    """
    ballots: Dict[str, Ballot] = {}
    for _, row in df.iterrows():
        participant = str(row["Participant"]).strip()
        item = None
        if pd.notna(row.get("Item")) and str(row["Item"]).strip():
            item = str(row["Item"]).strip()
        ballot = ballots.setdefault(participant, Ballot(participant))
        ballot.set(str(row["Day"]).strip(), str(row["Period"]).strip(), item)
    return ballots


def ballots_to_df(
    ballots: Dict[str, Ballot],
    days: Optional[List[str]] = None,
    periods: Optional[List[str]] = None,
) -> pd.DataFrame:
    """Flatten ballots into one row per participant and slot, in canonical order."""
    days = days or DAYS
    periods = periods or PERIODS
    rows = []
    for name, ballot in ballots.items():
        for day in days:
            for period in periods:
                rows.append({
                    "Participant": name,
                    "Day": day,
                    "Period": period,
                    "Item": ballot.get(day, period) or "",
                })
    return pd.DataFrame(rows, columns=["Participant", "Day", "Period", "Item"])


def plan_to_df(plan: Plan) -> pd.DataFrame:
    """One row per slot with the chosen item and how it was chosen."""
    rows = []
    for slot, a in plan.items():
        rows.append({
            "Day": slot.day,
            "Period": slot.period,
            "Item": a.item or "",
            "Votes": f"{a.votes}/{a.total_ballots}",
            "Reason": a.reason,
            "Violation": "Yes" if a.violated else "No",
        })
    return pd.DataFrame(rows, columns=["Day", "Period", "Item", "Votes", "Reason", "Violation"])


def plan_grid_df(
    plan: Plan,
    days: Optional[List[str]] = None,
    periods: Optional[List[str]] = None,
) -> pd.DataFrame:
    """Plan as a day x period grid of item names (blank for unassigned slots)."""
    days = days or DAYS
    periods = periods or PERIODS
    grid = {period: [] for period in periods}
    for day in days:
        for period in periods:
            a = plan.get(Slot(day, period))
            label = ""
            if a is not None and a.item:
                label = f"{a.item} ⚠️" if a.violated else a.item
            grid[period].append(label)
    return pd.DataFrame(grid, index=days)


def violations_to_df(violations: List[Violation]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Day": v.day, "Period": v.period, "Item": v.item, "Votes": v.votes, "Blocked By": v.reason}
         for v in violations],
        columns=["Day", "Period", "Item", "Votes", "Blocked By"],
    )


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


def tally_to_df(
    tally: VoteTally,
    days: Optional[List[str]] = None,
    periods: Optional[List[str]] = None,
) -> pd.DataFrame:
    """Vote counts with one row per slot (canonical order) and one column per catalog item."""
    days = days or DAYS
    periods = periods or PERIODS
    index = []
    rows = []
    for day in days:
        for period in periods:
            slot = Slot(day, period)
            index.append(slot.label)
            rows.append([tally.votes(slot, item) for item in tally.catalog])
    return pd.DataFrame(rows, index=index, columns=tally.catalog)
