"""Schema validation for ballots, uploaded ballot tables and rule settings."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Union
import pandas as pd

from models.ballot import Ballot
from models.slot import Slot
from config.defaults import CATALOG, DAYS, PERIODS, ADJACENCY_SCOPES


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.is_valid = self.is_valid and other.is_valid
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


class BallotValidationError(ValueError):
    """Raised at the engine boundary when ballots or settings fail validation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid ballots")


BALLOT_REQUIRED_COLUMNS = [
    "Participant",
    "Day",
    "Period",
    "Item",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_ballot_df(df: pd.DataFrame, rule_config: Optional[dict] = None) -> ValidationResult:
    """Validate a long-format ballot table (one row per participant and slot)."""
    cfg = rule_config or {}
    catalog = cfg.get("catalog", CATALOG)
    days = cfg.get("days", DAYS)
    periods = cfg.get("periods", PERIODS)

    result = _check_required_columns(df, BALLOT_REQUIRED_COLUMNS, "Ballots")
    if not result.is_valid:
        return result

    if df["Participant"].isna().any() or (df["Participant"].astype(str).str.strip() == "").any():
        result.is_valid = False
        result.errors.append("Ballots: Participant cannot be blank.")

    bad_days = sorted(set(df["Day"].astype(str).str.strip()) - set(days))
    if bad_days:
        result.is_valid = False
        result.errors.append(f"Ballots: Unknown days: {', '.join(bad_days)}")

    bad_periods = sorted(set(df["Period"].astype(str).str.strip()) - set(periods))
    if bad_periods:
        result.is_valid = False
        result.errors.append(f"Ballots: Unknown periods: {', '.join(bad_periods)}")

    items = df["Item"].dropna().astype(str).str.strip()
    bad_items = sorted(set(items[items != ""]) - set(catalog))
    if bad_items:
        result.is_valid = False
        result.errors.append(f"Ballots: Items outside the catalog: {', '.join(bad_items)}")

    dupes = df.duplicated(subset=["Participant", "Day", "Period"], keep=False)
    if dupes.any():
        result.is_valid = False
        dupe_rows = df[dupes][["Participant", "Day", "Period"]].drop_duplicates().to_dict("records")
        result.errors.append(f"Ballots: Duplicate slot entries: {dupe_rows}")

    return result


def validate_ballots(
    ballots: Union[Dict[str, Ballot], Iterable[Ballot]],
    rule_config: Optional[dict] = None,
) -> ValidationResult:
    """Check that every selection names a canonical slot and a catalog item."""
    cfg = rule_config or {}
    catalog = set(cfg.get("catalog", CATALOG))
    slots = {Slot(d, p) for d in cfg.get("days", DAYS) for p in cfg.get("periods", PERIODS)}

    result = ValidationResult()
    if isinstance(ballots, dict):
        for name, ballot in ballots.items():
            if ballot.participant != name:
                result.is_valid = False
                result.errors.append(
                    f"Ballot registered as '{name}' belongs to '{ballot.participant}'."
                )
        ballot_list = list(ballots.values())
    else:
        ballot_list = list(ballots)

    seen = set()
    for ballot in ballot_list:
        if ballot.participant in seen:
            result.is_valid = False
            result.errors.append(f"Duplicate participant: {ballot.participant}")
        seen.add(ballot.participant)

        for slot, item in ballot.selections.items():
            if slot not in slots:
                result.is_valid = False
                result.errors.append(
                    f"{ballot.participant}: Unknown slot {slot.day} {slot.period}"
                )
            elif item and item not in catalog:
                result.is_valid = False
                result.errors.append(
                    f"{ballot.participant}: '{item}' at {slot.label} is not in the catalog"
                )

        if result.is_valid and ballot.vote_count == 0:
            result.warnings.append(f"{ballot.participant} has not voted yet.")

    return result


def validate_rule_config(rule_config: Optional[dict] = None) -> ValidationResult:
    """Check rule overrides: non-negative cap, known adjacency scopes, non-empty unique orderings."""
    cfg = rule_config or {}
    result = ValidationResult()

    cap = cfg.get("usage_cap")
    if cap is not None and (not isinstance(cap, int) or isinstance(cap, bool) or cap < 0):
        result.is_valid = False
        result.errors.append(f"Usage cap must be a non-negative integer, got {cap!r}.")

    for key in ("scheduler_adjacency_scope", "editing_adjacency_scope"):
        scope = cfg.get(key)
        if scope is not None and scope not in ADJACENCY_SCOPES:
            result.is_valid = False
            result.errors.append(f"{key} must be one of {ADJACENCY_SCOPES}, got {scope!r}.")

    for key in ("catalog", "days", "periods"):
        values = cfg.get(key)
        if values is None:
            continue
        if len(values) == 0:
            result.is_valid = False
            result.errors.append(f"{key} cannot be empty.")
        elif len(set(values)) != len(values):
            result.is_valid = False
            result.errors.append(f"{key} contains duplicate entries.")

    if cfg.get("usage_cap") == 0:
        result.warnings.append("Usage cap is 0: every selection will be forced.")

    return result
