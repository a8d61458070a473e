"""Ballot factories and synthetic vote data for the Meal Vote Planner."""

import random
import os
from typing import Dict, List, Optional

import pandas as pd

from models.ballot import Ballot
from engine.constraints import available_items
from data.loader import ballots_to_df
from config.defaults import (
    DAYS, PERIODS, DEFAULT_PARTICIPANT_COUNT, PARTICIPANT_PREFIX,
)


def new_ballot(participant: str, days: Optional[List[str]] = None, periods: Optional[List[str]] = None) -> Ballot:
    """An empty ballot with every slot explicitly unset."""
    ballot = Ballot(participant)
    for day in days or DAYS:
        for period in periods or PERIODS:
            ballot.set(day, period, None)
    return ballot


def initialize_ballots(count: int = DEFAULT_PARTICIPANT_COUNT, rule_config: Optional[dict] = None) -> Dict[str, Ballot]:
    """Empty ballots for `User 1` .. `User <count>`."""
    cfg = rule_config or {}
    days = cfg.get("days", DAYS)
    periods = cfg.get("periods", PERIODS)
    ballots = {}
    for i in range(1, count + 1):
        name = f"{PARTICIPANT_PREFIX} {i}"
        ballots[name] = new_ballot(name, days, periods)
    return ballots


def next_participant_name(ballots: Dict[str, Ballot]) -> str:
    """Name for a newly added participant, skipping names already taken."""
    n = len(ballots) + 1
    name = f"{PARTICIPANT_PREFIX} {n}"
    while name in ballots:
        n += 1
        name = f"{PARTICIPANT_PREFIX} {n}"
    return name


def quick_fill_random(
    ballots: Dict[str, Ballot],
    rule_config: Optional[dict] = None,
    seed: Optional[int] = None,
) -> Dict[str, Ballot]:
    """Fill every ballot slot with a random item the participant may still pick.

    Slots are visited in canonical order and each pick constrains the next ones.
    A slot with nothing available keeps its previous value. The input ballots are
    not modified; filled copies are returned.
    """
    cfg = rule_config or {}
    days = cfg.get("days", DAYS)
    periods = cfg.get("periods", PERIODS)
    rng = random.Random(seed)

    filled = {name: ballot.copy() for name, ballot in ballots.items()}
    for name in filled:
        for day in days:
            for period in periods:
                choices = available_items(filled, name, day, period, cfg)
                if choices:
                    filled[name].set(day, period, rng.choice(choices))
    return filled


def generate_ballots_df(count: int = DEFAULT_PARTICIPANT_COUNT, seed: int = 42) -> pd.DataFrame:
    """Generate a randomly filled long-format ballot table."""
    ballots = quick_fill_random(initialize_ballots(count), seed=seed)
    return ballots_to_df(ballots)


def generate_sample_csvs(output_dir: str):
    """Write a sample ballot CSV file to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_ballots_df().to_csv(os.path.join(output_dir, "ballots.csv"), index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    print("Sample ballot CSV generated in sample_files/")
