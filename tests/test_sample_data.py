"""Tests for ballot factories and random fill."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from engine.constraints import available_items
from data.sample_data import (
    new_ballot, initialize_ballots, next_participant_name,
    quick_fill_random, generate_ballots_df,
)
from data.validator import validate_ballot_df
from config.defaults import DAYS, PERIODS


class TestFactories:
    def test_new_ballot_has_every_slot_unset(self):
        ballot = new_ballot("User 1")
        assert len(ballot.selections) == len(DAYS) * len(PERIODS)
        assert ballot.vote_count == 0

    def test_default_participants(self):
        ballots = initialize_ballots()
        assert list(ballots.keys()) == ["User 1", "User 2", "User 3", "User 4"]

    def test_next_participant_name(self):
        ballots = initialize_ballots(2)
        assert next_participant_name(ballots) == "User 3"

    def test_next_participant_name_skips_taken(self):
        ballots = initialize_ballots(3)
        ballots.pop("User 1")
        # two left (User 2, User 3) -> "User 3" is taken
        assert next_participant_name(ballots) == "User 4"


class TestQuickFillRandom:
    def test_does_not_modify_input(self):
        ballots = initialize_ballots(2)
        quick_fill_random(ballots, seed=1)
        assert all(b.vote_count == 0 for b in ballots.values())

    def test_seeded_fill_is_reproducible(self):
        ballots = initialize_ballots(3)
        assert quick_fill_random(ballots, seed=5) == quick_fill_random(ballots, seed=5)

    def test_filled_ballots_respect_own_rules(self):
        filled = quick_fill_random(initialize_ballots(3), seed=11)
        for name, ballot in filled.items():
            for day in DAYS:
                for period in PERIODS:
                    item = ballot.get(day, period)
                    if item:
                        assert item in available_items(filled, name, day, period)

    def test_default_catalog_fills_every_slot(self):
        filled = quick_fill_random(initialize_ballots(1), seed=3)
        assert filled["User 1"].vote_count == len(DAYS) * len(PERIODS)


class TestGenerateBallotsDf:
    def test_sample_table_is_valid(self):
        df = generate_ballots_df()
        assert validate_ballot_df(df).is_valid
        assert df["Participant"].nunique() == 4
