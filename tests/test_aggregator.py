"""Tests for vote aggregation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.ballot import Ballot
from models.slot import Slot
from engine.aggregator import aggregate, total_votes
from config.defaults import CATALOG, DAYS, PERIODS


def make_ballot(name="User 1", votes=None):
    ballot = Ballot(name)
    for (day, period), item in (votes or {}).items():
        ballot.set(day, period, item)
    return ballot


class TestAggregate:
    def test_counts_votes_per_slot(self):
        ballots = [
            make_ballot("A", {("Monday", "Lunch"): "Apple", ("Monday", "Dinner"): "Kiwi"}),
            make_ballot("B", {("Monday", "Lunch"): "Apple"}),
            make_ballot("C", {("Monday", "Lunch"): "Pear"}),
        ]
        tally = aggregate(ballots)

        assert tally.votes(Slot("Monday", "Lunch"), "Apple") == 2
        assert tally.votes(Slot("Monday", "Lunch"), "Pear") == 1
        assert tally.votes(Slot("Monday", "Dinner"), "Kiwi") == 1
        assert tally.votes(Slot("Tuesday", "Lunch"), "Apple") == 0
        assert tally.ballot_count == 3

    def test_every_slot_holds_full_catalog_in_order(self):
        tally = aggregate([])
        assert len(tally.counts) == len(DAYS) * len(PERIODS)
        for counts in tally.counts.values():
            assert list(counts.keys()) == CATALOG
            assert all(v == 0 for v in counts.values())

    def test_unset_selections_ignored(self):
        ballot = make_ballot(votes={("Monday", "Lunch"): None, ("Monday", "Dinner"): ""})
        tally = aggregate([ballot])
        assert sum(tally.for_slot(Slot("Monday", "Lunch")).values()) == 0
        assert sum(tally.for_slot(Slot("Monday", "Dinner")).values()) == 0
        assert tally.ballot_count == 1

    def test_does_not_mutate_ballots(self):
        ballot = make_ballot(votes={("Monday", "Lunch"): "Apple"})
        before = ballot.copy()
        aggregate([ballot])
        assert ballot == before

    def test_custom_catalog_and_slots(self):
        ballot = make_ballot(votes={("Sat", "Brunch"): "Tea"})
        tally = aggregate([ballot], catalog=["Tea", "Coffee"], days=["Sat"], periods=["Brunch"])
        assert tally.counts == {Slot("Sat", "Brunch"): {"Tea": 1, "Coffee": 0}}
        assert tally.catalog == ["Tea", "Coffee"]


class TestTotalVotes:
    def test_counts_cast_selections(self):
        ballots = [
            make_ballot("A", {("Monday", "Lunch"): "Apple", ("Monday", "Dinner"): None}),
            make_ballot("B", {("Friday", "Dinner"): "Kiwi", ("Saturday", "Lunch"): "Pear"}),
        ]
        assert total_votes(ballots) == 3

    def test_no_ballots(self):
        assert total_votes([]) == 0
