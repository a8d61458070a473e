"""Tests for ballot and rule validation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pandas as pd

from models.ballot import Ballot
from data.validator import (
    BallotValidationError, ValidationResult, validate_ballot_df, validate_ballots, validate_rule_config,
)


def make_df(rows):
    return pd.DataFrame(rows, columns=["Participant", "Day", "Period", "Item"])


class TestValidateBallotDf:
    def test_valid_table(self):
        df = make_df([
            ["User 1", "Monday", "Lunch", "Apple"],
            ["User 1", "Monday", "Dinner", None],
            ["User 2", "Monday", "Lunch", ""],
        ])
        result = validate_ballot_df(df)
        assert result.is_valid
        assert result.errors == []

    def test_missing_columns(self):
        df = pd.DataFrame({"Participant": ["User 1"], "Day": ["Monday"]})
        result = validate_ballot_df(df)
        assert not result.is_valid
        assert "Period" in result.errors[0]
        assert "Item" in result.errors[0]

    def test_empty_table(self):
        result = validate_ballot_df(make_df([]))
        assert not result.is_valid
        assert any("no data rows" in e for e in result.errors)

    def test_unknown_values(self):
        df = make_df([
            ["User 1", "Sunday", "Lunch", "Apple"],
            ["User 1", "Monday", "Breakfast", "Apple"],
            ["User 1", "Tuesday", "Lunch", "Durian"],
        ])
        result = validate_ballot_df(df)
        assert not result.is_valid
        joined = " ".join(result.errors)
        assert "Sunday" in joined
        assert "Breakfast" in joined
        assert "Durian" in joined

    def test_duplicate_slot(self):
        df = make_df([
            ["User 1", "Monday", "Lunch", "Apple"],
            ["User 1", "Monday", "Lunch", "Kiwi"],
        ])
        result = validate_ballot_df(df)
        assert not result.is_valid
        assert any("Duplicate" in e for e in result.errors)

    def test_blank_participant(self):
        result = validate_ballot_df(make_df([[" ", "Monday", "Lunch", "Apple"]]))
        assert not result.is_valid


class TestValidateBallots:
    def test_valid(self):
        ballot = Ballot("User 1")
        ballot.set("Monday", "Lunch", "Apple")
        result = validate_ballots({"User 1": ballot})
        assert result.is_valid
        assert result.warnings == []

    def test_empty_ballot_warns(self):
        result = validate_ballots([Ballot("User 1")])
        assert result.is_valid
        assert result.warnings == ["User 1 has not voted yet."]

    def test_duplicate_participant(self):
        result = validate_ballots([Ballot("User 1"), Ballot("User 1")])
        assert not result.is_valid

    def test_mismatched_key(self):
        result = validate_ballots({"User 2": Ballot("User 1")})
        assert not result.is_valid

    def test_item_outside_catalog(self):
        ballot = Ballot("User 1")
        ballot.set("Monday", "Lunch", "Durian")
        result = validate_ballots([ballot])
        assert not result.is_valid
        assert "Durian" in result.errors[0]

    def test_custom_catalog(self):
        ballot = Ballot("User 1")
        ballot.set("Monday", "Lunch", "Durian")
        result = validate_ballots([ballot], {"catalog": ["Durian"]})
        assert result.is_valid


class TestValidateRuleConfig:
    def test_defaults_are_valid(self):
        assert validate_rule_config().is_valid

    def test_negative_cap(self):
        assert not validate_rule_config({"usage_cap": -1}).is_valid

    def test_non_integer_cap(self):
        assert not validate_rule_config({"usage_cap": 1.5}).is_valid

    def test_zero_cap_warns(self):
        result = validate_rule_config({"usage_cap": 0})
        assert result.is_valid
        assert result.warnings

    def test_unknown_scope(self):
        assert not validate_rule_config({"editing_adjacency_scope": "none"}).is_valid

    def test_duplicate_days(self):
        assert not validate_rule_config({"days": ["Monday", "Monday"]}).is_valid

    def test_empty_catalog(self):
        assert not validate_rule_config({"catalog": []}).is_valid


class TestValidationResultMerge:
    def test_merge_combines_errors_and_validity(self):
        first = ValidationResult(errors=[], warnings=["w1"])
        second = ValidationResult(is_valid=False, errors=["e1"], warnings=["w2"])
        merged = first.merge(second)

        assert merged is first
        assert not merged.is_valid
        assert merged.errors == ["e1"]
        assert merged.warnings == ["w1", "w2"]

    def test_merge_of_valid_results_stays_valid(self):
        assert ValidationResult().merge(ValidationResult()).is_valid


class TestBallotValidationError:
    def test_is_value_error_with_errors(self):
        err = BallotValidationError(["a", "b"])
        assert isinstance(err, ValueError)
        assert err.errors == ["a", "b"]
        assert str(err) == "a; b"
