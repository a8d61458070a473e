"""Typed wrapper around st.session_state for ballots, settings and the latest plan."""

import logging
from typing import Dict, Optional

import streamlit as st

from models.ballot import Ballot
from models.diagnostics import AllocationResult
from engine.allocation_engine import recompute
from data.sample_data import initialize_ballots, next_participant_name, new_ballot, quick_fill_random
from config.defaults import DEFAULT_RULE_CONFIG, RANDOM_FILL_SEED

logger = logging.getLogger(__name__)

VOTE_WIDGET_PREFIX = "vote_"


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "rule_config": dict(DEFAULT_RULE_CONFIG),
        "ballots": None,
        "selected_participant": None,
        "show_debug": False,
        "result": None,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default

    if st.session_state["ballots"] is None:
        ballots = initialize_ballots(rule_config=st.session_state["rule_config"])
        st.session_state["ballots"] = ballots
        st.session_state["selected_participant"] = next(iter(ballots))
        refresh_plan()


# --- Getters ---

def get_ballots() -> Dict[str, Ballot]:
    return st.session_state.get("ballots") or {}


def get_selected_participant() -> Optional[str]:
    return st.session_state.get("selected_participant")


def get_rule_config() -> dict:
    return st.session_state.get("rule_config", {})


def get_result() -> Optional[AllocationResult]:
    return st.session_state.get("result")


def is_debug_shown() -> bool:
    return st.session_state.get("show_debug", False)


# --- Setters ---
# Every ballot mutation ends with refresh_plan() so the plan never goes stale.

def refresh_plan() -> AllocationResult:
    result = recompute(get_ballots(), get_rule_config())
    st.session_state["result"] = result
    return result


def set_selected_participant(name: str):
    st.session_state["selected_participant"] = name


def set_show_debug(show: bool):
    st.session_state["show_debug"] = show


def set_rule_config(config: dict):
    st.session_state["rule_config"] = config
    refresh_plan()


def set_ballots(ballots: Dict[str, Ballot]):
    st.session_state["ballots"] = ballots
    _clear_vote_widgets()
    if get_selected_participant() not in ballots and ballots:
        set_selected_participant(next(iter(ballots)))
    logger.debug("Replaced ballots: %d participants", len(ballots))
    refresh_plan()


def update_selection(participant: str, day: str, period: str, item: Optional[str]):
    ballots = dict(get_ballots())
    ballot = ballots[participant].copy()
    ballot.set(day, period, item)
    ballots[participant] = ballot
    st.session_state["ballots"] = ballots
    logger.debug("%s set %s %s to %s", participant, day, period, item)
    refresh_plan()


def _clear_vote_widgets():
    """Drop ballot editor widget state so widgets re-read the replaced ballots."""
    for key in [k for k in st.session_state.keys() if str(k).startswith(VOTE_WIDGET_PREFIX)]:
        del st.session_state[key]


# --- Participant Management ---

def add_participant() -> str:
    ballots = dict(get_ballots())
    cfg = get_rule_config()
    name = next_participant_name(ballots)
    ballots[name] = new_ballot(name, cfg.get("days"), cfg.get("periods"))
    set_ballots(ballots)
    return name


def remove_participant(name: str) -> bool:
    """Remove a participant; the last remaining one cannot be removed."""
    ballots = dict(get_ballots())
    if len(ballots) <= 1 or name not in ballots:
        return False
    ballots.pop(name)
    set_ballots(ballots)
    return True


def reset_all_votes():
    ballots = initialize_ballots(rule_config=get_rule_config())
    st.session_state["selected_participant"] = next(iter(ballots))
    set_ballots(ballots)


def fill_random():
    set_ballots(quick_fill_random(get_ballots(), get_rule_config(), seed=RANDOM_FILL_SEED))
