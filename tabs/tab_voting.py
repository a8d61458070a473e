"""Tab 1: Voting — edit one participant's ballot with rule-filtered choices."""

import streamlit as st

from data.session_store import VOTE_WIDGET_PREFIX, get_ballots, get_rule_config, update_selection
from engine.constraints import available_items
from config.defaults import DAYS, PERIODS, ITEM_EMOJIS

NO_VOTE = ""


def _label(item: str) -> str:
    if item == NO_VOTE:
        return "-- No vote --"
    return f"{ITEM_EMOJIS.get(item, '')} {item}".strip()


def _on_vote_change(key: str, participant: str, day: str, period: str):
    update_selection(participant, day, period, st.session_state[key] or None)


def render(sidebar_state):
    """Render the Voting tab."""
    participant = sidebar_state.participant
    st.header(f"🗳️ {participant}'s Preferences")
    st.caption(
        "Choices already ruled out by your own ballot (same day, neighbouring days, "
        "weekly limit) are hidden."
    )

    ballots = get_ballots()
    cfg = get_rule_config()
    days = cfg.get("days", DAYS)
    periods = cfg.get("periods", PERIODS)
    ballot = ballots[participant]

    cols = st.columns(len(days))
    for col, day in zip(cols, days):
        with col:
            st.markdown(f"**{day}**")
            for period in periods:
                current = ballot.get(day, period) or NO_VOTE
                options = [NO_VOTE] + available_items(ballots, participant, day, period, cfg)
                if current not in options:
                    options.append(current)
                key = f"{VOTE_WIDGET_PREFIX}{participant}_{day}_{period}"
                st.selectbox(
                    period,
                    options=options,
                    index=options.index(current),
                    format_func=_label,
                    key=key,
                    on_change=_on_vote_change,
                    args=(key, participant, day, period),
                )
                st.caption(f"{len(options) - 1} options available")
