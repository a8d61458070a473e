"""Global sidebar controls: participants, quick actions and rule settings."""

import streamlit as st
from dataclasses import dataclass

from data.session_store import (
    get_ballots, get_selected_participant, set_selected_participant,
    add_participant, remove_participant, reset_all_votes, fill_random,
    get_rule_config, set_rule_config, is_debug_shown, set_show_debug,
)
from config.defaults import ADJACENCY_SCOPES, USAGE_CAP, SCHEDULER_ADJACENCY_SCOPE

SCOPE_LABELS = {
    "previous": "Previous day only",
    "previous_and_next": "Previous and next day",
}


@dataclass
class SidebarState:
    participant: str
    show_debug: bool


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Meal Vote Planner")
        st.divider()

        ballots = get_ballots()
        names = list(ballots.keys())
        current = get_selected_participant()
        selected_idx = names.index(current) if current in names else 0
        selected = st.selectbox(
            "Participant",
            options=names,
            index=selected_idx,
            key="sidebar_participant",
        )
        if selected != current:
            set_selected_participant(selected)
        st.caption(f"Participants: {len(names)}")

        col1, col2 = st.columns(2)
        with col1:
            if st.button("➕ Add", use_container_width=True):
                set_selected_participant(add_participant())
                st.session_state.pop("sidebar_participant", None)
                st.rerun()
        with col2:
            if st.button("➖ Remove", use_container_width=True, disabled=len(names) <= 1):
                remove_participant(selected)
                st.session_state.pop("sidebar_participant", None)
                st.rerun()

        if st.button("🎲 Quick Fill Random", use_container_width=True):
            fill_random()
            st.rerun()

        confirm = st.checkbox("Confirm reset", key="sidebar_confirm_reset")
        if st.button("🗑️ Reset All Votes", use_container_width=True, disabled=not confirm):
            reset_all_votes()
            st.session_state.pop("sidebar_participant", None)
            st.rerun()

        st.divider()
        st.subheader("Rules")

        cfg = dict(get_rule_config())
        cap = st.number_input(
            "Max uses per item per week",
            min_value=0,
            max_value=12,
            value=int(cfg.get("usage_cap", USAGE_CAP)),
            step=1,
            key="sidebar_cap",
        )
        current_scope = cfg.get("scheduler_adjacency_scope", SCHEDULER_ADJACENCY_SCOPE)
        scope = st.selectbox(
            "Plan adjacency rule",
            options=ADJACENCY_SCOPES,
            format_func=lambda s: SCOPE_LABELS.get(s, s),
            index=ADJACENCY_SCOPES.index(current_scope),
            key="sidebar_scope",
        )
        if cap != cfg.get("usage_cap") or scope != current_scope:
            cfg["usage_cap"] = int(cap)
            cfg["scheduler_adjacency_scope"] = scope
            set_rule_config(cfg)

        st.divider()
        show_debug = st.toggle("🔍 Show Debug", value=is_debug_shown(), key="sidebar_debug")
        if show_debug != is_debug_shown():
            set_show_debug(show_debug)

    return SidebarState(
        participant=selected,
        show_debug=show_debug,
    )
