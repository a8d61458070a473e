"""Meal Vote Planner — Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_voting,
    tab_meal_plan,
    tab_constraint_status,
    tab_data,
)


def main():
    logging.basicConfig(level=os.environ.get("MEAL_PLANNER_LOG_LEVEL", "WARNING"))

    st.set_page_config(
        page_title="Meal Vote Planner",
        page_icon="🍎",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3, tab4 = st.tabs([
        "🗳️ Voting",
        "🍽️ Meal Plan",
        "🎯 Constraint Status",
        "📁 Data",
    ])

    with tab1:
        tab_voting.render(sidebar_state)
    with tab2:
        tab_meal_plan.render(sidebar_state)
    with tab3:
        tab_constraint_status.render(sidebar_state)
    with tab4:
        tab_data.render(sidebar_state)


if __name__ == "__main__":
    main()
