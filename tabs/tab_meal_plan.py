"""Tab 2: Meal Plan — the allocated item for every slot, with headline KPIs."""

import streamlit as st

from data.session_store import get_ballots, get_result, get_rule_config
from data.loader import plan_grid_df, plan_to_df
from components.metrics_cards import render_metric_row, render_constraint_status
from components.tables import render_plan_table
from engine.aggregator import total_votes
from engine.explainer import explain_assignment, satisfaction_score
from models.slot import Slot
from config.defaults import DAYS, PERIODS, ITEM_EMOJIS


def render(sidebar_state):
    """Render the Meal Plan tab."""
    st.header("🍽️ Weekly Meal Plan")

    result = get_result()
    if result is None:
        st.info("No plan yet. Add some votes in the Voting tab.")
        return

    ballots = get_ballots()
    cfg = get_rule_config()
    days = cfg.get("days", DAYS)
    periods = cfg.get("periods", PERIODS)
    plan = result.plan

    forced = sum(1 for a in plan.values() if a.violated)
    filled = sum(1 for a in plan.values() if a.item)
    render_metric_row([
        {"label": "Participants", "value": str(len(ballots))},
        {"label": "Total Votes", "value": str(total_votes(ballots.values()))},
        {"label": "Slots Filled", "value": f"{filled}/{len(plan)}"},
        {"label": "Satisfaction", "value": f"{satisfaction_score(ballots.values(), plan)}%"},
        {"label": "Forced Selections", "value": str(forced),
         "delta": "rules broken" if forced else "None",
         "delta_color": "inverse" if forced else "off"},
    ])
    render_constraint_status(result.summary.status, result.summary.violation_count)

    cols = st.columns(len(days))
    for col, day in zip(cols, days):
        with col:
            st.markdown(f"**{day}**")
            for period in periods:
                a = plan[Slot(day, period)]
                if a.item:
                    flag = " ⚠️" if a.violated else ""
                    st.markdown(f"{period}: {ITEM_EMOJIS.get(a.item, '')} **{a.item}**{flag}")
                    st.caption(f"{a.votes}/{a.total_ballots} votes · {a.reason}")
                else:
                    st.markdown(f"{period}: _No votes yet_")

    with st.expander("Plan grid"):
        st.dataframe(plan_grid_df(plan, days, periods), use_container_width=True)

    st.subheader("Slot Details")
    render_plan_table(plan_to_df(plan))

    if sidebar_state.show_debug:
        st.subheader("How each slot was decided")
        for day in days:
            for period in periods:
                slot = Slot(day, period)
                with st.expander(slot.label):
                    for step in explain_assignment(slot, plan[slot], result.violations):
                        st.write(step)
