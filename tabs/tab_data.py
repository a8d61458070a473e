"""Tab 4: Data — ballot import/export and sample data."""

import json

import streamlit as st

from data.loader import load_file, parse_ballots, ballots_to_df, plan_to_df
from data.validator import validate_ballot_df, validate_ballots
from data.sample_data import generate_ballots_df
from data.session_store import get_ballots, get_result, get_rule_config, set_ballots
from config.defaults import DAYS, PERIODS


def _load_and_validate(df) -> bool:
    """Validate an uploaded ballot table and replace the session ballots with it."""
    cfg = get_rule_config()
    result = validate_ballot_df(df, cfg)
    if not result.is_valid:
        for e in result.errors:
            st.error(e)
        return False

    ballots = parse_ballots(df)
    check = validate_ballots(ballots, cfg)
    if not check.is_valid:
        for e in check.errors:
            st.error(e)
        return False
    for w in result.warnings + check.warnings:
        st.warning(w)

    set_ballots(ballots)
    return True


def render(sidebar_state):
    """Render the Data tab."""
    st.header("📁 Ballot Data")

    cfg = get_rule_config()
    days = cfg.get("days", DAYS)
    periods = cfg.get("periods", PERIODS)

    st.subheader("Import")
    st.caption("One row per participant and slot with columns: Participant, Day, Period, Item.")
    uploaded = st.file_uploader("Ballot file (CSV or XLSX)", type=["csv", "xlsx"])
    if uploaded is not None and st.button("Load ballots"):
        try:
            df = load_file(uploaded)
        except ValueError as e:
            st.error(str(e))
        else:
            if _load_and_validate(df):
                st.success(f"Loaded {len(get_ballots())} ballots.")

    if st.button("Load sample ballots"):
        if _load_and_validate(generate_ballots_df()):
            st.success("Sample ballots loaded.")

    st.subheader("Export")
    ballots_df = ballots_to_df(get_ballots(), days, periods)
    st.download_button(
        "Download ballots (CSV)",
        data=ballots_df.to_csv(index=False).encode("utf-8"),
        file_name="ballots.csv",
        mime="text/csv",
    )

    result = get_result()
    if result is not None:
        st.download_button(
            "Download plan (CSV)",
            data=plan_to_df(result.plan).to_csv(index=False).encode("utf-8"),
            file_name="meal_plan.csv",
            mime="text/csv",
        )
        st.download_button(
            "Download diagnostics (JSON)",
            data=json.dumps(result.diagnostics(), indent=2).encode("utf-8"),
            file_name="diagnostics.json",
            mime="application/json",
        )

    with st.expander("Current ballots"):
        st.dataframe(ballots_df, use_container_width=True, hide_index=True)
