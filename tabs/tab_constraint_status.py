"""Tab 3: Constraint Status — item usage against the cap and the violation log."""

import pandas as pd
import streamlit as st

from data.session_store import get_ballots, get_result, get_rule_config
from data.loader import tally_to_df, violations_to_df
from components.charts import usage_by_period_bar, vote_heatmap, satisfaction_donut
from components.tables import render_usage_table
from engine.aggregator import aggregate
from engine.explainer import describe_violation, satisfaction_score, usage_chart_rows, usage_status
from config.defaults import CATALOG, DAYS, PERIODS, USAGE_CAP, ITEM_EMOJIS


def render(sidebar_state):
    """Render the Constraint Status tab."""
    st.header("🎯 Constraint Status")

    result = get_result()
    if result is None:
        st.info("No plan yet. Add some votes in the Voting tab.")
        return

    cfg = get_rule_config()
    catalog = cfg.get("catalog", CATALOG)
    days = cfg.get("days", DAYS)
    periods = cfg.get("periods", PERIODS)
    cap = cfg.get("usage_cap", USAGE_CAP)
    ballots = get_ballots()

    st.write(result.summary.status)

    col1, col2 = st.columns([3, 2])
    with col1:
        rows = usage_chart_rows(result.plan, catalog, periods)
        if rows:
            st.plotly_chart(usage_by_period_bar(rows, periods), use_container_width=True)
        else:
            st.info("Nothing allocated yet.")
    with col2:
        usage_df = pd.DataFrame([
            {
                "Item": f"{ITEM_EMOJIS.get(item, '')} {item}".strip(),
                "Used": f"{count}/{cap} times",
                "Status": usage_status(count, cap),
            }
            for item, count in result.summary.usage_by_item.items()
        ])
        render_usage_table(usage_df)
        st.caption("over = over limit (violation) · at = at limit · under = under limit")

    if result.summary.over_used:
        st.error(f"Over-used items: {', '.join(result.summary.over_used)}")

    st.plotly_chart(
        satisfaction_donut(satisfaction_score(ballots.values(), result.plan)),
        use_container_width=True,
    )

    if sidebar_state.show_debug:
        st.subheader("🐛 Constraint Violations Debug")
        if result.violations:
            for v in result.violations:
                st.write(describe_violation(v))
            st.dataframe(violations_to_df(result.violations), use_container_width=True, hide_index=True)
        else:
            st.success("No candidates were blocked.")

        tally = aggregate(ballots.values(), catalog, days, periods)
        st.plotly_chart(vote_heatmap(tally_to_df(tally, days, periods)), use_container_width=True)
