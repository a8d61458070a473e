"""KPI metric cards for the plan overview."""

import streamlit as st


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_constraint_status(summary_status: str, violation_count: int):
    """Headline banner: green when the plan is clean, amber when rules were broken."""
    if violation_count == 0:
        st.success(summary_status, icon="✅")
    else:
        st.warning(summary_status, icon="⚠️")
