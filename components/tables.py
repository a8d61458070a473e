"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd

from config.defaults import USAGE_STATUS_COLORS


def render_plan_table(df: pd.DataFrame, flag_column: str = "Violation"):
    """Render the slot-by-slot plan with forced selections highlighted."""
    def color_flag(val):
        if val == "Yes":
            return "background-color: #fff3cd; color: #856404; font-weight: bold"
        return ""

    if flag_column in df.columns:
        styled = df.style.map(color_flag, subset=[flag_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)


def render_usage_table(df: pd.DataFrame, status_column: str = "Status"):
    """Render per-item usage with over/at/under-cap colouring."""
    def color_status(val):
        color = USAGE_STATUS_COLORS.get(val)
        return f"background-color: {color}" if color else ""

    if status_column in df.columns:
        styled = df.style.map(color_status, subset=[status_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
