"""Plotly chart builders for the Meal Vote Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, List

from config.defaults import PERIOD_COLORS


def usage_by_period_bar(
    chart_rows: List[Dict],
    periods: List[str],
    title: str = "Item Usage in Final Plan",
) -> go.Figure:
    """Grouped bar chart of how many slots each item won, split by period."""
    fig = go.Figure()
    for period in periods:
        fig.add_trace(go.Bar(
            name=period,
            x=[r["item"] for r in chart_rows],
            y=[r[period] for r in chart_rows],
            marker_color=PERIOD_COLORS.get(period),
        ))

    fig.update_layout(
        barmode="group",
        title=title,
        xaxis_title="Item",
        yaxis_title="Slots",
        height=350,
    )
    return fig


def vote_heatmap(tally_df: pd.DataFrame, title: str = "Votes per Slot") -> go.Figure:
    """Heatmap of vote counts with slots as rows and items as columns."""
    fig = go.Figure(data=go.Heatmap(
        z=tally_df.values,
        x=list(tally_df.columns),
        y=list(tally_df.index),
        colorscale="YlOrRd",
        text=tally_df.values,
        texttemplate="%{text}",
        hovertemplate="Slot: %{y}<br>Item: %{x}<br>Votes: %{z}<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Item",
        yaxis_title="Slot",
        yaxis_autorange="reversed",
        height=max(350, len(tally_df.index) * 30),
    )
    return fig


def satisfaction_donut(score: int, title: str = "Satisfaction") -> go.Figure:
    """Donut chart of the share of votes that made it into the plan."""
    fig = px.pie(
        names=["Satisfied", "Not satisfied"],
        values=[score, 100 - score],
        hole=0.6,
        color_discrete_sequence=["#4A90D9", "#E8734A"],
    )
    fig.update_layout(
        title=title,
        height=300,
        annotations=[dict(text=f"{score}%", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig
