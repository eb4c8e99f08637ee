"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from realestate_calc.config import X_AXIS_TICKS

DEFAULT_TEMPLATE = "plotly_white"
SCATTER_COLOR = "#8884d8"


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        margin=dict(l=40, r=20, t=60, b=40),
        showlegend=True,
    )
    if xaxis_title:
        fig.update_xaxes(title=xaxis_title)
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    fig.update_xaxes(showgrid=True, griddash="dash")
    fig.update_yaxes(showgrid=True, griddash="dash", zeroline=True)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def price_vs_sqft_scatter(
    df: pd.DataFrame,
    ticks: Optional[List[int]] = None,
    title: Optional[str] = "Price vs Square Feet",
) -> go.Figure:
    """Scatter of price (y) against square footage (x).

    The x range runs from 0 to the largest square footage in `df` with a
    fixed tick set; y is left to autorange. An empty frame yields an empty
    chart.
    """
    ticks = list(X_AXIS_TICKS if ticks is None else ticks)
    hover_data = [col for col in ("beds", "baths", "zip_code") if col in df.columns]
    fig = px.scatter(
        df,
        x="square_feet",
        y="price",
        hover_data=hover_data,
        color_discrete_sequence=[SCATTER_COLOR],
        labels={"square_feet": "Square Feet", "price": "Price"},
    )
    fig.update_traces(name="Price vs Square Feet", showlegend=True)
    fig = _configure_layout(fig, title, "Square Feet", "Price")

    data_max = float(df["square_feet"].max()) if not df.empty else 0.0
    x_range = [0, data_max] if data_max > 0 else [0, ticks[-1] if ticks else 1]
    fig.update_xaxes(tickmode="array", tickvals=ticks, range=x_range)
    fig.update_yaxes(autorange=True)
    return fig
