from __future__ import annotations

from typing import Tuple

import streamlit as st

from realestate_calc.data.models import Property, properties_to_frame
from realestate_calc.data.stats import calculate_statistics
from realestate_calc.ui.components.charts import price_vs_sqft_scatter, render_plotly
from realestate_calc.ui.components.kpi import render_kpi_cards, stats_cards
from realestate_calc.ui.pages.context import PageContext


def render(filtered: Tuple[Property, ...], context: PageContext) -> None:
    st.subheader("Statistics")
    stats = calculate_statistics(filtered)
    render_kpi_cards(stats_cards(stats))

    if not context.all_properties:
        st.info("No listings loaded yet.")
    elif not filtered:
        st.info("No listings match the current filters.")

    st.subheader("Price vs Square Feet")
    df = properties_to_frame(filtered)
    render_plotly(price_vs_sqft_scatter(df))

    with st.expander("Listings", expanded=False):
        st.dataframe(
            df,
            use_container_width=True,
            height=400,
            column_config={
                "price": st.column_config.NumberColumn("Price", format="$%.2f"),
                "beds": st.column_config.NumberColumn("Beds", format="%d"),
                "baths": st.column_config.NumberColumn("Baths"),
                "zip_code": st.column_config.TextColumn("ZIP"),
                "square_feet": st.column_config.NumberColumn("Sq Ft"),
                "lot_size": st.column_config.NumberColumn("Lot Size"),
                "price_per_square_foot": st.column_config.NumberColumn("$/Sq Ft", format="$%.2f"),
                "days_on_market": st.column_config.NumberColumn("Days on Market", format="%d"),
                "year_built": st.column_config.NumberColumn("Year Built", format="%d"),
            },
        )
        st.caption("Sorted by price per square foot, lowest first.")
