"""
Layout helpers for the Streamlit application (sidebar, header, summary).
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from realestate_calc.data.filters import ListingFilters, active_filter_labels, bedroom_count
from realestate_calc.ui.components.formatting import format_number


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Real Estate Calculator",
        layout="wide",
        page_icon=":house:",
    )


def sidebar_upload_ui():
    """CSV picker; returns the UploadedFile or None when nothing is selected."""
    st.sidebar.header("Data")
    return st.sidebar.file_uploader(
        "Upload listings CSV",
        type=["csv"],
        key="rec_upload",
        help="Redfin-style export with PRICE and SQUARE FEET columns.",
    )


def sidebar_filters_ui() -> ListingFilters:
    st.sidebar.header("Filters")
    bedrooms = st.sidebar.text_input(
        "Filter by Bedrooms",
        key="rec_filter_bedrooms",
        help="Exact bedroom count. Leave empty for all listings.",
    )
    zip_code = st.sidebar.text_input(
        "Filter by ZIP Code",
        key="rec_filter_zip",
        help="Exact ZIP or postal code match.",
    )
    filters = ListingFilters(bedrooms=bedrooms, zip_code=zip_code)
    if bedrooms and bedroom_count(filters) is None:
        st.sidebar.caption("Bedroom filter ignored: not a whole number.")
    return filters


def active_filter_summary(filters: ListingFilters, total_rows: int, loaded_rows: Optional[int] = None) -> None:
    badges = active_filter_labels(filters)
    summary_text = "Active Filters: " + " | ".join(badges) if badges else "Active Filters: All data"
    st.markdown(f"**{summary_text}**")
    if loaded_rows is None:
        st.caption(f"Showing {format_number(total_rows, 0)} listings after filters.")
    else:
        st.caption(
            f"Showing {format_number(total_rows, 0)} of {format_number(loaded_rows, 0)} listings after filters."
        )
