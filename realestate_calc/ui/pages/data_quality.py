from __future__ import annotations

from typing import Tuple

import pandas as pd
import streamlit as st

from realestate_calc.data.models import Property
from realestate_calc.ui.components.formatting import format_number
from realestate_calc.ui.pages.context import PageContext


def _counts_table(counts: dict, label: str) -> pd.DataFrame:
    rows = [{label: key, "count": value} for key, value in counts.items() if value]
    df = pd.DataFrame(rows, columns=[label, "count"])
    return df.sort_values("count", ascending=False)


def render(filtered: Tuple[Property, ...], context: PageContext) -> None:
    st.subheader("Data Quality")
    report = context.report
    if report is None:
        st.info("Upload a CSV to see ingestion diagnostics.")
        return

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Rows in file", format_number(report.raw_row_count))
    with col2:
        st.metric("First row skipped", "Yes" if report.skipped_first_row else "No")
    with col3:
        st.metric("Incomplete rows dropped", format_number(report.dropped_incomplete))
    with col4:
        st.metric("Listings loaded", format_number(report.property_count))

    messages = report.warnings()
    if messages:
        for message in messages:
            st.warning(message)
    else:
        st.success("All rows parsed without defaults.")

    defaulted = _counts_table(report.defaulted_fields, "field")
    if not defaulted.empty:
        st.markdown("**Fields defaulted to 0**")
        st.dataframe(defaulted, use_container_width=True, hide_index=True)

    sentinels = _counts_table(report.sentinel_replacements, "column")
    if not sentinels.empty:
        st.markdown("**Blank or placeholder cells by column**")
        st.dataframe(sentinels, use_container_width=True, hide_index=True)

    with st.expander("Raw diagnostics", expanded=False):
        st.json(report.as_dict())
