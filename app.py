import realestate_calc.bootstrap_env  # must be first to set env/secrets
import streamlit as st

from realestate_calc.config import TABS, configure_logging, load_settings
from realestate_calc.data.filters import apply_filters, serialize_filters
from realestate_calc.data.loader import IngestOptions, IngestResult, ingest
from realestate_calc.data.models import properties_to_frame
from realestate_calc.data.store import ListingStore
from realestate_calc.ui.layout import (
    active_filter_summary,
    setup_page,
    sidebar_filters_ui,
    sidebar_upload_ui,
)
from realestate_calc.ui.pages import calculator, data_quality
from realestate_calc.ui.pages.context import PageContext


PAGE_RENDERERS = {
    "calculator": calculator.render,
    "data_quality": data_quality.render,
}


@st.cache_data(show_spinner="Parsing CSV…")
def _ingest_cached(data: bytes, skip_first_row: bool, drop_incomplete: bool) -> IngestResult:
    """Ingest uploaded bytes; cached by content and ingest options."""
    return ingest(data, IngestOptions(skip_first_row=skip_first_row, drop_incomplete=drop_incomplete))


def _get_store() -> ListingStore:
    if "rec_store" not in st.session_state:
        st.session_state["rec_store"] = ListingStore()
    return st.session_state["rec_store"]


def _sync_upload(store: ListingStore, uploaded, options: IngestOptions) -> None:
    # No file selected keeps whatever was loaded before.
    if uploaded is None:
        return
    source_id = f"{uploaded.file_id}:{options.skip_first_row}:{options.drop_incomplete}"
    if store.source_id == source_id:
        return
    token = store.begin_upload()
    result = _ingest_cached(uploaded.getvalue(), options.skip_first_row, options.drop_incomplete)
    if store.commit(token, result, source_id=source_id):
        st.toast(f"Loaded {result.report.property_count:,} listings from {uploaded.name}", icon="🏠")


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    setup_page()
    st.title("Real Estate Calculator")

    store = _get_store()
    uploaded = sidebar_upload_ui()
    _sync_upload(store, uploaded, settings.ingest_options())

    filters = sidebar_filters_ui()
    filtered = apply_filters(store.properties, filters)
    st.session_state["rec_active_filters"] = serialize_filters(filters)

    with st.sidebar.expander("Export", expanded=False):
        if filtered:
            csv_bytes = properties_to_frame(filtered).to_csv(index=False).encode("utf-8")
            st.download_button(
                "Download Filtered CSV",
                data=csv_bytes,
                file_name="filtered_properties.csv",
                mime="text/csv",
            )
        else:
            st.caption("No data to export")

    if store.report is None:
        st.info("Upload a listings CSV from the sidebar to get started.")
    else:
        issues = store.report.warnings()
        if issues:
            st.warning(
                f"{len(issues)} issue(s) found while reading the CSV. See the Data Quality tab for details."
            )

    active_filter_summary(filters, len(filtered), loaded_rows=len(store.properties))

    context = PageContext(
        all_properties=store.properties,
        filters=filters,
        report=store.report,
    )

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(filtered, context)


if __name__ == "__main__":
    main()
