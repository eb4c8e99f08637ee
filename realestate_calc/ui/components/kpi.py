from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import streamlit as st

from realestate_calc.data.stats import ListingStats
from realestate_calc.ui.components.formatting import format_currency


@dataclass
class KpiCard:
    label: str
    value_display: str
    help_text: Optional[str] = None


def stats_cards(stats: ListingStats) -> List[KpiCard]:
    return [
        KpiCard("Average Price", format_currency(stats.average_price)),
        KpiCard(
            "Median Price",
            format_currency(stats.median_price),
            help_text="Middle listing by price (upper middle for an even count).",
        ),
        KpiCard("Average Price per Square Foot", format_currency(stats.average_price_per_sq_ft)),
    ]


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 3) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                st.metric(label=card.label, value=card.value_display)
                if card.help_text:
                    st.caption(card.help_text)
