"""
Filter utilities that apply the sidebar filters to the loaded listings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from realestate_calc.data.models import Property
from realestate_calc.data.parsing import parse_int


@dataclass(frozen=True)
class ListingFilters:
    # Raw text as typed by the user; empty string means "no filter".
    bedrooms: str = ""
    zip_code: str = ""


DEFAULT_FILTERS = ListingFilters()


def bedroom_count(filters: ListingFilters) -> Optional[int]:
    """Integer value of the bedroom filter, or None when it is inactive.

    Unparsable input deactivates the filter instead of excluding every row.
    """
    if not filters.bedrooms:
        return None
    return parse_int(filters.bedrooms, default=None)


def apply_filters(properties: Iterable[Property], filters: ListingFilters) -> Tuple[Property, ...]:
    """
    Return the properties matching every active filter, in input order.

    The input collection is never modified; a new tuple is always returned.
    """
    filtered = tuple(properties)

    beds = bedroom_count(filters)
    if beds is not None:
        filtered = tuple(item for item in filtered if item.beds == beds)

    if filters.zip_code:
        filtered = tuple(item for item in filtered if item.zip_code == filters.zip_code)

    return filtered


def active_filter_labels(filters: ListingFilters) -> List[str]:
    badges: List[str] = []
    beds = bedroom_count(filters)
    if beds is not None:
        badges.append(f"Bedrooms: {beds}")
    if filters.zip_code:
        badges.append(f"ZIP: {filters.zip_code}")
    return badges


def serialize_filters(filters: ListingFilters) -> Dict[str, Any]:
    """
    Convert the ListingFilters dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "bedrooms": filters.bedrooms,
        "zip_code": filters.zip_code,
        "bedrooms_active": bedroom_count(filters) is not None,
    }
