"""
Typed listing record and helpers to move collections into pandas.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Iterable, List, Optional

import pandas as pd


@dataclass(frozen=True)
class Property:
    price: float = 0.0
    beds: int = 0
    baths: float = 0.0
    zip_code: str = ""
    square_feet: float = 0.0
    lot_size: float = 0.0
    price_per_square_foot: float = 0.0
    days_on_market: Optional[int] = None
    year_built: Optional[int] = None


PROPERTY_COLUMNS: List[str] = [f.name for f in fields(Property)]


def properties_to_frame(properties: Iterable[Property]) -> pd.DataFrame:
    """Build a DataFrame with one row per property and a fixed column order.

    An empty collection still yields the full set of columns so that chart
    and table code can rely on them being present.
    """
    records = [asdict(item) for item in properties]
    df = pd.DataFrame.from_records(records, columns=PROPERTY_COLUMNS)
    # Optional integer columns keep missing values without becoming floats.
    for col in ("days_on_market", "year_built"):
        df[col] = df[col].astype("Int64")
    return df
