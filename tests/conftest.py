from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from realestate_calc.data.models import Property

HEADER = [
    "PRICE",
    "BEDS",
    "BATHS",
    "ZIP OR POSTAL CODE",
    "SQUARE FEET",
    "LOT SIZE",
    "$/SQUARE FEET",
    "DAYS ON MARKET",
    "YEAR BUILT",
]

DISCLAIMER = "In accordance with local MLS rules some listings are not shown"


def build_csv(rows: List[Dict[str, str]], header: Optional[List[str]] = None) -> str:
    header = header or HEADER
    lines = [",".join(header)]
    for row in rows:
        lines.append(",".join(row.get(col, "") for col in header))
    return "\n".join(lines) + "\n"


def listing(price: str, sqft: str, beds: str = "3", zip_code: str = "98101", ppsf: str = "", **extra: str) -> Dict[str, str]:
    row = {
        "PRICE": price,
        "SQUARE FEET": sqft,
        "BEDS": beds,
        "BATHS": extra.pop("baths", "2"),
        "ZIP OR POSTAL CODE": zip_code,
        "LOT SIZE": extra.pop("lot", "4000"),
        "$/SQUARE FEET": ppsf,
        "DAYS ON MARKET": extra.pop("dom", ""),
        "YEAR BUILT": extra.pop("year", ""),
    }
    row.update(extra)
    return row


@pytest.fixture
def disclaimer_row() -> Dict[str, str]:
    return {"PRICE": DISCLAIMER}


@pytest.fixture
def sample_properties() -> List[Property]:
    return [
        Property(price=250_000, beds=2, zip_code="98102", square_feet=1000, price_per_square_foot=250),
        Property(price=450_000, beds=3, zip_code="98101", square_feet=1500, price_per_square_foot=300),
        Property(price=600_000, beds=3, zip_code="98101", square_feet=2000, price_per_square_foot=300),
        Property(price=900_000, beds=4, zip_code="98103", square_feet=2500, price_per_square_foot=360),
        Property(price=320_000, beds=3, zip_code="98102", square_feet=900, price_per_square_foot=355.56),
    ]
