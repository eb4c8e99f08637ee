from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

import pandas as pd

from realestate_calc.data.models import Property
from realestate_calc.data.parsing import to_fixed

ZERO = to_fixed(0.0)


@dataclass(frozen=True)
class ListingStats:
    average_price: str = ZERO
    median_price: str = ZERO
    average_price_per_sq_ft: str = ZERO

    def as_dict(self) -> Dict[str, str]:
        return {
            "averagePrice": self.average_price,
            "medianPrice": self.median_price,
            "averagePricePerSqFt": self.average_price_per_sq_ft,
        }


def safe_mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return float(pd.Series(values, dtype="float64").sum() / len(values))


def median_price(properties: Sequence[Property]) -> float:
    """Price at index floor(n / 2) of an ascending sort.

    For even counts this is the upper of the two middle prices, not their
    average. Sorting happens on a private copy.
    """
    if not properties:
        return 0.0
    prices = sorted(item.price for item in properties)
    return prices[len(prices) // 2]


def calculate_statistics(properties: Sequence[Property]) -> ListingStats:
    if not properties:
        return ListingStats()
    return ListingStats(
        average_price=to_fixed(safe_mean([item.price for item in properties])),
        median_price=to_fixed(median_price(properties)),
        average_price_per_sq_ft=to_fixed(safe_mean([item.price_per_square_foot for item in properties])),
    )
