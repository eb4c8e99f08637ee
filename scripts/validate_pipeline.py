"""Quick validation script for the ingest -> filter -> statistics pipeline.

Run with `python scripts/validate_pipeline.py` to ensure a Redfin-style CSV
is parsed, sorted, filtered and summarised as expected.
"""

from __future__ import annotations

from realestate_calc.data.filters import ListingFilters, apply_filters
from realestate_calc.data.loader import ingest
from realestate_calc.data.stats import calculate_statistics

SAMPLE_CSV = b"""PRICE,BEDS,BATHS,ZIP OR POSTAL CODE,SQUARE FEET,LOT SIZE,$/SQUARE FEET,DAYS ON MARKET,YEAR BUILT
In accordance with local MLS rules some listings are not shown,,,,,,,,
600000,3,2,98101,2000,5000,300,12,1995
250000,2,1,98102,1000,3000,250,,1978
450000,3,2.5,98101,1500,4000,300,40,
"""


def main() -> None:
    result = ingest(SAMPLE_CSV)
    properties = result.properties

    if len(properties) != 3:
        raise SystemExit(f"Expected 3 properties, got {len(properties)}: {result.report.as_dict()}")

    ratios = [p.price / p.square_feet for p in properties]
    assert ratios == sorted(ratios), "Properties should be sorted by price per square foot"

    three_beds = apply_filters(properties, ListingFilters(bedrooms="3"))
    assert {p.beds for p in three_beds} == {3}, "Bedroom filter should keep only 3-bed listings"

    stats = calculate_statistics(three_beds)
    assert stats.average_price == "525000.00", stats

    print("Pipeline validation passed. Stats:", calculate_statistics(properties).as_dict())


if __name__ == "__main__":
    main()
