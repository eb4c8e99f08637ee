from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from realestate_calc.data.filters import ListingFilters
from realestate_calc.data.loader import IngestReport
from realestate_calc.data.models import Property


@dataclass
class PageContext:
    all_properties: Tuple[Property, ...]
    filters: ListingFilters
    report: Optional[IngestReport]
