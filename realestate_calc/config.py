"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

# CSV headers, matched exactly (case, spacing, punctuation).
COL_PRICE = "PRICE"
COL_BEDS = "BEDS"
COL_BATHS = "BATHS"
COL_ZIP = "ZIP OR POSTAL CODE"
COL_SQUARE_FEET = "SQUARE FEET"
COL_LOT_SIZE = "LOT SIZE"
COL_PRICE_PER_SQFT = "$/SQUARE FEET"
COL_DAYS_ON_MARKET = "DAYS ON MARKET"
COL_YEAR_BUILT = "YEAR BUILT"

REQUIRED_COLUMNS: Tuple[str, ...] = (COL_PRICE, COL_SQUARE_FEET)

X_AXIS_TICKS: List[int] = [0, 500, 1000, 1500, 2000, 2500, 3000]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("calculator", "Calculator"),
    TabConfig("data_quality", "Data Quality"),
]


@dataclass(frozen=True)
class AppSettings:
    skip_first_row: bool = True
    drop_incomplete: bool = True
    log_level: str = "INFO"

    def ingest_options(self):
        # Late import: the loader imports the column constants above.
        from realestate_calc.data.loader import IngestOptions

        return IngestOptions(
            skip_first_row=self.skip_first_row,
            drop_incomplete=self.drop_incomplete,
        )


def _get_bool(name: str, default: bool) -> bool:
    raw: Optional[str] = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def load_settings() -> AppSettings:
    """Read settings from the environment (populated by bootstrap_env)."""
    level = (os.getenv("REC_LOG_LEVEL") or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    return AppSettings(
        skip_first_row=_get_bool("REC_SKIP_FIRST_ROW", True),
        drop_incomplete=_get_bool("REC_DROP_INCOMPLETE_ROWS", True),
        log_level=level,
    )


def configure_logging(level: str = "INFO") -> None:
    # basicConfig is a no-op once the root logger has handlers, so Streamlit
    # reruns do not stack handlers.
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("realestate_calc").setLevel(level)
