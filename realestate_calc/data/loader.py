import io
import logging
import math
import os
import warnings
from dataclasses import dataclass, field
from typing import IO, Any, Dict, List, Optional, Set, Tuple, Union

import pandas as pd

from realestate_calc.config import (
    COL_BATHS,
    COL_BEDS,
    COL_DAYS_ON_MARKET,
    COL_LOT_SIZE,
    COL_PRICE,
    COL_PRICE_PER_SQFT,
    COL_SQUARE_FEET,
    COL_YEAR_BUILT,
    COL_ZIP,
    REQUIRED_COLUMNS,
)
from realestate_calc.data.models import Property
from realestate_calc.data.parsing import is_blank, parse_int, parse_number, parse_optional_int

logger = logging.getLogger(__name__)

CsvSource = Union[str, os.PathLike, bytes, IO[Any]]
RawRow = Dict[str, Optional[str]]

SENTINELS: Set[str] = {"", "None", "none", "N/A", "n/a", "NA", "na", "null", "Null", "-", "—"}

# Required numeric fields and the header each one is read from.
REQUIRED_NUMERIC_FIELDS: Dict[str, str] = {
    "price": COL_PRICE,
    "beds": COL_BEDS,
    "baths": COL_BATHS,
    "square_feet": COL_SQUARE_FEET,
    "lot_size": COL_LOT_SIZE,
    "price_per_square_foot": COL_PRICE_PER_SQFT,
}


@dataclass(frozen=True)
class IngestOptions:
    skip_first_row: bool = True
    drop_incomplete: bool = True


@dataclass
class IngestReport:
    """Diagnostics collected while turning a CSV into properties.

    Everything the pipeline absorbs silently (defaulted cells, dropped rows,
    unreadable files) is counted here so the UI can surface it.
    """

    raw_row_count: int = 0
    skipped_first_row: bool = False
    dropped_incomplete: int = 0
    repaired_lines: int = 0
    sentinel_replacements: Dict[str, int] = field(default_factory=dict)
    defaulted_fields: Dict[str, int] = field(default_factory=dict)
    missing_columns: List[str] = field(default_factory=list)
    property_count: int = 0
    error: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "raw_row_count": self.raw_row_count,
            "skipped_first_row": self.skipped_first_row,
            "dropped_incomplete": self.dropped_incomplete,
            "repaired_lines": self.repaired_lines,
            "sentinel_replacements": dict(self.sentinel_replacements),
            "defaulted_fields": dict(self.defaulted_fields),
            "missing_columns": list(self.missing_columns),
            "property_count": self.property_count,
            "error": self.error,
        }

    def warnings(self) -> List[str]:
        messages: List[str] = []
        if self.error:
            messages.append(f"Problem reading the CSV file: {self.error}")
        if self.missing_columns:
            messages.append("Missing required columns: " + ", ".join(self.missing_columns))
        if self.dropped_incomplete:
            messages.append(
                f"{self.dropped_incomplete} row(s) without {COL_PRICE} or {COL_SQUARE_FEET} were excluded."
            )
        if self.repaired_lines:
            messages.append(f"{self.repaired_lines} row(s) had extra cells that were ignored.")
        defaulted = {k: v for k, v in self.defaulted_fields.items() if v}
        if defaulted:
            details = ", ".join(f"{name} ({count})" for name, count in sorted(defaulted.items()))
            messages.append(f"Missing or unparsable values defaulted to 0: {details}")
        return messages


@dataclass(frozen=True)
class IngestResult:
    properties: Tuple[Property, ...]
    report: IngestReport


def _read_text(source: CsvSource) -> str:
    """Decode the whole upload; undecodable bytes become U+FFFD, not errors."""
    if isinstance(source, (str, os.PathLike)):
        with open(source, encoding="utf-8-sig", errors="replace") as f:
            return f.read()
    data = source if isinstance(source, (bytes, bytearray)) else source.read()
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8-sig", errors="replace")
    return data.lstrip("\ufeff")


def _count_data_lines(text: str) -> int:
    lines = [line for line in text.splitlines() if line.strip()]
    return max(len(lines) - 1, 0)


def _normalize_sentinels(rows: List[RawRow]) -> Dict[str, int]:
    """Replace sentinel tokens with None (in-place) and return counts per column."""
    replacements: Dict[str, int] = {}
    for row in rows:
        for col, value in row.items():
            if value is None:
                continue
            if value.strip() in SENTINELS:
                row[col] = None
                replacements[col] = replacements.get(col, 0) + 1
    return replacements


def read_raw_rows(source: CsvSource) -> Tuple[List[RawRow], IngestReport]:
    """Parse a CSV into header-keyed rows of raw strings.

    Rows with more cells than the header are truncated, short rows are padded
    with missing cells. A file that cannot be parsed at all yields no rows and
    a report carrying the error.
    """
    report = IngestReport()
    repaired: List[List[str]] = []

    try:
        text = _read_text(source)
    except OSError as e:
        report.error = str(e)
        logger.warning("CSV ingestion failed: %s", report.error)
        return [], report

    def _keep_bad_line(bad_line: List[str]) -> List[str]:
        repaired.append(bad_line)
        # pandas drops the cells beyond the header width
        return bad_line

    try:
        with warnings.catch_warnings():
            # pandas warns each time it truncates a repaired line
            warnings.simplefilter("ignore", pd.errors.ParserWarning)
            # header=None: the header line fixes the width, so every longer
            # line goes through _keep_bad_line instead of becoming an index.
            df = pd.read_csv(
                io.StringIO(text),
                header=None,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                engine="python",
                on_bad_lines=_keep_bad_line,
            )
    except pd.errors.EmptyDataError:
        report.error = "file is empty"
    except (pd.errors.ParserError, ValueError) as e:
        report.error = str(e)

    unbalanced_quotes = text.count('"') % 2 == 1
    if report.error:
        if unbalanced_quotes:
            report.error += " (unterminated quoted field)"
        logger.warning("CSV ingestion failed: %s", report.error)
        return [], report

    header = [value if isinstance(value, str) else "" for value in df.iloc[0].tolist()] if len(df) else []
    rows: List[RawRow] = []
    for values in df.iloc[1:].itertuples(index=False, name=None):
        row: RawRow = {}
        for col, value in zip(header, values):
            # duplicate headers: first column wins
            row.setdefault(col, value if isinstance(value, str) else None)
        rows.append(row)

    if not rows and _count_data_lines(text):
        report.error = "no data rows could be parsed"
        if unbalanced_quotes:
            report.error += " (unterminated quoted field)"
    elif unbalanced_quotes and any("\n" in (v or "") for row in rows for v in row.values()):
        report.error = "unterminated quoted field; later rows were merged into one cell"
    if report.error:
        logger.warning("CSV ingestion problem: %s", report.error)

    report.raw_row_count = len(rows)
    report.repaired_lines = len(repaired)
    report.sentinel_replacements = _normalize_sentinels(rows)
    report.missing_columns = [c for c in REQUIRED_COLUMNS if c not in header]
    if report.missing_columns:
        logger.warning("CSV is missing required columns: %s", report.missing_columns)
    logger.debug("Read %d raw rows with columns %s", len(rows), header)
    return rows, report


def is_incomplete(row: RawRow) -> bool:
    return is_blank(row.get(COL_PRICE)) or is_blank(row.get(COL_SQUARE_FEET))


def price_ratio(row: RawRow) -> float:
    """Raw PRICE / SQUARE FEET; NaN or infinity when either side is unusable."""
    price = parse_number(row.get(COL_PRICE), default=math.nan)
    square_feet = parse_number(row.get(COL_SQUARE_FEET), default=math.nan)
    if math.isnan(price) or math.isnan(square_feet):
        return math.nan
    if square_feet == 0:
        return math.nan if price == 0 else math.copysign(math.inf, price)
    return price / square_feet


def sort_by_price_ratio(rows: List[RawRow]) -> List[RawRow]:
    """Return a new list sorted ascending by price per square foot.

    Rows with a non-finite ratio go to the end; ties and non-finite rows keep
    their input order.
    """
    def _key(row: RawRow):
        ratio = price_ratio(row)
        if math.isfinite(ratio):
            return (0, ratio)
        return (1, 0.0)

    return sorted(rows, key=_key)


def normalize_row(row: RawRow) -> Property:
    zip_code = row.get(COL_ZIP)
    return Property(
        price=parse_number(row.get(COL_PRICE), 0.0),
        beds=parse_int(row.get(COL_BEDS), 0),
        baths=parse_number(row.get(COL_BATHS), 0.0),
        zip_code=zip_code.strip() if isinstance(zip_code, str) else "",
        square_feet=parse_number(row.get(COL_SQUARE_FEET), 0.0),
        lot_size=parse_number(row.get(COL_LOT_SIZE), 0.0),
        price_per_square_foot=parse_number(row.get(COL_PRICE_PER_SQFT), 0.0),
        days_on_market=parse_optional_int(row.get(COL_DAYS_ON_MARKET)),
        year_built=parse_optional_int(row.get(COL_YEAR_BUILT)),
    )


def _count_defaults(rows: List[RawRow]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for name, col in REQUIRED_NUMERIC_FIELDS.items():
        parser = parse_int if name == "beds" else parse_number
        counts[name] = sum(1 for row in rows if parser(row.get(col), None) is None)
    return counts


def ingest(source: CsvSource, options: IngestOptions = IngestOptions()) -> IngestResult:
    """Turn an uploaded CSV into an ordered tuple of properties.

    Steps: read rows, optionally drop the first data row, optionally drop rows
    without PRICE or SQUARE FEET, sort by raw price per square foot, then
    normalise each row.
    """
    rows, report = read_raw_rows(source)

    if options.skip_first_row and rows:
        rows = rows[1:]
        report.skipped_first_row = True

    if options.drop_incomplete:
        kept = [row for row in rows if not is_incomplete(row)]
        report.dropped_incomplete = len(rows) - len(kept)
        rows = kept

    rows = sort_by_price_ratio(rows)
    report.defaulted_fields = _count_defaults(rows)
    properties = tuple(normalize_row(row) for row in rows)
    report.property_count = len(properties)

    logger.info(
        "Ingested %d properties (raw=%d, skipped_first=%s, dropped_incomplete=%d)",
        report.property_count,
        report.raw_row_count,
        report.skipped_first_row,
        report.dropped_incomplete,
    )
    return IngestResult(properties=properties, report=report)
