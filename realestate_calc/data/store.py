"""
In-memory owner of the loaded listings.

Each upload takes a generation token before parsing; a finished parse is only
applied when its token is still the latest, so a slow, stale parse can never
overwrite data from a newer upload.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from realestate_calc.data.loader import CsvSource, IngestOptions, IngestReport, IngestResult, ingest
from realestate_calc.data.models import Property

logger = logging.getLogger(__name__)


class ListingStore:
    def __init__(self) -> None:
        self._generation = 0
        self._properties: Tuple[Property, ...] = ()
        self._report: Optional[IngestReport] = None
        self.source_id: Optional[str] = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def properties(self) -> Tuple[Property, ...]:
        return self._properties

    @property
    def report(self) -> Optional[IngestReport]:
        return self._report

    def begin_upload(self) -> int:
        self._generation += 1
        return self._generation

    def commit(self, generation: int, result: IngestResult, source_id: Optional[str] = None) -> bool:
        if generation != self._generation:
            logger.debug("Discarding stale ingest result (generation %d, latest %d)", generation, self._generation)
            return False
        self._properties = result.properties
        self._report = result.report
        self.source_id = source_id
        return True

    def load(
        self,
        source: CsvSource,
        options: IngestOptions = IngestOptions(),
        source_id: Optional[str] = None,
    ) -> bool:
        token = self.begin_upload()
        return self.commit(token, ingest(source, options), source_id=source_id)

    def clear(self) -> None:
        self._generation += 1
        self._properties = ()
        self._report = None
        self.source_id = None
