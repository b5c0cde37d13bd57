"""In-memory store for past analyses."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from src.config.settings import settings
from src.seo.models import AnalysisResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredAnalysis:
    """An analysis record with its storage id."""
    id: int
    result: AnalysisResult

    @property
    def url(self) -> str:
        return self.result.url

    @property
    def analyzed_at(self) -> datetime:
        return self.result.analyzed_at

    def to_dict(self) -> dict:
        return {"id": self.id, **self.result.to_dict()}


class AnalysisStore:
    """Thread-safe, insertion-ordered store keyed by id and looked up by URL."""

    def __init__(self, max_records: int | None = None):
        self.max_records = settings.storage.max_records if max_records is None else max_records
        self._records: dict[int, StoredAnalysis] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, result: AnalysisResult) -> StoredAnalysis:
        """Store ``result`` under a new id."""
        with self._lock:
            record = StoredAnalysis(id=self._next_id, result=result)
            self._records[record.id] = record
            self._next_id += 1
            self._evict()
        logger.debug("Stored analysis %d for %s", record.id, result.url)
        return record

    def get(self, record_id: int) -> StoredAnalysis | None:
        with self._lock:
            return self._records.get(record_id)

    def get_by_url(self, url: str) -> StoredAnalysis | None:
        """Most recent analysis of ``url``, if any."""
        with self._lock:
            matches = [r for r in self._records.values() if r.url == url]
        if not matches:
            return None
        return max(matches, key=lambda r: (r.analyzed_at, r.id))

    def get_fresh(
        self,
        url: str,
        max_age: timedelta | None = None,
        now: datetime | None = None,
    ) -> StoredAnalysis | None:
        """Return the latest analysis of ``url`` if it is younger than ``max_age``."""
        record = self.get_by_url(url)
        if record is None:
            return None

        if max_age is None:
            max_age = timedelta(seconds=settings.storage.cache_ttl_seconds)
        if now is None:
            now = datetime.now(UTC)
        if record.analyzed_at > now - max_age:
            return record
        return None

    def list_recent(self, limit: int | None = None) -> list[StoredAnalysis]:
        """Newest analyses first."""
        limit = settings.storage.recent_default_limit if limit is None else limit
        with self._lock:
            records = list(self._records.values())
        records.sort(key=lambda r: (r.analyzed_at, r.id), reverse=True)
        return records[:max(limit, 0)]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
            self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _evict(self) -> None:
        """Drop the oldest records beyond capacity (called with lock held)."""
        while len(self._records) > self.max_records:
            oldest = next(iter(self._records))
            del self._records[oldest]


# Global store instance
analysis_store = AnalysisStore()
