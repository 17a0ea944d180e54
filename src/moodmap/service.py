"""Mood journal: the single owner of the record collection."""

from datetime import datetime, timedelta
from typing import Callable, Optional

import structlog

from shared_types import EmotionalCategory

from .aggregator import RECENT_LIMIT, MoodSummary, summarize
from .classifier import EmotionAnalysis, MoodClassifier
from .errors import EmptyDescriptionError, InvalidCoordinate, NotFoundError, PermissionDeniedError
from .permissions import LocationPermission
from .records import Coordinate, MoodRecord
from .storage import JournalStore

logger = structlog.get_logger()


def as_coordinate(value) -> Coordinate:
    """Accept a Coordinate or a (latitude, longitude) pair."""
    if isinstance(value, Coordinate):
        return value
    try:
        latitude, longitude = value
    except (TypeError, ValueError) as e:
        raise InvalidCoordinate(f"Expected a (latitude, longitude) pair, got {value!r}") from e
    return Coordinate(latitude, longitude)


class MoodJournal:
    """Keeps an in-memory cache of records consistent with a JournalStore.

    Writes go to the store first; the cache and summary only change after the
    store call succeeds. The summary is recomputed from the full cache after
    every mutation.
    """

    def __init__(
        self,
        store: JournalStore,
        classifier: Optional[MoodClassifier] = None,
        permission: Optional[LocationPermission] = None,
        clock: Callable[[], datetime] = datetime.now,
        recent_limit: int = RECENT_LIMIT,
    ):
        """
        Args:
            store: Persistence backend
            classifier: Text classifier (defaults to lexicon scoring)
            permission: Optional location permission gate for add_record
            clock: Timestamp source for new records
            recent_limit: Max records in summary.recent
        """
        self.store = store
        self.classifier = classifier or MoodClassifier()
        self.permission = permission
        self.recent_limit = recent_limit
        self._clock = clock
        self._records: list[MoodRecord] = []
        self._summary = summarize([], recent_limit)

    @property
    def records(self) -> tuple[MoodRecord, ...]:
        return tuple(self._records)

    @property
    def summary(self) -> MoodSummary:
        return self._summary

    def load(self) -> "MoodJournal":
        """Replace the cache with the store's contents."""
        self._records = list(self.store.fetch_all())
        self._refresh()
        logger.debug("journal_loaded", count=len(self._records))
        return self

    def get(self, record_id: str) -> Optional[MoodRecord]:
        return next((r for r in self._records if r.id == record_id), None)

    def preview(self, text: str) -> EmotionAnalysis:
        """Classify text without creating a record."""
        return self.classifier.analyze(text)

    def add_record(self, coordinate, text: str) -> MoodRecord:
        """Classify text and persist a new record at coordinate.

        Raises:
            PermissionDeniedError: If a permission gate is set and not granted
            EmptyDescriptionError: If text is empty or whitespace
            InvalidCoordinate: If coordinate is out of range
            PersistenceError: If the store write fails (cache unchanged)
        """
        if self.permission is not None and not self.permission.granted:
            raise PermissionDeniedError(
                f"Location permission is {self.permission.state}, cannot add records"
            )
        if not text or not text.strip():
            raise EmptyDescriptionError("Describe how you felt before saving")

        coordinate = as_coordinate(coordinate)
        label: EmotionalCategory = self.classifier.text_to_label(text)
        record = MoodRecord(
            coordinate=coordinate,
            label=label,
            created_at=self._next_timestamp(),
            note=text.strip(),
        )

        self.store.append(record)
        self._records.append(record)
        self._refresh()

        logger.info("record_added", record_id=record.id, label=record.label.display_name)
        return record

    def delete_record(self, record_id: str) -> MoodRecord:
        """Delete a record from the store, then from the cache.

        Returns:
            The deleted record

        Raises:
            NotFoundError: If the record is not cached or has no stored counterpart
            PersistenceError: If the store read/delete fails (cache unchanged)
        """
        cached = self.get(record_id)
        if cached is None:
            raise NotFoundError(f"No record with id {record_id}")

        def same_entity(r: MoodRecord) -> bool:
            return r.matches(cached.id, cached.coordinate)

        if not any(same_entity(r) for r in self.store.fetch_all()):
            logger.warning("record_missing_from_store", record_id=record_id)
            raise NotFoundError(f"Record {record_id} is not in the journal store")

        if self.store.delete_matching(same_entity) == 0:
            raise NotFoundError(f"Record {record_id} is not in the journal store")

        self._records = [r for r in self._records if r.id != record_id]
        self._refresh()

        logger.info("record_deleted", record_id=record_id)
        return cached

    def _next_timestamp(self) -> datetime:
        now = self._clock()
        if self._records:
            latest = max(r.created_at for r in self._records)
            # Strictly increasing so reload order matches insertion order
            if now <= latest:
                return latest + timedelta(microseconds=1)
        return now

    def _refresh(self) -> None:
        self._summary = summarize(self._records, self.recent_limit)
