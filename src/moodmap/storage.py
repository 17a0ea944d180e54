"""Markdown mood journal persistence."""

import re
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Callable

import frontmatter
import structlog
import yaml

from .errors import PersistenceError
from .records import Coordinate, MoodRecord

logger = structlog.get_logger()

MAX_NOTE_LENGTH = 10_000


def _sanitize_slug(text: str) -> str:
    """Sanitize text into safe filename slug. Only [a-z0-9-] allowed."""
    slug = text.lower().replace(" ", "-")
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    return slug[:50]


def _parse_created(value) -> datetime:
    created = value if isinstance(value, datetime) else datetime.fromisoformat(str(value))
    if created.tzinfo is not None:
        # Stored timestamps are naive local time
        created = created.astimezone().replace(tzinfo=None)
    return created


class JournalStore(ABC):
    """Persistence boundary for mood records.

    Every method raises ``PersistenceError`` on failure and leaves stored state as
    it was before the call.
    """

    @abstractmethod
    def append(self, record: MoodRecord) -> object:
        """Persist a new record."""

    @abstractmethod
    def fetch_all(self) -> list[MoodRecord]:
        """Return all stored records, oldest first."""

    @abstractmethod
    def delete_matching(self, predicate: Callable[[MoodRecord], bool]) -> int:
        """Delete records accepted by predicate and return how many were deleted."""


class InMemoryJournalStore(JournalStore):
    """Non-persistent store. Records with equal timestamps keep insertion order."""

    def __init__(self, records: list[MoodRecord] | None = None):
        self._records: list[MoodRecord] = list(records or [])

    def append(self, record: MoodRecord) -> None:
        if any(r.id == record.id for r in self._records):
            raise PersistenceError(f"Record {record.id} already stored")
        self._records.append(record)

    def fetch_all(self) -> list[MoodRecord]:
        return sorted(self._records, key=lambda r: r.created_at)

    def delete_matching(self, predicate: Callable[[MoodRecord], bool]) -> int:
        kept = [r for r in self._records if not predicate(r)]
        deleted = len(self._records) - len(kept)
        self._records = kept
        return deleted


class MarkdownJournalStore(JournalStore):
    """Stores each mood record as a markdown file with YAML frontmatter.

    The record's description is the file body; id, coordinate, label and
    creation time live in the frontmatter.
    """

    def __init__(self, journal_dir: str | Path):
        self.journal_dir = Path(journal_dir).expanduser().resolve()
        try:
            self.journal_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(f"Cannot create journal directory {self.journal_dir}: {e}") from e

    def _validate_path(self, filepath: Path) -> Path:
        """Ensure resolved path is inside journal_dir."""
        resolved = filepath.resolve()
        if not resolved.is_relative_to(self.journal_dir):
            raise PersistenceError(f"Path escapes journal directory: {filepath}")
        return resolved

    def path_for(self, record: MoodRecord) -> Path:
        slug = _sanitize_slug(record.id)
        if not slug:
            raise PersistenceError(f"Record id cannot be used as a filename: {record.id!r}")
        filename = f"{record.created_at.strftime('%Y-%m-%d')}_{slug}.md"
        return self._validate_path(self.journal_dir / filename)

    def append(self, record: MoodRecord) -> Path:
        """Persist a new record.

        Returns:
            Path to created file

        Raises:
            PersistenceError: If the file exists already or cannot be written
        """
        note = record.note or ""
        if len(note) > MAX_NOTE_LENGTH:
            raise PersistenceError(f"Note exceeds max length ({MAX_NOTE_LENGTH} chars)")

        post = frontmatter.Post(note)
        post["id"] = record.id
        post["latitude"] = record.coordinate.latitude
        post["longitude"] = record.coordinate.longitude
        post["label"] = str(record.label)
        post["created"] = record.created_at.isoformat()

        filepath = self.path_for(record)
        try:
            with open(filepath, "x", encoding="utf-8") as f:
                f.write(frontmatter.dumps(post))
        except FileExistsError as e:
            raise PersistenceError(f"Record {record.id} already stored") from e
        except OSError as e:
            filepath.unlink(missing_ok=True)
            raise PersistenceError(f"Failed to write {filepath.name}: {e}") from e

        logger.debug("record_persisted", record_id=record.id, path=str(filepath))
        return filepath

    def _load(self, filepath: Path) -> MoodRecord:
        try:
            post = frontmatter.load(filepath)
            return MoodRecord(
                id=str(post["id"]),
                coordinate=Coordinate(post["latitude"], post["longitude"]),
                label=post["label"],
                created_at=_parse_created(post["created"]),
                note=post.content or None,
            )
        except (OSError, yaml.YAMLError, KeyError, TypeError, ValueError) as e:
            raise PersistenceError(f"Unreadable record file {filepath.name}: {e}") from e

    def _iter_files(self) -> list[Path]:
        try:
            return sorted(self.journal_dir.glob("*.md"))
        except OSError as e:
            raise PersistenceError(f"Cannot list journal directory: {e}") from e

    def fetch_all(self) -> list[MoodRecord]:
        """Load every stored record, oldest first."""
        records = [self._load(f) for f in self._iter_files()]
        records.sort(key=lambda r: r.created_at)
        return records

    def delete_matching(self, predicate: Callable[[MoodRecord], bool]) -> int:
        """Delete every stored record the predicate accepts.

        Returns:
            Number of records deleted
        """
        deleted = 0
        for filepath in self._iter_files():
            record = self._load(filepath)
            if not predicate(record):
                continue
            try:
                filepath.unlink()
            except OSError as e:
                raise PersistenceError(f"Failed to delete {filepath.name}: {e}") from e
            deleted += 1
        return deleted
