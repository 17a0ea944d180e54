"""Tests for journal store implementations."""

from datetime import datetime
from unittest.mock import patch

import frontmatter
import pytest

from moodmap.errors import PersistenceError
from moodmap.records import Coordinate, MoodRecord
from moodmap.storage import InMemoryJournalStore, MarkdownJournalStore
from shared_types import EmotionalCategory as E


class TestMarkdownJournalStore:
    def test_append_creates_file(self, journal_dir, make_record):
        store = MarkdownJournalStore(journal_dir)
        record = make_record(E.JOYFUL, record_id="abc-123", note="Sunny bench")

        path = store.append(record)

        assert path.exists()
        assert path.name == "2024-12-16_abc-123.md"
        post = frontmatter.load(path)
        assert post["label"] == "🌸 Joyful"
        assert post.content == "Sunny bench"

    def test_round_trip(self, journal_dir):
        store = MarkdownJournalStore(journal_dir)
        record = MoodRecord(
            coordinate=Coordinate(34.07361234567891, -118.40040000000001),
            label=E.MELANCHOLIC,
            created_at=datetime(2024, 12, 17, 18, 30, 12, 345678),
            note="Rain on the pier",
        )
        store.append(record)

        loaded = store.fetch_all()

        assert loaded == [record]
        assert loaded[0].coordinate.latitude == record.coordinate.latitude
        assert loaded[0].created_at == record.created_at

    def test_round_trip_without_note(self, journal_dir, make_record):
        store = MarkdownJournalStore(journal_dir)
        record = make_record(E.NEUTRAL)
        store.append(record)
        assert store.fetch_all()[0].note is None

    def test_fetch_all_oldest_first(self, journal_dir, make_record):
        store = MarkdownJournalStore(journal_dir)
        for minutes in (30, 0, 10):
            store.append(make_record(E.CONTENT, minutes))

        created = [r.created_at for r in store.fetch_all()]

        assert created == sorted(created)

    def test_fetch_all_empty(self, journal_dir):
        assert MarkdownJournalStore(journal_dir).fetch_all() == []

    def test_creates_directory(self, tmp_path):
        target = tmp_path / "nested" / "journal"
        MarkdownJournalStore(target)
        assert target.is_dir()

    def test_duplicate_append_rejected(self, journal_dir, make_record):
        store = MarkdownJournalStore(journal_dir)
        record = make_record(E.JOYFUL, record_id="dup")
        store.append(record)
        with pytest.raises(PersistenceError):
            store.append(record)
        assert len(store.fetch_all()) == 1

    def test_write_failure_wrapped(self, journal_dir, make_record):
        store = MarkdownJournalStore(journal_dir)
        with patch("builtins.open", side_effect=PermissionError("read-only")):
            with pytest.raises(PersistenceError):
                store.append(make_record(E.JOYFUL))
        assert list(journal_dir.glob("*.md")) == []

    def test_unsafe_id_rejected(self, journal_dir, make_record):
        store = MarkdownJournalStore(journal_dir)
        with pytest.raises(PersistenceError):
            store.append(make_record(E.JOYFUL, record_id="../../"))

    def test_corrupt_file_raises(self, journal_dir):
        (journal_dir / "2024-01-01_bad.md").write_text("---\nlabel: [unclosed\n---\n")
        with pytest.raises(PersistenceError):
            MarkdownJournalStore(journal_dir).fetch_all()

    def test_unknown_label_raises(self, journal_dir):
        (journal_dir / "2024-01-01_x.md").write_text(
            "---\nid: x\nlatitude: 1.0\nlongitude: 2.0\nlabel: Happy\ncreated: '2024-01-01T10:00:00'\n---\n"
        )
        with pytest.raises(PersistenceError):
            MarkdownJournalStore(journal_dir).fetch_all()

    def test_timezone_aware_created_normalised(self, journal_dir, make_record):
        store = MarkdownJournalStore(journal_dir)
        store.append(make_record(E.JOYFUL, record_id="naive"))
        (journal_dir / "2024-12-16_aware.md").write_text(
            "---\nid: aware\nlatitude: 1.0\nlongitude: 2.0\nlabel: \"🌿 Neutral\"\n"
            "created: '2024-12-16T12:00:00+00:00'\n---\n",
            encoding="utf-8",
        )

        records = store.fetch_all()

        assert {r.id for r in records} == {"naive", "aware"}
        assert all(r.created_at.tzinfo is None for r in records)

    def test_delete_matching(self, journal_dir, make_record):
        store = MarkdownJournalStore(journal_dir)
        keep = make_record(E.JOYFUL, 0, record_id="keep")
        drop = make_record(E.DISTRESSED, 1, record_id="drop")
        store.append(keep)
        store.append(drop)

        deleted = store.delete_matching(lambda r: r.id == "drop")

        assert deleted == 1
        assert store.fetch_all() == [keep]

    def test_delete_matching_none(self, journal_dir, make_record):
        store = MarkdownJournalStore(journal_dir)
        store.append(make_record(E.JOYFUL))
        assert store.delete_matching(lambda r: False) == 0
        assert len(store.fetch_all()) == 1

    def test_ignores_non_markdown_files(self, journal_dir, make_record):
        (journal_dir / "notes.txt").write_text("not a record")
        store = MarkdownJournalStore(journal_dir)
        store.append(make_record(E.JOYFUL))
        assert len(store.fetch_all()) == 1


class TestInMemoryJournalStore:
    def test_append_and_fetch(self, make_record):
        store = InMemoryJournalStore()
        a = make_record(E.JOYFUL, 5)
        b = make_record(E.NEUTRAL, 1)
        store.append(a)
        store.append(b)
        assert store.fetch_all() == [b, a]

    def test_duplicate_rejected(self, make_record):
        record = make_record(E.JOYFUL, record_id="same")
        store = InMemoryJournalStore([record])
        with pytest.raises(PersistenceError):
            store.append(record)

    def test_delete_matching(self, make_record):
        a = make_record(E.JOYFUL, 0, record_id="a")
        b = make_record(E.JOYFUL, 1, record_id="b")
        store = InMemoryJournalStore([a, b])
        assert store.delete_matching(lambda r: r.id == "a") == 1
        assert store.fetch_all() == [b]
