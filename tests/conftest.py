"""Shared test fixtures for serenity-stops."""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from moodmap.records import Coordinate, MoodRecord  # noqa: E402
from moodmap.sentiment import SentimentScorer  # noqa: E402
from shared_types import EmotionalCategory  # noqa: E402

BASE_TIME = datetime(2024, 12, 16, 9, 0, 0)


class FixedScorer(SentimentScorer):
    """Scorer double returning canned scores keyed by text."""

    def __init__(self, scores: dict | None = None, default=None):
        self.scores = scores or {}
        self.default = default
        self.calls: list[str] = []

    def score(self, text):
        self.calls.append(text)
        return self.scores.get(text, self.default)


class StepClock:
    """Clock double advancing one minute per call."""

    def __init__(self, start: datetime = BASE_TIME, step: timedelta = timedelta(minutes=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def journal_dir(tmp_path):
    d = tmp_path / "journal"
    d.mkdir()
    return d


@pytest.fixture
def fixed_scorer():
    return FixedScorer(
        {
            "best day ever": 0.95,
            "pretty good walk": 0.6,
            "quiet coffee": 0.3,
            "just a bus stop": 0.0,
            "missed my train": -0.3,
            "lonely evening": -0.6,
            "awful news": -0.9,
        }
    )


@pytest.fixture
def step_clock():
    return StepClock()


@pytest.fixture
def make_record():
    """Factory for records at BASE_TIME + minutes."""

    def _make(label: EmotionalCategory, minutes: int = 0, record_id: str | None = None, **kwargs):
        fields = {
            "coordinate": kwargs.pop("coordinate", Coordinate(34.0736, -118.4004)),
            "label": label,
            "created_at": BASE_TIME + timedelta(minutes=minutes),
        }
        if record_id:
            fields["id"] = record_id
        fields.update(kwargs)
        return MoodRecord(**fields)

    return _make
