from .aggregator import MoodSummary, chart_data, has_enough_data, summarize
from .classifier import EmotionAnalysis, MoodClassifier, classify, clamp
from .errors import (
    EmptyDescriptionError,
    InvalidCoordinate,
    MoodJournalError,
    NotFoundError,
    PermissionDeniedError,
    PersistenceError,
    ScoringUnavailable,
)
from .permissions import LocationPermission
from .records import Coordinate, MoodRecord
from .sentiment import LexiconScorer, SentimentScorer
from .service import MoodJournal
from .storage import InMemoryJournalStore, JournalStore, MarkdownJournalStore

__all__ = [
    "MoodJournal",
    "MoodClassifier",
    "MoodRecord",
    "MoodSummary",
    "Coordinate",
    "EmotionAnalysis",
    "JournalStore",
    "InMemoryJournalStore",
    "MarkdownJournalStore",
    "LocationPermission",
    "SentimentScorer",
    "LexiconScorer",
    "classify",
    "clamp",
    "summarize",
    "has_enough_data",
    "chart_data",
    "MoodJournalError",
    "ScoringUnavailable",
    "PersistenceError",
    "NotFoundError",
    "InvalidCoordinate",
    "EmptyDescriptionError",
    "PermissionDeniedError",
]
