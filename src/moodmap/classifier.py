"""Map sentiment scores to emotional categories."""

import math
from typing import NamedTuple, Optional

import structlog

from shared_types import EmotionalCategory

from .errors import ScoringUnavailable
from .sentiment import LexiconScorer, SentimentScorer

logger = structlog.get_logger()

MIN_SCORE = -1.0
MAX_SCORE = 1.0


class EmotionAnalysis(NamedTuple):
    label: EmotionalCategory
    intensity: float


def clamp(score: float) -> float:
    """Clamp a score into [-1.0, 1.0].

    Raises:
        ValueError: If score is NaN
    """
    if math.isnan(score):
        raise ValueError("Sentiment score must be a number, got NaN")
    return max(MIN_SCORE, min(MAX_SCORE, score))


def classify(score: float) -> EmotionalCategory:
    """Map a score to one of the seven categories.

    Out-of-range scores are clamped first. Ranges, highest first:
    [0.8, 1] Euphoric, [0.5, 0.8) Joyful, [0.2, 0.5) Content, (-0.2, 0.2) Neutral,
    [-0.5, -0.2] Reflective, [-0.8, -0.5) Melancholic, [-1, -0.8) Distressed.
    """
    s = clamp(score)
    if s >= 0.8:
        return EmotionalCategory.EUPHORIC
    if s >= 0.5:
        return EmotionalCategory.JOYFUL
    if s >= 0.2:
        return EmotionalCategory.CONTENT
    if s > -0.2:
        return EmotionalCategory.NEUTRAL
    if s >= -0.5:
        return EmotionalCategory.REFLECTIVE
    if s >= -0.8:
        return EmotionalCategory.MELANCHOLIC
    return EmotionalCategory.DISTRESSED


class MoodClassifier:
    """Classify free text into an emotional category using an injected scorer."""

    def __init__(self, scorer: Optional[SentimentScorer] = None):
        self.scorer = scorer or LexiconScorer()

    def score(self, text: str) -> Optional[float]:
        """Clamped score for text, or None when no score is available."""
        if not text or not text.strip():
            return None
        try:
            raw = self.scorer.score(text)
        except ScoringUnavailable as e:
            logger.debug("scoring_unavailable", error=str(e))
            return None
        except Exception as e:
            logger.warning("scoring_failed", error=str(e))
            return None
        if isinstance(raw, bool) or not isinstance(raw, (int, float)) or math.isnan(raw):
            return None
        return clamp(raw)

    def classify(self, score: float) -> EmotionalCategory:
        return classify(score)

    def text_to_label(self, text: str) -> EmotionalCategory:
        """Label for text; Neutral when the text cannot be scored."""
        score = self.score(text)
        if score is None:
            return EmotionalCategory.NEUTRAL
        return classify(score)

    def analyze(self, text: str) -> EmotionAnalysis:
        """Label plus intensity (absolute clamped score, 0.0 without a score)."""
        score = self.score(text)
        if score is None:
            return EmotionAnalysis(EmotionalCategory.NEUTRAL, 0.0)
        return EmotionAnalysis(classify(score), abs(score))
