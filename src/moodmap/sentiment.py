"""Sentiment scoring for mood descriptions.

A scorer turns free text into a continuous score in [-1, 1], or None when the
text carries no sentiment signal. The classifier only depends on the
``SentimentScorer`` interface, so any model can be plugged in.
"""

import math
import re
from abc import ABC, abstractmethod
from typing import Optional

# Lexicon-based sentiment (no external deps needed). Weight 2 marks strong words.
_POSITIVE = {
    "good": 1.0, "happy": 1.0, "proud": 1.0, "enjoy": 1.0, "enjoyed": 1.0,
    "fun": 1.0, "nice": 1.0, "calm": 1.0, "peaceful": 1.0, "relaxed": 1.0,
    "pleasant": 1.0, "glad": 1.0, "grateful": 1.0, "thankful": 1.0, "cozy": 1.0,
    "satisfied": 1.0, "content": 1.0, "hopeful": 1.0, "inspired": 1.0,
    "motivated": 1.0, "confident": 1.0, "beautiful": 1.0, "lovely": 1.0,
    "excited": 1.0, "cheerful": 1.0, "warm": 1.0, "safe": 1.0, "love": 1.0,
    "great": 2.0, "excellent": 2.0, "awesome": 2.0, "fantastic": 2.0,
    "amazing": 2.0, "wonderful": 2.0, "incredible": 2.0, "perfect": 2.0,
    "thrilled": 2.0, "ecstatic": 2.0, "euphoric": 2.0, "overjoyed": 2.0,
    "blissful": 2.0, "magical": 2.0, "breathtaking": 2.0,
}

_NEGATIVE = {
    "bad": 1.0, "sad": 1.0, "tired": 1.0, "bored": 1.0, "boring": 1.0,
    "lonely": 1.0, "worried": 1.0, "anxious": 1.0, "stressed": 1.0,
    "confused": 1.0, "disappointed": 1.0, "frustrated": 1.0, "annoyed": 1.0,
    "stuck": 1.0, "lost": 1.0, "difficult": 1.0, "hard": 1.0, "upset": 1.0,
    "nervous": 1.0, "gloomy": 1.0, "cold": 1.0, "empty": 1.0, "hurt": 1.0,
    "miss": 1.0, "drained": 1.0, "overwhelmed": 1.0, "doubt": 1.0,
    "terrible": 2.0, "awful": 2.0, "horrible": 2.0, "miserable": 2.0,
    "hopeless": 2.0, "devastated": 2.0, "furious": 2.0, "angry": 2.0,
    "hate": 2.0, "painful": 2.0, "scared": 2.0, "terrified": 2.0,
    "depressed": 2.0, "heartbroken": 2.0, "exhausted": 2.0, "dread": 2.0,
}

_NEGATIONS = {
    "not", "no", "never", "nothing", "without", "hardly", "barely",
    "don't", "didn't", "doesn't", "isn't", "wasn't", "aren't", "weren't",
    "can't", "couldn't", "won't", "wouldn't", "dont", "didnt", "isnt", "wasnt",
}

# Normalization constant: score = total / sqrt(total^2 + alpha)
_ALPHA = 4.0

_TOKEN_RE = re.compile(r"[a-z']+")


class SentimentScorer(ABC):
    """Turns text into a sentiment score."""

    @abstractmethod
    def score(self, text: str) -> Optional[float]:
        """Return a score in [-1.0, 1.0], or None when the text cannot be scored.

        Implementations may also raise ``ScoringUnavailable``.
        """


class LexiconScorer(SentimentScorer):
    """Weighted keyword scorer with simple negation handling.

    A negator ("not", "never", ...) flips the polarity of sentiment words that
    follow it within ``negation_window`` tokens.
    """

    def __init__(self, negation_window: int = 3):
        self.negation_window = negation_window

    def score(self, text: str) -> Optional[float]:
        if not text or not text.strip():
            return None

        total = 0.0
        hits = 0
        negated = 0
        for token in _TOKEN_RE.findall(text.lower()):
            if token in _NEGATIONS:
                negated = self.negation_window
                continue

            weight = _POSITIVE.get(token, 0.0) - _NEGATIVE.get(token, 0.0)
            if weight:
                total += -weight if negated else weight
                hits += 1
            if negated:
                negated -= 1

        if hits == 0:
            return None
        return round(total / math.sqrt(total * total + _ALPHA), 4)
