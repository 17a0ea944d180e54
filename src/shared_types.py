"""Shared enums and types for serenity-stops."""

from enum import StrEnum


class EmotionalCategory(StrEnum):
    """Mood labels, ordered from the most positive score range to the most negative.

    The value is the persisted label string (glyph + name).
    """

    EUPHORIC = "✨ Euphoric"
    JOYFUL = "🌸 Joyful"
    CONTENT = "🌼 Content"
    NEUTRAL = "🌿 Neutral"
    REFLECTIVE = "🍂 Reflective"
    MELANCHOLIC = "🌫️ Melancholic"
    DISTRESSED = "⛈️ Distressed"

    @property
    def display_name(self) -> str:
        return self.value.split(" ", 1)[1]

    @property
    def glyph(self) -> str:
        return self.value.split(" ", 1)[0]


class PermissionState(StrEnum):
    UNKNOWN = "unknown"
    REQUESTED = "requested"
    GRANTED = "granted"
    DENIED = "denied"


# Rich color per category, mirrors the statistics chart palette
CATEGORY_COLORS = {
    EmotionalCategory.EUPHORIC: "bright_magenta",
    EmotionalCategory.JOYFUL: "magenta",
    EmotionalCategory.CONTENT: "yellow",
    EmotionalCategory.NEUTRAL: "green",
    EmotionalCategory.REFLECTIVE: "dark_orange",
    EmotionalCategory.MELANCHOLIC: "grey62",
    EmotionalCategory.DISTRESSED: "blue",
}
