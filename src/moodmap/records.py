"""Mood record value types."""

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from shared_types import EmotionalCategory

from .errors import InvalidCoordinate


@dataclass(frozen=True)
class Coordinate:
    """Latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    def __post_init__(self):
        for name, value, limit in (
            ("latitude", self.latitude, 90.0),
            ("longitude", self.longitude, 180.0),
        ):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidCoordinate(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or not -limit <= value <= limit:
                raise InvalidCoordinate(f"{name} must be within [-{limit:g}, {limit:g}], got {value}")
        object.__setattr__(self, "latitude", float(self.latitude))
        object.__setattr__(self, "longitude", float(self.longitude))

    def __str__(self) -> str:
        return f"{self.latitude:.4f}, {self.longitude:.4f}"


@dataclass(frozen=True)
class MoodRecord:
    """A journal entry: how the user felt at a place, at a time."""

    coordinate: Coordinate
    label: EmotionalCategory
    created_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    note: Optional[str] = None

    def __post_init__(self):
        # Closed enumeration: a label string outside the seven categories raises ValueError
        object.__setattr__(self, "label", EmotionalCategory(self.label))
        if not self.id:
            raise ValueError("Record id must not be empty")

    def matches(self, record_id: str, coordinate: Coordinate) -> bool:
        """True if this record is the same logical entity as (record_id, coordinate)."""
        return self.id == record_id and self.coordinate == coordinate
