from dataclasses import dataclass
from datetime import date
from typing import NamedTuple, Optional


class Schedule(NamedTuple):
    interval_days: int
    ease_factor: float


@dataclass(frozen=True)
class RevisionItem:
    """Scheduling state of one memorised ayah for one user."""

    surah_id: int
    ayah_number: int
    interval_days: int
    ease_factor: float
    next_review: date
    last_reviewed: Optional[date] = None
