import math
from datetime import date, timedelta
from typing import Iterable, Optional

from .enums import AyahStatus
from .items import RevisionItem, Schedule
from ..config import (
    DEFAULT_EASE_FACTOR,
    DEFAULT_INTERVAL_DAYS,
    GRADUATION_STEPS,
    MIN_EASE_FACTOR,
    PASSING_QUALITY,
)


def compute_next_schedule(quality, current_interval_days: int, current_ease_factor: float) -> Schedule:
    # quality is validated by callers; the formula is defined for any number
    lapse = 5 - quality
    ease = current_ease_factor + (0.1 - lapse * (0.08 + lapse * 0.02))
    ease = max(MIN_EASE_FACTOR, ease)

    if quality < PASSING_QUALITY:
        return Schedule(1, ease)

    for ceiling, interval in GRADUATION_STEPS:
        if current_interval_days <= ceiling:
            return Schedule(interval, ease)

    # Half-up rounding, not banker's rounding
    return Schedule(math.floor(current_interval_days * ease + 0.5), ease)


def default_schedule_state(item: Optional[RevisionItem]) -> Schedule:
    """Starting state for a review: the item's own state, or the defaults for a new ayah."""
    if item is None:
        return Schedule(DEFAULT_INTERVAL_DAYS, DEFAULT_EASE_FACTOR)
    return Schedule(item.interval_days, item.ease_factor)


def next_review_date(today: date, interval_days: int) -> date:
    return today + timedelta(days=interval_days)


def classify_status(item: Optional[RevisionItem], today: date) -> AyahStatus:
    if item is None:
        return AyahStatus.NEW
    if item.next_review < today:
        return AyahStatus.OVERDUE
    if item.next_review == today:
        return AyahStatus.DUE
    return AyahStatus.SAFE


def select_next_due(items: Iterable[RevisionItem], today: date) -> Optional[int]:
    """Ayah number to review next, or None when nothing is due.

    `items` are expected in load order (ayah ascending); the sort is stable,
    so among equally overdue ayahs the first loaded one wins.
    """
    due = sorted(
        (item for item in items if item.next_review <= today),
        key=lambda item: item.next_review,
    )
    return due[0].ayah_number if due else None
