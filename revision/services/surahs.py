from typing import List, NamedTuple

import structlog
from django.db import transaction
from django.utils import timezone

from ..config import UPCOMING_LIMIT
from ..data.models import SurahRevision
from ..data.repos import (
    create_surah_revisions,
    get_surah_revision_for_update,
    list_surah_revisions,
    scheduled_surah_ids,
)
from ..domain.enums import Quality
from ..domain.logic import compute_next_schedule, next_review_date
from ..errors import SurahNotScheduled

logger = structlog.get_logger()


class SurahOverview(NamedTuple):
    due_today: List[SurahRevision]
    upcoming: List[SurahRevision]


def enrol_memorised_surahs(user_id, surah_ids, today=None):
    today = today or timezone.localdate()
    already = scheduled_surah_ids(user_id)
    missing = sorted(set(surah_ids) - already)
    if missing:
        create_surah_revisions(user_id, missing, today)
        logger.info("surahs_enrolled",
            user_id=str(user_id),
            surah_ids=missing,
            next_review=today.isoformat(),
        )
    return missing


def review_surah(user_id, surah_id, quality, today=None):
    quality = Quality(quality)
    today = today or timezone.localdate()

    logger.info("surah_review_received",
        user_id=str(user_id),
        surah_id=surah_id,
        quality=int(quality),
    )

    # Serialize schedule updates per (user, surah)
    with transaction.atomic():
        try:
            sched = get_surah_revision_for_update(user_id, surah_id)
        except SurahRevision.DoesNotExist:
            raise SurahNotScheduled(surah_id) from None

        interval_days, ease_factor = compute_next_schedule(
            int(quality), sched.interval_days, sched.ease_factor
        )
        sched.interval_days = interval_days
        sched.ease_factor = ease_factor
        sched.last_reviewed = today
        sched.next_review = next_review_date(today, interval_days)
        sched.save(update_fields=["interval_days", "ease_factor", "last_reviewed", "next_review"])

    logger.info("surah_review_scheduled",
        user_id=str(user_id),
        surah_id=surah_id,
        interval_days=interval_days,
        ease_factor=ease_factor,
        next_review=sched.next_review.isoformat(),
    )
    return sched


def surah_overview(user_id, today=None):
    today = today or timezone.localdate()
    rows = list_surah_revisions(user_id)
    due_today = [row for row in rows if row.next_review <= today]
    upcoming = [row for row in rows if row.next_review > today][:UPCOMING_LIMIT]
    return SurahOverview(due_today, upcoming)
