from django.db import DatabaseError

from ..config import DEFAULT_EASE_FACTOR, DEFAULT_INTERVAL_DAYS
from ..domain.items import RevisionItem
from ..errors import StoreUnavailable
from .models import AyahRevision, SurahRevision


def to_revision_item(row: AyahRevision) -> RevisionItem:
    return RevisionItem(
        surah_id=row.surah_id,
        ayah_number=row.ayah_number,
        interval_days=row.interval_days,
        ease_factor=row.ease_factor,
        next_review=row.next_review,
        last_reviewed=row.last_reviewed,
    )


async def aload_schedule(user_id, surah_id):
    """
    All revision items of one surah for one user, ordered by ayah number.
    """
    qs = AyahRevision.objects.filter(user_id=user_id, surah_id=surah_id).order_by("ayah_number")
    try:
        return [to_revision_item(row) async for row in qs]
    except DatabaseError as exc:
        raise StoreUnavailable(str(exc)) from exc


async def aupsert_revision_item(
    user_id, surah_id, ayah_number, last_reviewed, next_review, interval_days, ease_factor
):
    """
    Insert or overwrite the row keyed on (user, surah, ayah).
    Concurrent writers race here; the last one wins.
    """
    try:
        row, _ = await AyahRevision.objects.aupdate_or_create(
            user_id=user_id,
            surah_id=surah_id,
            ayah_number=ayah_number,
            defaults={
                "last_reviewed": last_reviewed,
                "next_review": next_review,
                "interval_days": interval_days,
                "ease_factor": ease_factor,
            },
        )
    except DatabaseError as exc:
        raise StoreUnavailable(str(exc)) from exc
    return to_revision_item(row)


def scheduled_surah_ids(user_id):
    return set(
        SurahRevision.objects.filter(user_id=user_id).values_list("surah_id", flat=True)
    )


def create_surah_revisions(user_id, surah_ids, today):
    """
    Put surahs on the schedule, due today. Rows that already exist are left alone.
    """
    rows = [
        SurahRevision(
            user_id=user_id,
            surah_id=surah_id,
            last_reviewed=today,
            next_review=today,
            interval_days=DEFAULT_INTERVAL_DAYS,
            ease_factor=DEFAULT_EASE_FACTOR,
        )
        for surah_id in surah_ids
    ]
    SurahRevision.objects.bulk_create(rows, ignore_conflicts=True)


def get_surah_revision_for_update(user_id, surah_id):
    """
    Fetch a surah's schedule row and lock it. Must run inside transaction.atomic().
    """
    return SurahRevision.objects.select_for_update().get(user_id=user_id, surah_id=surah_id)


def list_surah_revisions(user_id):
    return list(
        SurahRevision.objects.filter(user_id=user_id).order_by("next_review", "surah_id")
    )
