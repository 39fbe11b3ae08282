from typing import List, Optional

import structlog
from django.utils import timezone

from ..data import repos
from ..domain.enums import AyahStatus, Quality
from ..domain.items import RevisionItem
from ..domain.logic import (
    classify_status,
    compute_next_schedule,
    default_schedule_state,
    next_review_date,
    select_next_due,
)
from ..errors import StoreUnavailable

logger = structlog.get_logger()


class ReviewSession:
    """
    Ayah review schedule of one user for the surah currently being memorised.

    The store is anything exposing `aload_schedule` and `aupsert_revision_item`
    coroutines; the Django repos module is the default.
    """

    def __init__(self, user_id, store=repos):
        self.user_id = user_id
        self.store = store
        self.surah_id: Optional[int] = None
        self.schedule: List[RevisionItem] = []
        self.loading = False
        self._generation = 0

    async def select_surah(self, surah_id: Optional[int]) -> None:
        self.surah_id = surah_id
        self.schedule = []
        if surah_id is None:
            # Invalidate whatever load is still in flight
            self._generation += 1
            self.loading = False
            return
        await self.reload()

    async def reload(self) -> None:
        if self.surah_id is None:
            logger.debug("missing_surah_context", user_id=str(self.user_id), action="reload")
            return

        self._generation += 1
        generation = self._generation
        surah_id = self.surah_id
        self.loading = True

        try:
            items = await self.store.aload_schedule(self.user_id, surah_id)
        except StoreUnavailable as exc:
            logger.warning("schedule_load_failed",
                user_id=str(self.user_id),
                surah_id=surah_id,
                error=str(exc),
            )
            items = None

        if generation != self._generation:
            logger.info("stale_schedule_discarded",
                user_id=str(self.user_id),
                surah_id=surah_id,
                active_surah_id=self.surah_id,
            )
            return

        self.loading = False
        if items is not None:
            self.schedule = items

    def find(self, ayah_number: int) -> Optional[RevisionItem]:
        for item in self.schedule:
            if item.ayah_number == ayah_number:
                return item
        return None

    async def review_ayah(self, ayah_number: int, quality, today=None) -> Optional[RevisionItem]:
        if self.surah_id is None:
            logger.debug("missing_surah_context", user_id=str(self.user_id), action="review")
            return None

        quality = Quality(quality)
        today = today or timezone.localdate()
        surah_id = self.surah_id

        logger.info("review_received",
            user_id=str(self.user_id),
            surah_id=surah_id,
            ayah_number=ayah_number,
            quality=int(quality),
        )

        current = default_schedule_state(self.find(ayah_number))
        interval_days, ease_factor = compute_next_schedule(
            int(quality), current.interval_days, current.ease_factor
        )
        next_review = next_review_date(today, interval_days)

        try:
            item = await self.store.aupsert_revision_item(
                self.user_id, surah_id, ayah_number,
                today, next_review, interval_days, ease_factor,
            )
        except StoreUnavailable as exc:
            logger.warning("review_upsert_failed",
                user_id=str(self.user_id),
                surah_id=surah_id,
                ayah_number=ayah_number,
                error=str(exc),
            )
            return None

        logger.info("review_scheduled",
            user_id=str(self.user_id),
            surah_id=surah_id,
            ayah_number=ayah_number,
            interval_days=interval_days,
            ease_factor=ease_factor,
            next_review=next_review.isoformat(),
        )

        await self.reload()
        return item

    def get_ayah_status(self, ayah_number: int, today=None) -> AyahStatus:
        return classify_status(self.find(ayah_number), today or timezone.localdate())

    def get_next_due(self, today=None) -> Optional[int]:
        return select_next_due(self.schedule, today or timezone.localdate())
