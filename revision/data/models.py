from django.conf import settings
from django.db import models

from ..config import DEFAULT_EASE_FACTOR, DEFAULT_INTERVAL_DAYS


class AyahRevision(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="ayah_revisions"
    )
    surah_id = models.PositiveSmallIntegerField()
    ayah_number = models.PositiveSmallIntegerField()
    interval_days = models.PositiveIntegerField(default=DEFAULT_INTERVAL_DAYS)
    ease_factor = models.FloatField(default=DEFAULT_EASE_FACTOR)
    last_reviewed = models.DateField(null=True, blank=True)
    next_review = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["user", "surah_id", "ayah_number"], name="uniq_ayah_revision"
            ),
        ]
        indexes = [
            models.Index(fields=["user", "surah_id", "ayah_number"], name="ayah_rev_user_surah_idx"),
        ]


class SurahRevision(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="surah_revisions"
    )
    surah_id = models.PositiveSmallIntegerField()
    interval_days = models.PositiveIntegerField(default=DEFAULT_INTERVAL_DAYS)
    ease_factor = models.FloatField(default=DEFAULT_EASE_FACTOR)
    last_reviewed = models.DateField(null=True, blank=True)
    next_review = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "surah_id"], name="uniq_surah_revision"),
        ]
        indexes = [
            models.Index(fields=["user", "next_review"], name="surah_rev_user_next_idx"),
        ]
