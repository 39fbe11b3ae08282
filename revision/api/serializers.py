from rest_framework import serializers

from ..config import MAX_QUALITY, MIN_QUALITY, SURAH_COUNT
from ..domain.enums import QUICK_RATING_LABELS


class ReviewInSerializer(serializers.Serializer):
    quality = serializers.IntegerField(min_value=MIN_QUALITY, max_value=MAX_QUALITY)


class QuickReviewInSerializer(serializers.Serializer):
    quality = serializers.ChoiceField(
        choices=[(int(rating), label) for rating, label in QUICK_RATING_LABELS.items()]
    )


class ScheduleQuerySerializer(serializers.Serializer):
    ayah_count = serializers.IntegerField(min_value=1, required=False)


class EnrolInSerializer(serializers.Serializer):
    surah_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1, max_value=SURAH_COUNT),
        allow_empty=True,
    )


class RevisionItemSerializer(serializers.Serializer):
    surah_id = serializers.IntegerField()
    ayah_number = serializers.IntegerField()
    interval_days = serializers.IntegerField()
    ease_factor = serializers.FloatField()
    last_reviewed = serializers.DateField(allow_null=True)
    next_review = serializers.DateField()


class SurahRevisionSerializer(serializers.Serializer):
    surah_id = serializers.IntegerField()
    interval_days = serializers.IntegerField()
    ease_factor = serializers.FloatField()
    last_reviewed = serializers.DateField(allow_null=True)
    next_review = serializers.DateField()
