from django.urls import path
from .views import (
    AyahReviewView,
    AyahScheduleView,
    NextDueAyahView,
    SurahEnrolView,
    SurahOverviewView,
    SurahReviewView,
    SurahTextView,
)

urlpatterns = [
    path("surahs/<int:surah_id>/ayahs/schedule", AyahScheduleView.as_view(), name="ayah-schedule"),
    path(
        "surahs/<int:surah_id>/ayahs/<int:ayah_number>/reviews",
        AyahReviewView.as_view(),
        name="ayah-review",
    ),
    path("surahs/<int:surah_id>/ayahs/next-due", NextDueAyahView.as_view(), name="ayah-next-due"),
    path("surahs/<int:surah_id>/text", SurahTextView.as_view(), name="surah-text"),
    path("revisions/surahs", SurahOverviewView.as_view(), name="surah-overview"),
    path("revisions/surahs/enrol", SurahEnrolView.as_view(), name="surah-enrol"),
    path("revisions/surahs/<int:surah_id>/reviews", SurahReviewView.as_view(), name="surah-review"),
]
