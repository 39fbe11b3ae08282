import pytest
import logging
from datetime import date, timedelta
from django.urls import reverse
from django.utils import timezone

from revision.data.models import SurahRevision
from revision.errors import SurahNotScheduled
from revision.services.surahs import enrol_memorised_surahs, review_surah, surah_overview

logger = logging.getLogger(__name__)

TODAY = date(2024, 3, 10)


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="hafiz")


@pytest.mark.django_db
def test_enrol_adds_only_missing_surahs(user):
    assert enrol_memorised_surahs(user.pk, [114, 112, 113], today=TODAY) == [112, 113, 114]
    assert enrol_memorised_surahs(user.pk, [113, 1], today=TODAY) == [1]
    assert enrol_memorised_surahs(user.pk, [1, 112], today=TODAY) == []

    rows = SurahRevision.objects.filter(user=user)
    assert rows.count() == 4
    row = rows.get(surah_id=1)
    assert (row.interval_days, row.ease_factor) == (1, 2.5)
    assert row.last_reviewed == row.next_review == TODAY


@pytest.mark.django_db
def test_enrol_leaves_existing_schedule_untouched(user):
    enrol_memorised_surahs(user.pk, [67], today=TODAY)
    review_surah(user.pk, 67, 5, today=TODAY)

    enrol_memorised_surahs(user.pk, [67], today=TODAY + timedelta(days=3))

    row = SurahRevision.objects.get(user=user, surah_id=67)
    assert row.next_review == TODAY + timedelta(days=1)


@pytest.mark.django_db
def test_review_surah_progression(user):
    enrol_memorised_surahs(user.pk, [36], today=TODAY)

    first = review_surah(user.pk, 36, 4, today=TODAY)
    assert (first.interval_days, first.next_review) == (1, TODAY + timedelta(days=1))

    SurahRevision.objects.filter(user=user, surah_id=36).update(interval_days=7)
    grown = review_surah(user.pk, 36, 5, today=TODAY)
    assert grown.interval_days == 18
    assert grown.ease_factor == pytest.approx(2.6)

    hard = review_surah(user.pk, 36, 2, today=TODAY)
    assert hard.interval_days == 1
    assert hard.ease_factor == pytest.approx(2.28)
    logger.info("✓ Passed: surah review Good → Easy → Hard")


@pytest.mark.django_db
def test_review_unscheduled_surah_raises(user):
    with pytest.raises(SurahNotScheduled):
        review_surah(user.pk, 18, 4, today=TODAY)


@pytest.mark.django_db
def test_overview_splits_due_and_upcoming(user):
    enrol_memorised_surahs(user.pk, range(100, 111), today=TODAY)
    for offset, surah_id in enumerate(range(100, 111)):
        SurahRevision.objects.filter(user=user, surah_id=surah_id).update(
            next_review=TODAY + timedelta(days=offset - 3)
        )

    overview = surah_overview(user.pk, today=TODAY)

    assert [row.surah_id for row in overview.due_today] == [100, 101, 102, 103]
    assert [row.surah_id for row in overview.upcoming] == [104, 105, 106, 107, 108]


@pytest.mark.django_db
def test_surah_endpoints(client, user):
    headers = {"HTTP_X_USER_NAME": "hafiz"}
    today = timezone.localdate()

    resp = client.post(
        reverse("surah-enrol"), data={"surah_ids": [1, 114]},
        content_type="application/json", **headers,
    )
    assert resp.status_code == 201
    assert resp.json() == {"enrolled": [1, 114]}

    overview = client.get(reverse("surah-overview"), **headers).json()
    assert [row["surah_id"] for row in overview["due_today"]] == [1, 114]
    assert overview["upcoming"] == []

    resp = client.post(
        reverse("surah-review", kwargs={"surah_id": 114}), data={"quality": 5},
        content_type="application/json", **headers,
    )
    data = resp.json()
    assert resp.status_code == 200
    assert data["rating_label"] == "Easy"
    assert data["next_review"] == (today + timedelta(days=1)).isoformat()

    resp = client.post(
        reverse("surah-review", kwargs={"surah_id": 2}), data={"quality": 4},
        content_type="application/json", **headers,
    )
    assert resp.status_code == 404


@pytest.mark.django_db
def test_enrol_rejects_invalid_surah_ids(client, user):
    resp = client.post(
        reverse("surah-enrol"), data={"surah_ids": [0, 115]},
        content_type="application/json", HTTP_X_USER_NAME="hafiz",
    )
    assert resp.status_code == 400
    assert not SurahRevision.objects.exists()


@pytest.mark.django_db
@pytest.mark.parametrize("quality, label", [(2, "Hard"), (4, "Good"), (5, "Easy")])
def test_surah_review_uses_quick_rating_labels(client, user, quality, label):
    enrol_memorised_surahs(user.pk, [55], today=TODAY)

    resp = client.post(
        reverse("surah-review", kwargs={"surah_id": 55}), data={"quality": quality},
        content_type="application/json", HTTP_X_USER_NAME="hafiz",
    )

    assert resp.status_code == 200
    assert resp.json()["rating_label"] == label


@pytest.mark.django_db
@pytest.mark.parametrize("quality", [0, 1, 3, 6])
def test_surah_review_rejects_ratings_outside_quick_scale(client, user, quality):
    enrol_memorised_surahs(user.pk, [55], today=TODAY)

    resp = client.post(
        reverse("surah-review", kwargs={"surah_id": 55}), data={"quality": quality},
        content_type="application/json", HTTP_X_USER_NAME="hafiz",
    )

    assert resp.status_code == 400
    row = SurahRevision.objects.get(user=user, surah_id=55)
    assert row.next_review == TODAY
