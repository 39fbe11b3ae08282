import uuid
from functools import wraps

import structlog
from asgiref.sync import async_to_sync
from django.utils import timezone
from rest_framework import status, views
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from ..config import SURAH_COUNT
from ..domain.enums import QUALITY_LABELS, QUICK_RATING_LABELS, Quality, QuickRating
from ..errors import QuranTextUnavailable, SurahNotScheduled
from ..services.quran_text import get_surah_text
from ..services.sessions import ReviewSession
from ..services.surahs import enrol_memorised_surahs, review_surah, surah_overview
from .serializers import (
    EnrolInSerializer,
    QuickReviewInSerializer,
    ReviewInSerializer,
    RevisionItemSerializer,
    ScheduleQuerySerializer,
    SurahRevisionSerializer,
)

base_logger = structlog.get_logger()


def require_user(method):
    @wraps(method)
    def wrapper(self, request, *args, **kwargs):
        if not request.user.is_authenticated:
            return Response(
                {"error": "User not authenticated"}, status=status.HTTP_401_UNAUTHORIZED
            )
        return method(self, request, *args, **kwargs)

    return wrapper


def check_surah_id(surah_id):
    if not 1 <= surah_id <= SURAH_COUNT:
        raise ValidationError({"surah_id": f"must be between 1 and {SURAH_COUNT}"})


def check_ayah_number(ayah_number):
    if ayah_number < 1:
        raise ValidationError({"ayah_number": "must be a positive integer"})


def load_session(user_id, surah_id):
    session = ReviewSession(user_id)
    async_to_sync(session.select_surah)(surah_id)
    return session


def item_payload(session, item, today):
    data = dict(RevisionItemSerializer(item).data)
    data["status"] = session.get_ayah_status(item.ayah_number, today).value
    return data


class AyahScheduleView(views.APIView):
    @require_user
    def get(self, request, surah_id):
        logger = base_logger.bind(request_id=str(uuid.uuid4()))
        check_surah_id(surah_id)

        qs = ScheduleQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        ayah_count = qs.validated_data.get("ayah_count")

        session = load_session(request.user.pk, surah_id)
        today = timezone.localdate()

        body = {
            "surah_id": surah_id,
            "today": today.isoformat(),
            "items": [item_payload(session, item, today) for item in session.schedule],
            "next_due": session.get_next_due(today),
        }
        if ayah_count:
            body["statuses"] = {
                str(n): session.get_ayah_status(n, today).value
                for n in range(1, ayah_count + 1)
            }

        logger.info("ayah_schedule_api_response",
            user_id=str(request.user.pk),
            surah_id=surah_id,
            item_count=len(session.schedule),
            next_due=body["next_due"],
        )
        return Response(body)


class AyahReviewView(views.APIView):
    @require_user
    def post(self, request, surah_id, ayah_number):
        logger = base_logger.bind(request_id=str(uuid.uuid4()))
        check_surah_id(surah_id)
        check_ayah_number(ayah_number)

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        quality = s.validated_data["quality"]

        session = load_session(request.user.pk, surah_id)
        today = timezone.localdate()
        item = async_to_sync(session.review_ayah)(ayah_number, quality, today)

        if item is None:
            logger.warning("ayah_review_api_store_unavailable",
                user_id=str(request.user.pk),
                surah_id=surah_id,
                ayah_number=ayah_number,
            )
            return Response(
                {"error": "Revision schedule is temporarily unavailable"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        body = item_payload(session, item, today)
        body["quality_label"] = QUALITY_LABELS[Quality(quality)]
        body["next_due"] = session.get_next_due(today)

        logger.info("ayah_review_api_response",
            user_id=str(request.user.pk),
            surah_id=surah_id,
            ayah_number=ayah_number,
            quality=quality,
            interval_days=item.interval_days,
            next_review=item.next_review.isoformat(),
            status=status.HTTP_201_CREATED,
        )
        return Response(body, status=status.HTTP_201_CREATED)


class NextDueAyahView(views.APIView):
    @require_user
    def get(self, request, surah_id):
        check_surah_id(surah_id)
        session = load_session(request.user.pk, surah_id)
        return Response({"surah_id": surah_id, "ayah_number": session.get_next_due()})


class SurahOverviewView(views.APIView):
    @require_user
    def get(self, request):
        logger = base_logger.bind(request_id=str(uuid.uuid4()))
        today = timezone.localdate()
        overview = surah_overview(request.user.pk, today)

        logger.info("surah_overview_api_response",
            user_id=str(request.user.pk),
            due_count=len(overview.due_today),
            upcoming_count=len(overview.upcoming),
        )
        return Response(
            {
                "today": today.isoformat(),
                "due_today": SurahRevisionSerializer(overview.due_today, many=True).data,
                "upcoming": SurahRevisionSerializer(overview.upcoming, many=True).data,
            }
        )


class SurahEnrolView(views.APIView):
    @require_user
    def post(self, request):
        s = EnrolInSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        enrolled = enrol_memorised_surahs(request.user.pk, s.validated_data["surah_ids"])
        code = status.HTTP_201_CREATED if enrolled else status.HTTP_200_OK
        return Response({"enrolled": enrolled}, status=code)


class SurahReviewView(views.APIView):
    @require_user
    def post(self, request, surah_id):
        logger = base_logger.bind(request_id=str(uuid.uuid4()))
        check_surah_id(surah_id)

        s = QuickReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        quality = s.validated_data["quality"]

        try:
            sched = review_surah(request.user.pk, surah_id, quality)
        except SurahNotScheduled as exc:
            return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)

        body = dict(SurahRevisionSerializer(sched).data)
        body["rating_label"] = QUICK_RATING_LABELS[QuickRating(quality)]

        logger.info("surah_review_api_response",
            user_id=str(request.user.pk),
            surah_id=surah_id,
            quality=quality,
            interval_days=sched.interval_days,
            next_review=sched.next_review.isoformat(),
        )
        return Response(body, status=status.HTTP_200_OK)


class SurahTextView(views.APIView):
    @require_user
    def get(self, request, surah_id):
        check_surah_id(surah_id)
        try:
            ayahs = get_surah_text(surah_id)
        except QuranTextUnavailable as exc:
            base_logger.warning("surah_text_unavailable", surah_id=surah_id, error=str(exc))
            return Response({"error": str(exc)}, status=status.HTTP_502_BAD_GATEWAY)

        return Response(
            {
                "surah_id": surah_id,
                "ayahs": [ayah._asdict() for ayah in ayahs],
            }
        )
