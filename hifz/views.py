from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response


class UserViewSet(viewsets.ViewSet):
    @action(detail=False, methods=["get"])
    def me(self, request):
        """
        The signed-in user and how much of their memorisation is on a schedule.
        """
        if not request.user.is_authenticated:
            return Response(
                {"error": "User not authenticated"}, status=status.HTTP_401_UNAUTHORIZED
            )

        user = request.user
        return Response(
            {
                "username": user.username,
                "scheduled_ayahs": user.ayah_revisions.count(),
                "scheduled_surahs": user.surah_revisions.count(),
            },
            status=status.HTTP_200_OK,
        )
