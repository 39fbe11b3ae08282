from django.contrib.auth import login
from django.http import JsonResponse

from hifz.models import User

import logging

logger = logging.getLogger(__name__)


# Sign-in is owned by the hosting app; API callers name themselves in a header
class HeaderLoginMiddleware:
    header = "X-User-NAME"

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.path.startswith("/api"):
            username = request.headers.get(self.header)
            if username:
                logger.info("Header login for user: %s", username)
                try:
                    user = User.objects.get(username=username)
                except User.DoesNotExist:
                    return JsonResponse(
                        {"error": "User not found or invalid credentials."}, status=401
                    )
                login(request, user)
        response = self.get_response(request)
        return response
