from rest_framework.authentication import BaseAuthentication


class HeaderLoginAuthentication(BaseAuthentication):
    """
    Hands the user signed in by HeaderLoginMiddleware to DRF, but only for
    requests that carry the header themselves. Cookie-only requests fall
    through to SessionAuthentication and its CSRF check.
    """

    header = "X-User-NAME"

    def authenticate(self, request):
        username = request.headers.get(self.header)
        if not username:
            return None
        user = getattr(request._request, "user", None)
        if user is None or not user.is_authenticated or user.get_username() != username:
            return None
        return (user, None)

    def authenticate_header(self, request):
        return self.header
