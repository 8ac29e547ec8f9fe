"""Admin session transport: cookie handling and per-request verification."""

from django.conf import settings
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts import tokens
from accounts.domain import AdminSession
from core.errors import DomainError, UnauthorizedError


def get_admin_session(request: Request) -> AdminSession | None:
    """Return the verified admin session of a request, or None. Never raises."""
    token = request.COOKIES.get(settings.ADMIN_SESSION_COOKIE)
    if not token:
        header = request.META.get("HTTP_AUTHORIZATION", "")
        scheme, _, credentials = header.partition(" ")
        if scheme.lower() == "bearer":
            token = credentials.strip()
    return tokens.verify_session_token(token)


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        settings.ADMIN_SESSION_COOKIE,
        token,
        max_age=settings.ADMIN_SESSION_MAX_AGE,
        httponly=True,
        secure=not settings.DEBUG,
        samesite="Lax",
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(settings.ADMIN_SESSION_COOKIE, path="/", samesite="Lax")


class AdminSessionAPIView(APIView):
    """APIView that rejects requests without a valid admin session.

    The verified session is available as ``request.admin_session``.
    """

    unauthorized_error: type[DomainError] = UnauthorizedError

    def initial(self, request: Request, *args, **kwargs) -> None:
        super().initial(request, *args, **kwargs)
        session = get_admin_session(request)
        if session is None:
            raise self.unauthorized_error()
        request.admin_session = session
