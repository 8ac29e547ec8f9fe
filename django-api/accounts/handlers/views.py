"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let domain errors reach the exception handler for HTTP mapping
- Never contain business logic
- Never expose internal error details
"""

from uuid import UUID

from django.core.cache import cache
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts import tokens
from accounts.cache import SETTINGS_CACHE_KEY, SETTINGS_CACHE_TIMEOUT
from accounts.domain import LoginAttempt, LoginLogQuery
from accounts.handlers.serializers import (
    AdminUserSerializer,
    LoginLogSerializer,
    LoginLogStatsSerializer,
    PlatformSettingsSerializer,
    PlatformSettingsUpdateSerializer,
    first_error_message,
)
from accounts.handlers.sessions import (
    AdminSessionAPIView,
    clear_session_cookie,
    set_session_cookie,
)
from accounts.models import LoginLog
from accounts.services.admin_service import PlatformAdminService
from accounts.services.auth_service import AdminAuthService
from accounts.services.password_service import PasswordResetService
from accounts.stores.django_store import (
    DjangoAccountStore,
    DjangoInvitationStore,
    DjangoLoginLogStore,
    DjangoPlatformSettingsStore,
)
from core.errors import ForbiddenError, InvalidRequestError
from core.http import client_ip
from core.ratelimit import limiter

FORGOT_PASSWORD_MESSAGE = (
    "If an account with that email exists, we have sent a password reset link."
)


def _login_attempt(request: Request) -> LoginAttempt:
    return LoginAttempt(
        ip_address=client_ip(request),
        user_agent=request.META.get("HTTP_USER_AGENT"),
    )


def _admin_service() -> PlatformAdminService:
    return PlatformAdminService(
        DjangoPlatformSettingsStore(), DjangoLoginLogStore(), DjangoInvitationStore()
    )


class AdminLoginView(APIView):
    """Handler for POST /api/admin/login"""

    rate_limiter = limiter

    def get_service(self) -> AdminAuthService:
        return AdminAuthService(DjangoAccountStore(), DjangoLoginLogStore(), self.rate_limiter)

    def post(self, request: Request) -> Response:
        session = self.get_service().login(
            request.data.get("email"),
            request.data.get("password"),
            _login_attempt(request),
        )
        response = Response({"success": True, "user": AdminUserSerializer(session).data})
        set_session_cookie(response, tokens.create_session_token(session))
        return response


class AdminLogoutView(APIView):
    """Handler for POST /api/admin/logout"""

    def post(self, request: Request) -> Response:
        response = Response({"success": True})
        clear_session_cookie(response)
        return response


class ForgotPasswordView(APIView):
    """Handler for POST /api/auth/forgot-password"""

    rate_limiter = limiter

    def get_service(self) -> PasswordResetService:
        return PasswordResetService(DjangoAccountStore(), self.rate_limiter)

    def post(self, request: Request) -> Response:
        self.get_service().request_reset(request.data.get("email"), _login_attempt(request))
        return Response({"success": True, "message": FORGOT_PASSWORD_MESSAGE})


class ResetPasswordView(APIView):
    """Handler for POST /api/auth/reset-password"""

    rate_limiter = limiter

    def get_service(self) -> PasswordResetService:
        return PasswordResetService(DjangoAccountStore(), self.rate_limiter)

    def post(self, request: Request) -> Response:
        self.get_service().reset_password(request.data.get("token"), request.data.get("password"))
        return Response({"success": True, "message": "Password has been reset successfully"})


class PlatformSettingsView(AdminSessionAPIView):
    """Handler for GET/PATCH /api/admin/settings"""

    def get(self, request: Request) -> Response:
        data = cache.get(SETTINGS_CACHE_KEY)
        if data is None:
            data = PlatformSettingsSerializer(_admin_service().get_settings()).data
            cache.set(SETTINGS_CACHE_KEY, data, SETTINGS_CACHE_TIMEOUT)
        return Response(data)

    def patch(self, request: Request) -> Response:
        serializer = PlatformSettingsUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            raise InvalidRequestError(first_error_message(serializer.errors))
        updated = _admin_service().update_settings(dict(serializer.validated_data))
        return Response(PlatformSettingsSerializer(updated).data)


class LoginLogListView(AdminSessionAPIView):
    """Handler for GET /api/admin/login-logs"""

    def get(self, request: Request) -> Response:
        params = request.query_params
        try:
            limit = int(params.get("limit", "50"))
            offset = int(params.get("offset", "0"))
        except ValueError:
            raise InvalidRequestError("Invalid pagination parameters")

        business_id = params.get("businessId") or None
        if business_id is not None:
            try:
                business_id = str(UUID(business_id))
            except ValueError:
                raise InvalidRequestError("Invalid businessId")

        user_type = params.get("userType") or None
        if user_type is not None and user_type not in LoginLog.UserType.values:
            raise InvalidRequestError("Invalid userType")

        page, stats = _admin_service().list_login_logs(
            LoginLogQuery(limit=limit, offset=offset, business_id=business_id, user_type=user_type),
            include_stats=params.get("includeStats") == "true",
        )
        return Response(
            {
                "logs": LoginLogSerializer(page.logs, many=True).data,
                "total": page.total,
                "stats": LoginLogStatsSerializer(stats).data if stats else None,
            }
        )


class AdminInvitationDetailView(AdminSessionAPIView):
    """Handler for DELETE /api/admin/invitations/{invitation_id}"""

    unauthorized_error = ForbiddenError

    def delete(self, request: Request, invitation_id: str) -> Response:
        _admin_service().delete_invitation(invitation_id)
        return Response({"success": True})
