from accounts.handlers.views import (
    AdminInvitationDetailView,
    AdminLoginView,
    AdminLogoutView,
    ForgotPasswordView,
    LoginLogListView,
    PlatformSettingsView,
    ResetPasswordView,
)

__all__ = [
    "AdminInvitationDetailView",
    "AdminLoginView",
    "AdminLogoutView",
    "ForgotPasswordView",
    "LoginLogListView",
    "PlatformSettingsView",
    "ResetPasswordView",
]
