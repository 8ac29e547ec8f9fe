from django.urls import path

from accounts.handlers import (
    AdminInvitationDetailView,
    AdminLoginView,
    AdminLogoutView,
    ForgotPasswordView,
    LoginLogListView,
    PlatformSettingsView,
    ResetPasswordView,
)

urlpatterns = [
    path("admin/login", AdminLoginView.as_view(), name="admin-login"),
    path("admin/logout", AdminLogoutView.as_view(), name="admin-logout"),
    path("admin/settings", PlatformSettingsView.as_view(), name="admin-settings"),
    path("admin/login-logs", LoginLogListView.as_view(), name="admin-login-logs"),
    path(
        "admin/invitations/<str:invitation_id>",
        AdminInvitationDetailView.as_view(),
        name="admin-invitation-detail",
    ),
    path("auth/forgot-password", ForgotPasswordView.as_view(), name="forgot-password"),
    path("auth/reset-password", ResetPasswordView.as_view(), name="reset-password"),
]
