from accounts.domain.models import (
    Account,
    AdminSession,
    LoginAttempt,
    LoginLog,
    LoginLogPage,
    LoginLogQuery,
    LoginLogStats,
    PasswordResetClaims,
    PlatformSettings,
)
from accounts.domain.value_objects import AccountId, Email, InvitationId

__all__ = [
    "Account",
    "AdminSession",
    "LoginAttempt",
    "LoginLog",
    "LoginLogPage",
    "LoginLogQuery",
    "LoginLogStats",
    "PasswordResetClaims",
    "PlatformSettings",
    "AccountId",
    "Email",
    "InvitationId",
]
