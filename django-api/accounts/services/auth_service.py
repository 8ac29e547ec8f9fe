"""Admin authentication - credential checks, throttling and audit.

Services:
- Depend only on interfaces (stores) and the injected rate limiter
- Raise domain errors; never decide HTTP details
"""

import logging

from django.contrib.auth.hashers import check_password, make_password

from accounts.domain import Account, AdminSession, Email, LoginAttempt
from accounts.domain.errors import InvalidCredentialsError
from accounts.stores.interfaces import AccountStore, LoginLogStore
from core.errors import InvalidRequestError, TooManyAttemptsError
from core.ratelimit import RateLimitConfig, RateLimiter

logger = logging.getLogger(__name__)

IP_ACTION = "admin-login-ip"
EMAIL_ACTION = "admin-login-email"


class AdminAuthService:
    """Service for platform admin login."""

    def __init__(
        self,
        accounts: AccountStore,
        login_logs: LoginLogStore,
        limiter: RateLimiter,
    ) -> None:
        self._accounts = accounts
        self._login_logs = login_logs
        self._limiter = limiter

    def login(self, email: object, password: object, attempt: LoginAttempt) -> AdminSession:
        """Verify admin credentials and return the session to issue.

        Raises:
            InvalidRequestError: If email or password is missing.
            TooManyAttemptsError: If the client IP or the e-mail is throttled.
            InvalidCredentialsError: For an unknown e-mail, a non-admin account
                or a wrong password alike.
        """
        if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
            raise InvalidRequestError("Email and password are required")

        config = RateLimitConfig.from_settings("login")
        self._throttle(attempt.ip_address or "unknown", IP_ACTION, config)
        self._throttle(email.strip().lower(), EMAIL_ACTION, config)

        account = self._find_admin(email)
        verified = account is not None and check_password(password, account.password_hash)
        if account is None:
            # Unknown e-mails cost one hash, same as a wrong password.
            make_password(password)
        if not verified:
            logger.warning("Rejected admin login from %s", attempt.ip_address)
            raise InvalidCredentialsError()

        self._login_logs.record_admin_login(account, attempt)
        logger.info("Admin %s logged in", account.id.value)
        return AdminSession(
            user_id=str(account.id.value),
            email=account.email.value,
            name=account.name,
        )

    def _find_admin(self, email: str) -> Account | None:
        try:
            address = Email.from_string(email)
        except ValueError:
            return None
        return self._accounts.get_platform_admin(address)

    def _throttle(self, identity: str, action: str, config: RateLimitConfig) -> None:
        result = self._limiter.attempt(identity, action, config)
        if not result.success:
            logger.warning("Rate limited %s, retry in %ss", action, result.reset_in)
            raise TooManyAttemptsError(result.reset_in)
