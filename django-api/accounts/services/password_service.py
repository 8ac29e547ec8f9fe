"""Password reset - token issuance by e-mail and credential update."""

import logging
from urllib.parse import urlencode

from django.conf import settings
from django.contrib.auth.hashers import make_password
from django.contrib.auth.password_validation import (
    password_validators_help_texts,
    validate_password,
)
from django.core.exceptions import ValidationError
from django.utils.crypto import constant_time_compare

from accounts import notifications, tokens
from accounts.domain import AccountId, Email, LoginAttempt
from accounts.domain.errors import InvalidOrExpiredTokenError, WeakPasswordError
from accounts.stores.interfaces import AccountStore
from core.errors import InvalidRequestError, TooManyAttemptsError
from core.ratelimit import RateLimitConfig, RateLimiter

logger = logging.getLogger(__name__)

IP_ACTION = "password-reset-ip"
EMAIL_ACTION = "password-reset-email"


class PasswordResetService:
    """Service for the forgot/reset password flow."""

    def __init__(self, accounts: AccountStore, limiter: RateLimiter) -> None:
        self._accounts = accounts
        self._limiter = limiter

    def request_reset(self, email: object, attempt: LoginAttempt) -> None:
        """E-mail a reset link when the account exists; silent otherwise.

        Raises:
            InvalidRequestError: If email is missing.
            TooManyAttemptsError: If the client IP or the e-mail is throttled.
        """
        if not isinstance(email, str) or not email.strip():
            raise InvalidRequestError("Email is required")

        config = RateLimitConfig.from_settings("password_reset")
        for identity, action in (
            (attempt.ip_address or "unknown", IP_ACTION),
            (email.strip().lower(), EMAIL_ACTION),
        ):
            result = self._limiter.attempt(identity, action, config)
            if not result.success:
                raise TooManyAttemptsError(result.reset_in)

        try:
            address = Email.from_string(email)
        except ValueError:
            return
        account = self._accounts.get_by_email(address)
        if account is None:
            return

        token = tokens.create_password_reset_token(account)
        reset_url = f"{settings.APP_BASE_URL}/reset-password?{urlencode({'token': token})}"
        notifications.send_password_reset_email(
            to=account.email.value, reset_url=reset_url, user_name=account.name
        )
        logger.info("Sent password reset link to account %s", account.id.value)

    def reset_password(self, token: object, password: object) -> None:
        """Set a new password for the account named by a valid reset token.

        A token stops working once the password it was issued against has
        changed, so each link can be used once.

        Raises:
            InvalidRequestError: If token or password is missing.
            WeakPasswordError: If the password fails AUTH_PASSWORD_VALIDATORS.
            InvalidOrExpiredTokenError: For any unusable token.
        """
        if not isinstance(token, str) or not isinstance(password, str) or not token or not password:
            raise InvalidRequestError("Token and password are required")

        self.check_strength(password)

        claims = tokens.verify_password_reset_token(token)
        if claims is None:
            raise InvalidOrExpiredTokenError()
        try:
            account_id = AccountId.from_string(claims.user_id)
        except ValueError:
            raise InvalidOrExpiredTokenError()

        account = self._accounts.get_by_id(account_id)
        if account is None or not constant_time_compare(
            claims.fingerprint, tokens.password_fingerprint(account.password_hash)
        ):
            logger.warning("Rejected stale or unknown password reset token")
            raise InvalidOrExpiredTokenError()

        self._accounts.set_password_hash(account.id, make_password(password))
        logger.info("Password reset for account %s", account.id.value)

    def check_strength(self, password: str) -> None:
        try:
            validate_password(password)
        except ValidationError as exc:
            messages = exc.messages
            raise WeakPasswordError(
                messages[0] if messages else " ".join(password_validators_help_texts())
            )
