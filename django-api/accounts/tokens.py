"""Signed, time-boxed tokens for admin sessions and password resets.

Both token kinds share one signing mechanism (``SESSION_SECRET`` + salt) and
are told apart by their embedded ``type``. Verification never raises: any
bad signature, expiry, malformed payload or wrong type yields ``None``.
"""

import logging

from django.conf import settings
from django.core import signing
from django.utils.crypto import salted_hmac

from accounts.domain import Account, AdminSession, PasswordResetClaims

logger = logging.getLogger(__name__)

TOKEN_SALT = "accounts.tokens"
ADMIN_SESSION_TYPE = "admin_session"
PASSWORD_RESET_TYPE = "password_reset"


def sign_payload(payload: dict) -> str:
    return signing.dumps(payload, key=settings.SESSION_SECRET, salt=TOKEN_SALT, compress=True)


def unsign_payload(token: object, max_age: int) -> dict | None:
    if not isinstance(token, str) or not token:
        return None
    try:
        payload = signing.loads(
            token, key=settings.SESSION_SECRET, salt=TOKEN_SALT, max_age=max_age
        )
    except signing.SignatureExpired:
        logger.info("Rejected expired token")
        return None
    except signing.BadSignature:
        logger.warning("Rejected token with bad signature")
        return None
    return payload if isinstance(payload, dict) else None


def create_session_token(session: AdminSession) -> str:
    return sign_payload(
        {
            "userId": session.user_id,
            "email": session.email,
            "name": session.name,
            "type": ADMIN_SESSION_TYPE,
        }
    )


def verify_session_token(token: object) -> AdminSession | None:
    payload = unsign_payload(token, settings.ADMIN_SESSION_MAX_AGE)
    if payload is None or payload.get("type") != ADMIN_SESSION_TYPE:
        return None
    try:
        return AdminSession(
            user_id=str(payload["userId"]),
            email=str(payload["email"]),
            name=str(payload["name"]),
        )
    except KeyError:
        return None


def password_fingerprint(password_hash: str) -> str:
    """Short digest of the current hash; changes once the password is reset."""
    return salted_hmac(
        "accounts.tokens.password_fingerprint",
        password_hash,
        secret=settings.SESSION_SECRET,
        algorithm="sha256",
    ).hexdigest()[:32]


def create_password_reset_token(account: Account) -> str:
    return sign_payload(
        {
            "userId": str(account.id.value),
            "email": account.email.value,
            "type": PASSWORD_RESET_TYPE,
            "fp": password_fingerprint(account.password_hash),
        }
    )


def verify_password_reset_token(token: object) -> PasswordResetClaims | None:
    payload = unsign_payload(token, settings.PASSWORD_RESET_TOKEN_MAX_AGE)
    if payload is None or payload.get("type") != PASSWORD_RESET_TYPE:
        return None
    try:
        return PasswordResetClaims(
            user_id=str(payload["userId"]),
            email=str(payload["email"]),
            fingerprint=str(payload["fp"]),
        )
    except KeyError:
        return None
