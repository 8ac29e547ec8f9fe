"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in accounts/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from accounts.domain.value_objects import AccountId, Email


@dataclass(frozen=True)
class Account:
    """Domain representation of a platform user."""

    id: AccountId
    email: Email
    name: str
    password_hash: str
    is_platform_admin: bool


@dataclass(frozen=True)
class AdminSession:
    """Identity carried by a signed admin session token."""

    user_id: str
    email: str
    name: str


@dataclass(frozen=True)
class PasswordResetClaims:
    """Verified contents of a password reset token."""

    user_id: str
    email: str
    fingerprint: str


@dataclass(frozen=True)
class LoginAttempt:
    """Request metadata recorded with a successful login."""

    ip_address: str | None
    user_agent: str | None


@dataclass(frozen=True)
class LoginLog:
    """Domain representation of one login audit row."""

    id: str
    user_type: str
    user_id: str
    user_email: str
    user_name: str
    business_id: str | None
    business_name: str | None
    business_slug: str | None
    ip_address: str | None
    city: str | None
    region: str | None
    country: str | None
    user_agent: str | None
    created_at: datetime


@dataclass(frozen=True)
class LoginLogQuery:
    limit: int = 50
    offset: int = 0
    business_id: str | None = None
    user_type: str | None = None


@dataclass(frozen=True)
class LoginLogPage:
    logs: tuple[LoginLog, ...]
    total: int


@dataclass(frozen=True)
class BusinessLoginCount:
    business_name: str
    count: int


@dataclass(frozen=True)
class LoginLogStats:
    total_logins: int
    today_logins: int
    unique_users: int
    top_businesses: tuple[BusinessLoginCount, ...]


@dataclass(frozen=True)
class PlatformSettings:
    """Global fee and subscription configuration."""

    platform_fee_type: str
    flat_fee_amount: Decimal
    percentage_fee: Decimal
    platform_stripe_account_id: str | None
    subscription_monthly_fee: Decimal
    subscription_trial_days: int
    stripe_subscription_product_id: str | None
    stripe_subscription_price_id: str | None
    updated_at: datetime
