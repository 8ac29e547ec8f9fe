"""Django ORM implementations of the accounts stores."""

import logging
from datetime import datetime

from django.db import DatabaseError
from django.db.models import Count

from accounts import models
from accounts.domain import (
    Account,
    AccountId,
    Email,
    InvitationId,
    LoginAttempt,
    LoginLog,
    LoginLogPage,
    LoginLogQuery,
    LoginLogStats,
    PlatformSettings,
)
from accounts.domain.models import BusinessLoginCount
from accounts.stores.interfaces import (
    AccountStore,
    InvitationStore,
    LoginLogStore,
    PlatformSettingsStore,
)

logger = logging.getLogger(__name__)

TOP_BUSINESSES = 5


class DjangoAccountStore(AccountStore):
    def get_platform_admin(self, email: Email) -> Account | None:
        row = models.Account.objects.filter(email=email.value, is_platform_admin=True).first()
        return _account_to_domain(row) if row else None

    def get_by_email(self, email: Email) -> Account | None:
        row = models.Account.objects.filter(email=email.value).first()
        return _account_to_domain(row) if row else None

    def get_by_id(self, account_id: AccountId) -> Account | None:
        row = models.Account.objects.filter(pk=account_id.value).first()
        return _account_to_domain(row) if row else None

    def set_password_hash(self, account_id: AccountId, password_hash: str) -> None:
        row = models.Account.objects.get(pk=account_id.value)
        row.password_hash = password_hash
        row.save(update_fields=["password_hash", "updated_at"])


class DjangoLoginLogStore(LoginLogStore):
    def record_admin_login(self, account: Account, attempt: LoginAttempt) -> LoginLog | None:
        try:
            row = models.LoginLog.objects.create(
                user_type=models.LoginLog.UserType.ADMIN,
                user_id=account.id.value,
                user_email=account.email.value,
                user_name=account.name,
                ip_address=attempt.ip_address,
                user_agent=attempt.user_agent,
            )
        except DatabaseError:
            logger.exception("Failed to record admin login for %s", account.id.value)
            return None
        return _log_to_domain(row)

    def list_logs(self, query: LoginLogQuery) -> LoginLogPage:
        rows = models.LoginLog.objects.order_by("-created_at")
        if query.business_id:
            rows = rows.filter(business_id=query.business_id)
        if query.user_type:
            rows = rows.filter(user_type=query.user_type)
        total = rows.count()
        page = rows[query.offset : query.offset + query.limit]
        return LoginLogPage(logs=tuple(_log_to_domain(row) for row in page), total=total)

    def get_stats(self, today_start: datetime) -> LoginLogStats:
        logs = models.LoginLog.objects.all()
        top = (
            logs.exclude(business_name__isnull=True)
            .exclude(business_name="")
            .values("business_name")
            .annotate(count=Count("id"))
            .order_by("-count", "business_name")[:TOP_BUSINESSES]
        )
        return LoginLogStats(
            total_logins=logs.count(),
            today_logins=logs.filter(created_at__gte=today_start).count(),
            unique_users=logs.values("user_id").distinct().count(),
            top_businesses=tuple(
                BusinessLoginCount(business_name=row["business_name"], count=row["count"])
                for row in top
            ),
        )

    def delete_older_than(self, cutoff: datetime) -> int:
        deleted, _ = models.LoginLog.objects.filter(created_at__lt=cutoff).delete()
        return deleted


class DjangoInvitationStore(InvitationStore):
    def delete_invitation(self, invitation_id: InvitationId) -> bool:
        deleted, _ = models.AdminInvitation.objects.filter(pk=invitation_id.value).delete()
        return deleted > 0


class DjangoPlatformSettingsStore(PlatformSettingsStore):
    def get_settings(self) -> PlatformSettings:
        return _settings_to_domain(models.PlatformSettings.load())

    def update_settings(self, updates: dict) -> PlatformSettings:
        row = models.PlatformSettings.load()
        for field, value in updates.items():
            setattr(row, field, value)
        # Full save so post_save fires and the settings cache is invalidated.
        row.save()
        return _settings_to_domain(row)


def _account_to_domain(row: models.Account) -> Account:
    return Account(
        id=AccountId(value=row.id),
        email=Email(value=row.email),
        name=row.name,
        password_hash=row.password_hash,
        is_platform_admin=row.is_platform_admin,
    )


def _log_to_domain(row: models.LoginLog) -> LoginLog:
    return LoginLog(
        id=str(row.id),
        user_type=row.user_type,
        user_id=str(row.user_id),
        user_email=row.user_email,
        user_name=row.user_name,
        business_id=str(row.business_id) if row.business_id else None,
        business_name=row.business_name,
        business_slug=row.business_slug,
        ip_address=row.ip_address,
        city=row.city,
        region=row.region,
        country=row.country,
        user_agent=row.user_agent,
        created_at=row.created_at,
    )


def _settings_to_domain(row: models.PlatformSettings) -> PlatformSettings:
    return PlatformSettings(
        platform_fee_type=row.platform_fee_type,
        flat_fee_amount=row.flat_fee_amount,
        percentage_fee=row.percentage_fee,
        platform_stripe_account_id=row.platform_stripe_account_id,
        subscription_monthly_fee=row.subscription_monthly_fee,
        subscription_trial_days=row.subscription_trial_days,
        stripe_subscription_product_id=row.stripe_subscription_product_id,
        stripe_subscription_price_id=row.stripe_subscription_price_id,
        updated_at=row.updated_at,
    )
