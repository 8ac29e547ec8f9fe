"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Account(models.Model):
    """Global user identity; platform admins carry ``is_platform_admin``."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=32, blank=True, null=True)
    password_hash = models.CharField(max_length=255)
    is_platform_admin = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def save(self, *args, **kwargs) -> None:
        self.email = self.email.lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.email


class LoginLog(models.Model):
    """Audit row written on every successful login."""

    class UserType(models.TextChoices):
        ADMIN = "admin"
        BUSINESS = "business"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_type = models.CharField(max_length=20, choices=UserType.choices)
    user_id = models.UUIDField()
    user_email = models.EmailField()
    user_name = models.CharField(max_length=255)
    business_id = models.UUIDField(blank=True, null=True)
    business_name = models.CharField(max_length=255, blank=True, null=True)
    business_slug = models.CharField(max_length=100, blank=True, null=True)
    ip_address = models.CharField(max_length=64, blank=True, null=True)
    city = models.CharField(max_length=100, blank=True, null=True)
    region = models.CharField(max_length=100, blank=True, null=True)
    country = models.CharField(max_length=100, blank=True, null=True)
    user_agent = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"]),
            models.Index(fields=["business_id", "-created_at"]),
        ]

    def __str__(self) -> str:
        return f"{self.user_email} ({self.user_type}) at {self.created_at}"


class AdminInvitation(models.Model):
    """Pending invitation for a new platform admin."""

    class Status(models.TextChoices):
        PENDING = "pending"
        ACCEPTED = "accepted"
        CANCELLED = "cancelled"
        EXPIRED = "expired"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(blank=True, null=True)
    phone = models.CharField(max_length=32, blank=True, null=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    token = models.CharField(max_length=64, unique=True)
    invited_by = models.UUIDField(blank=True, null=True)
    expires_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"Invitation for {self.email or self.phone} ({self.status})"


class PlatformSettings(models.Model):
    """Singleton row holding global fee and subscription settings."""

    SINGLETON_ID = 1

    class FeeType(models.TextChoices):
        FLAT = "flat"
        PERCENTAGE = "percentage"
        HIGHER_OF_BOTH = "higher_of_both"

    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_ID, editable=False)
    platform_fee_type = models.CharField(max_length=20, choices=FeeType.choices, default=FeeType.FLAT)
    flat_fee_amount = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    percentage_fee = models.DecimalField(max_digits=5, decimal_places=2, default=0)
    platform_stripe_account_id = models.CharField(max_length=255, blank=True, null=True)
    subscription_monthly_fee = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    subscription_trial_days = models.PositiveIntegerField(default=0)
    stripe_subscription_product_id = models.CharField(max_length=255, blank=True, null=True)
    stripe_subscription_price_id = models.CharField(max_length=255, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "platform settings"

    @classmethod
    def load(cls) -> "PlatformSettings":
        obj, _ = cls.objects.get_or_create(pk=cls.SINGLETON_ID)
        return obj

    def __str__(self) -> str:
        return "Platform settings"
