"""Serializers for transforming accounts domain models to API responses and
validating admin settings updates."""

from rest_framework import serializers

from accounts.models import PlatformSettings as PlatformSettingsModel

_NUMBER_ERROR_KEYS = (
    "invalid",
    "null",
    "required",
    "min_value",
    "max_value",
    "max_digits",
    "max_decimal_places",
    "max_whole_digits",
    "max_string_length",
)


def _errors(message: str) -> dict[str, str]:
    return {key: message for key in _NUMBER_ERROR_KEYS}


def first_error_message(errors: dict) -> str:
    """Return the first message of a DRF ``serializer.errors`` mapping."""
    for messages in errors.values():
        if isinstance(messages, (list, tuple)):
            return str(messages[0]) if messages else "Invalid value"
        if isinstance(messages, dict):
            return first_error_message(messages)
        return str(messages)
    return "Invalid value"


class AdminUserSerializer(serializers.Serializer):
    """Serializer for the AdminSession domain model."""

    id = serializers.CharField(source="user_id")
    email = serializers.CharField()
    name = serializers.CharField()


class PlatformSettingsSerializer(serializers.Serializer):
    """Serializer for the PlatformSettings domain model."""

    platform_fee_type = serializers.CharField()
    flat_fee_amount = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False)
    percentage_fee = serializers.DecimalField(max_digits=5, decimal_places=2, coerce_to_string=False)
    platform_stripe_account_id = serializers.CharField(allow_null=True)
    subscription_monthly_fee = serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False
    )
    subscription_trial_days = serializers.IntegerField()
    stripe_subscription_product_id = serializers.CharField(allow_null=True)
    stripe_subscription_price_id = serializers.CharField(allow_null=True)
    updated_at = serializers.DateTimeField()


class PlatformSettingsUpdateSerializer(serializers.Serializer):
    """Validates a PATCH body; only the fields present are returned."""

    platform_fee_type = serializers.ChoiceField(
        choices=PlatformSettingsModel.FeeType.choices,
        required=False,
        error_messages={"invalid_choice": "Invalid platform fee type", "null": "Invalid platform fee type"},
    )
    flat_fee_amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=0,
        required=False,
        error_messages=_errors("Invalid flat fee amount"),
    )
    percentage_fee = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=0,
        max_value=100,
        required=False,
        error_messages=_errors("Invalid percentage fee"),
    )
    platform_stripe_account_id = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=255
    )
    subscription_monthly_fee = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=0,
        required=False,
        error_messages=_errors("Invalid monthly fee"),
    )
    subscription_trial_days = serializers.IntegerField(
        min_value=0,
        required=False,
        error_messages=_errors("Invalid trial days"),
    )
    stripe_subscription_product_id = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=255
    )
    stripe_subscription_price_id = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=255
    )


class LoginLogSerializer(serializers.Serializer):
    """Serializer for the LoginLog domain model."""

    id = serializers.CharField()
    user_type = serializers.CharField()
    user_id = serializers.CharField()
    user_email = serializers.CharField()
    user_name = serializers.CharField()
    business_id = serializers.CharField(allow_null=True)
    business_name = serializers.CharField(allow_null=True)
    business_slug = serializers.CharField(allow_null=True)
    ip_address = serializers.CharField(allow_null=True)
    city = serializers.CharField(allow_null=True)
    region = serializers.CharField(allow_null=True)
    country = serializers.CharField(allow_null=True)
    user_agent = serializers.CharField(allow_null=True)
    created_at = serializers.DateTimeField()


class BusinessLoginCountSerializer(serializers.Serializer):
    business_name = serializers.CharField()
    count = serializers.IntegerField()


class LoginLogStatsSerializer(serializers.Serializer):
    """Serializer for the LoginLogStats domain model."""

    totalLogins = serializers.IntegerField(source="total_logins")
    todayLogins = serializers.IntegerField(source="today_logins")
    uniqueUsers = serializers.IntegerField(source="unique_users")
    topBusinesses = BusinessLoginCountSerializer(source="top_businesses", many=True)
