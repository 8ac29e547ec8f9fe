"""Integration tests for platform settings, login logs and invitations.

Run with: pytest tests/test_admin_backoffice.py -v
"""

import uuid
from datetime import timedelta
from io import StringIO

import pytest
from django.core.management import CommandError, call_command
from django.utils import timezone

from accounts.models import AdminInvitation, LoginLog, PlatformSettings

SETTINGS_URL = "/api/admin/settings"
LOGS_URL = "/api/admin/login-logs"


def _log(email: str, business_name: str | None = None, age: timedelta = timedelta()) -> LoginLog:
    log = LoginLog.objects.create(
        user_type=LoginLog.UserType.BUSINESS if business_name else LoginLog.UserType.ADMIN,
        user_id=uuid.uuid5(uuid.NAMESPACE_DNS, email),
        user_email=email,
        user_name=email.split("@")[0],
        business_id=uuid.uuid5(uuid.NAMESPACE_DNS, business_name) if business_name else None,
        business_name=business_name,
    )
    if age:
        LoginLog.objects.filter(pk=log.pk).update(created_at=timezone.now() - age)
        log.refresh_from_db()
    return log


@pytest.mark.django_db
class TestPlatformSettings:
    """Tests for GET/PATCH /api/admin/settings."""

    def test_get_returns_defaults(self, admin_client):
        response = admin_client.get(SETTINGS_URL)
        assert response.status_code == 200
        body = response.json()
        assert body["platform_fee_type"] == "flat"
        assert body["subscription_trial_days"] == 0
        assert body["platform_stripe_account_id"] is None

    def test_patch_updates_only_given_fields(self, admin_client):
        response = admin_client.patch(
            SETTINGS_URL,
            {"platform_fee_type": "percentage", "percentage_fee": "2.5", "subscription_trial_days": 14},
            format="json",
        )
        assert response.status_code == 200
        body = response.json()
        assert body["platform_fee_type"] == "percentage"
        assert body["percentage_fee"] == 2.5
        assert body["subscription_trial_days"] == 14
        assert body["flat_fee_amount"] == 0

        row = PlatformSettings.load()
        assert row.platform_fee_type == "percentage"
        assert row.subscription_trial_days == 14

    @pytest.mark.parametrize(
        "payload,message",
        [
            ({"subscription_monthly_fee": "abc"}, "Invalid monthly fee"),
            ({"subscription_monthly_fee": -5}, "Invalid monthly fee"),
            ({"subscription_trial_days": -1}, "Invalid trial days"),
            ({"subscription_trial_days": "soon"}, "Invalid trial days"),
            ({"percentage_fee": 120}, "Invalid percentage fee"),
            ({"flat_fee_amount": "free"}, "Invalid flat fee amount"),
            ({"platform_fee_type": "bogus"}, "Invalid platform fee type"),
            ({}, "No valid updates provided"),
            ({"favourite_colour": "teal"}, "No valid updates provided"),
        ],
    )
    def test_invalid_patch_is_bad_request(self, admin_client, payload, message):
        response = admin_client.patch(SETTINGS_URL, payload, format="json")
        assert response.status_code == 400
        assert response.json() == {"error": message, "code": "INVALID_REQUEST"}

    def test_requires_admin_session(self, api_client):
        assert api_client.get(SETTINGS_URL).status_code == 401
        response = api_client.patch(SETTINGS_URL, {"subscription_trial_days": 3}, format="json")
        assert response.status_code == 401
        assert PlatformSettings.objects.filter(subscription_trial_days=3).count() == 0


@pytest.mark.django_db
class TestLoginLogs:
    """Tests for GET /api/admin/login-logs."""

    def test_pages_newest_first(self, admin_client):
        _log("old@example.com", age=timedelta(days=2))
        _log("mid@example.com", age=timedelta(days=1))
        _log("new@example.com")

        response = admin_client.get(LOGS_URL, {"limit": 2, "offset": 1})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 3
        assert [log["user_email"] for log in body["logs"]] == ["mid@example.com", "old@example.com"]
        assert body["stats"] is None

    def test_filters_by_business_and_user_type(self, admin_client):
        club = _log("owner@club.example", business_name="Club Aurora")
        _log("owner@bar.example", business_name="Bar Nova")
        _log("admin@example.com")

        body = admin_client.get(LOGS_URL, {"businessId": str(club.business_id)}).json()
        assert [log["user_email"] for log in body["logs"]] == ["owner@club.example"]

        body = admin_client.get(LOGS_URL, {"userType": "admin"}).json()
        assert body["total"] == 1
        assert body["logs"][0]["user_type"] == "admin"

    def test_stats(self, admin_client):
        _log("a@club.example", business_name="Club Aurora")
        _log("a@club.example", business_name="Club Aurora")
        _log("b@bar.example", business_name="Bar Nova")
        _log("admin@example.com", age=timedelta(days=3))

        body = admin_client.get(LOGS_URL, {"includeStats": "true"}).json()

        assert body["stats"] == {
            "totalLogins": 4,
            "todayLogins": 3,
            "uniqueUsers": 3,
            "topBusinesses": [
                {"business_name": "Club Aurora", "count": 2},
                {"business_name": "Bar Nova", "count": 1},
            ],
        }

    @pytest.mark.parametrize(
        "params,message",
        [
            ({"limit": "ten"}, "Invalid pagination parameters"),
            ({"offset": "1.5"}, "Invalid pagination parameters"),
            ({"businessId": "not-a-uuid"}, "Invalid businessId"),
            ({"userType": "robot"}, "Invalid userType"),
        ],
    )
    def test_invalid_params_are_bad_request(self, admin_client, params, message):
        response = admin_client.get(LOGS_URL, params)
        assert response.status_code == 400
        assert response.json()["error"] == message

    def test_requires_admin_session(self, api_client):
        assert api_client.get(LOGS_URL).status_code == 401


@pytest.mark.django_db
class TestInvitationDelete:
    """Tests for DELETE /api/admin/invitations/{id}."""

    def _invitation(self) -> AdminInvitation:
        return AdminInvitation.objects.create(
            email="new-admin@venuestack.io",
            token=uuid.uuid4().hex,
            expires_at=timezone.now() + timedelta(days=7),
        )

    def test_deletes_invitation(self, admin_client):
        invitation = self._invitation()
        response = admin_client.delete(f"/api/admin/invitations/{invitation.id}")
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert not AdminInvitation.objects.exists()

    def test_missing_invitation_still_succeeds(self, admin_client):
        response = admin_client.delete(f"/api/admin/invitations/{uuid.uuid4()}")
        assert response.status_code == 200

    def test_invalid_id_is_bad_request(self, admin_client):
        response = admin_client.delete("/api/admin/invitations/abc")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid invitation ID format", "code": "INVALID_ID"}

    def test_without_session_is_forbidden(self, api_client):
        invitation = self._invitation()
        response = api_client.delete(f"/api/admin/invitations/{invitation.id}")
        assert response.status_code == 403
        assert response.json() == {"error": "Unauthorized", "code": "FORBIDDEN"}
        assert AdminInvitation.objects.filter(pk=invitation.pk).exists()


@pytest.mark.django_db
class TestPruneLoginLogsCommand:
    def test_deletes_logs_past_retention(self):
        _log("stale@example.com", age=timedelta(days=400))
        _log("recent@example.com", age=timedelta(days=10))
        out = StringIO()

        call_command("prune_login_logs", "--days", "365", stdout=out)

        assert "Deleted 1 login logs" in out.getvalue()
        assert list(LoginLog.objects.values_list("user_email", flat=True)) == ["recent@example.com"]

    def test_rejects_non_positive_retention(self):
        with pytest.raises(CommandError):
            call_command("prune_login_logs", "--days", "0")
