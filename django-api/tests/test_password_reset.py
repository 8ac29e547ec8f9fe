"""Integration tests for the forgot/reset password flow.

Run with: pytest tests/test_password_reset.py -v
"""

from urllib.parse import parse_qs, urlsplit

import pytest
from django.contrib.auth.hashers import check_password
from django.core import mail

from accounts.models import Account

FORGOT_URL = "/api/auth/forgot-password"
RESET_URL = "/api/auth/reset-password"

FORGOT_BODY = {
    "success": True,
    "message": "If an account with that email exists, we have sent a password reset link.",
}
EXPIRED_BODY = {
    "error": "Invalid or expired reset link. Please request a new one.",
    "code": "INVALID_OR_EXPIRED_TOKEN",
}


def _token_from_outbox() -> str:
    link = next(line for line in mail.outbox[-1].body.splitlines() if "/reset-password?" in line)
    return parse_qs(urlsplit(link.strip()).query)["token"][0]


@pytest.fixture
def reset_token(api_client, admin_account) -> str:
    api_client.post(FORGOT_URL, {"email": admin_account.email}, format="json")
    return _token_from_outbox()


@pytest.mark.django_db
class TestForgotPassword:
    def test_sends_reset_link_to_known_account(self, api_client, admin_account, settings):
        settings.APP_BASE_URL = "https://app.venuestack.test"

        response = api_client.post(FORGOT_URL, {"email": "ADMIN@venuestack.io"}, format="json")

        assert response.status_code == 200
        assert response.json() == FORGOT_BODY
        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.to == ["admin@venuestack.io"]
        assert "https://app.venuestack.test/reset-password?token=" in message.body
        assert "Platform Admin" in message.body

    def test_unknown_email_gets_same_answer_and_no_mail(self, api_client):
        response = api_client.post(FORGOT_URL, {"email": "ghost@venuestack.io"}, format="json")
        assert response.status_code == 200
        assert response.json() == FORGOT_BODY
        assert mail.outbox == []

    def test_missing_email_is_bad_request(self, api_client):
        assert api_client.post(FORGOT_URL, {}, format="json").status_code == 400

    def test_fourth_request_is_throttled(self, api_client, admin_account):
        for _ in range(3):
            response = api_client.post(FORGOT_URL, {"email": admin_account.email}, format="json")
            assert response.status_code == 200
        response = api_client.post(FORGOT_URL, {"email": admin_account.email}, format="json")
        assert response.status_code == 429
        assert response.json()["retryAfter"] > 0
        assert len(mail.outbox) == 3


@pytest.mark.django_db
class TestResetPassword:
    def test_reset_updates_password(self, api_client, admin_account, reset_token):
        response = api_client.post(
            RESET_URL, {"token": reset_token, "password": "BrandNew1pass"}, format="json"
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Password has been reset successfully"}
        admin_account.refresh_from_db()
        assert check_password("BrandNew1pass", admin_account.password_hash)

    def test_token_cannot_be_used_twice(self, api_client, reset_token):
        first = api_client.post(
            RESET_URL, {"token": reset_token, "password": "BrandNew1pass"}, format="json"
        )
        assert first.status_code == 200

        second = api_client.post(
            RESET_URL, {"token": reset_token, "password": "Another1pass"}, format="json"
        )
        assert second.status_code == 400
        assert second.json() == EXPIRED_BODY

    def test_expired_token_is_rejected(self, api_client, admin_account, reset_token, settings):
        settings.PASSWORD_RESET_TOKEN_MAX_AGE = -1
        response = api_client.post(
            RESET_URL, {"token": reset_token, "password": "BrandNew1pass"}, format="json"
        )
        assert response.status_code == 400
        assert response.json() == EXPIRED_BODY
        password_hash = admin_account.password_hash
        admin_account.refresh_from_db()
        assert admin_account.password_hash == password_hash

    def test_garbage_token_is_rejected(self, api_client):
        response = api_client.post(
            RESET_URL, {"token": "garbage", "password": "BrandNew1pass"}, format="json"
        )
        assert response.status_code == 400
        assert response.json() == EXPIRED_BODY

    def test_weak_password_reports_first_violation(self, api_client, reset_token):
        response = api_client.post(
            RESET_URL, {"token": reset_token, "password": "weakpass"}, format="json"
        )
        assert response.status_code == 400
        assert response.json() == {
            "error": "Password must contain at least one uppercase letter",
            "code": "WEAK_PASSWORD",
        }

    @pytest.mark.parametrize("payload", [{}, {"token": "abc"}, {"password": "BrandNew1pass"}])
    def test_missing_fields_are_bad_request(self, api_client, payload):
        response = api_client.post(RESET_URL, payload, format="json")
        assert response.status_code == 400
        assert response.json()["error"] == "Token and password are required"

    def test_new_password_works_for_admin_login(self, api_client, reset_token):
        api_client.post(RESET_URL, {"token": reset_token, "password": "BrandNew1pass"}, format="json")
        response = api_client.post(
            "/api/admin/login",
            {"email": "admin@venuestack.io", "password": "BrandNew1pass"},
            format="json",
        )
        assert response.status_code == 200
        assert Account.objects.get().email == "admin@venuestack.io"
