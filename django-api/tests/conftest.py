"""Pytest configuration and shared fixtures."""

import datetime as dt
from decimal import Decimal

import pytest
from django.conf import settings
from django.contrib.auth.hashers import make_password
from rest_framework.test import APIClient

from accounts import tokens
from accounts.domain import AdminSession
from accounts.models import Account
from bookings.models import Business, Event, EventTableSection, TableBooking
from core.ratelimit import limiter

ADMIN_PASSWORD = "Sup3rSecret"


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def business() -> Business:
    return Business.objects.create(name="Club Aurora", slug="club-aurora")


@pytest.fixture
def event(business: Business) -> Event:
    return Event.objects.create(
        business=business,
        title="Saturday Night Live Set",
        event_date=dt.date(2026, 11, 14),
        event_time=dt.time(22, 0),
        location="12 Harbour St",
        image_url="https://cdn.example.com/events/saturday.jpg",
    )


@pytest.fixture
def make_section(event: Event):
    def _make(name: str) -> EventTableSection:
        return EventTableSection.objects.create(event=event, section_name=name, price=Decimal("50"))

    return _make


@pytest.fixture
def make_booking(event: Event):
    def _make(order_id: str, section=None, amount=None, table_number=None) -> TableBooking:
        return TableBooking.objects.create(
            order_id=order_id,
            event=event,
            section=section,
            amount=amount,
            table_number=table_number,
            customer_name="Dana Reyes",
            customer_email="dana@example.com",
        )

    return _make


@pytest.fixture
def admin_account() -> Account:
    return Account.objects.create(
        email="admin@venuestack.io",
        name="Platform Admin",
        password_hash=make_password(ADMIN_PASSWORD),
        is_platform_admin=True,
    )


@pytest.fixture
def admin_client(api_client: APIClient, admin_account: Account) -> APIClient:
    session = AdminSession(
        user_id=str(admin_account.id), email=admin_account.email, name=admin_account.name
    )
    api_client.cookies[settings.ADMIN_SESSION_COOKIE] = tokens.create_session_token(session)
    return api_client
