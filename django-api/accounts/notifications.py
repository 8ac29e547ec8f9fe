"""Outbound e-mail for account flows."""

from django.conf import settings
from django.core.mail import send_mail


def send_password_reset_email(to: str, reset_url: str, user_name: str) -> None:
    greeting = f"Hi {user_name}," if user_name else "Hi,"
    body = (
        f"{greeting}\n\n"
        "We received a request to reset your VenueStack password.\n"
        f"Use the link below within the next hour to choose a new one:\n\n{reset_url}\n\n"
        "If you did not ask for this, you can ignore this e-mail."
    )
    send_mail(
        subject="Reset your VenueStack password",
        message=body,
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[to],
    )
