"""Environment helpers used by the settings modules."""

import os

from django.core.exceptions import ImproperlyConfigured


def require_env(name: str, environ: dict | None = None) -> str:
    """Return a required environment variable or refuse to start.

    Raises:
        ImproperlyConfigured: If the variable is missing or blank.
    """
    source = os.environ if environ is None else environ
    value = source.get(name, "").strip()
    if not value:
        raise ImproperlyConfigured(
            f"{name} environment variable is not set. "
            "It is required for signing admin sessions and reset tokens. "
            "Generate one with: openssl rand -base64 32"
        )
    return value


def env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def env_list(name: str, default: str = "") -> list[str]:
    return [item.strip() for item in os.environ.get(name, default).split(",") if item.strip()]
