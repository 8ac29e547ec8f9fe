"""Tests for start-up configuration checks.

Run with: pytest tests/test_config.py -v
"""

import pytest
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from config.env import require_env


class TestRequireEnv:
    @pytest.mark.parametrize("environ", [{}, {"SESSION_SECRET": ""}, {"SESSION_SECRET": "   "}])
    def test_missing_secret_refuses_to_start(self, environ):
        with pytest.raises(ImproperlyConfigured, match="SESSION_SECRET"):
            require_env("SESSION_SECRET", environ)

    def test_present_secret_is_returned(self):
        assert require_env("SESSION_SECRET", {"SESSION_SECRET": " s3cret "}) == "s3cret"

    def test_settings_carry_the_signing_secret(self):
        assert settings.SESSION_SECRET
