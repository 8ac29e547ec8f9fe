"""Password strength validators for AUTH_PASSWORD_VALIDATORS."""

import re

from django.core.exceptions import ValidationError


class _CharacterClassValidator:
    pattern: re.Pattern
    code: str
    message: str

    def validate(self, password: str, user=None) -> None:
        if not self.pattern.search(password):
            raise ValidationError(self.message, code=self.code)

    def get_help_text(self) -> str:
        return self.message.replace("Password must contain", "Your password must contain")


class UppercaseValidator(_CharacterClassValidator):
    pattern = re.compile(r"[A-Z]")
    code = "password_no_upper"
    message = "Password must contain at least one uppercase letter"


class LowercaseValidator(_CharacterClassValidator):
    pattern = re.compile(r"[a-z]")
    code = "password_no_lower"
    message = "Password must contain at least one lowercase letter"


class DigitValidator(_CharacterClassValidator):
    pattern = re.compile(r"[0-9]")
    code = "password_no_digit"
    message = "Password must contain at least one number"
