"""JSON log formatting with PII redaction."""

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any

EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+", re.I)
PHONE_RE = re.compile(r"\+?\b\d{10,15}\b")


def redact_pii(text: str) -> str:
    """Replace e-mail addresses and phone numbers with ***."""
    text = EMAIL_RE.sub("***", text)
    return PHONE_RE.sub("***", text)


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": redact_pii(record.getMessage()),
        }
        if record.exc_info:
            data["exc"] = self.formatException(record.exc_info)
        return json.dumps(data)
