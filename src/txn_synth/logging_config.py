"""Logging setup - stderr only (stdout carries generated transactions), address redaction."""

from __future__ import annotations

import logging
import re
import sys

# Address tokens identify accounts: never log their values.
ADDRESS_REDACT_KEYS = frozenset({"sender", "recipient", "address"})
ADDRESS_KEY_PATTERN = re.compile(
    r"(\b" + "|".join(re.escape(k) for k in ADDRESS_REDACT_KEYS) + r")[\s=:]+[^\s,\)\]]+",
    re.IGNORECASE,
)


def _redact_message(msg: str) -> str:
    """Replace address key=value or key: value in message with [REDACTED]."""
    if not isinstance(msg, str):
        return str(msg)
    return ADDRESS_KEY_PATTERN.sub(r"\1=[REDACTED]", msg)


class AddressRedactionFilter(logging.Filter):
    """Filter that redacts address tokens from log records (message and args)."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.args:
            record.msg = record.getMessage()
            record.args = None
        record.msg = _redact_message(record.msg)
        return True


def setup_logging(log_level: str = "INFO") -> None:
    """Configure root logger: stderr, address redaction filter."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
        stream=sys.stderr,
        force=True,
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(AddressRedactionFilter())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for module `name` (redaction applied at root handlers)."""
    return logging.getLogger(name)
