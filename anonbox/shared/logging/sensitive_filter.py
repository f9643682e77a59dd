# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction applied to every log record before any sink sees it.

Anything that would let a reader of the logs impersonate a user or identify a
sender is masked: bearer tokens and raw JWTs, the signing secret, passwords,
database credentials and email addresses.
"""

from __future__ import annotations

import re
from typing import Any

REDACTED = "***REDACTED***"

_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(bearer\s+)[\w\-.]{16,}", re.IGNORECASE), rf"\g<1>{REDACTED}"),
    (re.compile(r"\beyJ[\w-]+\.[\w-]+\.[\w-]+"), REDACTED),
    (
        re.compile(r"(jwt[_-]?secret\s*[:=]\s*['\"]?)[^'\"\s,}]+", re.IGNORECASE),
        rf"\g<1>{REDACTED}",
    ),
    (
        re.compile(r"((?:password|token)\s*[:=]\s*['\"]?)[^'\"\s,}]+", re.IGNORECASE),
        rf"\g<1>{REDACTED}",
    ),
    (
        re.compile(r"(authorization\s*[:=]\s*['\"]?)[^'\"\n]{8,}", re.IGNORECASE),
        rf"\g<1>{REDACTED}",
    ),
    (re.compile(r"(\w[\w+.-]*://[^:/@\s]+:)[^@\s]+@"), rf"\g<1>{REDACTED}@"),
    (re.compile(r"\b[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[a-zA-Z]{2,})\b"), r"***@\1"),
]


def redact(text: str) -> str:
    for pattern, replacement in _RULES:
        text = pattern.sub(replacement, text)
    return text


def redact_record(record: dict[str, Any]) -> None:
    """loguru patcher hook: rewrites ``record["message"]`` in place."""

    message = record.get("message")
    if message:
        record["message"] = redact(message)


__all__ = ["REDACTED", "redact", "redact_record"]
