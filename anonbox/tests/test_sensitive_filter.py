from __future__ import annotations

from anonbox.shared.logging.sensitive_filter import REDACTED, redact, redact_record

TOKEN = "eyJhbGciOiJIUzI1NiJ9.eyJpZCI6MX0.c2lnbmF0dXJl"


def test_bearer_tokens_are_redacted() -> None:
    out = redact(f"header Bearer {TOKEN}")

    assert TOKEN not in out
    assert REDACTED in out


def test_bare_jwts_are_redacted() -> None:
    assert redact(f"issued {TOKEN} for user=3") == f"issued {REDACTED} for user=3"


def test_passwords_are_redacted() -> None:
    out = redact("login payload password=hunter22, user=domm")

    assert "hunter22" not in out
    assert "user=domm" in out


def test_emails_are_masked() -> None:
    assert redact("registered domm@example.com") == "registered ***@example.com"


def test_database_credentials_are_redacted() -> None:
    out = redact("connect postgresql://anon:s3cr3t@db:5432/anonbox")

    assert "s3cr3t" not in out
    assert f"postgresql://anon:{REDACTED}@" in out


def test_record_hook_rewrites_message_in_place() -> None:
    record = {"message": "jwt_secret=topsecretvalue", "extra": {}}

    redact_record(record)

    assert "topsecretvalue" not in record["message"]


def test_plain_messages_are_untouched() -> None:
    line = "messages.post: message_id=4 to slug=domm"

    assert redact(line) == line
