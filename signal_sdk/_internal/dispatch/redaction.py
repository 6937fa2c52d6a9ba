"""Redaction of sensitive request fields before they reach debug logs."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "pin",
    "captcha",
    "challenge_token",
    "token",
    "verified_safety_number",
    "pack_key",
    "uri",
    "password",
    "authorization",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Any) -> Any:
    """Return a copy of a JSON body with sensitive values replaced.

    Keys are matched case-insensitively against REDACT_KEYS at any depth,
    including inside lists. The input is never mutated.
    """
    if isinstance(payload, dict):
        return {
            key: REDACTED_VALUE if _is_sensitive(key) else redact_payload(value)
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    return payload


def _is_sensitive(key: Any) -> bool:
    return isinstance(key, str) and key.lower() in REDACT_KEYS
