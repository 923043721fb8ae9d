"""Helpers for anonymising personal data in logs and telemetry."""

from __future__ import annotations

import hashlib
from typing import Any

__all__ = [
    "mask_email",
    "mask_identifier",
    "mask_username",
    "scrub_sensitive_mapping",
]

_DIGEST_SIZE = 10
_SENSITIVE_KEYS = {"user_id", "athlete_id", "username", "email", "password"}
_REDACTED = "***"


def _stable_digest(value: str) -> str:
    normalised = value.strip().encode("utf-8", "ignore")
    return hashlib.blake2b(normalised, digest_size=_DIGEST_SIZE).hexdigest()


def mask_identifier(value: int | str, *, prefix: str = "id") -> str:
    """Return an anonymised representation of ``value`` suitable for logs."""

    raw = str(value)
    digest = _stable_digest(f"{prefix}:{raw}")
    return f"{prefix}-{digest[:6]}...{digest[-4:]}"


def mask_username(username: str) -> str:
    """Mask a login name while keeping it traceable across events."""

    cleaned = username.strip()
    if not cleaned:
        return "user-anon"
    digest = _stable_digest(f"username:{cleaned.lower()}")
    return f"user-{digest[:8]}"


def mask_email(email: str) -> str:
    """Keep the domain of ``email`` and replace the local part with a digest.

    >>> mask_email("joao@lions.com").endswith("@lions.com")
    True
    >>> mask_email("not-an-email")
    '***'
    """

    local, sep, domain = email.strip().rpartition("@")
    if not sep or not local:
        return _REDACTED
    digest = _stable_digest(f"email:{local.lower()}")
    return f"mail-{digest[:8]}@{domain}"


def _scrub_value(value: Any, *, key: str | None = None) -> Any:
    if value is None:
        return None
    lowered = key.lower() if isinstance(key, str) else None

    if lowered == "password":
        return _REDACTED
    if lowered in {"user_id", "athlete_id"}:
        return mask_identifier(value, prefix=lowered.replace("_id", ""))
    if lowered == "username" and isinstance(value, str):
        return mask_username(value)
    if lowered == "email" and isinstance(value, str):
        return mask_email(value)

    if isinstance(value, dict):
        return scrub_sensitive_mapping(value)
    if isinstance(value, list):
        return [_scrub_value(item, key=key) for item in value]
    if isinstance(value, tuple):
        return tuple(_scrub_value(item, key=key) for item in value)
    return value


def scrub_sensitive_mapping(mapping: dict[str, Any]) -> dict[str, Any]:
    """Recursively mask identifiers, logins and secrets inside ``mapping`` in-place."""

    for key, value in list(mapping.items()):
        if isinstance(key, str) and key.lower() in _SENSITIVE_KEYS:
            mapping[key] = _scrub_value(value, key=key)
        elif isinstance(value, (dict, list, tuple)):
            mapping[key] = _scrub_value(
                value, key=key if isinstance(key, str) else None
            )
    return mapping
