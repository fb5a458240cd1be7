"""
Response Redaction

Strips sensitive student fields from payloads before they leave the API.
"""

from typing import Any, FrozenSet


SENSITIVE_FIELDS: FrozenSet[str] = frozenset({"family_income"})


def redact_sensitive(payload: Any, fields: FrozenSet[str] = SENSITIVE_FIELDS) -> Any:
    """Return a copy of payload with sensitive keys removed at any depth."""
    if isinstance(payload, dict):
        return {
            key: redact_sensitive(value, fields)
            for key, value in payload.items()
            if key not in fields
        }
    if isinstance(payload, list):
        return [redact_sensitive(item, fields) for item in payload]
    return payload
