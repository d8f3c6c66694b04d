"""Blank Field Removal — strips empty-string values from nested request payloads.

Invariants:
    - Pure: never mutates its argument, always returns a fresh structure
    - Only values equal to "" are dropped; None, 0, False and whitespace survive
    - Recurses into nested dicts and into dicts held inside lists

Design Decisions:
    - Applied to PATCH bodies only: a blank form field means "leave unchanged",
      so it must never reach storage as an overwrite
"""

from typing import Any


def remove_blank_fields(payload: Any) -> Any:
    """Return a copy of payload without empty-string fields.

    >>> remove_blank_fields({"project": {"title": "", "user1": "u1"}})
    {'project': {'user1': 'u1'}}
    """
    if isinstance(payload, dict):
        return {
            key: remove_blank_fields(value)
            for key, value in payload.items()
            if value != ""
        }
    if isinstance(payload, list):
        return [remove_blank_fields(item) for item in payload]
    return payload
