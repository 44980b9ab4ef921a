"""Sanitization levels for errors crossing a trust boundary."""

from __future__ import annotations

from enum import Enum
from typing import Any

from resultobject.errors import InvalidArgumentError


class SanitizationLevel(Enum):
    """How much detail to strip from an error before exposing it.

    ``NONE`` keeps everything, ``MESSAGE_ONLY`` hides the message and stack
    trace, ``FULL`` additionally hides the reason and the inner error chain.
    """

    NONE = "none"
    MESSAGE_ONLY = "message_only"
    FULL = "full"


def parse_level(value: Any) -> SanitizationLevel:
    """Return ``value`` as a ``SanitizationLevel``.

    Accepts enum members, their values (``"message_only"``) and their names
    (``"MESSAGE_ONLY"``), case-insensitively for strings. Anything else is
    rejected rather than mapped to a default.
    """
    if isinstance(value, SanitizationLevel):
        return value
    if isinstance(value, str):
        key = value.strip()
        for level in SanitizationLevel:
            if key.lower() == level.value or key.upper() == level.name:
                return level
    raise InvalidArgumentError(
        f"Unsupported sanitization level: {value!r}",
        hint="Use SanitizationLevel.NONE, MESSAGE_ONLY or FULL.",
    )
