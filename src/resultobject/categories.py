"""Standard error categories.

Callers that need their own taxonomy can parameterize ``ResultError`` and
``Result`` with any ``enum.Enum`` subclass instead of ``ErrorCategory``.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """Closed set of failure classes shared across an application."""

    #: Invalid input, violated business rule, or malformed data.
    VALIDATION = "Validation"
    #: The requested entity, route, or resource does not exist.
    NOT_FOUND = "NotFound"
    #: Authentication is missing, invalid, or expired.
    UNAUTHORIZED = "Unauthorized"
    #: Authenticated, but lacking permission for the operation.
    FORBIDDEN = "Forbidden"
    #: The operation conflicts with current state (concurrency, uniqueness).
    CONFLICT = "Conflict"
    #: Unexpected failure inside the application; keep details internal.
    INTERNAL = "Internal"
    #: A third-party service or network dependency failed.
    EXTERNAL = "External"

    def __str__(self) -> str:
        return self.value


def category_label(category: Enum) -> str:
    """Return the display label of a category member.

    String-valued enums (such as ``ErrorCategory``) render their value,
    anything else renders the member name.
    """
    return category.value if isinstance(category.value, str) else category.name
