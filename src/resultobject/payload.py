"""Serializable error payloads for external-facing boundaries.

A boundary (HTTP handler, message producer) turns a sanitized
``ResultError`` into an ``ErrorPayload`` and dumps it with
``model_dump()`` / ``model_dump_json()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from resultobject.categories import category_label

if TYPE_CHECKING:
    from resultobject.error import ResultError


class ErrorPayload(BaseModel):
    """Wire shape of a ``ResultError``; the category is its display label."""

    model_config = ConfigDict(frozen=True)

    code: str
    reason: str
    message: str
    category: str | None = None
    stack_trace: str | None = None
    inner_error: ErrorPayload | None = None

    @classmethod
    def from_error(cls, error: ResultError[Any]) -> ErrorPayload:
        """Build a payload mirroring ``error`` and its inner chain as-is.

        No redaction happens here; call ``error.sanitize()`` first, or use
        ``error.to_payload()``.
        """
        return cls(
            code=error.code,
            reason=error.reason,
            message=error.message,
            category=(
                category_label(error.category) if error.category is not None else None
            ),
            stack_trace=error.stack_trace,
            inner_error=(
                cls.from_error(error.inner_error)
                if error.inner_error is not None
                else None
            ),
        )
