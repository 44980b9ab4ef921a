"""Exception hierarchy for resultobject.

These exceptions signal contract violations by the caller (bad arguments,
reading the wrong side of a result, impossible casts). Expected domain
failures never travel through them; they are carried as ``ResultError``
data inside a ``Failure``.
"""

from __future__ import annotations

from typing import Any


class ResultObjectError(Exception):
    """Base exception for all resultobject errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message followed by the hint, when one is attached."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class ConfigurationError(ResultObjectError):
    """Configuration validation or resolution failed."""


class InvalidArgumentError(ResultObjectError, ValueError):
    """An argument outside the supported set was passed to an operation."""


class InvalidStateError(ResultObjectError):
    """An accessor was used on the wrong side of a result."""


class TypeMismatchError(ResultObjectError, TypeError):
    """A successful value could not be reinterpreted as the requested type."""

    def __init__(
        self,
        source_type: type[Any],
        target: Any,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            f"Cannot cast value of type {_type_name(source_type)} "
            f"to {_type_name(target)}",
            hint=hint,
        )
        self.source_type = source_type
        self.target = target


def _type_name(tp: Any) -> str:
    if isinstance(tp, tuple):
        return " | ".join(_type_name(t) for t in tp)
    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp)
