"""Result type: explicit success/failure values instead of raised exceptions.

A ``Result`` is exactly one of ``Success(value)`` or ``Failure(error)``.
Neither "both" nor "neither" can be represented, so callers branch on
``is_success`` or pattern-match:

    match load_order(order_id):
        case Success(order):
            ship(order)
        case Failure(error):
            report(error.sanitize())
"""

from __future__ import annotations

import dataclasses
from enum import Enum
import types
import typing
from typing import Any, TypeGuard

from resultobject.categories import ErrorCategory
from resultobject.error import ResultError
from resultobject.errors import InvalidArgumentError, InvalidStateError, TypeMismatchError


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T, C: Enum]:
    """A successful outcome holding a present (non-None) value."""

    value: T

    def __post_init__(self) -> None:
        """Reject ``None`` payloads; a success always carries a value."""
        if self.value is None:
            raise InvalidStateError(
                "Success requires a value",
                hint="Use success() for a payload-free success or failure(...) for errors.",
            )

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> ResultError[C]:
        raise InvalidStateError(
            "Cannot read error of a successful result",
            hint="Check is_failure before reading error.",
        )

    def value_or(self, default: Any = None) -> T:  # noqa: ARG002
        """Return the held value; ``default`` is ignored."""
        return self.value

    def cast[U](self, target: type[U]) -> Result[U, C]:
        """Reinterpret the held value as ``target``.

        Raises:
            TypeMismatchError: If the value is not an instance of ``target``.
            InvalidArgumentError: If ``target`` cannot be used for an
                instance check.
        """
        if not _is_instance(self.value, target):
            raise TypeMismatchError(
                type(self.value),
                target,
                hint="cast() only narrows or widens; it never converts values.",
            )
        return Success(self.value)


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[T, C: Enum]:
    """A failed outcome holding a ``ResultError``.

    ``T`` is the value type the successful path would have produced.
    """

    error: ResultError[C]

    def __post_init__(self) -> None:
        """Require a ``ResultError`` payload."""
        if not isinstance(self.error, ResultError):
            raise InvalidStateError(
                f"Failure requires a ResultError, got {type(self.error).__name__}",
                hint="Build one with ResultError(code, reason, message).",
            )

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> T:
        raise InvalidStateError(
            f"Cannot read value of a failed result ({self.error.code})",
            hint="Check is_success before reading value, or use value_or().",
        )

    def value_or(self, default: Any = None) -> Any:
        """Return ``default``; a failure has no value."""
        return default

    def cast[U](self, target: type[U]) -> Result[U, C]:  # noqa: ARG002
        """Forward this failure under a new value type, keeping the same error."""
        return Failure(self.error)


# Annotation-only alias; use is_result() or isinstance(obj, Success | Failure) at runtime.
type Result[T, C: Enum] = Success[T, C] | Failure[T, C]

type StandardResult[T] = Result[T, ErrorCategory]


def is_result(obj: object) -> TypeGuard[Result[Any, Any]]:
    """Return True if ``obj`` is a ``Success`` or a ``Failure``."""
    return isinstance(obj, (Success, Failure))


def _is_instance(value: object, target: Any) -> bool:
    if target is typing.Any or target is object:
        return True
    origin = typing.get_origin(target)
    if origin is typing.Union or isinstance(target, types.UnionType):
        # Optional[list[int]] and list[int] | None: check each member.
        return any(_is_instance(value, arg) for arg in typing.get_args(target))
    if isinstance(target, tuple):
        return any(_is_instance(value, arg) for arg in target)
    if origin is not None:
        # list[int] -> list
        target = origin
    try:
        return isinstance(value, target)
    except TypeError as exc:
        raise InvalidArgumentError(
            f"Cannot cast to {target!r}",
            hint="Use a class, a tuple or union of classes, or a runtime_checkable protocol.",
        ) from exc
