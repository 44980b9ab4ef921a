"""Construction helpers for results.

Prefer these over instantiating ``Success``/``Failure`` directly: they apply
the missing-value rule (a ``None`` value becomes a failure) instead of
raising, and build errors from plain fields.
"""

from __future__ import annotations

from enum import Enum
import logging
from typing import Any, overload

from resultobject.categories import ErrorCategory
from resultobject.constants import (
    MISSING_VALUE_CODE,
    MISSING_VALUE_MESSAGE,
    MISSING_VALUE_REASON,
)
from resultobject.error import ResultError
from resultobject.errors import InvalidArgumentError
from resultobject.result import Failure, Result, Success, is_result
from resultobject.unit import UNIT, Unit

log = logging.getLogger(__name__)


def missing_value_error() -> ResultError[Any]:
    """Error used when a success is requested without a value."""
    return ResultError(MISSING_VALUE_CODE, MISSING_VALUE_REASON, MISSING_VALUE_MESSAGE)


@overload
def success() -> Success[Unit, Any]: ...


@overload
def success[T](value: T) -> Result[T, Any]: ...


def success(value: Any = UNIT) -> Result[Any, Any]:
    """Create a successful result.

    Without arguments the result carries ``UNIT``. A ``None`` value yields a
    ``Failure`` with the ``MISSING_VALUE`` error.

    Example:
        result = success(order)
        done = success()
    """
    if value is None:
        log.debug("success() called with None; returning MISSING_VALUE failure")
        return Failure(missing_value_error())
    return Success(value)


@overload
def failure[T, C: Enum](error: ResultError[C], /) -> Failure[T, C]: ...


@overload
def failure[T](
    code: str,
    reason: str,
    message: str,
    /,
    *,
    category: ErrorCategory | None = None,
    inner_error: ResultError[Any] | None = None,
) -> Failure[T, ErrorCategory]: ...


def failure(
    error_or_code: ResultError[Any] | str,
    reason: str | None = None,
    message: str | None = None,
    /,
    *,
    category: Enum | None = None,
    inner_error: ResultError[Any] | None = None,
) -> Failure[Any, Any]:
    """Create a failed result from an error, or from its fields.

    Example:
        failure(ResultError("404", "NotFound", "The item was not found."))
        failure("404", "NotFound", "The item was not found.")
    """
    if isinstance(error_or_code, ResultError):
        extras = (reason, message, category, inner_error)
        if any(x is not None for x in extras):
            raise InvalidArgumentError(
                "failure(error) takes no other arguments",
                hint="Set category and inner_error on the ResultError itself.",
            )
        return Failure(error_or_code)

    if not isinstance(error_or_code, str):
        raise InvalidArgumentError(
            f"failure() code must be a str, got {type(error_or_code).__name__}",
            hint="Pass a ResultError, or code, reason and message as strings.",
        )
    if reason is None or message is None:
        raise InvalidArgumentError(
            "failure() requires either a ResultError or code, reason and message",
        )
    return Failure(ResultError(error_or_code, reason, message, category, inner_error))


def from_parts[T, C: Enum](
    value: T | None, error: ResultError[C] | None
) -> Result[T, C]:
    """Build a result from a value/error pair.

    The error wins when both are given; a ``None`` value without an error
    becomes a ``MISSING_VALUE`` failure.
    """
    if error is not None:
        if value is not None:
            log.debug("from_parts() got both value and error; keeping the error")
        return Failure(error)
    if value is None:
        return Failure(missing_value_error())
    return Success(value)


def ensure_result(obj: Any) -> Result[Any, Any]:
    """Return ``obj`` if it is already a result, else wrap it with ``success``."""
    if is_result(obj):
        return obj
    return success(obj)
