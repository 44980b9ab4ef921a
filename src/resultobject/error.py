"""Structured, immutable error values carried by failed results.

``ResultError`` is data, not an exception: it is built bottom-up (inner
causes first), never mutated, and every transformation returns a new value.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
import logging
import traceback
from typing import TYPE_CHECKING, Any

from resultobject.categories import ErrorCategory, category_label
from resultobject.config import current_config
from resultobject.constants import SANITIZED_MESSAGE, SANITIZED_REASON
from resultobject.errors import InvalidArgumentError
from resultobject.payload import ErrorPayload
from resultobject.sanitization import SanitizationLevel, parse_level

if TYPE_CHECKING:
    from collections.abc import Iterator

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class ResultError[C: Enum]:
    """Details of a failure: a stable code plus human-facing text.

    ``code`` and ``category`` are meant for programmatic handling and
    survive sanitization; ``reason``, ``message``, ``stack_trace`` and
    ``inner_error`` are progressively redacted by ``sanitize``.

    Example:
        db = ResultError("DB_TIMEOUT", "Timeout", "query exceeded 5s")
        err = ResultError(
            "ORDER_LOAD",
            "Load Failed",
            "Could not load order 42",
            ErrorCategory.EXTERNAL,
            inner_error=db,
        )
    """

    code: str
    reason: str
    message: str
    category: C | None = None
    inner_error: ResultError[Any] | None = None
    stack_trace: str | None = None

    def with_stack_trace(self, *, limit: int | None = None) -> ResultError[C]:
        """Return a copy carrying the caller's current call stack.

        Args:
            limit: Maximum number of innermost frames to keep. Defaults to
                the ``stack_trace_limit`` of the active ``config_scope``
                (all frames outside a scope).
        """
        if limit is None:
            limit = current_config().stack_trace_limit
        elif isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise InvalidArgumentError(
                f"limit must be a positive integer, got {limit!r}",
                hint="Pass limit=None to capture the full stack.",
            )
        # The innermost frame is this method; drop it.
        frames = traceback.extract_stack(limit=None if limit is None else limit + 1)[:-1]
        trace = "".join(traceback.format_list(frames)).rstrip("\n")
        log.debug("Captured %d stack frames for error %s", len(frames), self.code)
        return dataclasses.replace(self, stack_trace=trace)

    def sanitize(
        self, level: SanitizationLevel | str | None = None
    ) -> ResultError[C]:
        """Return a copy safe to expose across a trust boundary.

        - ``NONE``: the receiver itself.
        - ``MESSAGE_ONLY``: generic message, no stack trace.
        - ``FULL``: generic message and reason, no stack trace, no inner error.

        ``code`` and ``category`` are always preserved. Without ``level`` the
        active ``config_scope``'s ``sanitization_level`` applies, and ``FULL``
        outside a scope.

        Raises:
            InvalidArgumentError: If ``level`` is not a supported level.
        """
        resolved = (
            current_config().sanitization_level if level is None else parse_level(level)
        )
        match resolved:
            case SanitizationLevel.NONE:
                return self
            case SanitizationLevel.MESSAGE_ONLY:
                return dataclasses.replace(
                    self, message=SANITIZED_MESSAGE, stack_trace=None
                )
            case SanitizationLevel.FULL:
                return dataclasses.replace(
                    self,
                    reason=SANITIZED_REASON,
                    message=SANITIZED_MESSAGE,
                    stack_trace=None,
                    inner_error=None,
                )

    def iter_chain(self) -> Iterator[ResultError[Any]]:
        """Yield this error followed by each inner error, outermost first.

        Stops early if the same error object shows up twice.
        """
        seen: set[int] = set()
        cur: ResultError[Any] | None = self
        while cur is not None and id(cur) not in seen:
            seen.add(id(cur))
            yield cur
            cur = cur.inner_error

    @property
    def root_cause(self) -> ResultError[Any]:
        """The innermost error of the chain (``self`` when there is no inner error)."""
        *_, last = self.iter_chain()
        return last

    def to_text(self) -> str:
        """Render the error, its stack trace, and its inner errors as text."""
        prefix = (
            f"[{category_label(self.category)}] " if self.category is not None else ""
        )
        text = (
            f"{prefix}Code: {self.code}, Reason: {self.reason}, Message: {self.message}"
        )
        if self.stack_trace is not None:
            text += f"\nStack Trace: {self.stack_trace}"
        if self.inner_error is not None:
            text += f"\nInner Error: {self.inner_error.to_text()}"
        return text

    __str__ = to_text

    def to_payload(
        self, level: SanitizationLevel | str | None = None
    ) -> ErrorPayload:
        """Sanitize at ``level`` and convert to a serializable payload."""
        return ErrorPayload.from_error(self.sanitize(level))


type StandardResultError = ResultError[ErrorCategory]
