"""Capability contract for result-like objects.

Code that only queries and casts results can depend on ``ResultLike``
rather than on ``Success``/``Failure``, so wrappers (lazy or instrumented
results, for instance) can stand in for them.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from resultobject.error import ResultError


@runtime_checkable
class ResultLike[T, C: Enum](Protocol):
    """Duck-typed protocol satisfied by ``Success`` and ``Failure``."""

    @property
    def is_success(self) -> bool: ...  # noqa: D102
    @property
    def is_failure(self) -> bool: ...  # noqa: D102
    @property
    def value(self) -> T: ...  # noqa: D102
    @property
    def error(self) -> ResultError[C]: ...  # noqa: D102
    def cast[U](self, target: type[U]) -> ResultLike[U, C]: ...  # noqa: D102
    def value_or(self, default: Any = None) -> Any: ...  # noqa: D102
