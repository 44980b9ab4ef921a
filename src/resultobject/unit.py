"""The no-payload marker used for results that carry no meaningful value."""

from __future__ import annotations

from typing import Final, Self


class Unit:
    """Zero-information value: every instance is the same instance.

    ``Success(UNIT)`` is the void-equivalent success returned by
    ``success()`` with no arguments.
    """

    __slots__ = ()

    _instance: Unit | None = None

    def __new__(cls) -> Self:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unit)

    def __hash__(self) -> int:
        return hash(Unit)

    def __repr__(self) -> str:
        return "Unit()"

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Self:
        return self

    def __reduce__(self) -> tuple[type[Unit], tuple[()]]:
        return (Unit, ())


UNIT: Final[Unit] = Unit()
