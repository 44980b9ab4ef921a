"""Configuration: frozen Config, environment resolution, and ambient scope.

Precedence is defaults < environment (``.env`` included) < overrides. The
environment is only read by explicit ``resolve_config()`` and ``config_scope()``
calls. Library operations call ``current_config()``, which returns the
innermost scoped Config or the built-in defaults, never the environment.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass, fields
import logging
import os
from typing import TYPE_CHECKING, Any

from resultobject.constants import ENV_SANITIZATION_LEVEL, ENV_STACK_TRACE_LIMIT
from resultobject.errors import ConfigurationError, InvalidArgumentError
from resultobject.sanitization import SanitizationLevel, parse_level

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """Immutable library configuration.

    Example:
        config = Config(sanitization_level="message_only", stack_trace_limit=20)
    """

    #: Level used by ``ResultError.sanitize()`` when called without a level.
    sanitization_level: SanitizationLevel = SanitizationLevel.FULL
    #: Maximum frames captured by ``with_stack_trace()``; *None* keeps all.
    stack_trace_limit: int | None = None

    def __post_init__(self) -> None:
        """Normalize the sanitization level and validate numeric fields."""
        try:
            level = parse_level(self.sanitization_level)
        except InvalidArgumentError as exc:
            raise ConfigurationError(
                f"Invalid sanitization_level: {self.sanitization_level!r}",
                hint="Supported levels: 'none', 'message_only', 'full'.",
            ) from exc
        object.__setattr__(self, "sanitization_level", level)

        limit = self.stack_trace_limit
        if limit is not None and (
            isinstance(limit, bool) or not isinstance(limit, int) or limit < 1
        ):
            raise ConfigurationError(
                f"stack_trace_limit must be a positive integer or None, got {limit!r}",
                hint="This bounds how many frames with_stack_trace() records.",
            )


_AMBIENT: contextvars.ContextVar[Config | None] = contextvars.ContextVar(
    "resultobject_config", default=None
)

_DEFAULT_CONFIG = Config()

_DOTENV_LOADED: bool = False


def _load_dotenv_once() -> None:
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(find_dotenv(usecwd=True))
    _DOTENV_LOADED = True


def _env_values() -> dict[str, Any]:
    values: dict[str, Any] = {}
    level = os.environ.get(ENV_SANITIZATION_LEVEL)
    if level:
        values["sanitization_level"] = level
    limit = os.environ.get(ENV_STACK_TRACE_LIMIT)
    if limit:
        try:
            values["stack_trace_limit"] = int(limit)
        except ValueError as exc:
            raise ConfigurationError(
                f"{ENV_STACK_TRACE_LIMIT} must be an integer, got {limit!r}",
                hint=f"Unset {ENV_STACK_TRACE_LIMIT} to capture full stacks.",
            ) from exc
    return values


def resolve_config(overrides: Mapping[str, Any] | None = None) -> Config:
    """Resolve a Config from defaults, the environment and ``overrides``.

    Args:
        overrides: Field values taking precedence over the environment.

    Returns:
        A validated, frozen Config.

    Raises:
        ConfigurationError: On unknown keys or invalid values.
    """
    _load_dotenv_once()
    known = {f.name for f in fields(Config)}
    unknown = sorted(set(overrides or {}) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            hint=f"Supported keys: {', '.join(sorted(known))}.",
        )
    merged = {**_env_values(), **(overrides or {})}
    cfg = Config(**merged)
    log.debug("Resolved configuration: %s", cfg)
    return cfg


def current_config() -> Config:
    """Return the scoped Config if one is active, else the built-in defaults."""
    cfg = _AMBIENT.get()
    return cfg if cfg is not None else _DEFAULT_CONFIG


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | Config | None = None,
    **overrides: Any,
) -> Generator[Config]:
    """Use a configuration for the duration of a ``with`` block.

    The scope is context-local, so concurrent threads and tasks do not see
    each other's overrides.

    Example:
        with config_scope(sanitization_level="message_only"):
            payload = error.to_payload()
    """
    if isinstance(cfg_or_overrides, Config):
        cfg = cfg_or_overrides
    else:
        cfg = resolve_config({**(cfg_or_overrides or {}), **overrides})

    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)
