"""Pytest configuration and fixtures.

Provides environment isolation and logging configuration. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from resultobject import ErrorCategory, ResultError

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_resultobject_env(request, monkeypatch):
    """Clear RESULTOBJECT_* env vars so configuration starts from defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("RESULTOBJECT_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def debug_library_logging():
    """Let caplog see the library's debug records."""
    logging.getLogger("resultobject").setLevel(logging.DEBUG)


# =============================================================================
# Shared errors (opt-in)
# =============================================================================


@pytest.fixture
def inner_error() -> ResultError[ErrorCategory]:
    """A categorized cause used as the inner error of other fixtures."""
    return ResultError(
        "DB_TIMEOUT",
        "Timeout",
        "SELECT * FROM orders took 5.2s",
        ErrorCategory.EXTERNAL,
    )


@pytest.fixture
def sensitive_error(inner_error) -> ResultError[ErrorCategory]:
    """An error carrying every redactable field, stack trace included."""
    return ResultError(
        "SENSITIVE_CODE",
        "Sensitive Reason",
        "Sensitive Message",
        ErrorCategory.INTERNAL,
        inner_error=inner_error,
    ).with_stack_trace()
