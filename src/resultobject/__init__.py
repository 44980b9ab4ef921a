"""resultobject: explicit success/failure values with structured errors.

Public API:
    - success() / failure(): Result construction
    - Success / Failure / Result: The result types
    - ResultError: Immutable structured error with sanitization
    - ErrorCategory: Standard error categories
    - UNIT / Unit: No-payload marker
    - Config / config_scope(): Library configuration
"""

from __future__ import annotations

import logging

from resultobject.categories import ErrorCategory
from resultobject.config import Config, config_scope, current_config, resolve_config
from resultobject.contract import ResultLike
from resultobject.error import ResultError, StandardResultError
from resultobject.errors import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidStateError,
    ResultObjectError,
    TypeMismatchError,
)
from resultobject.factory import (
    ensure_result,
    failure,
    from_parts,
    missing_value_error,
    success,
)
from resultobject.payload import ErrorPayload
from resultobject.result import Failure, Result, StandardResult, Success, is_result
from resultobject.sanitization import SanitizationLevel
from resultobject.unit import UNIT, Unit

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultobject")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultobject").addHandler(logging.NullHandler())

__all__ = [
    "UNIT",
    "Config",
    "ConfigurationError",
    "ErrorCategory",
    "ErrorPayload",
    "Failure",
    "InvalidArgumentError",
    "InvalidStateError",
    "Result",
    "ResultError",
    "ResultLike",
    "ResultObjectError",
    "SanitizationLevel",
    "StandardResult",
    "StandardResultError",
    "Success",
    "TypeMismatchError",
    "Unit",
    "config_scope",
    "current_config",
    "ensure_result",
    "failure",
    "from_parts",
    "is_result",
    "missing_value_error",
    "resolve_config",
    "success",
]
