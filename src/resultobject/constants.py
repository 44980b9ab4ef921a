"""Fixed literals shared by sanitization and the result factory."""  # noqa: D415

# ==============================================================================
# Sanitization
# ==============================================================================

SANITIZED_MESSAGE = "An error occurred."
SANITIZED_REASON = "Internal Error"

# ==============================================================================
# Missing success values
# ==============================================================================

MISSING_VALUE_CODE = "MISSING_VALUE"
MISSING_VALUE_REASON = "Missing Value"
MISSING_VALUE_MESSAGE = "A successful result requires a value."

# ==============================================================================
# Environment
# ==============================================================================

ENV_SANITIZATION_LEVEL = "RESULTOBJECT_SANITIZATION_LEVEL"
ENV_STACK_TRACE_LIMIT = "RESULTOBJECT_STACK_TRACE_LIMIT"
