"""Property tests for result and error invariants."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from resultobject import (
    ErrorCategory,
    Failure,
    ResultError,
    SanitizationLevel,
    Success,
    TypeMismatchError,
    failure,
    success,
)

pytestmark = pytest.mark.unit

_PROPS = settings(max_examples=50, deadline=None, derandomize=True)

values = st.one_of(
    st.integers(),
    st.text(),
    st.floats(allow_nan=False),
    st.lists(st.integers(), max_size=3),
    st.booleans(),
)

_leaf_errors = st.builds(
    ResultError,
    code=st.text(max_size=8),
    reason=st.text(max_size=8),
    message=st.text(max_size=16),
    category=st.none() | st.sampled_from(ErrorCategory),
    stack_trace=st.none() | st.text(min_size=1, max_size=16),
)

errors = st.recursive(
    _leaf_errors,
    lambda inner: st.builds(
        ResultError,
        code=st.text(max_size=8),
        reason=st.text(max_size=8),
        message=st.text(max_size=16),
        category=st.none() | st.sampled_from(ErrorCategory),
        inner_error=inner,
        stack_trace=st.none() | st.text(min_size=1, max_size=16),
    ),
    max_leaves=4,
)

levels = st.sampled_from(SanitizationLevel)


@given(value=values)
@_PROPS
def test_success_is_success(value) -> None:
    result = success(value)
    assert result.is_success
    assert not result.is_failure
    assert result.value == value


@given(error=errors)
@_PROPS
def test_failure_is_failure(error) -> None:
    result = failure(error)
    assert result.is_failure
    assert not result.is_success
    assert result.error == error


@given(value=values)
@_PROPS
def test_cast_round_trip_recovers_value(value) -> None:
    result = success(value).cast(object).cast(type(value))
    assert isinstance(result, Success)
    assert result.value == value


@given(error=errors, target=st.sampled_from([int, str, object, list, ErrorCategory]))
@_PROPS
def test_failure_cast_preserves_error(error, target) -> None:
    result = Failure(error)
    cast_result = result.cast(target)
    assert cast_result.is_failure
    assert cast_result.error == result.error


@given(value=st.integers())
@_PROPS
def test_int_never_casts_to_str(value) -> None:
    with pytest.raises(TypeMismatchError):
        success(value).cast(str)


@given(value=st.text())
@_PROPS
def test_str_never_casts_to_int(value) -> None:
    with pytest.raises(TypeMismatchError):
        success(value).cast(int)


@given(error=errors, level=levels)
@_PROPS
def test_sanitize_is_idempotent(error, level) -> None:
    once = error.sanitize(level)
    assert once.sanitize(level) == once


@given(error=errors)
@_PROPS
def test_sanitize_levels_are_ordered(error) -> None:
    assert error.sanitize(SanitizationLevel.NONE) == error

    message_only = error.sanitize(SanitizationLevel.MESSAGE_ONLY)
    assert message_only.message == "An error occurred."
    assert message_only.stack_trace is None
    assert message_only.reason == error.reason
    assert message_only.inner_error == error.inner_error

    full = error.sanitize(SanitizationLevel.FULL)
    assert full.reason == "Internal Error"
    assert full.inner_error is None
    assert (full.code, full.category) == (error.code, error.category)


@given(error=errors)
@_PROPS
def test_to_text_is_deterministic_and_recursive(error) -> None:
    text = error.to_text()
    assert text == error.to_text()
    if error.inner_error is not None:
        assert text.endswith(f"\nInner Error: {error.inner_error.to_text()}")
