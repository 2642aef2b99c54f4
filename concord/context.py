"""
Context manager for validation configuration (strict mode, repr limit).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

DEFAULT_REPR_LIMIT = 50

# Context variables for validation configuration
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)
_repr_limit: ContextVar[int] = ContextVar("repr_limit", default=DEFAULT_REPR_LIMIT)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict_mode.get()


def get_repr_limit() -> int:
    """Maximum length of a value rendered into a constraint description."""
    return _repr_limit.get()


def describe(value: Any) -> str:
    """Render a value for a constraint description, truncated to the repr limit."""
    rendered = repr(value)
    limit = get_repr_limit()
    if len(rendered) > limit:
        return rendered[:limit] + "..."
    return rendered


@contextmanager
def validation_context(*, strict: bool = False, repr_limit: int = DEFAULT_REPR_LIMIT):
    """
    Context manager for validation configuration.

    Args:
        strict: If True, validate() raises ValidationFailed on a Failure
               instead of returning it. Validators themselves never raise.
        repr_limit: Maximum number of characters of a value's repr embedded
               in constraint descriptions.

    Example:
        from concord import each, gt, validate, validation_context

        positive = each.is_(gt(0))

        # Normal: a Failure is returned
        result = validate([1, -2], positive)

        # Strict: raises ValidationFailed
        with validation_context(strict=True):
            validate([1, -2], positive)  # ValidationFailed!
    """
    if repr_limit < 1:
        raise ValueError(f"repr_limit must be positive, got {repr_limit}")

    strict_token = _strict_mode.set(strict)
    limit_token = _repr_limit.set(repr_limit)
    try:
        yield
    finally:
        _repr_limit.reset(limit_token)
        _strict_mode.reset(strict_token)
