"""
Entry points for concord: validate() and Pydantic interop.

Provides validate() and as_pydantic().
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import AfterValidator
from pydantic_core import PydanticCustomError

from .context import is_strict
from .core import to_validator
from .errors import ValidationFailed
from .types import Failure, Result

logger = logging.getLogger(__name__)


def validate(value: Any, validator: Any) -> Result:
    """
    Validate a value.

    Args:
        value: The subject to validate
        validator: A Validator, or a function returning a Result

    Returns:
        SUCCESS if every rule holds
        Failure({Violation, ...}) otherwise

    Raises:
        ValidationFailed: In strict mode, instead of returning a Failure

    Usage:
        result = validate(order.items, each.is_(not_null) & not_empty)
        if isinstance(result, Failure):
            for violation in result.violations:
                print(violation)
    """
    result = to_validator(validator)(value)

    if isinstance(result, Failure):
        logger.debug("Validation failed with %d violation(s)", len(result.violations))
        if is_strict():
            raise ValidationFailed(result)

    return result


def as_pydantic(validator: Any) -> AfterValidator:
    """
    Wrap a validator for use in a Pydantic field annotation.

    Returns:
        An AfterValidator raising a "rule_violation" error on Failure

    Usage:
        class Order(BaseModel):
            tags: Annotated[list[str], as_pydantic(distinct & not_empty)]
    """
    v = to_validator(validator)

    def check(value: Any) -> Any:
        result = v(value)
        if isinstance(result, Failure):
            messages = sorted(str(violation) for violation in result.violations)
            raise PydanticCustomError(
                "rule_violation",
                "{violations}",
                {"violations": "; ".join(messages), "count": len(messages)},
            )
        return value

    return AfterValidator(check)
