"""
Temporal ordering validators for concord: before and after.

Endpoints are `datetime.date`, `datetime.datetime` or `datetime.time`
values, compared using their own ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import TypeVar, Union

from .core import Validator
from .errors import ConstructionError
from .types import SUCCESS, Result, fail

Temporal = Union[date, time]

T = TypeVar("T", date, time)


def _iso(instant: object) -> str:
    isoformat = getattr(instant, "isoformat", None)
    return isoformat() if callable(isoformat) else repr(instant)


def _check_endpoint(right: object) -> None:
    if not isinstance(right, (date, time)):
        raise ConstructionError(
            f"Temporal endpoint must be a date, datetime or time, got {type(right).__name__}"
        )


@dataclass(frozen=True, slots=True)
class Before(Validator[T]):
    """Succeeds iff the subject is strictly earlier than `right`."""

    right: T

    def validate(self, left: T) -> Result:
        try:
            passed = left < self.right
        except TypeError:
            return fail(left, f"{_iso(left)} is not comparable to {_iso(self.right)}")
        if passed:
            return SUCCESS
        return fail(left, f"{_iso(left)} is not before {_iso(self.right)}")


@dataclass(frozen=True, slots=True)
class After(Validator[T]):
    """Succeeds iff the subject is strictly later than `right`."""

    right: T

    def validate(self, left: T) -> Result:
        try:
            passed = left > self.right
        except TypeError:
            return fail(left, f"{_iso(left)} is not comparable to {_iso(self.right)}")
        if passed:
            return SUCCESS
        return fail(left, f"{_iso(left)} is not after {_iso(self.right)}")


def before(right: T) -> Before[T]:
    """
    Validate that an instant precedes `right`.

    Usage:
        before(datetime.now())
        before(date(2030, 1, 1))
    """
    _check_endpoint(right)
    return Before(right)


def after(right: T) -> After[T]:
    """Validate that an instant follows `right`."""
    _check_endpoint(right)
    return After(right)
