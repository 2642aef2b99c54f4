"""
Built-in value validators for concord.

Relational checks (gt, ge, lt, le, eq, ne, between), null checks and
string checks. Each factory returns an immutable Validator instance.
"""

from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from typing import Any, Callable

from .context import describe
from .core import Validator
from .errors import ConstructionError
from .types import SUCCESS, Result, fail


@dataclass(frozen=True, slots=True)
class Compare(Validator[Any]):
    """Compare the subject against a fixed bound."""

    bound: Any
    op: Callable[[Any, Any], bool]
    expectation: str

    def validate(self, value: Any) -> Result:
        try:
            passed = self.op(value, self.bound)
        except TypeError:
            return fail(value, f"got {describe(value)}, which is not comparable to {describe(self.bound)}")
        if passed:
            return SUCCESS
        return fail(value, f"got {describe(value)}, expected {self.expectation}")


def gt(bound: Any) -> Compare:
    """Validate greater than."""
    return Compare(bound, operator.gt, f"more than {describe(bound)}")


def ge(bound: Any) -> Compare:
    """Validate greater than or equal."""
    return Compare(bound, operator.ge, f"{describe(bound)} or more")


def lt(bound: Any) -> Compare:
    """Validate less than."""
    return Compare(bound, operator.lt, f"less than {describe(bound)}")


def le(bound: Any) -> Compare:
    """Validate less than or equal."""
    return Compare(bound, operator.le, f"{describe(bound)} or less")


@dataclass(frozen=True, slots=True)
class EqualTo(Validator[Any]):
    other: Any

    def validate(self, value: Any) -> Result:
        if value == self.other:
            return SUCCESS
        return fail(value, f"does not equal {describe(self.other)}")


@dataclass(frozen=True, slots=True)
class NotEqualTo(Validator[Any]):
    other: Any

    def validate(self, value: Any) -> Result:
        if value != self.other:
            return SUCCESS
        return fail(value, f"equals {describe(self.other)}")


def eq(other: Any) -> EqualTo:
    """Validate exact equality."""
    return EqualTo(other)


def ne(other: Any) -> NotEqualTo:
    """Validate inequality."""
    return NotEqualTo(other)


@dataclass(frozen=True, slots=True)
class Between(Validator[Any]):
    """Validate value is between bounds."""

    lower: Any
    upper: Any
    inclusive: bool = True

    def validate(self, value: Any) -> Result:
        try:
            if self.inclusive:
                passed = self.lower <= value <= self.upper
            else:
                passed = self.lower < value < self.upper
        except TypeError:
            return fail(value, f"got {describe(value)}, which is not comparable to the range bounds")
        if passed:
            return SUCCESS
        suffix = "" if self.inclusive else " (exclusively)"
        return fail(
            value,
            f"got {describe(value)}, expected between {describe(self.lower)} "
            f"and {describe(self.upper)}{suffix}",
        )


def between(lower: Any, upper: Any, inclusive: bool = True) -> Between:
    """
    Validate value is between bounds.

    Usage:
        between(0, 10)
        between(0, 10, inclusive=False)
    """
    return Between(lower, upper, inclusive)


@dataclass(frozen=True, slots=True)
class IsNull(Validator[Any]):
    def validate(self, value: Any) -> Result:
        if value is None:
            return SUCCESS
        return fail(value, "is not a null")


@dataclass(frozen=True, slots=True)
class IsNotNull(Validator[Any]):
    def validate(self, value: Any) -> Result:
        if value is not None:
            return SUCCESS
        return fail(value, "is a null")


is_null = IsNull()
not_null = IsNotNull()


@dataclass(frozen=True, slots=True)
class Matches(Validator[str]):
    """Validate string matches regex pattern (anchored at the start)."""

    pattern: re.Pattern

    def validate(self, value: str) -> Result:
        if isinstance(value, str) and self.pattern.match(value) is not None:
            return SUCCESS
        return fail(value, f"must match regular expression {self.pattern.pattern!r}")


def matches(pattern: str | re.Pattern) -> Matches:
    """
    Validate string matches regex pattern.

    Usage:
        matches(r"^[a-z]+$")
    """
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise ConstructionError(f"Invalid pattern {pattern!r}: {e}") from e
    return Matches(compiled)


@dataclass(frozen=True, slots=True)
class StartsWith(Validator[str]):
    prefix: str

    def validate(self, value: str) -> Result:
        if isinstance(value, str) and value.startswith(self.prefix):
            return SUCCESS
        return fail(value, f"must start with {self.prefix!r}")


@dataclass(frozen=True, slots=True)
class EndsWith(Validator[str]):
    suffix: str

    def validate(self, value: str) -> Result:
        if isinstance(value, str) and value.endswith(self.suffix):
            return SUCCESS
        return fail(value, f"must end with {self.suffix!r}")


def starts_with(prefix: str) -> StartsWith:
    return StartsWith(prefix)


def ends_with(suffix: str) -> EndsWith:
    return EndsWith(suffix)


@dataclass(frozen=True, slots=True)
class Blank(Validator[str]):
    """None or whitespace only."""

    def validate(self, value: str) -> Result:
        if value is None or (isinstance(value, str) and not value.strip()):
            return SUCCESS
        return fail(value, "must be blank")


@dataclass(frozen=True, slots=True)
class NotBlank(Validator[str]):
    def validate(self, value: str) -> Result:
        if isinstance(value, str) and value.strip():
            return SUCCESS
        return fail(value, "must not be blank")


blank = Blank()
not_blank = NotBlank()


@dataclass(frozen=True, slots=True)
class Predicate(Validator[Any]):
    fn: Callable[[Any], bool]
    constraint: str

    def validate(self, value: Any) -> Result:
        if self.fn(value):
            return SUCCESS
        return fail(value, self.constraint)


def predicate(fn: Callable[[Any], bool], constraint: str | None = None) -> Predicate:
    """
    Create validator from arbitrary predicate function.

    Usage:
        predicate(lambda x: x % 2 == 0, "must be even")
        predicate(str.isalpha, "must be alphabetic")
    """
    if not callable(fn):
        raise ConstructionError(f"Predicate must be callable, got {type(fn).__name__}")
    return Predicate(fn, constraint or f"failed {getattr(fn, '__name__', 'predicate')}")
