"""
Core validator classes for concord.

Provides the Validator base class, function coercion (to_validator) and
the composition primitives: And, Or, projection (Has) and field descent (At).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .errors import ConstructionError
from .types import Failure, Generic as GenericElement, Result, Success, aggregate

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P")


class Validator(ABC, Generic[T]):
    """
    A pure function from a subject to a Result.

    Subclasses are frozen dataclasses implementing `validate`. Instances are
    stateless and may be shared freely across calls and threads.
    """

    __slots__ = ()

    @abstractmethod
    def validate(self, value: T) -> Result:
        raise NotImplementedError

    def __call__(self, value: T) -> Result:
        return self.validate(value)

    def __and__(self, other: Validator[T] | Callable[[T], Result]) -> And[T]:
        """
        Sequence with another validator: both always run, results combine.

        Usage:
            not_empty & distinct
        """
        return And((*_members(self, And), *_members(to_validator(other), And)))

    def __rand__(self, other: Callable[[T], Result]) -> And[T]:
        """Support `fn & validator` where the function comes first."""
        return to_validator(other) & self

    def __or__(self, other: Validator[T] | Callable[[T], Result]) -> Or[T]:
        """
        Alternate with another validator: at least one must succeed.

        Usage:
            is_null | gt(0)
        """
        return Or((*_members(self, Or), *_members(to_validator(other), Or)))

    def __ror__(self, other: Callable[[T], Result]) -> Or[T]:
        """Support `fn | validator` where the function comes first."""
        return to_validator(other) | self


def _members(v: Validator, kind: type) -> tuple[Validator, ...]:
    if isinstance(v, kind):
        return v.validators  # type: ignore[attr-defined]
    return (v,)


@dataclass(frozen=True, slots=True)
class FunctionValidator(Validator[T]):
    """Adapts a plain `T -> Result` function into a Validator."""

    fn: Callable[[T], Result]

    def validate(self, value: T) -> Result:
        result = self.fn(value)
        if not isinstance(result, (Success, Failure)):
            raise TypeError(
                f"Validator function {self.fn!r} returned {type(result).__name__}, "
                "expected Success or Failure"
            )
        return result


@dataclass(frozen=True, slots=True)
class And(Validator[T]):
    """All members run against the same value; results are combined."""

    validators: tuple[Validator[T], ...]

    def validate(self, value: T) -> Result:
        return aggregate(v(value) for v in self.validators)


@dataclass(frozen=True, slots=True)
class Or(Validator[T]):
    """Succeeds if any member succeeds, otherwise combines every failure."""

    validators: tuple[Validator[T], ...]

    def validate(self, value: T) -> Result:
        results = []
        for v in self.validators:
            result = v(value)
            if isinstance(result, Success):
                return result
            results.append(result)
        return aggregate(results)


@dataclass(frozen=True, slots=True)
class Has(Validator[T], Generic[T, P]):
    """
    Projection: validate a property derived from the subject.

    The extraction runs exactly once per call. Violations produced by the
    inner validator are reported against the original subject, keeping
    their path and constraint.
    """

    extract: Callable[[T], P]
    validator: Validator[P]
    name: str | None = None

    def validate(self, value: T) -> Result:
        projected = self.extract(value)
        result = self.validator(projected)
        if isinstance(result, Failure):
            logger.debug(
                "Projection %s failed with %d violation(s)",
                self.name or self.extract,
                len(result.violations),
            )
            return result.map_violations(lambda v: v.with_value(value))
        return result


@dataclass(frozen=True, slots=True)
class At(Validator[T], Generic[T, P]):
    """
    Field descent: validate a named part of the subject.

    Unlike Has, violations keep the field's own value; the field name is
    prepended to their path.
    """

    name: str
    extract: Callable[[T], P]
    validator: Validator[P]

    def validate(self, value: T) -> Result:
        return self.validator(self.extract(value)).prefixed(GenericElement(self.name))


def project(extract: Callable[[T], P], validator: Any, name: str | None = None) -> Has[T, P]:
    """
    Build a projection validator.

    Usage:
        project(lambda order: order.total, gt(0), name="total")
    """
    if not callable(extract):
        raise ConstructionError(f"Extraction must be callable, got {type(extract).__name__}")
    return Has(extract=extract, validator=to_validator(validator), name=name)


def at(name: str, extract: Callable[[T], P], validator: Any) -> At[T, P]:
    """
    Build a field validator.

    Usage:
        at("items", lambda order: order.items, not_empty)
    """
    if not callable(extract):
        raise ConstructionError(f"Extraction must be callable, got {type(extract).__name__}")
    return At(name=name, extract=extract, validator=to_validator(validator))


def to_validator(v: Any) -> Validator:
    """
    Coerce a value to a validator.

    Conversion rules:
        Validator -> pass through
        Callable -> FunctionValidator (must return Success or Failure)
    """
    if isinstance(v, Validator):
        return v

    if callable(v):
        return FunctionValidator(fn=v)

    raise ConstructionError(f"Cannot convert {type(v).__name__} to validator")
