"""
Collection validators for concord: empty, not_empty, distinct and in_.
"""

from __future__ import annotations

from collections.abc import Iterable, Sized
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from typing import Any

from .context import describe
from .core import Validator
from .errors import ConstructionError
from .types import SUCCESS, Result, fail


def _is_empty(value: Any) -> bool | None:
    """`None` is an absent optional. Returns None for values with no notion of emptiness."""
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    is_empty = getattr(value, "is_empty", None)
    if is_empty is not None:
        return bool(is_empty() if callable(is_empty) else is_empty)
    return None


@dataclass(frozen=True, slots=True)
class Empty(Validator[Any]):
    """Succeeds iff the container has no elements."""

    def validate(self, value: Any) -> Result:
        outcome = _is_empty(value)
        if outcome is None:
            return fail(value, "is not a container")
        if outcome:
            return SUCCESS
        return fail(value, "must be empty")


@dataclass(frozen=True, slots=True)
class NotEmpty(Validator[Any]):
    """Succeeds iff the container has at least one element."""

    def validate(self, value: Any) -> Result:
        outcome = _is_empty(value)
        if outcome is None:
            return fail(value, "is not a container")
        if not outcome:
            return SUCCESS
        return fail(value, "must not be empty")


empty = Empty()
not_empty = NotEmpty()


def _has_duplicates(items: list[Any]) -> bool:
    try:
        return len(set(items)) != len(items)
    except TypeError:
        # Unhashable elements: fall back to pairwise equality
        seen: list[Any] = []
        for item in items:
            if item in seen:
                return True
            seen.append(item)
        return False


@dataclass(frozen=True, slots=True)
class Distinct(Validator[Iterable[Any]]):
    """Succeeds iff no two elements of the container are equal."""

    def validate(self, value: Iterable[Any]) -> Result:
        if value is None:
            return fail(value, "is a null")
        if not isinstance(value, Iterable):
            return fail(value, "is not a container")
        if _has_duplicates(list(value)):
            return fail(value, "is not a distinct set")
        return SUCCESS


# Stateless; every use shares this instance.
distinct = Distinct()


def _render_allowed(allowed: frozenset) -> str:
    try:
        ordered = sorted(allowed)
    except TypeError:
        ordered = sorted(allowed, key=repr)
    return ", ".join(describe(item) for item in ordered)


def _contains(allowed: frozenset, value: Any) -> bool:
    try:
        return value in allowed
    except TypeError:
        # Unhashable values are never members
        return False


@dataclass(frozen=True, slots=True)
class In(Validator[Any]):
    """Succeeds iff the value is a member of `allowed`."""

    allowed: frozenset
    description: str = "got"

    def validate(self, value: Any) -> Result:
        if _contains(self.allowed, value):
            return SUCCESS
        return fail(
            value,
            f"{self.description} {describe(value)}, expected one of: {_render_allowed(self.allowed)}",
        )


def in_(*items: Any) -> In:
    """
    Validate membership in a fixed set of values.

    Usage:
        in_(1, 3, 5)
        in_({1, 3, 5})       # same validator as above

    A single set-like argument supplies the allowed values. Any other single
    iterable (range, generator) is ambiguous and rejected; strings and
    tuples are taken as one allowed value.
    """
    candidates: Iterable[Any] = items
    if len(items) == 1:
        (single,) = items
        if isinstance(single, AbstractSet):
            candidates = single
        elif isinstance(single, Iterable) and not isinstance(single, (str, bytes, tuple)):
            raise ConstructionError(
                f"Pass a set or spread the values of {type(single).__name__} into in_()"
            )
    try:
        allowed = frozenset(candidates)
    except TypeError as e:
        raise ConstructionError(f"Allowed values must be hashable: {e}") from e
    if not allowed:
        raise ConstructionError("in_() requires at least one allowed value")
    return In(allowed)
