"""
Property-extraction validators for concord ("has size > 5").

A Property names a capability of a subject (e.g. its size) and knows how to
read it for a given subject type. `has(prop, SubjectType)` resolves the
accessor once, when the validator is built, and rejects subject types that
lack the capability with ConstructionError.

Usage:
    has(size, list) > 5
    has(size, Shipment).between(1, 10)
    has(size, dict).is_(in_(0, 1))
"""

from __future__ import annotations

import inspect
from collections.abc import Sized
from dataclasses import dataclass
from typing import Any, Callable, Generic, Protocol, TypeVar, get_origin, runtime_checkable

from .core import Has, to_validator
from .errors import ConstructionError
from .validators import between, eq, ge, gt, le, lt, ne

T = TypeVar("T")
P = TypeVar("P")

_MISSING = object()


@runtime_checkable
class HasSize(Protocol):
    """Anything exposing a `size` property."""

    @property
    def size(self) -> int: ...


@dataclass(frozen=True, slots=True)
class AttributeReader:
    """Reads a named attribute, calling it if it is a method."""

    name: str

    def __call__(self, subject: Any) -> Any:
        value = getattr(subject, self.name)
        return value() if callable(value) else value


def _declares(subject_type: type, name: str) -> bool:
    if inspect.getattr_static(subject_type, name, _MISSING) is not _MISSING:
        return True
    return any(name in getattr(klass, "__annotations__", {}) for klass in subject_type.__mro__)


class Property(Generic[P]):
    """
    A named, extractable capability of a subject.

    Accessor resolution for a subject type, first match wins:
        1. adapters added with `register`, searched along the type's MRO
        2. built-in capabilities given at construction (e.g. Sized -> len)
        3. an attribute, property or method named after the property
    """

    def __init__(self, name: str, builtins: tuple[tuple[type, Callable[[Any], P]], ...] = ()):
        self.name = name
        self._builtins = builtins
        self._adapters: dict[type, Callable[[Any], P]] = {}

    def register(self, subject_type: type, accessor: Callable[[Any], P]) -> None:
        """Teach this property how to read itself from `subject_type`."""
        if not isinstance(subject_type, type):
            raise ConstructionError(f"Expected a type, got {subject_type!r}")
        self._adapters[subject_type] = accessor

    def accessor_for(self, subject_type: Any) -> Callable[[Any], P]:
        """
        Resolve the accessor for `subject_type`.

        Raises:
            ConstructionError: if the subject type lacks this property
        """
        resolved = get_origin(subject_type) or subject_type
        if not isinstance(resolved, type):
            raise ConstructionError(f"Expected a subject type, got {subject_type!r}")

        for klass in resolved.__mro__:
            if klass in self._adapters:
                return self._adapters[klass]

        for capability, accessor in self._builtins:
            if issubclass(resolved, capability):
                return accessor

        if _declares(resolved, self.name):
            return AttributeReader(self.name)

        raise ConstructionError(
            f"{resolved.__name__} has no '{self.name}' property to validate"
        )

    def __repr__(self) -> str:
        return f"Property({self.name!r})"


size: Property[int] = Property("size", builtins=((Sized, len),))


class PropertyCheck(Generic[T, P]):
    """
    Builder returned by `has`. Every comparison, `==` and `!=` included,
    yields a Has validator rather than a bool.
    """

    __slots__ = ("prop", "accessor")

    def __init__(self, prop: Property[P], accessor: Callable[[T], P]):
        self.prop = prop
        self.accessor = accessor

    def is_(self, validator: Any) -> Has[T, P]:
        return Has(extract=self.accessor, validator=to_validator(validator), name=self.prop.name)

    def gt(self, bound: Any) -> Has[T, P]:
        return self.is_(gt(bound))

    def ge(self, bound: Any) -> Has[T, P]:
        return self.is_(ge(bound))

    def lt(self, bound: Any) -> Has[T, P]:
        return self.is_(lt(bound))

    def le(self, bound: Any) -> Has[T, P]:
        return self.is_(le(bound))

    def eq(self, other: Any) -> Has[T, P]:
        return self.is_(eq(other))

    def ne(self, other: Any) -> Has[T, P]:
        return self.is_(ne(other))

    def between(self, lower: Any, upper: Any, inclusive: bool = True) -> Has[T, P]:
        return self.is_(between(lower, upper, inclusive))

    __gt__ = gt
    __ge__ = ge
    __lt__ = lt
    __le__ = le
    __eq__ = eq  # type: ignore[assignment]
    __ne__ = ne  # type: ignore[assignment]
    __hash__ = None  # type: ignore[assignment]


def has(prop: Property[P], subject_type: Any) -> PropertyCheck[Any, P]:
    """
    Start a property-extraction validator for subjects of `subject_type`.

    Raises:
        ConstructionError: if `subject_type` lacks the property
    """
    if not isinstance(prop, Property):
        raise ConstructionError(f"Expected a Property, got {type(prop).__name__}")
    return PropertyCheck(prop, prop.accessor_for(subject_type))
