"""
Traversal validators for concord: apply a validator to every element.

Usage:
    each.is_(gt(0))                               # every element > 0
    each.map(str.strip).is_(not_blank)            # validate transformed elements
    each.flat_map(lambda o: o.lines).is_(valid)   # validate flattened elements
    each.optional.is_(after(launch))              # None is an absent value

Path attribution depends on the container:
    sequence   -> Indexed(i) prepended, i counted after any map/flat_map
    optional   -> no path element; None succeeds vacuously
    set        -> no path element (no stable position)
A null container (None, except for optionals) fails with "is a null";
a non-iterable one fails with "is not a container".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Set
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable

from .core import Validator, to_validator
from .types import Indexed, Result, aggregate, fail

logger = logging.getLogger(__name__)


class ContainerKind(Enum):
    SEQUENCE = auto()
    OPTIONAL = auto()
    SET = auto()


def infer_kind(container: Any) -> ContainerKind:
    """Sets and mappings are unordered; every other iterable is a sequence."""
    if isinstance(container, (Set, Mapping)):
        return ContainerKind.SET
    return ContainerKind.SEQUENCE


def _elements(container: Any, kind: ContainerKind) -> list[Any]:
    if kind is ContainerKind.OPTIONAL:
        return [] if container is None else [container]
    if isinstance(container, Mapping):
        return list(container.items())
    return list(container)


@dataclass(frozen=True, slots=True)
class MapStage:
    fn: Callable[[Any], Any]

    def apply(self, elements: list[Any]) -> list[Any]:
        return [self.fn(e) for e in elements]


@dataclass(frozen=True, slots=True)
class FlatMapStage:
    fn: Callable[[Any], Iterable[Any]]

    def apply(self, elements: list[Any]) -> list[Any]:
        return [item for e in elements for item in self.fn(e)]


Stage = MapStage | FlatMapStage


@dataclass(frozen=True, slots=True)
class Each(Validator[Any]):
    """Validates every element of a container and combines the results."""

    validator: Validator[Any]
    stages: tuple[Stage, ...] = ()
    kind: ContainerKind | None = None

    def validate(self, container: Any) -> Result:
        kind = self.kind or infer_kind(container)

        if container is None and kind is not ContainerKind.OPTIONAL:
            logger.debug("Traversal over a null container")
            return fail(container, "is a null")
        if kind is not ContainerKind.OPTIONAL and not isinstance(container, Iterable):
            return fail(container, "is not a container")

        elements = _elements(container, kind)
        for stage in self.stages:
            elements = stage.apply(elements)

        logger.debug("Traversing %d element(s) of a %s", len(elements), kind.name.lower())

        if kind is ContainerKind.SEQUENCE:
            return aggregate(
                self.validator(element).prefixed(Indexed(i))
                for i, element in enumerate(elements)
            )
        return aggregate(self.validator(element) for element in elements)


@dataclass(frozen=True, slots=True)
class Traversal:
    """
    Immutable builder for Each validators.

    `map` and `flat_map` return new builders with a transformation stage
    appended; `is_` (or calling the builder) binds the element validator.
    """

    kind: ContainerKind | None = None
    stages: tuple[Stage, ...] = ()

    def map(self, fn: Callable[[Any], Any]) -> Traversal:
        return Traversal(self.kind, (*self.stages, MapStage(fn)))

    def flat_map(self, fn: Callable[[Any], Iterable[Any]]) -> Traversal:
        return Traversal(self.kind, (*self.stages, FlatMapStage(fn)))

    def of(self, kind: ContainerKind) -> Traversal:
        """Fix the container kind instead of inferring it per value."""
        return Traversal(kind, self.stages)

    @property
    def optional(self) -> Traversal:
        return self.of(ContainerKind.OPTIONAL)

    def is_(self, validator: Any) -> Each:
        return Each(validator=to_validator(validator), stages=self.stages, kind=self.kind)

    def __call__(self, validator: Any) -> Each:
        return self.is_(validator)


each = Traversal()
