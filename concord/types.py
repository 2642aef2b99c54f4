"""
Type definitions for concord.

Provides the path model (Path, Indexed, Generic), the Violation record and
the Result algebra (Success/Failure) that every validator returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, ClassVar, Iterable, Iterator, Union


@dataclass(frozen=True, slots=True)
class Indexed:
    """Position of an element within an ordered sequence."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Index must be non-negative, got {self.index}")

    def __str__(self) -> str:
        return f"[{self.index}]"


@dataclass(frozen=True, slots=True)
class Generic:
    """Named location, e.g. a field or property of an object."""

    name: str

    def __str__(self) -> str:
        return self.name


PathElement = Union[Indexed, Generic]


@dataclass(frozen=True, slots=True)
class Path:
    """
    Immutable location descriptor, ordered outermost to innermost.

    Usage:
        Path.empty
        Path.of(Generic("items"), Indexed(2))
        Path.of(Indexed(2)).prepend(Generic("items"))
    """

    elements: tuple[PathElement, ...] = ()

    empty: ClassVar[Path]

    @classmethod
    def of(cls, *elements: PathElement) -> Path:
        return cls(tuple(elements))

    def prepend(self, element: PathElement) -> Path:
        """Return a new path with `element` as the outermost location."""
        return Path((element, *self.elements))

    def __add__(self, other: Path) -> Path:
        return Path((*self.elements, *other.elements))

    def __iter__(self) -> Iterator[PathElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __bool__(self) -> bool:
        return bool(self.elements)

    def __str__(self) -> str:
        rendered = ""
        for element in self.elements:
            if isinstance(element, Indexed) or not rendered:
                rendered += str(element)
            else:
                rendered += f".{element}"
        return rendered


Path.empty = Path()


@dataclass(frozen=True, slots=True)
class Violation:
    """
    A single failed constraint.

    `value` is always the original subject that failed, `constraint` a
    human-readable description and `path` where in the subject it happened.
    """

    value: Any
    constraint: str
    path: Path = Path.empty

    # Offending values may be unhashable (lists, dicts); equality still
    # compares them structurally.
    def __hash__(self) -> int:
        return hash((self.constraint, self.path))

    def prefixed(self, element: PathElement) -> Violation:
        return Violation(self.value, self.constraint, self.path.prepend(element))

    def with_value(self, value: Any) -> Violation:
        return Violation(value, self.constraint, self.path)

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.constraint}"
        return self.constraint


@dataclass(frozen=True, slots=True)
class Success:
    """The successful outcome. Carries no data; use the shared SUCCESS."""

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    @property
    def violations(self) -> frozenset[Violation]:
        return frozenset()

    def prefixed(self, element: PathElement) -> Success:
        return self

    def map_violations(self, fn: Callable[[Violation], Violation]) -> Success:
        return self

    def __and__(self, other: Result) -> Result:
        return other

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """The failed outcome: a non-empty set of violations."""

    violations: frozenset[Violation]

    def __post_init__(self) -> None:
        if not isinstance(self.violations, frozenset):
            object.__setattr__(self, "violations", frozenset(self.violations))
        if not self.violations:
            raise ValueError("Failure requires at least one violation")

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def prefixed(self, element: PathElement) -> Failure:
        """Prepend `element` to the path of every violation."""
        return Failure(frozenset(v.prefixed(element) for v in self.violations))

    def map_violations(self, fn: Callable[[Violation], Violation]) -> Failure:
        return Failure(frozenset(fn(v) for v in self.violations))

    def __and__(self, other: Result) -> Failure:
        if isinstance(other, Failure):
            return Failure(self.violations | other.violations)
        return self

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "; ".join(sorted(str(v) for v in self.violations))


Result = Union[Success, Failure]

SUCCESS = Success()


def success() -> Success:
    return SUCCESS


def failure(violations: Iterable[Violation]) -> Failure:
    """
    Build a Failure from violations.

    Raises:
        ValueError: if no violations are given
    """
    return Failure(frozenset(violations))


def combine(*results: Result) -> Result:
    """
    Aggregate results: Success is the identity, failures union their violations.

    Usage:
        combine(SUCCESS, failure([v1]), failure([v2]))  # Failure({v1, v2})
    """
    return aggregate(results)


def aggregate(results: Iterable[Result]) -> Result:
    """Left-fold an iterable of results with `combine`."""
    return reduce(lambda acc, r: acc & r, results, SUCCESS)


def fail(value: Any, constraint: str, path: Path = Path.empty) -> Failure:
    """Shorthand for a Failure holding a single violation."""
    return Failure(frozenset({Violation(value, constraint, path)}))
