"""
Concord - composable validation rules with structured violation reports.

Usage:
    from concord import each, has, size, not_empty, gt, validate

    rules = not_empty & each.is_(gt(0)) & (has(size, list) <= 10)

    result = validate([3, -1, 4], rules)
    # Failure: one violation, value -1, path [1],
    #          constraint "got -1, expected more than 0"
"""

from .collection_ops import Distinct, Empty, In, NotEmpty, distinct, empty, in_, not_empty
from .context import describe, get_repr_limit, is_strict, validation_context
from .core import And, At, FunctionValidator, Has, Or, Validator, at, project, to_validator
from .errors import ConstructionError, ValidationFailed
from .properties import HasSize, Property, PropertyCheck, has, size
from .schema import as_pydantic, validate
from .temporal import After, Before, after, before
from .traversal import ContainerKind, Each, Traversal, each
from .types import (
    SUCCESS,
    Failure,
    Generic,
    Indexed,
    Path,
    Result,
    Success,
    Violation,
    aggregate,
    combine,
    fail,
    failure,
    success,
)
from .validators import (
    between,
    blank,
    ends_with,
    eq,
    ge,
    gt,
    is_null,
    le,
    lt,
    matches,
    ne,
    not_blank,
    not_null,
    predicate,
    starts_with,
)

__all__ = [
    # Result types
    "Path",
    "Indexed",
    "Generic",
    "Violation",
    "Result",
    "Success",
    "Failure",
    "SUCCESS",
    "success",
    "failure",
    "fail",
    "combine",
    "aggregate",
    # Core
    "Validator",
    "FunctionValidator",
    "And",
    "Or",
    "Has",
    "At",
    "project",
    "at",
    "to_validator",
    # Validators
    "gt",
    "ge",
    "lt",
    "le",
    "eq",
    "ne",
    "between",
    "is_null",
    "not_null",
    "matches",
    "starts_with",
    "ends_with",
    "blank",
    "not_blank",
    "predicate",
    # Collections
    "Empty",
    "NotEmpty",
    "Distinct",
    "In",
    "empty",
    "not_empty",
    "distinct",
    "in_",
    # Temporal
    "Before",
    "After",
    "before",
    "after",
    # Properties
    "Property",
    "PropertyCheck",
    "HasSize",
    "size",
    "has",
    # Traversal
    "ContainerKind",
    "Each",
    "Traversal",
    "each",
    # Configuration and errors
    "validation_context",
    "is_strict",
    "describe",
    "get_repr_limit",
    "ConstructionError",
    "ValidationFailed",
    # Schema
    "validate",
    "as_pydantic",
]
