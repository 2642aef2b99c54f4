"""
Exceptions raised by concord.

Rule violations are data (see concord.types); these exceptions only signal
programming errors at validator-construction time, or a Failure surfaced by
validate() in strict mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Failure, Violation


class ConstructionError(TypeError):
    """A validator was assembled for a subject it cannot apply to."""


class ValidationFailed(ValueError):
    """Raised by validate() in strict mode when the result is a Failure."""

    def __init__(self, result: Failure):
        self.result = result
        super().__init__(f"Validation failed: {result}")

    @property
    def violations(self) -> frozenset[Violation]:
        return self.result.violations
