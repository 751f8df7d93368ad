"""
Validation result records consumed by the mapper.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol


@dataclass(frozen=True)
class ValidationFailure:
    """
    A single problem reported for one field of an entity.
    """

    field_name: str
    message: str
    attempted_value: Any = None


@dataclass
class ValidationResult:
    failures: Optional[List[ValidationFailure]] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.failures

    def add_failure(self, field_name: str, message: str, attempted_value: Any = None) -> None:
        if self.failures is None:
            self.failures = []
        self.failures.append(
            ValidationFailure(field_name=field_name, message=message, attempted_value=attempted_value)
        )

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """
        Extend this result with the failures of ``other`` and return ``self``.
        """
        if other.failures:
            if self.failures is None:
                self.failures = []
            self.failures.extend(other.failures)
        return self


class Validator(Protocol):
    def validate(self, entity: Any) -> Optional[ValidationResult]: ...
