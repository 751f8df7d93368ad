"""
Validation result model exposed at the package level.
"""

from .results import ValidationFailure, ValidationResult, Validator

__all__ = ["ValidationFailure", "ValidationResult", "Validator"]
