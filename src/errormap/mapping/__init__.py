"""
Result mapping helpers exposed at the package level.
"""

from .mapper import ErrorMap, ensure_valid, group_failures, to_multiline_message, validate_entity

__all__ = [
    "ErrorMap",
    "ensure_valid",
    "group_failures",
    "to_multiline_message",
    "validate_entity",
]
