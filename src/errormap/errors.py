"""
Error hierarchy for ErrorMap.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence


class ErrorMapError(Exception):
    """Base error for ErrorMap failures."""


class InvalidArgumentError(ErrorMapError, ValueError):
    """Raised when a required argument is ``None``."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None.")


class EmptyInputError(ErrorMapError, ValueError):
    """Raised when there are no errors to build a message from."""


class ConfigurationError(ErrorMapError):
    """Raised when mapper configuration is invalid."""


class ValidationError(ErrorMapError):
    """
    Aggregated validation error storing field-to-messages mapping.
    """

    def __init__(self, errors: Mapping[str, Sequence[str]]) -> None:
        self.errors: Dict[str, List[str]] = {
            key: list(messages) for key, messages in errors.items()
        }
        super().__init__(self._format_message())

    def multiline_message(self, separator: Optional[str] = None) -> str:
        from .mapping.mapper import to_multiline_message

        return to_multiline_message(self.errors, separator=separator)

    def _format_message(self) -> str:
        segments = []
        for field_name, messages in self.errors.items():
            combined = "; ".join(messages)
            segments.append(f"{field_name}: {combined}")
        return "; ".join(segments)
