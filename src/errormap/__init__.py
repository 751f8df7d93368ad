"""
ErrorMap public package initialization.

Reshapes validation results into per-field error maps and display messages.
"""

from .config import MapperConfig, get_config, set_config  # noqa: F401
from .core import ValidationFailure, ValidationResult, Validator  # noqa: F401
from .errors import (  # noqa: F401
    ConfigurationError,
    EmptyInputError,
    ErrorMapError,
    InvalidArgumentError,
    ValidationError,
)
from .hooks import hooks  # noqa: F401
from .mapping import (  # noqa: F401
    ErrorMap,
    ensure_valid,
    group_failures,
    to_multiline_message,
    validate_entity,
)

__all__ = [
    "ErrorMap",
    "MapperConfig",
    "get_config",
    "set_config",
    "ValidationFailure",
    "ValidationResult",
    "Validator",
    "ErrorMapError",
    "InvalidArgumentError",
    "EmptyInputError",
    "ConfigurationError",
    "ValidationError",
    "validate_entity",
    "group_failures",
    "to_multiline_message",
    "ensure_valid",
    "hooks",
]
