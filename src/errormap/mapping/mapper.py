"""
Helpers reshaping validation results into per-field error maps.
"""

from __future__ import annotations

from itertools import chain
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from ..config import get_config
from ..core.results import ValidationFailure, Validator
from ..errors import EmptyInputError, InvalidArgumentError, ValidationError
from ..hooks import AFTER_VALIDATE, BEFORE_VALIDATE, HookDispatcher, hooks
from ..utils.logging import get_logger, time_call

ErrorMap = Dict[str, List[str]]

logger = get_logger("mapping")


def validate_entity(
    validator: Validator,
    entity: Any,
    *,
    dispatcher: Optional[HookDispatcher] = None,
) -> ErrorMap:
    """
    Validate ``entity`` and return its errors keyed by field name.

    An empty map means the entity passed validation.
    """
    if validator is None:
        raise InvalidArgumentError("validator")
    if entity is None:
        raise InvalidArgumentError("entity")

    dispatcher = dispatcher or hooks
    dispatcher.fire(BEFORE_VALIDATE, entity, validator=validator)

    with time_call("validate_entity", logger, detail=type(validator).__name__):
        result = validator.validate(entity)

    failures = getattr(result, "failures", None) if result is not None else None
    errors: ErrorMap = group_failures(failures) if failures else {}

    logger.debug(
        "Validated %s with %s: %d field(s) in error",
        type(entity).__name__,
        type(validator).__name__,
        len(errors),
    )
    dispatcher.fire(AFTER_VALIDATE, entity, validator=validator, errors=errors)
    return errors


def group_failures(failures: Iterable[ValidationFailure]) -> ErrorMap:
    errors: ErrorMap = {}
    for failure in failures:
        errors.setdefault(failure.field_name, []).append(failure.message)
    return errors


def to_multiline_message(
    errors: Mapping[str, Sequence[str]],
    *,
    separator: Optional[str] = None,
) -> str:
    """
    Join every message in ``errors`` into one string, one message per line.

    Messages keep map order, then per-field order. ``separator`` defaults to
    the active :class:`~errormap.config.MapperConfig` separator.
    """
    if errors is None:
        raise InvalidArgumentError("errors")
    if not errors:
        raise EmptyInputError("No errors to use to generate message")

    messages = list(chain.from_iterable(errors.values()))
    if not messages:
        raise EmptyInputError("No errors to use to generate message")

    if separator is None:
        separator = get_config().separator
    return separator.join(messages)


def ensure_valid(validator: Validator, entity: Any, **kwargs: Any) -> None:
    errors = validate_entity(validator, entity, **kwargs)
    if errors:
        raise ValidationError(errors)
