"""
Form model and validator for the ErrorMap sign-up example.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from errormap.core import ValidationResult

Rule = Callable[[Any], Optional[str]]


@dataclass
class SignupForm:
    username: str = ""
    email: str = ""
    age: Optional[int] = None


def required(message: str = "This field is required.") -> Rule:
    def check(value: Any) -> Optional[str]:
        if value is None or value == "":
            return message
        return None

    return check


def min_value(minimum: float, message: str | None = None) -> Rule:
    message = message or f"Ensure value is greater than or equal to {minimum}."

    def check(value: Any) -> Optional[str]:
        if value is not None and value < minimum:
            return message
        return None

    return check


def max_length(limit: int, message: str | None = None) -> Rule:
    message = message or f"Ensure value has at most {limit} characters."

    def check(value: Any) -> Optional[str]:
        if value and len(value) > limit:
            return message
        return None

    return check


def matches(pattern: str, message: str = "Value does not match required pattern.") -> Rule:
    compiled = re.compile(pattern)

    def check(value: Any) -> Optional[str]:
        if value and not compiled.match(value):
            return message
        return None

    return check


class SignupValidator:
    """
    Rule-per-field validator reporting every broken rule, in declaration order.
    """

    rules: Tuple[Tuple[str, Rule], ...] = (
        ("username", required()),
        ("username", max_length(12)),
        ("username", matches(r"^[a-z0-9_]+$", "Use lowercase letters, digits and underscores.")),
        ("email", required()),
        ("email", matches(r"^[^@\s]+@[^@\s]+$", "Enter a valid email address.")),
        ("age", required()),
        ("age", min_value(13, "You must be at least 13 to sign up.")),
    )

    def validate(self, entity: SignupForm) -> ValidationResult:
        result = ValidationResult()
        for field_name, rule in self.rules:
            value = getattr(entity, field_name)
            message = rule(value)
            if message:
                result.add_failure(field_name, message, attempted_value=value)
        return result
