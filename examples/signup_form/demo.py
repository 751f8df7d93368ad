"""
Sign-up example turning validator output into form and banner errors.
"""

from __future__ import annotations

from typing import Any, Dict

from errormap import ValidationError, ensure_valid, to_multiline_message, validate_entity
from errormap.utils import get_logger

from .models import SignupForm, SignupValidator

logger = get_logger("examples.signup_form")


def form_errors(form: SignupForm) -> Dict[str, Any]:
    """
    Build the payload a form view renders: per-field errors plus a banner.
    """
    errors = validate_entity(SignupValidator(), form)
    if not errors:
        return {"valid": True, "errors": {}, "banner": ""}
    return {"valid": False, "errors": errors, "banner": to_multiline_message(errors)}


def register(form: SignupForm) -> str:
    try:
        ensure_valid(SignupValidator(), form)
    except ValidationError as exc:
        logger.info("Rejected sign-up: %s", exc)
        raise
    return form.username


def run_demo() -> Dict[str, Any]:
    good = SignupForm(username="octavia", email="octavia@example.com", age=34)
    bad = SignupForm(username="Not Valid!", email="", age=9)
    return {"accepted": form_errors(good), "rejected": form_errors(bad)}
