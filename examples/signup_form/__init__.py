from .demo import form_errors, register, run_demo  # noqa: F401
from .models import SignupForm, SignupValidator  # noqa: F401

__all__ = [
    "SignupForm",
    "SignupValidator",
    "form_errors",
    "register",
    "run_demo",
]
