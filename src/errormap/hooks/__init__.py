"""
Validation hooks registry for ErrorMap.
"""

from .dispatcher import AFTER_VALIDATE, BEFORE_VALIDATE, HookDispatcher, hooks

__all__ = ["AFTER_VALIDATE", "BEFORE_VALIDATE", "HookDispatcher", "hooks"]
