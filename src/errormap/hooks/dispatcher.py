"""
Hook dispatcher coordinating validation events.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional

HookHandler = Callable[..., None]

BEFORE_VALIDATE = "before_validate"
AFTER_VALIDATE = "after_validate"


class HookDispatcher:
    """
    Maintains global and per-validator-type hook handlers.
    """

    def __init__(self) -> None:
        self._global_handlers: Dict[str, List[HookHandler]] = defaultdict(list)
        self._typed_handlers: Dict[type, Dict[str, List[HookHandler]]] = defaultdict(
            lambda: defaultdict(list)
        )

    def register(self, event: str, handler: HookHandler, *, validator_type: Optional[type] = None) -> None:
        if validator_type:
            self._typed_handlers[validator_type][event].append(handler)
        else:
            self._global_handlers[event].append(handler)

    def fire(self, event: str, entity: Any, *, validator: Any = None, **context: Any) -> None:
        handlers = list(self._global_handlers.get(event, []))
        if validator is not None:
            handlers.extend(self._typed_handlers.get(type(validator), {}).get(event, []))
        for handler in handlers:
            handler(entity, validator=validator, **context)

    def clear(self) -> None:
        self._global_handlers.clear()
        self._typed_handlers.clear()


hooks = HookDispatcher()
