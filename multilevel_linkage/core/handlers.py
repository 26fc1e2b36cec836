"""
Typed handler table for population callbacks.

Handler shapes:
- level 1: ``handler(current)`` - initial population of the root widget
- level N >= 2: ``handler(previous, current)`` - populate widget N from widget N-1

Shapes are checked once, when the table is built, instead of at dispatch time.
"""

import inspect
import logging
import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from multilevel_linkage.constants.constants import LEGACY_HANDLER_PREFIX, ROOT_LEVEL

from .exceptions import HandlerSignatureError, InvalidLevelError
from .registry import validate_level
from .widget_protocols import WidgetHandle

logger = logging.getLogger(__name__)

_LEGACY_NAME = re.compile(rf"^{LEGACY_HANDLER_PREFIX}(\d+)$")


def handler_arity(level: int) -> int:
    """Number of positional arguments a handler for ``level`` receives."""
    return 1 if level == ROOT_LEVEL else 2


def parse_handler_key(key: Union[int, str]) -> int:
    """Convert a handler key (int level or legacy ``"menuN"`` name) to a level."""
    if isinstance(key, str):
        match = _LEGACY_NAME.match(key)
        if match is None:
            raise InvalidLevelError(f"Handler name {key!r} does not match '{LEGACY_HANDLER_PREFIX}<level>'", key)
        return validate_level(int(match.group(1)))
    return validate_level(key)


def _check_signature(level: int, handler: Callable) -> None:
    if not callable(handler):
        raise HandlerSignatureError(f"expected a callable, got {type(handler).__name__}", level)
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        # Some builtins expose no signature; accept them unchecked
        logger.debug(f"No signature available for level {level} handler {handler!r}")
        return
    arity = handler_arity(level)
    try:
        signature.bind(*([None] * arity))
    except TypeError as e:
        raise HandlerSignatureError(
            f"must accept {arity} positional argument(s), signature is {signature} ({e})", level
        ) from e


class HandlerTable:
    """Explicit mapping from level to population callback."""

    def __init__(self, handlers: Optional[Mapping[int, Callable[..., Any]]] = None) -> None:
        self._handlers: Dict[int, Callable[..., Any]] = {}
        for level, handler in (handlers or {}).items():
            validate_level(level)
            _check_signature(level, handler)
            self._handlers[level] = handler

    @classmethod
    def from_mapping(cls, handlers: Optional[Mapping[Union[int, str], Callable[..., Any]]]) -> "HandlerTable":
        """Build a table from int levels and/or legacy ``"menuN"`` names."""
        normalized: Dict[int, Callable[..., Any]] = {}
        for key, handler in (handlers or {}).items():
            level = parse_handler_key(key)
            if level in normalized:
                raise InvalidLevelError(f"Handler for level {level} given more than once", key)
            normalized[level] = handler
        return cls(normalized)

    def get(self, level: int) -> Optional[Callable[..., Any]]:
        return self._handlers.get(level)

    def levels(self) -> List[int]:
        return sorted(self._handlers)

    def __contains__(self, level: object) -> bool:
        return level in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def invoke_initial(self, current: WidgetHandle) -> bool:
        """Run the level-1 handler if present. Returns True if it ran."""
        handler = self._handlers.get(ROOT_LEVEL)
        if handler is None:
            return False
        handler(current)
        return True

    def invoke_populate(self, level: int, previous: WidgetHandle, current: WidgetHandle) -> bool:
        """Run the handler populating ``level`` if present. Returns True if it ran.

        Exceptions raised by the handler propagate unchanged.
        """
        handler = self._handlers.get(level)
        if handler is None:
            return False
        handler(previous, current)
        return True
