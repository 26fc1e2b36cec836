"""Linkage state machine: registry, handler table and controller."""

from .controller import LinkageController, init_linkage
from .exceptions import (
    DuplicateLevelError,
    HandlerSignatureError,
    InvalidLevelError,
    LinkageError,
)
from .handlers import HandlerTable
from .registry import LevelRegistry
from .types import LinkageConfig, OptionEntry
from .widget_protocols import WidgetDiscovery, WidgetHandle

__all__ = [
    "LinkageController",
    "init_linkage",
    "LinkageError",
    "InvalidLevelError",
    "DuplicateLevelError",
    "HandlerSignatureError",
    "HandlerTable",
    "LevelRegistry",
    "LinkageConfig",
    "OptionEntry",
    "WidgetDiscovery",
    "WidgetHandle",
]
