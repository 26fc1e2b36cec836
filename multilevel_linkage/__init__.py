"""
multilevel_linkage: cascading selection controls.

A change at level N of a linkage group resets every level below it and hands
level N+1 to a caller-supplied population callback. Toolkit adapters live in
``multilevel_linkage.ui.shared`` (headless) and ``multilevel_linkage.pyqt_gui``
(PyQt6, optional extra).

Usage:

    from multilevel_linkage import LinkageConfig, init_linkage

    config = LinkageConfig(
        group_mark="access",
        handlers={
            1: lambda current: ...,
            2: lambda previous, current: current.append_option("Paris", "paris"),
        },
    )
    controller = init_linkage(config, discovery)
"""

import logging

__version__ = "1.0.0"

from multilevel_linkage.constants.constants import DuplicateLevelPolicy
from multilevel_linkage.core import (
    DuplicateLevelError,
    HandlerSignatureError,
    HandlerTable,
    InvalidLevelError,
    LevelRegistry,
    LinkageConfig,
    LinkageController,
    LinkageError,
    OptionEntry,
    WidgetDiscovery,
    WidgetHandle,
    init_linkage,
)


# Set up basic logging configuration if none exists
def _ensure_basic_logging():
    """Ensure basic logging is configured if no configuration exists."""
    root_logger = logging.getLogger()

    # Only configure if no handlers exist and level is too high
    if not root_logger.handlers and root_logger.level > logging.INFO:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )


_ensure_basic_logging()

__all__ = [
    "__version__",
    "init_linkage",
    "LinkageController",
    "LinkageConfig",
    "DuplicateLevelPolicy",
    "OptionEntry",
    "HandlerTable",
    "LevelRegistry",
    "WidgetHandle",
    "WidgetDiscovery",
    "LinkageError",
    "InvalidLevelError",
    "DuplicateLevelError",
    "HandlerSignatureError",
]
