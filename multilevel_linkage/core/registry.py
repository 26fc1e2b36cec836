"""Level registry: maps each level of one linkage group to its widget handle."""

from __future__ import annotations

import logging
from typing import Dict, ItemsView, List, Optional

from multilevel_linkage.constants.constants import DEFAULT_DUPLICATE_POLICY, DuplicateLevelPolicy

from .exceptions import DuplicateLevelError, InvalidLevelError
from .widget_protocols import WidgetHandle

logger = logging.getLogger(__name__)


def validate_level(level) -> int:
    """Return ``level`` if it is a positive int, else raise InvalidLevelError."""
    # bool is an int subclass but never a meaningful level
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidLevelError(f"Level must be an int, got {type(level).__name__}: {level!r}", level)
    if level < 1:
        raise InvalidLevelError(f"Level must be positive, got {level}", level)
    return level


class LevelRegistry:
    """Per-group mapping from level to widget handle.

    Owned by one LinkageController; never a process-wide singleton, so
    independent groups coexist. Holds references only: widget lifecycle
    belongs to the host.
    """

    def __init__(
        self,
        duplicate_policy: DuplicateLevelPolicy = DEFAULT_DUPLICATE_POLICY,
        group_mark: Optional[str] = None,
    ) -> None:
        self._widgets: Dict[int, WidgetHandle] = {}
        self._duplicate_policy = duplicate_policy
        self._group_mark = group_mark

    @property
    def duplicate_policy(self) -> DuplicateLevelPolicy:
        return self._duplicate_policy

    def register(self, level: int, handle: WidgetHandle) -> None:
        validate_level(level)
        if level in self._widgets:
            if self._duplicate_policy is DuplicateLevelPolicy.FAIL_FAST:
                raise DuplicateLevelError(level, self._group_mark)
            logger.warning(
                f"Level {level} of group '{self._group_mark}' registered twice; "
                f"keeping the later widget"
            )
        self._widgets[level] = handle

    def get(self, level: int) -> Optional[WidgetHandle]:
        """Return the handle at ``level``, or None if no widget was registered there."""
        return self._widgets.get(level)

    def max_level(self) -> int:
        """Highest registered level; 0 for an empty registry."""
        return max(self._widgets, default=0)

    def levels(self) -> List[int]:
        return sorted(self._widgets)

    def items(self) -> ItemsView[int, WidgetHandle]:
        return self._widgets.items()

    def __contains__(self, level: object) -> bool:
        return level in self._widgets

    def __len__(self) -> int:
        return len(self._widgets)

    def __repr__(self) -> str:
        return f"LevelRegistry(group={self._group_mark!r}, levels={self.levels()})"
