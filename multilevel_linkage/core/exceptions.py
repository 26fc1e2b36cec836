"""Linkage-specific exceptions."""

from typing import Any, Optional


class LinkageError(Exception):
    """Base exception for the linkage system."""

    pass


class InvalidLevelError(LinkageError):
    """Raised when a level is missing, not an integer, or not positive."""

    def __init__(self, message: str, level: Any = None):
        self.level = level
        super().__init__(message)


class DuplicateLevelError(LinkageError):
    """Raised when two widgets of one group declare the same level."""

    def __init__(self, level: int, group_mark: Optional[str] = None):
        self.level = level
        self.group_mark = group_mark
        where = f" in group '{group_mark}'" if group_mark is not None else ""
        super().__init__(f"Level {level} registered twice{where}")


class HandlerSignatureError(LinkageError):
    """Raised when a population callback cannot accept its level's arguments."""

    def __init__(self, message: str, level: int):
        self.level = level
        super().__init__(f"Handler for level {level}: {message}")
