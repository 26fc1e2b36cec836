"""
Widget ABCs consumed by the linkage core.

The core never touches a concrete toolkit. Hosts wrap their choice controls in
a WidgetHandle and provide a WidgetDiscovery that finds the handles of one
linkage group:

- get_attribute() for group mark, level and default label
- get_options() / replace_options() for option content
- get_value() for the current selection
- subscribe_change() returning an unsubscribe callable
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Sequence

from .types import OptionEntry

ChangeCallback = Callable[[Any], None]
Unsubscribe = Callable[[], None]


class WidgetHandle(ABC):
    """Opaque reference to one selectable-choice control."""

    @abstractmethod
    def get_attribute(self, name: str) -> Optional[str]:
        """Return the external attribute ``name``, or None if undeclared."""
        pass

    @abstractmethod
    def get_options(self) -> List[OptionEntry]:
        """Return a copy of the current option content, in order."""
        pass

    @abstractmethod
    def replace_options(self, entries: Sequence[OptionEntry]) -> None:
        """Replace the whole option content.

        Must not emit a change notification: replacing content is not a
        selection.
        """
        pass

    @abstractmethod
    def get_value(self) -> Optional[str]:
        """Return the value of the current selection, or None."""
        pass

    @abstractmethod
    def subscribe_change(self, callback: ChangeCallback) -> Unsubscribe:
        """Call ``callback(new_value)`` whenever the selection changes.

        Returns:
            Zero-argument callable removing exactly this subscription
        """
        pass

    def append_option(self, label: str, value: str = "") -> None:
        """Append one entry; the usual operation of a population callback."""
        self.replace_options(self.get_options() + [OptionEntry(label, value)])


class WidgetDiscovery(ABC):
    """Finds all widget handles of one linkage group."""

    @abstractmethod
    def find(self, mark_attribute: str, group_mark: str) -> List[WidgetHandle]:
        """Return handles whose ``mark_attribute`` equals ``group_mark``, in discovery order."""
        pass
