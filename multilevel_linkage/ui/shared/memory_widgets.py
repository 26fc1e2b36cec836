"""
Toolkit-free select widget.

SelectWidget behaves like an HTML <select>: attributes, ordered options and a
current value that falls back to the first option's value after its content is
replaced. Useful for headless hosts, server-side form models and tests.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from multilevel_linkage.core.types import OptionEntry
from multilevel_linkage.core.widget_protocols import (
    ChangeCallback,
    Unsubscribe,
    WidgetDiscovery,
    WidgetHandle,
)

logger = logging.getLogger(__name__)


class SelectWidget(WidgetHandle):
    """In-memory choice control implementing the WidgetHandle ABC."""

    def __init__(
        self,
        attributes: Optional[Dict[str, Any]] = None,
        options: Iterable[OptionEntry] = (),
        name: str = "",
    ) -> None:
        self.name = name
        self._attributes = {key: str(value) for key, value in (attributes or {}).items()}
        self._options: List[OptionEntry] = list(options)
        self._value: Optional[str] = self._options[0].value if self._options else None
        self._listeners: List[ChangeCallback] = []

    def get_attribute(self, name: str) -> Optional[str]:
        return self._attributes.get(name)

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = str(value)

    def get_options(self) -> List[OptionEntry]:
        return list(self._options)

    def replace_options(self, entries: Sequence[OptionEntry]) -> None:
        self._options = list(entries)
        self._value = self._options[0].value if self._options else None

    def get_value(self) -> Optional[str]:
        return self._value

    def select(self, value: str) -> None:
        """Select the entry carrying ``value`` and notify listeners.

        Re-selecting the current value is silent, like a DOM change event.

        Raises:
            ValueError: If no entry carries ``value``
        """
        if not any(entry.value == value for entry in self._options):
            raise ValueError(f"{self!r} has no option with value {value!r}")
        if value == self._value:
            return
        self._value = value
        # Copy: a listener may unsubscribe while we iterate
        for listener in list(self._listeners):
            listener(value)

    def subscribe_change(self, callback: ChangeCallback) -> Unsubscribe:
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)
        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def __repr__(self) -> str:
        return f"SelectWidget({self.name or self._attributes!r})"


class ListWidgetDiscovery(WidgetDiscovery):
    """Discovery over an explicit list of widgets, in list order."""

    def __init__(self, widgets: Iterable[WidgetHandle]) -> None:
        self._widgets = list(widgets)

    def find(self, mark_attribute: str, group_mark: str) -> List[WidgetHandle]:
        found = [w for w in self._widgets if w.get_attribute(mark_attribute) == group_mark]
        logger.debug(f"Found {len(found)} of {len(self._widgets)} widgets with {mark_attribute}={group_mark!r}")
        return found
