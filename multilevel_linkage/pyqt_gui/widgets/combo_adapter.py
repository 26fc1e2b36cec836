"""
QComboBox adapter for the linkage core.

Normalizes the Qt API to the WidgetHandle ABC:
- dynamic properties → get_attribute()
- itemText()/itemData() → get_options() / replace_options()
- currentData() → get_value()
- currentIndexChanged → subscribe_change()

Group membership, level and default label are declared as Qt dynamic
properties, using the same names as the markup attributes
(``data-multimenu-id`` etc.) unless the config says otherwise.
"""

import logging
from typing import List, Optional, Sequence

from PyQt6.QtWidgets import QComboBox, QWidget

from multilevel_linkage.constants.constants import (
    DEFAULT_INIT_ATTRIBUTE,
    DEFAULT_LEVEL_ATTRIBUTE,
    DEFAULT_MARK_ATTRIBUTE,
    RESET_OPTION_VALUE,
)
from multilevel_linkage.core.types import OptionEntry
from multilevel_linkage.core.widget_protocols import (
    ChangeCallback,
    Unsubscribe,
    WidgetDiscovery,
    WidgetHandle,
)

logger = logging.getLogger(__name__)


class ComboBoxHandle(WidgetHandle):
    """Wraps a QComboBox; item data holds the option value."""

    def __init__(self, combo: QComboBox) -> None:
        self.widget = combo

    def get_attribute(self, name: str) -> Optional[str]:
        value = self.widget.property(name)
        return None if value is None else str(value)

    def get_options(self) -> List[OptionEntry]:
        entries = []
        for i in range(self.widget.count()):
            data = self.widget.itemData(i)
            entries.append(OptionEntry(self.widget.itemText(i), RESET_OPTION_VALUE if data is None else str(data)))
        return entries

    def replace_options(self, entries: Sequence[OptionEntry]) -> None:
        # clear()/addItem() move the current index; that is not a user selection
        was_blocked = self.widget.blockSignals(True)
        try:
            self.widget.clear()
            for entry in entries:
                self.widget.addItem(entry.label, entry.value)
        finally:
            self.widget.blockSignals(was_blocked)

    def get_value(self) -> Optional[str]:
        if self.widget.currentIndex() < 0:
            return None
        data = self.widget.currentData()
        return RESET_OPTION_VALUE if data is None else str(data)

    def subscribe_change(self, callback: ChangeCallback) -> Unsubscribe:
        def slot(_index: int) -> None:
            callback(self.get_value())

        self.widget.currentIndexChanged.connect(slot)

        def unsubscribe() -> None:
            try:
                self.widget.currentIndexChanged.disconnect(slot)
            except TypeError:
                # Signal not connected - ignore
                pass
        return unsubscribe

    def __repr__(self) -> str:
        return f"ComboBoxHandle({self.widget.objectName() or hex(id(self.widget))})"


class QtWidgetDiscovery(WidgetDiscovery):
    """Finds QComboBox descendants of ``root`` marked with the group mark."""

    def __init__(self, root: QWidget) -> None:
        self.root = root

    def find(self, mark_attribute: str, group_mark: str) -> List[WidgetHandle]:
        handles: List[WidgetHandle] = []
        for combo in self.root.findChildren(QComboBox):
            mark = combo.property(mark_attribute)
            if mark is not None and str(mark) == group_mark:
                handles.append(ComboBoxHandle(combo))
        logger.debug(f"Found {len(handles)} combo boxes with {mark_attribute}={group_mark!r}")
        return handles


def mark_combo(
    combo: QComboBox,
    group_mark: str,
    level: int,
    init_label: Optional[str] = None,
    mark_attribute: str = DEFAULT_MARK_ATTRIBUTE,
    level_attribute: str = DEFAULT_LEVEL_ATTRIBUTE,
    init_attribute: str = DEFAULT_INIT_ATTRIBUTE,
) -> QComboBox:
    """Declare ``combo`` as level ``level`` of linkage group ``group_mark``."""
    combo.setProperty(mark_attribute, group_mark)
    combo.setProperty(level_attribute, str(level))
    if init_label is not None:
        combo.setProperty(init_attribute, init_label)
    return combo
