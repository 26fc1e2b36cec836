#!/usr/bin/env python3
"""
Four-level region picker built on QComboBox.

Continent → country → city → district. Each level is populated from a static
table when its parent changes; changing any level resets everything below it.

Run:
    python examples/cascading_region_demo.py
"""

import logging
import sys

from PyQt6.QtWidgets import QApplication, QComboBox, QFormLayout, QWidget

from multilevel_linkage import LinkageConfig, OptionEntry, init_linkage
from multilevel_linkage.pyqt_gui.widgets.combo_adapter import QtWidgetDiscovery, mark_combo

logger = logging.getLogger(__name__)

REGIONS = {
    "asia": {"jp": {"tokyo": ["Shibuya", "Shinjuku"], "osaka": ["Namba", "Umeda"]}},
    "europe": {"fr": {"paris": ["Marais", "Montmartre"]}, "de": {"berlin": ["Mitte", "Kreuzberg"]}},
}
LABELS = {"asia": "Asia", "europe": "Europe", "jp": "Japan", "fr": "France", "de": "Germany",
          "tokyo": "Tokyo", "osaka": "Osaka", "paris": "Paris", "berlin": "Berlin"}


def _children(*path):
    node = REGIONS
    for key in path:
        node = node[key]
    return node


def populate_continents(current):
    current.replace_options([OptionEntry("Select continent", "")] +
                            [OptionEntry(LABELS[key], key) for key in REGIONS])


def make_populate(selections):
    """Build a population callback that walks REGIONS along the chosen path."""
    def populate(previous, current):
        choice = previous.get_value()
        level = int(previous.get_attribute("data-multimenu-level"))
        del selections[level - 1:]
        if not choice:
            return
        selections.append(choice)
        children = _children(*selections)
        for key in children:
            current.append_option(LABELS.get(key, key), key)
        logger.info(f"Populated level {level + 1} from {'/'.join(selections)}")
    return populate


def populate_districts(previous, current):
    city = previous.get_value()
    for districts in (c.get(city) for country in REGIONS.values() for c in country.values()):
        for district in districts or ():
            current.append_option(district, district.lower())


def main():
    app = QApplication(sys.argv)
    window = QWidget()
    window.setWindowTitle("Region picker")
    layout = QFormLayout(window)

    for level, (title, init_label) in enumerate(
        [("Continent", None), ("Country", "Select country"),
         ("City", "Select city"), ("District", "Select district")], start=1):
        layout.addRow(title, mark_combo(QComboBox(window), "region", level, init_label))

    selections = []
    populate = make_populate(selections)
    init_linkage(
        LinkageConfig(group_mark="region", handlers={
            1: populate_continents, 2: populate, 3: populate, 4: populate_districts,
        }),
        QtWidgetDiscovery(window),
    )

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
