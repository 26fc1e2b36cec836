from unittest.mock import Mock

import pytest

from multilevel_linkage.core.types import OptionEntry
from multilevel_linkage.ui.shared.memory_widgets import ListWidgetDiscovery, SelectWidget


def _widget(**attributes):
    return SelectWidget(attributes, [OptionEntry("Europe", "eu"), OptionEntry("Asia", "as")])


def test_value_follows_first_option_after_replace():
    widget = _widget()
    assert widget.get_value() == "eu"

    widget.replace_options([OptionEntry("Pick", "")])
    assert widget.get_value() == ""

    widget.replace_options([])
    assert widget.get_value() is None


def test_replace_does_not_notify_but_select_does():
    widget = _widget()
    listener = Mock()
    widget.subscribe_change(listener)

    widget.replace_options([OptionEntry("Africa", "af"), OptionEntry("Asia", "as")])
    listener.assert_not_called()

    widget.select("as")
    listener.assert_called_once_with("as")


def test_reselecting_current_value_is_silent():
    widget = _widget()
    listener = Mock()
    widget.subscribe_change(listener)

    widget.select("eu")
    widget.select("as")
    widget.select("as")

    listener.assert_called_once_with("as")


def test_select_unknown_value_raises():
    with pytest.raises(ValueError):
        _widget().select("africa")


def test_unsubscribe_removes_only_its_listener():
    widget = _widget()
    kept, dropped = Mock(), Mock()
    widget.subscribe_change(kept)
    unsubscribe = widget.subscribe_change(dropped)

    unsubscribe()
    unsubscribe()
    widget.select("as")

    kept.assert_called_once_with("as")
    dropped.assert_not_called()


def test_append_option_keeps_order():
    widget = _widget()
    widget.append_option("Africa", "af")

    assert [entry.value for entry in widget.get_options()] == ["eu", "as", "af"]


def test_attributes_are_strings():
    widget = _widget(level=2)
    assert widget.get_attribute("level") == "2"
    assert widget.get_attribute("missing") is None


def test_discovery_filters_by_mark_in_order():
    first, other, second = _widget(group="a"), _widget(group="b"), _widget(group="a")

    found = ListWidgetDiscovery([first, other, second]).find("group", "a")

    assert found == [first, second]
