from unittest.mock import Mock

import pytest

from multilevel_linkage.core.exceptions import HandlerSignatureError, InvalidLevelError
from multilevel_linkage.core.handlers import HandlerTable, handler_arity, parse_handler_key
from multilevel_linkage.ui.shared.memory_widgets import SelectWidget


def test_arity_is_one_for_root_and_two_below():
    assert handler_arity(1) == 1
    assert handler_arity(2) == 2
    assert handler_arity(7) == 2


def test_legacy_menu_names_map_to_levels():
    assert parse_handler_key("menu1") == 1
    assert parse_handler_key("menu12") == 12
    assert parse_handler_key(3) == 3


@pytest.mark.parametrize("key", ["menu", "menu0", "level2", "2", 0])
def test_bad_handler_keys_are_rejected(key):
    with pytest.raises(InvalidLevelError):
        parse_handler_key(key)


def test_from_mapping_accepts_mixed_keys():
    def initial(current):
        pass

    def populate(previous, current):
        pass

    table = HandlerTable.from_mapping({"menu1": initial, 2: populate, "menu3": populate})

    assert table.levels() == [1, 2, 3]
    assert table.get(1) is initial
    assert table.get(4) is None


def test_same_level_under_two_keys_is_rejected():
    def populate(previous, current):
        pass

    with pytest.raises(InvalidLevelError):
        HandlerTable.from_mapping({2: populate, "menu2": populate})


def test_root_handler_with_two_required_args_is_rejected():
    def populate(previous, current):
        pass

    with pytest.raises(HandlerSignatureError) as exc_info:
        HandlerTable({1: populate})

    assert exc_info.value.level == 1


def test_lower_handler_taking_only_one_arg_is_rejected():
    def initial(current):
        pass

    with pytest.raises(HandlerSignatureError):
        HandlerTable({3: initial})


def test_varargs_and_defaults_are_accepted():
    def flexible(*widgets):
        pass

    def with_default(previous, current, extra=None):
        pass

    table = HandlerTable({1: flexible, 2: with_default, 3: flexible})

    assert len(table) == 3


def test_non_callable_handler_is_rejected():
    with pytest.raises(HandlerSignatureError):
        HandlerTable({2: "not a function"})


def test_invoke_reports_whether_a_handler_ran():
    populate = Mock()
    table = HandlerTable({2: populate})
    previous, current = SelectWidget(name="1"), SelectWidget(name="2")

    assert table.invoke_initial(previous) is False
    assert table.invoke_populate(3, previous, current) is False
    assert table.invoke_populate(2, previous, current) is True
    populate.assert_called_once_with(previous, current)


def test_handler_exception_propagates_unchanged():
    error = RuntimeError("backend down")
    table = HandlerTable({2: Mock(side_effect=error)})

    with pytest.raises(RuntimeError) as exc_info:
        table.invoke_populate(2, SelectWidget(), SelectWidget())

    assert exc_info.value is error
