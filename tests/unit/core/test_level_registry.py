import pytest

from multilevel_linkage.constants.constants import DuplicateLevelPolicy
from multilevel_linkage.core.exceptions import DuplicateLevelError, InvalidLevelError
from multilevel_linkage.core.registry import LevelRegistry
from multilevel_linkage.ui.shared.memory_widgets import SelectWidget


def test_get_returns_registered_handle_and_none_when_absent():
    registry = LevelRegistry()
    widget = SelectWidget(name="one")

    registry.register(1, widget)

    assert registry.get(1) is widget
    assert registry.get(2) is None
    assert 1 in registry
    assert 2 not in registry


def test_max_level_tracks_highest_level_with_sparse_numbering():
    registry = LevelRegistry()
    for level in (4, 1, 2):
        registry.register(level, SelectWidget(name=str(level)))

    assert registry.max_level() == 4
    assert registry.levels() == [1, 2, 4]
    assert len(registry) == 3


def test_empty_registry_has_max_level_zero():
    assert LevelRegistry().max_level() == 0


@pytest.mark.parametrize("level", [0, -3, "2", 1.0, True, None])
def test_register_rejects_non_positive_or_non_int_levels(level):
    registry = LevelRegistry()

    with pytest.raises(InvalidLevelError):
        registry.register(level, SelectWidget())

    assert len(registry) == 0


def test_duplicate_level_fails_fast_by_default():
    registry = LevelRegistry(group_mark="access")
    first = SelectWidget(name="first")
    registry.register(2, first)

    with pytest.raises(DuplicateLevelError) as exc_info:
        registry.register(2, SelectWidget(name="second"))

    assert exc_info.value.level == 2
    assert exc_info.value.group_mark == "access"
    assert registry.get(2) is first


def test_duplicate_level_last_wins_when_configured(caplog):
    registry = LevelRegistry(DuplicateLevelPolicy.LAST_WINS, group_mark="access")
    second = SelectWidget(name="second")
    registry.register(2, SelectWidget(name="first"))

    with caplog.at_level("WARNING"):
        registry.register(2, second)

    assert registry.get(2) is second
    assert len(registry) == 1
    assert "registered twice" in caplog.text
