"""
Linkage controller: binds change reactions and runs the reset/populate cascade.

On a change at level L:
1. No widget at L+1 -> L is the bottom of the chain, nothing happens.
2. Every registered widget at levels L+1..max is reset, either to a single
   default entry (non-empty init label) or to no entries.
3. The handler for L+1, if any, is called with (widget L, widget L+1).

Levels beyond L+1 stay reset until their own parent changes. All cascade state
is local to one invocation, so a handler that changes a lower widget (firing a
nested cascade) cannot corrupt the outer one.

Thread safety: Not thread-safe (all operations expected on the UI thread).
"""

import logging
from typing import List, Optional

from multilevel_linkage.constants.constants import RESET_OPTION_VALUE, ROOT_LEVEL

from .exceptions import InvalidLevelError, LinkageError
from .handlers import HandlerTable
from .registry import LevelRegistry
from .types import LinkageConfig, OptionEntry
from .widget_protocols import Unsubscribe, WidgetDiscovery, WidgetHandle

logger = logging.getLogger(__name__)


class LinkageController:
    """Owns the registry, handler table and subscriptions of one linkage group."""

    def __init__(self, config: LinkageConfig, discovery: WidgetDiscovery) -> None:
        self.config = config
        self.discovery = discovery
        self.handlers = HandlerTable.from_mapping(config.handlers)
        self.registry = LevelRegistry(config.duplicate_policy, config.group_mark)
        self._unsubscribers: List[Unsubscribe] = []
        self._setup_done = False

    @property
    def is_bound(self) -> bool:
        return bool(self._unsubscribers)

    def setup(self) -> bool:
        """Discover, register and bind the group's widgets.

        Returns:
            False if no widget carries the group mark (nothing bound, no
            handler called), True otherwise.

        Raises:
            LinkageError: If setup already ran on this controller
            InvalidLevelError: If a widget's level attribute is unusable
            DuplicateLevelError: If two widgets share a level under FAIL_FAST
        """
        if self._setup_done:
            raise LinkageError(f"Linkage group '{self.config.group_mark}' is already set up")

        widgets = self.discovery.find(self.config.mark_attribute, self.config.group_mark)
        if not widgets:
            logger.debug(f"No widgets found for linkage group '{self.config.group_mark}'")
            return False

        # Register everything first so a bad level binds nothing and leaves
        # the controller ready for another setup()
        registry = LevelRegistry(self.config.duplicate_policy, self.config.group_mark)
        bindings = []
        for widget in widgets:
            level = self._read_level(widget)
            registry.register(level, widget)
            bindings.append((level, widget))
        self.registry = registry
        self._setup_done = True

        # Every discovered widget gets a reaction, including ones a later
        # widget displaced from the registry under LAST_WINS
        for level, widget in bindings:
            self._unsubscribers.append(widget.subscribe_change(self._make_reaction(level, widget)))

        logger.debug(f"Bound linkage group '{self.config.group_mark}' levels {self.registry.levels()}")

        root = self.registry.get(ROOT_LEVEL)
        if root is not None and self.handlers.invoke_initial(root):
            logger.debug(f"Ran initial handler for group '{self.config.group_mark}'")
        return True

    def teardown(self) -> None:
        """Remove every change subscription made by setup(). Safe to call twice."""
        unsubscribers, self._unsubscribers = self._unsubscribers, []
        for unsubscribe in unsubscribers:
            unsubscribe()
        if unsubscribers:
            logger.debug(f"Unbound linkage group '{self.config.group_mark}'")

    def _make_reaction(self, level: int, widget: WidgetHandle):
        def on_change(_value=None):
            self.on_level_changed(level, widget)
        return on_change

    def _read_level(self, widget: WidgetHandle) -> int:
        attribute = self.config.level_attribute
        raw = widget.get_attribute(attribute)
        if raw is None:
            raise InvalidLevelError(f"Widget {widget!r} has no '{attribute}' attribute")
        try:
            level = int(str(raw).strip())
        except ValueError as e:
            raise InvalidLevelError(f"Attribute '{attribute}' of {widget!r} is not an integer: {raw!r}", raw) from e
        if level < 1:
            raise InvalidLevelError(f"Attribute '{attribute}' of {widget!r} must be positive, got {level}", level)
        return level

    def reset_level(self, level: int) -> bool:
        """Reset the widget at ``level`` to its default content.

        Returns:
            False if no widget is registered at ``level``
        """
        widget = self.registry.get(level)
        if widget is None:
            return False
        init_label = widget.get_attribute(self.config.init_attribute)
        if init_label:
            widget.replace_options([OptionEntry(init_label, RESET_OPTION_VALUE)])
        else:
            widget.replace_options([])
        return True

    def on_level_changed(self, level: int, source: Optional[WidgetHandle] = None) -> None:
        """Run the cascade for a change at ``level``.

        Args:
            level: Level of the widget that changed
            source: The widget that changed; handed to the populate handler as
                ``previous``. Defaults to the registered widget at ``level``.
        """
        child_level = level + 1
        child = self.registry.get(child_level)
        if child is None:
            return

        for lower in range(child_level, self.registry.max_level() + 1):
            self.reset_level(lower)

        parent = source if source is not None else self.registry.get(level)
        if self.handlers.invoke_populate(child_level, parent, child):
            logger.debug(f"Group '{self.config.group_mark}': populated level {child_level} from level {level}")
        else:
            logger.debug(f"Group '{self.config.group_mark}': no handler for level {child_level}, left reset")


def init_linkage(config: LinkageConfig, discovery: WidgetDiscovery) -> Optional[LinkageController]:
    """Set up one linkage group.

    Returns:
        The bound controller, or None if no widget carries the group mark
    """
    controller = LinkageController(config, discovery)
    if not controller.setup():
        return None
    return controller
