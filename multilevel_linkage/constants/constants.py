"""
Constants for multilevel_linkage.

Default external attribute names used to discover linkage groups, plus the
policy enum that governs duplicate level registration.
"""

from enum import Enum


class DuplicateLevelPolicy(Enum):
    FAIL_FAST = "fail_fast"  # raise DuplicateLevelError
    LAST_WINS = "last_wins"  # overwrite silently (logged as a warning)


# Attribute marking which linkage group a widget belongs to
DEFAULT_MARK_ATTRIBUTE = "data-multimenu-id"

# Attribute holding the widget's level, counted from 1
DEFAULT_LEVEL_ATTRIBUTE = "data-multimenu-level"

# Attribute holding the label of the single default option seeded on reset
DEFAULT_INIT_ATTRIBUTE = "data-multimenu-init"

# Value carried by the default option seeded on reset
RESET_OPTION_VALUE = ""

ROOT_LEVEL = 1

# Legacy handler names look like "menu1", "menu2", ...
LEGACY_HANDLER_PREFIX = "menu"

DEFAULT_DUPLICATE_POLICY = DuplicateLevelPolicy.FAIL_FAST
