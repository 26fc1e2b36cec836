"""Value types shared by the linkage core: option entries and group configuration."""

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, Mapping, Union

from multilevel_linkage.constants.constants import (
    DEFAULT_DUPLICATE_POLICY,
    DEFAULT_INIT_ATTRIBUTE,
    DEFAULT_LEVEL_ATTRIBUTE,
    DEFAULT_MARK_ATTRIBUTE,
    RESET_OPTION_VALUE,
    DuplicateLevelPolicy,
)

HandlerKey = Union[int, str]


@dataclass(frozen=True)
class OptionEntry:
    """One selectable entry of a widget's option content."""
    label: str
    value: str = RESET_OPTION_VALUE


@dataclass(frozen=True)
class LinkageConfig:
    """Configuration of one linkage group.

    Attributes:
        group_mark: Identifies which widgets belong to the group (required)
        mark_attribute: Attribute carrying the group mark on each widget
        level_attribute: Attribute carrying the widget's level
        init_attribute: Attribute carrying the default label seeded on reset
        handlers: Level -> population callback. Level 1 takes ``(current)``,
            levels >= 2 take ``(previous, current)``. Legacy ``"menuN"`` names
            are accepted as keys.
        duplicate_policy: What to do when two widgets declare the same level
    """
    group_mark: str
    mark_attribute: str = DEFAULT_MARK_ATTRIBUTE
    level_attribute: str = DEFAULT_LEVEL_ATTRIBUTE
    init_attribute: str = DEFAULT_INIT_ATTRIBUTE
    handlers: Mapping[HandlerKey, Callable[..., Any]] = field(default_factory=dict)
    duplicate_policy: DuplicateLevelPolicy = DEFAULT_DUPLICATE_POLICY

    # Option keys understood by the jQuery-era setup call
    LEGACY_KEYS = {
        "multiMenuMark": "group_mark",
        "multiMenuMarkAttr": "mark_attribute",
        "multiMenuLevelAttr": "level_attribute",
        "multiMenuInitAttr": "init_attribute",
        "handler": "handlers",
    }

    def __post_init__(self):
        if not isinstance(self.group_mark, str) or not self.group_mark:
            raise ValueError(f"group_mark must be a non-empty string, got {self.group_mark!r}")
        for name in ("mark_attribute", "level_attribute", "init_attribute"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")
        if not isinstance(self.duplicate_policy, DuplicateLevelPolicy):
            raise ValueError(f"duplicate_policy must be a DuplicateLevelPolicy, got {self.duplicate_policy!r}")

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "LinkageConfig":
        """Build a config by merging a loose option mapping over the defaults.

        Accepts the dataclass field names as well as the camelCase keys of the
        jQuery-era setup call (``multiMenuMark``, ``handler`` ...). Unknown keys
        raise ``ValueError``.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in options.items():
            name = cls.LEGACY_KEYS.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown linkage option: {key!r}")
            if name in kwargs:
                raise ValueError(f"Linkage option {name!r} given more than once")
            kwargs[name] = value

        if "group_mark" not in kwargs:
            raise ValueError("Missing required linkage option: group_mark")
        if kwargs.get("handlers") is None:
            kwargs.pop("handlers", None)
        if isinstance(kwargs.get("duplicate_policy"), str):
            kwargs["duplicate_policy"] = DuplicateLevelPolicy(kwargs["duplicate_policy"])
        return cls(**kwargs)
