"""Enum-like options: a fixed table of names, one default."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from stylish.config.errors import ConfigTypeError, InvalidOptionError
from stylish.config.values import describe

T = TypeVar("T")


class ImportAlign(Enum):
    GLOBAL = "global"
    FILE = "file"
    GROUP = "group"
    NONE = "none"


class ListAlign(Enum):
    NEW_LINE = "new_line"
    WITH_ALIAS = "with_alias"
    AFTER_ALIAS = "after_alias"


class LongListAlign(Enum):
    INLINE = "inline"
    INLINE_WITH_BREAK = "inline_with_break"
    INLINE_TO_MULTILINE = "inline_to_multiline"
    MULTILINE = "multiline"


class PragmaStyle(Enum):
    VERTICAL = "vertical"
    COMPACT = "compact"
    COMPACT_LINE = "compact_line"


@dataclass(frozen=True)
class EnumSpec(Generic[T]):
    """Ordered (name, value) table plus the value used when the option is absent."""

    choices: tuple[tuple[str, T], ...]
    default: T

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.choices]

    def name_of(self, value: T) -> str:
        """Document name of a value from this table."""
        for name, candidate in self.choices:
            if candidate == value:
                return name
        raise KeyError(value)


def resolve_enum(spec: EnumSpec[T], value: Any) -> T:
    """Resolve an optional option value against an enum table.

    Matching is exact: no case folding, no prefixes.

    Args:
        spec: Table of allowed names and the default
        value: Raw option value, or None when the option is absent

    Returns:
        The value mapped to ``value``, or the default

    Raises:
        InvalidOptionError: If ``value`` names no entry of the table
        ConfigTypeError: If ``value`` is not a string
    """
    if value is None:
        return spec.default
    if not isinstance(value, str):
        raise ConfigTypeError(f"expected one of {', '.join(spec.names)}, got {describe(value)}")
    for name, result in spec.choices:
        if name == value:
            return result
    raise InvalidOptionError(value, spec.names)


IMPORT_ALIGNS = EnumSpec(
    choices=(
        ("global", ImportAlign.GLOBAL),
        ("file", ImportAlign.FILE),
        ("group", ImportAlign.GROUP),
        ("none", ImportAlign.NONE),
    ),
    default=ImportAlign.GLOBAL,
)

LIST_ALIGNS = EnumSpec(
    choices=(
        ("new_line", ListAlign.NEW_LINE),
        ("with_alias", ListAlign.WITH_ALIAS),
        ("after_alias", ListAlign.AFTER_ALIAS),
    ),
    default=ListAlign.AFTER_ALIAS,
)

# Document names differ from the value names for the two "new_line" variants
LONG_LIST_ALIGNS = EnumSpec(
    choices=(
        ("inline", LongListAlign.INLINE),
        ("new_line", LongListAlign.INLINE_WITH_BREAK),
        ("new_line_multiline", LongListAlign.INLINE_TO_MULTILINE),
        ("multiline", LongListAlign.MULTILINE),
    ),
    default=LongListAlign.INLINE,
)

PRAGMA_STYLES = EnumSpec(
    choices=(
        ("vertical", PragmaStyle.VERTICAL),
        ("compact", PragmaStyle.COMPACT),
        ("compact_line", PragmaStyle.COMPACT_LINE),
    ),
    default=PragmaStyle.VERTICAL,
)
