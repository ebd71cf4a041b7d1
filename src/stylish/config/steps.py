"""Option parsers, one per step kind.

Every parser takes the partially parsed configuration (for shared settings such
as the column limit) and the step's own options mapping, and returns a fully
parameterized step. Options missing from the mapping fall back to their
defaults; options the step does not know are ignored.
"""

from typing import Any, Callable

from stylish.config.enums import (
    IMPORT_ALIGNS,
    LIST_ALIGNS,
    LONG_LIST_ALIGNS,
    PRAGMA_STYLES,
    resolve_enum,
)
from stylish.config.schema import (
    Config,
    ImportsStep,
    LanguagePragmasStep,
    RecordsStep,
    Step,
    TabsStep,
    TrailingWhitespaceStep,
    UnicodeSyntaxStep,
)
from stylish.config.values import optional

# Parser signature: (partial_config: Config, options: dict) -> Step
StepParser = Callable[[Config, dict[str, Any]], Step]


def parse_imports(config: Config, options: dict[str, Any]) -> ImportsStep:
    padding = optional(options, "list_padding", int)

    return ImportsStep(
        columns=config.columns,
        align=resolve_enum(IMPORT_ALIGNS, optional(options, "align", str)),
        list_align=resolve_enum(LIST_ALIGNS, optional(options, "list_align", str)),
        long_list_align=resolve_enum(LONG_LIST_ALIGNS, optional(options, "long_list_align", str)),
        # Padding has to be at least 1
        list_padding=4 if padding is None else max(1, padding),
        separate_lists=optional(options, "separate_lists", bool, True),
    )


def parse_language_pragmas(config: Config, options: dict[str, Any]) -> LanguagePragmasStep:
    return LanguagePragmasStep(
        columns=config.columns,
        style=resolve_enum(PRAGMA_STYLES, optional(options, "style", str)),
        align=optional(options, "align", bool, True),
        remove_redundant=optional(options, "remove_redundant", bool, True),
    )


def parse_records(config: Config, options: dict[str, Any]) -> RecordsStep:
    return RecordsStep()


def parse_tabs(config: Config, options: dict[str, Any]) -> TabsStep:
    return TabsStep(spaces=optional(options, "spaces", int, 8))


def parse_trailing_whitespace(config: Config, options: dict[str, Any]) -> TrailingWhitespaceStep:
    return TrailingWhitespaceStep()


def parse_unicode_syntax(config: Config, options: dict[str, Any]) -> UnicodeSyntaxStep:
    return UnicodeSyntaxStep(
        add_language_pragma=optional(options, "add_language_pragma", bool, True),
    )
