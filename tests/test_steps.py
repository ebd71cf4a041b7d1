"""Tests for step option parsers and the step catalog."""

import pytest

from stylish.config.catalog import CATALOG, get_step_parser, list_steps
from stylish.config.enums import ImportAlign, ListAlign, LongListAlign, PragmaStyle
from stylish.config.errors import ConfigTypeError, InvalidOptionError, UnknownStepError
from stylish.config.schema import (
    Config,
    ImportsStep,
    LanguagePragmasStep,
    RecordsStep,
    TabsStep,
    TrailingWhitespaceStep,
    UnicodeSyntaxStep,
)
from stylish.config.steps import (
    parse_imports,
    parse_language_pragmas,
    parse_records,
    parse_tabs,
    parse_trailing_whitespace,
    parse_unicode_syntax,
)


@pytest.fixture
def config():
    return Config(columns=100)


class TestImports:
    def test_defaults(self, config):
        step = parse_imports(config, {})
        assert step == ImportsStep(
            columns=100,
            align=ImportAlign.GLOBAL,
            list_align=ListAlign.AFTER_ALIAS,
            long_list_align=LongListAlign.INLINE,
            list_padding=4,
            separate_lists=True,
        )

    def test_all_options(self, config):
        step = parse_imports(
            config,
            {
                "align": "file",
                "list_align": "new_line",
                "long_list_align": "multiline",
                "list_padding": 2,
                "separate_lists": False,
            },
        )
        assert step.align is ImportAlign.FILE
        assert step.list_align is ListAlign.NEW_LINE
        assert step.long_list_align is LongListAlign.MULTILINE
        assert step.list_padding == 2
        assert step.separate_lists is False

    def test_list_padding_clamped(self, config):
        assert parse_imports(config, {"list_padding": 0}).list_padding == 1
        assert parse_imports(config, {"list_padding": -5}).list_padding == 1

    def test_bad_align(self, config):
        with pytest.raises(InvalidOptionError, match="global, file, group, none"):
            parse_imports(config, {"align": "bogus"})

    def test_bad_list_padding_type(self, config):
        with pytest.raises(ConfigTypeError, match="list_padding"):
            parse_imports(config, {"list_padding": "wide"})

    def test_unknown_options_ignored(self, config):
        assert parse_imports(config, {"colour": "red"}) == parse_imports(config, {})


class TestLanguagePragmas:
    def test_defaults(self, config):
        step = parse_language_pragmas(config, {})
        assert step == LanguagePragmasStep(
            columns=100, style=PragmaStyle.VERTICAL, align=True, remove_redundant=True
        )

    def test_options(self, config):
        step = parse_language_pragmas(
            config, {"style": "compact_line", "align": False, "remove_redundant": False}
        )
        assert step.style is PragmaStyle.COMPACT_LINE
        assert step.align is False
        assert step.remove_redundant is False

    def test_bad_style(self, config):
        with pytest.raises(InvalidOptionError, match="vertical, compact, compact_line"):
            parse_language_pragmas(config, {"style": "sideways"})

    def test_bool_type_checked(self, config):
        with pytest.raises(ConfigTypeError):
            parse_language_pragmas(config, {"align": "yes please"})


class TestSimpleSteps:
    def test_records(self, config):
        assert parse_records(config, {"anything": 1}) == RecordsStep()

    def test_trailing_whitespace(self, config):
        assert parse_trailing_whitespace(config, {}) == TrailingWhitespaceStep()

    def test_tabs(self, config):
        assert parse_tabs(config, {}).spaces == 8
        assert parse_tabs(config, {"spaces": 4}).spaces == 4

    def test_tabs_rejects_bool(self, config):
        with pytest.raises(ConfigTypeError):
            parse_tabs(config, {"spaces": True})

    def test_unicode_syntax(self, config):
        assert parse_unicode_syntax(config, {}) == UnicodeSyntaxStep(add_language_pragma=True)
        step = parse_unicode_syntax(config, {"add_language_pragma": False})
        assert step.add_language_pragma is False


class TestCatalog:
    def test_names(self):
        assert list_steps() == [
            "imports",
            "language_pragmas",
            "records",
            "tabs",
            "trailing_whitespace",
            "unicode_syntax",
        ]

    def test_contains(self):
        assert "tabs" in CATALOG
        assert "foo" not in CATALOG

    def test_get(self):
        assert get_step_parser("tabs") is parse_tabs

    def test_get_unknown(self):
        with pytest.raises(UnknownStepError, match="Invalid declaration for foo"):
            CATALOG.get("foo")

    def test_parse(self, config):
        assert CATALOG.parse("tabs", config, {"spaces": 2}) == TabsStep(spaces=2)

    def test_parse_type_error_names_step(self, config):
        with pytest.raises(ConfigTypeError, match=r"tabs\.spaces"):
            CATALOG.parse("tabs", config, {"spaces": "two"})

    def test_read_only(self):
        with pytest.raises(TypeError):
            CATALOG._parsers["foo"] = parse_tabs
