"""Pydantic models for the resolved configuration."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from stylish.config.enums import ImportAlign, ListAlign, LongListAlign, PragmaStyle

DEFAULT_COLUMNS = 80


class _Step(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)


class ImportsStep(_Step):
    """Import sorting and alignment."""

    step: Literal["imports"] = "imports"
    columns: int = Field(gt=0)
    align: ImportAlign = ImportAlign.GLOBAL
    list_align: ListAlign = ListAlign.AFTER_ALIAS
    long_list_align: LongListAlign = LongListAlign.INLINE
    list_padding: int = Field(default=4, ge=1)
    separate_lists: bool = True


class LanguagePragmasStep(_Step):
    """LANGUAGE pragma grouping and alignment."""

    step: Literal["language_pragmas"] = "language_pragmas"
    columns: int = Field(gt=0)
    style: PragmaStyle = PragmaStyle.VERTICAL
    align: bool = True
    remove_redundant: bool = True


class RecordsStep(_Step):
    """Record field alignment."""

    step: Literal["records"] = "records"


class TabsStep(_Step):
    """Tab to space replacement."""

    step: Literal["tabs"] = "tabs"
    spaces: int = 8


class TrailingWhitespaceStep(_Step):
    """Trailing whitespace removal."""

    step: Literal["trailing_whitespace"] = "trailing_whitespace"


class UnicodeSyntaxStep(_Step):
    """Unicode syntax replacement."""

    step: Literal["unicode_syntax"] = "unicode_syntax"
    add_language_pragma: bool = True


# Union of all step types
Step = Annotated[
    Union[
        ImportsStep,
        LanguagePragmasStep,
        RecordsStep,
        TabsStep,
        TrailingWhitespaceStep,
        UnicodeSyntaxStep,
    ],
    Field(discriminator="step"),
]


class Config(BaseModel):
    """Complete resolved configuration.

    The order of ``steps`` is the order in which they are applied.
    """

    steps: tuple[Step, ...] = ()
    columns: int = Field(default=DEFAULT_COLUMNS, gt=0)
    language_extensions: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


def empty_config() -> Config:
    """Configuration used when no configuration file is found."""
    return Config()
