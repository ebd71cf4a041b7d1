"""Fixed registry of step names and their option parsers."""

from types import MappingProxyType
from typing import Any, Mapping

from stylish.config.errors import ConfigTypeError, UnknownStepError
from stylish.config.schema import Config, Step
from stylish.config.steps import (
    StepParser,
    parse_imports,
    parse_language_pragmas,
    parse_records,
    parse_tabs,
    parse_trailing_whitespace,
    parse_unicode_syntax,
)


class StepCatalog:
    """Read-only mapping from step names to step parsers."""

    def __init__(self, parsers: Mapping[str, StepParser]):
        self._parsers = MappingProxyType(dict(parsers))

    def get(self, name: str) -> StepParser:
        """Get a step parser by name.

        Args:
            name: Step name as written in the configuration file

        Returns:
            Step parser

        Raises:
            UnknownStepError: If no step has this name
        """
        if name not in self._parsers:
            raise UnknownStepError(name)
        return self._parsers[name]

    def parse(self, name: str, config: Config, options: dict[str, Any]) -> Step:
        """Build the step called ``name`` from its options.

        Args:
            name: Step name
            config: Partial configuration holding the global settings
            options: The step's options mapping

        Returns:
            Fully parameterized step
        """
        parser = self.get(name)
        try:
            return parser(config, options)
        except ConfigTypeError as e:
            raise ConfigTypeError(f"{name}.{e}") from e

    def names(self) -> list[str]:
        """List step names in catalog order."""
        return list(self._parsers)

    def __contains__(self, name: object) -> bool:
        return name in self._parsers


CATALOG = StepCatalog(
    {
        "imports": parse_imports,
        "language_pragmas": parse_language_pragmas,
        "records": parse_records,
        "tabs": parse_tabs,
        "trailing_whitespace": parse_trailing_whitespace,
        "unicode_syntax": parse_unicode_syntax,
    }
)


def get_step_parser(name: str) -> StepParser:
    """Get a step parser from the built-in catalog."""
    return CATALOG.get(name)


def list_steps() -> list[str]:
    """List the names of all built-in steps."""
    return CATALOG.names()
