"""Parsing of a configuration document into a Config."""

from typing import Any

import yaml
from pydantic import ValidationError

from stylish.config.catalog import CATALOG, StepCatalog
from stylish.config.enums import IMPORT_ALIGNS, LIST_ALIGNS, LONG_LIST_ALIGNS, PRAGMA_STYLES
from stylish.config.errors import ConfigTypeError, MalformedDocumentError, UnknownStepError
from stylish.config.schema import DEFAULT_COLUMNS, Config, Step
from stylish.config.values import expect_list, expect_mapping, optional, optional_strings


def parse_config_bytes(data: bytes, catalog: StepCatalog = CATALOG) -> Config:
    """Parse raw YAML configuration contents.

    Args:
        data: File contents
        catalog: Step catalog used to resolve step names

    Returns:
        Validated Config
    """
    try:
        document = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise MalformedDocumentError(f"Invalid YAML: {e}") from e

    return parse_config(document, catalog)


def parse_config(document: Any, catalog: StepCatalog = CATALOG) -> Config:
    """Parse a decoded configuration document.

    The global settings are read first so that step parsers can use them;
    steps are then built in the order they are declared. The first invalid
    step aborts the whole parse.

    Args:
        document: Decoded YAML document
        catalog: Step catalog used to resolve step names

    Returns:
        Validated Config

    Raises:
        MalformedDocumentError: If the document or its steps list has the wrong shape
        UnknownStepError: If a step name is not in the catalog
        InvalidOptionError: If an enum-like option has an unknown value
        ConfigTypeError: If a field has the wrong type
    """
    top = expect_mapping(document, "configuration")

    # First load the config without the actual steps
    try:
        config = Config(
            columns=optional(top, "columns", int, DEFAULT_COLUMNS),
            language_extensions=optional_strings(top, "language_extensions"),
        )
    except ValidationError as e:
        raise ConfigTypeError(f"columns: {e.errors()[0]['msg']}") from e

    if "steps" not in top:
        raise MalformedDocumentError("configuration: missing required field 'steps'")
    declarations = expect_list(top["steps"], "steps")

    steps: list[Step] = []
    for index, declaration in enumerate(declarations):
        steps.extend(parse_steps(config, expect_mapping(declaration, f"steps[{index}]"), catalog))

    return config.model_copy(update={"steps": tuple(steps)})


def parse_steps(
    config: Config, declaration: dict[str, Any], catalog: StepCatalog = CATALOG
) -> list[Step]:
    """Build the steps named by one item of the steps list.

    An item usually holds a single step name, but every key is honoured, in
    the order it appears in the document.

    Args:
        config: Partial configuration holding the global settings
        declaration: Mapping of step names to options mappings
        catalog: Step catalog used to resolve step names

    Returns:
        Steps in declaration order
    """
    steps = []
    for name, options in declaration.items():
        if name not in catalog or not isinstance(options, dict):
            raise UnknownStepError(str(name))
        steps.append(catalog.parse(name, config, options))
    return steps


_ENUM_FIELDS = {
    ("imports", "align"): IMPORT_ALIGNS,
    ("imports", "list_align"): LIST_ALIGNS,
    ("imports", "long_list_align"): LONG_LIST_ALIGNS,
    ("language_pragmas", "style"): PRAGMA_STYLES,
}

# Taken from the global settings when parsing, so not written per step
_GLOBAL_FIELDS = {"step", "columns"}


def step_to_document(step: Step) -> dict[str, Any]:
    """Convert a step back to its single-key declaration."""
    options = {}
    for key, value in step.model_dump(exclude=_GLOBAL_FIELDS).items():
        spec = _ENUM_FIELDS.get((step.step, key))
        options[key] = spec.name_of(value) if spec is not None else value
    return {step.step: options}


def config_to_document(config: Config) -> dict[str, Any]:
    """Convert a Config to a document that parses back to an equal Config.

    Args:
        config: Configuration to convert

    Returns:
        Plain dictionary suitable for YAML serialization
    """
    data: dict[str, Any] = {"steps": [step_to_document(step) for step in config.steps]}
    data["columns"] = config.columns
    if config.language_extensions:
        data["language_extensions"] = list(config.language_extensions)
    return data
