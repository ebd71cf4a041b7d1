"""Configuration loading and validation."""

from stylish.config.catalog import CATALOG, StepCatalog, list_steps
from stylish.config.document import parse_config, parse_config_bytes
from stylish.config.errors import (
    ConfigError,
    ConfigFileError,
    ConfigTypeError,
    InvalidOptionError,
    MalformedDocumentError,
    UnknownStepError,
)
from stylish.config.loader import load_config
from stylish.config.locator import (
    CONFIG_FILE_NAME,
    config_file_path,
    default_config_file_path,
    find_config_file,
)
from stylish.config.schema import Config, Step, empty_config

__all__ = [
    "Config",
    "Step",
    "empty_config",
    "load_config",
    "parse_config",
    "parse_config_bytes",
    "config_file_path",
    "default_config_file_path",
    "find_config_file",
    "CONFIG_FILE_NAME",
    "CATALOG",
    "StepCatalog",
    "list_steps",
    "ConfigError",
    "ConfigFileError",
    "ConfigTypeError",
    "InvalidOptionError",
    "MalformedDocumentError",
    "UnknownStepError",
]
