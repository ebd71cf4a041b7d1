"""Exceptions raised while locating, reading and parsing configuration."""


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigFileError(ConfigError):
    """Configuration file exists but could not be read."""

    pass


class MalformedDocumentError(ConfigError):
    """Document is not a mapping, is not valid YAML, or lacks a steps list."""

    pass


class UnknownStepError(ConfigError):
    """A step declaration names no known step."""

    def __init__(self, name: str):
        super().__init__(f"Invalid declaration for {name}")
        self.name = name


class InvalidOptionError(ConfigError):
    """An enum-like option holds a value outside its allowed names."""

    def __init__(self, value: str, choices: list[str]):
        super().__init__(f"Unknown option: {value}, should be one of: {', '.join(choices)}")
        self.value = value
        self.choices = choices


class ConfigTypeError(ConfigError):
    """A field is present but has the wrong shape."""

    pass
