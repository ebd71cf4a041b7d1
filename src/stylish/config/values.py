"""Checked access to the loosely-typed values produced by the YAML decoder."""

from typing import Any

from stylish.config.errors import ConfigTypeError, MalformedDocumentError

_KIND_NAMES = {
    bool: "boolean",
    int: "integer",
    str: "string",
    list: "list",
    dict: "mapping",
}


def describe(value: Any) -> str:
    """Name the YAML shape of a decoded value."""
    if value is None:
        return "null"
    for kind, name in _KIND_NAMES.items():
        if isinstance(value, kind):
            return name
    return type(value).__name__


def is_kind(value: Any, kind: type) -> bool:
    # bool is a subclass of int, but YAML keeps them apart
    if kind is int and isinstance(value, bool):
        return False
    return isinstance(value, kind)


def expect_mapping(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedDocumentError(f"{where}: expected a mapping, got {describe(value)}")
    return value


def expect_list(value: Any, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise MalformedDocumentError(f"{where}: expected a list, got {describe(value)}")
    return value


def optional(options: dict[str, Any], key: str, kind: type, default: Any = None) -> Any:
    """Read an optional field, checking its type when present.

    Args:
        options: Mapping to read from
        key: Field name
        kind: Expected Python type (bool, int, str, list)
        default: Value returned when the field is absent or null

    Returns:
        The field value, or ``default``

    Raises:
        ConfigTypeError: If the field is present with another type
    """
    value = options.get(key)
    if value is None:
        return default
    if not is_kind(value, kind):
        raise ConfigTypeError(
            f"{key}: expected {_KIND_NAMES.get(kind, kind.__name__)}, got {describe(value)}"
        )
    return value


def optional_strings(options: dict[str, Any], key: str) -> list[str]:
    """Read an optional list of strings, defaulting to an empty list."""
    items = optional(options, key, list, [])
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise ConfigTypeError(f"{key}[{index}]: expected string, got {describe(item)}")
    return list(items)
