"""Configuration loading."""

from pathlib import Path

from stylish.config.document import parse_config_bytes
from stylish.config.errors import ConfigFileError
from stylish.config.locator import config_file_path
from stylish.config.schema import Config, empty_config
from stylish.verbose import Verbose


def load_config(
    verbose: Verbose | None = None,
    explicit_path: Path | str | None = None,
    *,
    current_dir: Path | str | None = None,
    home_dir: Path | str | None = None,
    default_path: Path | str | None = None,
) -> Config:
    """Locate, read and parse the configuration.

    Search locations that are not given are taken from the process
    environment. When no configuration file exists the empty configuration is
    returned; a file that exists but cannot be read or parsed is an error.

    Args:
        verbose: Sink for progress messages
        explicit_path: Configuration file chosen by the user
        current_dir: Directory the search starts from (default: cwd)
        home_dir: User home directory (default: ``Path.home()``)
        default_path: Bundled default configuration

    Returns:
        Validated Config

    Raises:
        ConfigFileError: If the configuration file cannot be read
        ConfigError: If the configuration file is invalid
    """
    say = verbose if verbose is not None else (lambda message: None)

    path = config_file_path(
        say,
        explicit_path,
        current_dir=current_dir,
        home_dir=home_dir,
        default_path=default_path,
    )

    if path is None:
        say("Using empty configuration")
        return empty_config()

    say(f"Loading configuration at {path}")
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConfigFileError(f"Cannot read configuration file {path}: {e}") from e

    return parse_config_bytes(data)
