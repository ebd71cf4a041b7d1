"""Configuration file lookup."""

from pathlib import Path

from stylish.verbose import Verbose

CONFIG_FILE_NAME = ".stylish-haskell.yaml"

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def default_config_file_path() -> Path:
    """Path of the default configuration shipped with the package."""
    return _DATA_DIR / "stylish-haskell.yaml"


def ancestors(directory: Path) -> list[Path]:
    """A directory and its parents, nearest first, without the filesystem root."""
    directory = Path(directory).absolute()
    return [d for d in (directory, *directory.parents) if d != d.parent]


def candidate_paths(current_dir: Path, home_dir: Path, default_path: Path) -> list[Path]:
    """List the locations searched for a configuration file, in priority order.

    Args:
        current_dir: Directory the search starts from
        home_dir: User home directory
        default_path: Bundled default configuration

    Returns:
        Candidate configuration file paths
    """
    candidates = [d / CONFIG_FILE_NAME for d in ancestors(Path(current_dir))]
    candidates.append(Path(home_dir) / CONFIG_FILE_NAME)
    candidates.append(Path(default_path))
    return candidates


def find_config_file(
    explicit_path: Path | str | None,
    current_dir: Path,
    home_dir: Path,
    default_path: Path,
    verbose: Verbose | None = None,
) -> Path | None:
    """Resolve the configuration file to load.

    A path given by the user is returned as is, without checking that it
    exists. Otherwise the candidates are probed in order and the first
    existing one wins.

    Args:
        explicit_path: Path given by the user, if any
        current_dir: Directory the search starts from
        home_dir: User home directory
        default_path: Bundled default configuration
        verbose: Sink receiving one line per probed candidate

    Returns:
        Configuration file path, or None if no candidate exists
    """
    if explicit_path is not None:
        return Path(explicit_path)

    for candidate in candidate_paths(current_dir, home_dir, default_path):
        exists = candidate.is_file()
        if verbose is not None:
            verbose(f"{candidate} {'exists' if exists else 'does not exist'}")
        if exists:
            return candidate

    return None


def config_file_path(
    verbose: Verbose | None = None,
    explicit_path: Path | str | None = None,
    *,
    current_dir: Path | str | None = None,
    home_dir: Path | str | None = None,
    default_path: Path | str | None = None,
) -> Path | None:
    """Resolve the configuration file.

    Search locations that are not given are taken from the process
    environment: the working directory, the user home directory and the
    bundled default configuration.
    """
    return find_config_file(
        explicit_path,
        current_dir=Path(current_dir) if current_dir is not None else Path.cwd(),
        home_dir=Path(home_dir) if home_dir is not None else Path.home(),
        default_path=(
            Path(default_path) if default_path is not None else default_config_file_path()
        ),
        verbose=verbose,
    )
