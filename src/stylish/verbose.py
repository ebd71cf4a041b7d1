"""Verbose output sink."""

from typing import Callable

from rich.console import Console

# Receives one human-readable line per call
Verbose = Callable[[str], None]

_stderr = Console(stderr=True)


def make_verbose(enabled: bool, console: Console | None = None) -> Verbose:
    """Create a verbose sink.

    Args:
        enabled: Whether messages should be shown at all
        console: Console to write to (default: stderr)

    Returns:
        Sink writing dimmed lines to the console, or one discarding them
    """
    if not enabled:
        return lambda message: None

    out = console or _stderr

    def verbose(message: str) -> None:
        out.print(message, style="dim", markup=False, highlight=False)

    return verbose
