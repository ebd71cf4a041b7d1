"""Shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def messages():
    """Verbose sink collecting messages into a list."""

    class Sink(list):
        def __call__(self, message: str) -> None:
            self.append(message)

    return Sink()


@pytest.fixture
def write_config():
    """Write a configuration file and return its path."""

    def write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        return path

    return write
