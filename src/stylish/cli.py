"""Stylish CLI - inspect stylish-haskell configuration."""

from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stylish import __version__
from stylish.config import (
    ConfigError,
    default_config_file_path,
    list_steps,
    load_config,
)
from stylish.config.document import config_to_document, step_to_document
from stylish.verbose import make_verbose

app = typer.Typer(
    name="stylish",
    help="Resolve and inspect stylish-haskell configuration.",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"stylish version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
):
    """Stylish - configuration loader for stylish-haskell."""
    pass


@app.command()
def show(
    config_path: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="Configuration file")
    ] = None,
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Verbose output")] = False,
    as_yaml: Annotated[bool, typer.Option("--yaml", help="Print as YAML")] = False,
):
    """Show the resolved configuration.

    Without --config, the configuration is searched in the current directory
    and its parents, then the home directory, then the bundled defaults.
    """
    try:
        config = load_config(make_verbose(verbose), config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_yaml:
        console.print(
            yaml.dump(config_to_document(config), default_flow_style=False, sort_keys=False),
            markup=False,
            end="",
        )
        return

    console.print(f"[bold]Columns:[/bold] {config.columns}")
    extensions = escape(", ".join(config.language_extensions)) or "none"
    console.print(f"[bold]Language extensions:[/bold] {extensions}")

    table = Table(title="Steps")
    table.add_column("#", justify="right")
    table.add_column("Step", style="cyan")
    table.add_column("Options")

    for i, step in enumerate(config.steps):
        options = step_to_document(step)[step.step]
        rendered = ", ".join(f"{key}={value}" for key, value in options.items())
        table.add_row(str(i + 1), step.step, rendered)

    console.print(table)


@app.command()
def defaults():
    """Print the bundled default configuration file."""
    console.print(default_config_file_path().read_text(), markup=False, end="")


@app.command()
def steps():
    """List available steps."""
    for name in list_steps():
        console.print(name)


if __name__ == "__main__":
    app()
