"""create-my-internet command.

Interactive only: every choice is made through prompts. The project is
created in the current directory.
"""

from __future__ import annotations

from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console

from create_internet import __version__
from create_internet.logging import configure_logging, get_logger
from create_internet.models.config import load_settings
from create_internet.probe import EnvironmentProbe
from create_internet.prompting import PromptAbortedError, Prompter
from create_internet.runner import CommandFailedError, SubprocessRunner
from create_internet.scaffold.materializer import ProjectExistsError
from create_internet.wizard import PackageManagerNotFoundError, run_bootstrap

console = Console()
logger = get_logger("cli")

# Failures that end the run with a diagnostic instead of a traceback
FATAL_ERRORS: tuple[type[Exception], ...] = (
    PackageManagerNotFoundError,
    ProjectExistsError,
    CommandFailedError,
    PromptAbortedError,
    OSError,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"create-my-internet {__version__}")
        raise typer.Exit()


def create(
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Show debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Create a new internetdata project interactively."""
    configure_logging(verbose=verbose)

    try:
        settings = load_settings()
    except (OSError, ValidationError, yaml.YAMLError) as e:
        typer.echo(f"Error: could not load settings: {e}", err=True)
        raise typer.Exit(code=1)

    if console.is_terminal:
        console.clear()

    try:
        run_bootstrap(
            Prompter(console=console),
            EnvironmentProbe(settings),
            SubprocessRunner(),
            settings,
            Path.cwd(),
        )
    except FATAL_ERRORS as e:
        logger.debug("Run aborted", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        typer.echo("\nCancelled.", err=True)
        raise typer.Exit(code=1)
