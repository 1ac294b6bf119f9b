"""create-my-internet CLI entry point."""

import typer

from create_internet.cli.create_cmd import create

app = typer.Typer(
    name="create-my-internet",
    help="Bootstrap a new internetdata project",
    add_completion=False,
)

app.command()(create)
