"""fieldext CLI - Typer-based command line interface."""

from typing import Annotated

import typer
from rich.console import Console

from fieldext.cli.commands import list_extenders_command, replay_command
from fieldext.cli.context import CLIContext

app = typer.Typer(
    name="fieldext",
    help="fieldext: field extender pipelines for undo/redo history state",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose output")
    ] = False,
):
    """
    fieldext CLI callback - sets up context for all commands.

    Commands reach the shared CLIContext through ctx.obj.
    """
    ctx.obj = CLIContext(console=console, verbose=verbose)


app.command(name="extenders")(list_extenders_command)
app.command(name="replay")(replay_command)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
