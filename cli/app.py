"""
modtool - edit and analyze tracker modules.

A command line tool for cleaning up, merging, annotating and inspecting
ProTracker style modules.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from cli.commands.show import show
from cli.commands.save import save
from cli.commands.convert import convert
from cli.commands.merge import merge
from cli.commands.insert import insert
from cli.commands.usecode import usecode
from cli.context import set_config
from modtool import __version__
from modtool.config import CONFIG_ENV_VAR, ToolConfig
from modtool.utils.validation import ValidationError

console = Console()
err_console = Console(stderr=True)

# Main app
app = typer.Typer(
    name="modtool",
    help="Edit and analyze tracker modules.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="show")(show)
app.command(name="save")(save)
app.command(name="convert")(convert)
app.command(name="merge")(merge)
app.command(name="insert")(insert)
app.command(name="usecode")(usecode)


def setup_logging(verbose: bool = False) -> None:
    """Send library log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, markup=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]modtool[/bold] version {__version__}")
    console.print("[dim]Edit and analyze tracker modules[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug log messages"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", envvar=CONFIG_ENV_VAR, help="JSON config file"
    ),
) -> None:
    """
    modtool - edit and analyze tracker modules.

    Works on [cyan]ProTracker[/cyan] (.mod), [cyan]The Player 6.1A[/cyan] (.p61)
    and [cyan]JSON[/cyan] interchange (.json) modules.

    [bold]Analysis Commands:[/bold]

        modtool show --summary song.mod           # Song summary
        modtool show --pattern-info song.mod      # Play order, notes, effects
        modtool show --sample-stats song.mod      # Sample statistics
        modtool usecode song.mod                  # The Player usecode

    [bold]Editing Commands:[/bold]

        modtool convert --unused-patterns --unused-samples out song.mod
        modtool merge --sync merged.mod song.mod sync.mod
        modtool insert marked.mod song.mod
        modtool save --all smp song.mod

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    setup_logging(verbose)

    try:
        set_config(ctx, ToolConfig.load(config_path))
    except ValidationError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
