"""
Insert command - put an E81 sync marker into every pattern.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.context import get_config
from cli.display.tables import display_marker_reports
from modtool.editing.marker import insert_markers
from modtool.formats import ModuleFormat, detect_format, read_module, write_module
from modtool.utils.validation import ModtoolError

console = Console()
app = typer.Typer()


@app.command()
def insert(
    ctx: typer.Context,
    target: Path = typer.Argument(..., help="Output module file"),
    file: Path = typer.Argument(..., help="Module file to mark"),
    in_p61: bool = typer.Option(False, "--in-p61", help="Input file is The Player 6.1A"),
) -> None:
    """
    Insert E81 into patterns that have no E8x command yet.

    The marker goes into the first cell without an effect. Patterns with
    no free cell are reported and left unchanged; the module is still
    written.

    Examples:

        modtool insert marked.mod song.mod
    """
    config = get_config(ctx)

    try:
        module = read_module(file, detect_format(file, in_p61))
        reports = insert_markers(module)

        fmt = detect_format(target)
        options = config.json_options if fmt is ModuleFormat.JSON else {}
        write_module(module, target, fmt, **options)
    except ModtoolError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    display_marker_reports(module, reports)
    console.print(f"[green]Written:[/green] {target}")


if __name__ == "__main__":
    app()
