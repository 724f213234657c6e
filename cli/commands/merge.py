"""
Merge command - append the patterns of several modules to one.
"""

from pathlib import Path
from typing import List

import typer
from rich.console import Console

from cli.context import get_config
from modtool.editing.merge import merge_modules
from modtool.formats import ModuleFormat, detect_format, read_module, write_module
from modtool.utils.validation import ModtoolError

console = Console()
app = typer.Typer()


@app.command()
def merge(
    ctx: typer.Context,
    target: Path = typer.Argument(..., help="Output module file"),
    files: List[Path] = typer.Argument(..., help="Module files; the first one is the base"),
    sync: bool = typer.Option(
        False, "--sync", help="Keep only E8x, Bxx, Dxx and Fxx in merged patterns"
    ),
    in_p61: bool = typer.Option(False, "--in-p61", help="Input files are The Player 6.1A"),
) -> None:
    """
    Merge modules into TARGET.

    The first FILE is the base module. The patterns and play order of the
    other files are appended to it. With --sync the appended patterns keep
    only their sync effects, so a song can carry its own timing track.

    Examples:

        modtool merge merged.mod song.mod intro.mod

        modtool merge --sync synced.mod song.mod song.mod
    """
    config = get_config(ctx)

    try:
        base = read_module(files[0], detect_format(files[0], in_p61))
        sources = [read_module(path, detect_format(path, in_p61)) for path in files[1:]]

        merge_modules(base, sources, sync=sync)

        fmt = detect_format(target)
        options = config.json_options if fmt is ModuleFormat.JSON else {}
        write_module(base, target, fmt, **options)
    except ModtoolError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]Merged:[/green] {len(files)} file(s) -> {target} "
        f"({len(base.patterns)} patterns, length {base.length})"
    )


if __name__ == "__main__":
    app()
