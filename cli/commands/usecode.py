"""
Usecode command - print The Player 6.1A usecode of modules.
"""

from pathlib import Path
from typing import List

import typer
from rich.console import Console

from cli.batch import BatchReport
from cli.context import get_config
from modtool.analysis.usecode import compute_usecode, format_usecode
from modtool.formats import detect_format, read_module

console = Console()
app = typer.Typer()


@app.command()
def usecode(
    ctx: typer.Context,
    files: List[Path] = typer.Argument(..., help="Module file(s)"),
    in_p61: bool = typer.Option(False, "--in-p61", help="Input files are The Player 6.1A"),
) -> None:
    """
    Show The Player 6.1A usecode of each file.

    Examples:

        modtool usecode song.mod

        modtool usecode *.mod
    """
    config = get_config(ctx)

    def process(path: Path) -> None:
        module = read_module(path, detect_format(path, in_p61))
        code = format_usecode(compute_usecode(module), width=8)
        if len(files) > 1:
            console.print(f"{path}: {code}")
        else:
            console.print(code)

    report = BatchReport(continue_on_error=config.continue_on_error).run(files, process)
    report.finish()


if __name__ == "__main__":
    app()
