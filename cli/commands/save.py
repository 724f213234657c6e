"""
Save command - write raw sample data to files.
"""

import re
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from cli.batch import BatchReport
from cli.context import get_config
from modtool.formats import detect_format, read_module
from modtool.models.module import Module
from modtool.utils.validation import (
    SampleNumberError,
    validate_sample_available,
    validate_sample_number,
)

console = Console()
app = typer.Typer()

# Characters not allowed in file names on common file systems
_UNSAFE_CHARS = re.compile(r'[\x00-\x1f\x7f/\\:*?"<>|]')


def sanitize_filename(name: str) -> str:
    """
    Make a sample name safe to use as a file name.

    Returns:
        Cleaned name, empty if nothing usable is left
    """
    cleaned = _UNSAFE_CHARS.sub("", name).strip().rstrip(".")
    if cleaned in (".", ".."):
        return ""
    return cleaned


def sample_filename(module: Module, index: int, prefix: str, use_sample_name: bool) -> str:
    """
    File name for a 0-based sample slot.

    Falls back to PREFIX_N.raw when the sample name is empty after cleaning.
    """
    if use_sample_name:
        name = sanitize_filename(module.sample_info[index].name)
        if name:
            return f"{name}.raw"
    return f"{prefix}_{index + 1}.raw"


def save_samples(
    module: Module,
    indices: List[int],
    prefix: str,
    output_dir: Path,
    use_sample_name: bool = False,
) -> int:
    """
    Write raw 8-bit signed sample data, one file per slot.

    Empty slots are skipped and existing files are never overwritten.

    Returns:
        Number of files written
    """
    written = 0
    for index in indices:
        si = module.sample_info[index]
        if not si.is_used:
            console.print(f"[dim]Skipping empty sample {index + 1} '{si.name}'[/dim]")
            continue

        target = output_dir / sample_filename(module, index, prefix, use_sample_name)
        try:
            with open(target, "xb") as f:
                f.write(bytes(si.data))
        except FileExistsError:
            console.print(f"[yellow]Not overwriting existing file: {target}[/yellow]")
            continue
        except OSError as e:
            console.print(f"[red]Failed to write sample {index + 1} to {target}: {e}[/red]")
            continue

        console.print(f"[green]Writing sample:[/green] {target} ({len(si.data)} bytes)")
        written += 1

    return written


@app.command()
def save(
    ctx: typer.Context,
    prefix: str = typer.Argument(..., help="Prefix for sample file names"),
    files: List[Path] = typer.Argument(..., help="Module file(s) to process"),
    number: Optional[int] = typer.Option(None, "--number", "-n", help="Save only sample NUMBER"),
    save_all: bool = typer.Option(False, "--all", help="Save all samples"),
    use_sample_name: bool = typer.Option(
        False, "--use-sample-name", help="Use sample name as file name, if valid"
    ),
    output_dir: Path = typer.Option(Path("."), "--output-dir", "-d", help="Directory for files"),
    in_p61: bool = typer.Option(False, "--in-p61", help="Input files are The Player 6.1A"),
) -> None:
    """
    Save samples as RAW 8-bit signed data.

    Examples:

        modtool save --all smp song.mod

        modtool save --number 3 smp song.mod

        modtool save --all --use-sample-name -d samples smp song.mod
    """
    if save_all == (number is not None):
        console.print("[red]Error: Use exactly one of --number or --all[/red]")
        raise typer.Exit(1)

    selected = None
    if number is not None:
        try:
            selected = validate_sample_number(number)
        except SampleNumberError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)

    output_dir.mkdir(parents=True, exist_ok=True)

    def process(path: Path) -> None:
        module = read_module(path, detect_format(path, in_p61))
        console.print(f"[bold]Processing:[/bold] {path}")

        if selected is None:
            indices = list(range(len(module.sample_info)))
        else:
            validate_sample_available(selected, len(module.sample_info))
            indices = [selected - 1]

        save_samples(module, indices, prefix, output_dir, use_sample_name)

    config = get_config(ctx)
    report = BatchReport(continue_on_error=config.continue_on_error).run(files, process)
    report.finish()


if __name__ == "__main__":
    app()
