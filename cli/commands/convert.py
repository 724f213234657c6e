"""
Convert command - clean up modules and write them in another format.
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from cli.batch import BatchReport
from cli.context import get_config
from cli.display.formatters import format_index_list
from modtool.editing.prune import remove_unused_patterns, remove_unused_samples
from modtool.formats import ModuleFormat, detect_format, read_module, write_module

console = Console()
app = typer.Typer()


def output_path(path: Path, prefix: str, fmt: ModuleFormat, in_fmt: ModuleFormat) -> Path:
    """
    Name of the converted file: PREFIX_<filename> beside the input.

    The suffix is replaced when the output format differs from the input.
    """
    name = f"{prefix}_{path.name}"
    if fmt is not in_fmt:
        name = str(Path(name).with_suffix(fmt.suffix))
    return path.with_name(name)


def parse_format(value: Optional[str]) -> Optional[ModuleFormat]:
    """Format from a --to value or config setting, None to keep the input format."""
    if value is None:
        return None
    try:
        return ModuleFormat(value.lower().lstrip("."))
    except ValueError:
        choices = ", ".join(f.value for f in ModuleFormat)
        raise typer.BadParameter(f"Unknown format '{value}' (choose from {choices})")


@app.command()
def convert(
    ctx: typer.Context,
    prefix: str = typer.Argument(..., help="Prefix for output file names"),
    files: List[Path] = typer.Argument(..., help="Module file(s) to convert"),
    unused_patterns: bool = typer.Option(
        False, "--unused-patterns", help="Remove unused patterns"
    ),
    unused_samples: bool = typer.Option(False, "--unused-samples", help="Remove unused samples"),
    to: Optional[str] = typer.Option(None, "--to", help="Output format: mod, p61 or json"),
    in_p61: bool = typer.Option(False, "--in-p61", help="Input files are The Player 6.1A"),
) -> None:
    """
    Convert modules, optionally removing unused patterns and samples.

    Each FILE is written beside the input as PREFIX_<filename>.

    Examples:

        modtool convert --unused-patterns --unused-samples clean song.mod

        modtool convert --to json dump song.mod

        modtool convert --unused-samples --to mod out song.json
    """
    config = get_config(ctx)
    out_fmt = parse_format(to if to is not None else config.output_format)

    def process(path: Path) -> None:
        in_fmt = detect_format(path, in_p61)
        module = read_module(path, in_fmt)
        console.print(f"[bold]Processing:[/bold] {path}")

        if unused_patterns:
            removed = remove_unused_patterns(module)
            console.print(f"  Removed patterns: {format_index_list(removed)}")
        if unused_samples:
            removed = remove_unused_samples(module)
            console.print(f"  Removed samples: {format_index_list(removed)}")

        fmt = out_fmt or in_fmt
        target = output_path(path, prefix, fmt, in_fmt)
        options = config.json_options if fmt is ModuleFormat.JSON else {}
        write_module(module, target, fmt, **options)

        console.print(f"[green]Converted:[/green] {path} -> {target}")

    report = BatchReport(continue_on_error=config.continue_on_error).run(files, process)
    report.finish()


if __name__ == "__main__":
    app()
