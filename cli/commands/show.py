"""
Show command - display module information and statistics.
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from cli.batch import BatchReport
from cli.context import get_config
from cli.display.tables import (
    display_integrity_warnings,
    display_pattern_info,
    display_sample_info,
    display_sample_stats,
    display_summary,
)
from modtool.analysis.module_analyzer import ModuleAnalyzer
from modtool.formats import detect_format, read_module

console = Console()
app = typer.Typer()


@app.command()
def show(
    ctx: typer.Context,
    files: List[Path] = typer.Argument(..., help="Module file(s) to analyze"),
    summary: bool = typer.Option(False, "--summary", help="Show summary info"),
    sample_info: bool = typer.Option(False, "--sample-info", help="Show info about samples"),
    sample_stats: bool = typer.Option(False, "--sample-stats", help="Show sample statistics"),
    pattern_info: bool = typer.Option(False, "--pattern-info", help="Show info about patterns"),
    use_spn: Optional[bool] = typer.Option(
        None,
        "--use-spn/--no-spn",
        help="Use scientific pitch notation where middle C is C4",
    ),
    in_p61: bool = typer.Option(False, "--in-p61", help="Input files are The Player 6.1A"),
) -> None:
    """
    Show various info and statistics.

    Without any --summary/--sample-info/--sample-stats/--pattern-info
    flag, only the summary is shown.

    Examples:

        modtool show song.mod

        modtool show --pattern-info --use-spn song.mod

        modtool show --sample-stats *.mod
    """
    config = get_config(ctx)
    if use_spn is None:
        use_spn = config.use_spn

    if not (summary or sample_info or sample_stats or pattern_info):
        summary = True

    analyzer = ModuleAnalyzer(use_spn=use_spn)

    def process(path: Path) -> None:
        module = read_module(path, detect_format(path, in_p61))
        console.print(f"[bold]Processing:[/bold] {path}")

        analysis = analyzer.analyze(module)

        if summary:
            display_summary(analysis)
        if sample_info:
            display_sample_info(analysis)
        if sample_stats:
            display_sample_stats(analysis)
        if pattern_info:
            display_pattern_info(analysis)

        display_integrity_warnings(analysis.warnings)

    report = BatchReport(continue_on_error=config.continue_on_error).run(files, process)
    report.finish()


if __name__ == "__main__":
    app()
