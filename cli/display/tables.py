"""
Rich table displays for module information.

Provides formatted output for the show, insert and batch reports.
"""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cli.display.formatters import (
    format_cell,
    format_finetune,
    format_index_list,
    slot_bar,
    volume_bar,
)
from modtool.analysis.module_analyzer import ModuleAnalysis
from modtool.analysis.usage import IntegrityWarning
from modtool.analysis.usecode import format_usecode
from modtool.editing.marker import MarkerReport, MarkerResult
from modtool.models.module import Module
from modtool.utils.stats import Stats

console = Console()


def display_summary(analysis: ModuleAnalysis) -> None:
    """Display the song summary panel."""
    content = f"""[bold]Songname:[/bold] {analysis.name or "N/A"}
[bold]Length:[/bold] {analysis.length}
[bold]Samples with length > 0:[/bold] {analysis.num_used_samples}
[bold]Patterns:[/bold] {analysis.num_patterns}
[bold]Channels:[/bold] {analysis.num_channels}
[bold]Sample slots used:[/bold] {slot_bar(analysis.num_used_samples, analysis.num_samples)}"""

    console.print(
        Panel(
            content,
            title="[bold blue]Song Summary[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def display_sample_info(analysis: ModuleAnalysis) -> None:
    """Display header details of every sample slot."""
    table = Table(title="Samples", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=3)
    table.add_column("Name", style="cyan", width=22)
    table.add_column("Length", justify="right")
    table.add_column("Finetune", justify="right")
    table.add_column("Volume", width=22)
    table.add_column("Repeat start", justify="right")
    table.add_column("Repeat length", justify="right")

    for sample in analysis.samples:
        style = None if sample.length > 0 else "dim"
        table.add_row(
            str(sample.number),
            sample.name,
            f"{sample.length}b",
            format_finetune(sample.finetune),
            volume_bar(sample.volume),
            f"{sample.repeat_start}b",
            f"{sample.repeat_length}b",
            style=style,
        )

    console.print(table)


def _stats_row(table: Table, name: str, stats: Optional[Stats]) -> None:
    if stats is None:
        table.add_row(name, "-", "-", "-")
    else:
        table.add_row(name, str(stats.min), str(stats.max), str(stats.average))


def display_sample_stats(analysis: ModuleAnalysis) -> None:
    """Display statistics over the used samples."""
    stats = analysis.sample_stats

    table = Table(
        title="Sample Statistics", box=box.ROUNDED, show_header=True, header_style="bold green"
    )
    table.add_column("Field", style="cyan", width=14)
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("Avg", justify="right")

    _stats_row(table, "Length", stats.length if stats else None)
    _stats_row(table, "Finetune", stats.finetune if stats else None)
    _stats_row(table, "Volume", stats.volume if stats else None)
    _stats_row(table, "Repeat start", stats.repeat_start if stats else None)
    _stats_row(table, "Repeat length", stats.repeat_length if stats else None)

    console.print(table)
    console.print(f"[bold]Unused samples:[/bold] {format_index_list(analysis.unused_samples)}")
    console.print()


def display_pattern_info(analysis: ModuleAnalysis) -> None:
    """Display play order, pattern usage, used periods and effects."""
    order_table = Table(title="Pattern Info", box=box.SIMPLE, show_header=False)
    order_table.add_column("Property", style="cyan", width=20)
    order_table.add_column("Value")

    order_table.add_row("Pattern play order", format_index_list(analysis.play_order))
    order_table.add_row("Unused patterns", format_index_list(analysis.unused_patterns))
    order_table.add_row("Empty patterns", format_index_list(analysis.empty_patterns))
    console.print(order_table)

    period_table = Table(
        title="Used Periods", box=box.ROUNDED, show_header=True, header_style="bold yellow"
    )
    period_table.add_column("Period", justify="right")
    period_table.add_column("Note", width=6)
    period_table.add_column("Count", justify="right")

    for usage in analysis.used_periods:
        note = usage.label or "[red]?[/red]"
        period_table.add_row(str(usage.period), note, str(usage.count))

    if analysis.used_periods:
        console.print(period_table)
    else:
        console.print("[dim]No periods used.[/dim]")

    effect_table = Table(
        title="Used Effects", box=box.ROUNDED, show_header=True, header_style="bold yellow"
    )
    effect_table.add_column("Bit", justify="right", style="dim")
    effect_table.add_column("Effect", style="cyan")

    for effect in analysis.used_effects:
        bit = 8 if effect.index == 0 else effect.index
        effect_table.add_row(str(bit), effect.name)

    if analysis.used_effects:
        console.print(effect_table)
    else:
        console.print("[dim]No effects used.[/dim]")

    console.print(f"[bold]The Player usecode:[/bold] {format_usecode(analysis.usecode)}")
    console.print()


def display_integrity_warnings(warnings: List[IntegrityWarning], limit: int = 20) -> None:
    """Display invalid sample references found while scanning."""
    if not warnings:
        return

    console.print(f"[yellow]{len(warnings)} invalid sample reference(s):[/yellow]")
    for warning in warnings[:limit]:
        console.print(f"[yellow]  - {warning}[/yellow]")
    if len(warnings) > limit:
        console.print(f"[dim](Showing first {limit} of {len(warnings)})[/dim]")


def display_marker_reports(module: Module, reports: List[MarkerReport]) -> None:
    """Display the outcome of inserting E81 markers."""
    table = Table(title="E8x Markers", box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Pattern", justify="right", width=8)
    table.add_column("Result", width=16)
    table.add_column("Cell")

    for report in reports:
        if report.result is MarkerResult.INSERTED:
            cell = module.patterns[report.pattern].cell(report.row, report.channel)
            table.add_row(
                str(report.pattern),
                "[green]inserted[/green]",
                f"row {report.row} ch {report.channel}: {format_cell(cell)}",
            )
        elif report.result is MarkerResult.ALREADY_PRESENT:
            table.add_row(str(report.pattern), "[dim]has E8x[/dim]", "")
        else:
            table.add_row(str(report.pattern), "[red]no free cell[/red]", "")

    console.print(table)

    failed = [r.pattern for r in reports if not r.result.ok]
    if failed:
        console.print(
            f"[yellow]Failed to add E8x to pattern(s): {format_index_list(failed)}[/yellow]"
        )
