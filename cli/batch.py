"""
Sequential processing of several module files.

Every file is processed on its own. A failure is recorded and, unless the
config says otherwise, the batch moves on to the next file. The command
exits non-zero if any file failed.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List

import typer
from rich.console import Console

from modtool.utils.validation import ModtoolError

console = Console()


@dataclass
class FileResult:
    """Outcome of processing one file."""

    path: Path
    ok: bool
    message: str = ""


@dataclass
class BatchReport:
    """Collected results of a batch run."""

    continue_on_error: bool = True
    results: List[FileResult] = field(default_factory=list)

    @property
    def failed(self) -> List[FileResult]:
        return [r for r in self.results if not r.ok]

    def run(self, files: Iterable[Path], action: Callable[[Path], None]) -> "BatchReport":
        """
        Apply an action to each file in order.

        Only modtool errors are caught; anything else is a bug and propagates.

        Args:
            files: Files to process
            action: Function called with each path

        Returns:
            self
        """
        for path in files:
            try:
                action(path)
            except ModtoolError as e:
                console.print(f"[red]Error: {e}[/red]")
                self.results.append(FileResult(path=path, ok=False, message=str(e)))
                if not self.continue_on_error:
                    console.print("[yellow]Stopping batch after first failure.[/yellow]")
                    break
            else:
                self.results.append(FileResult(path=path, ok=True))
        return self

    def finish(self) -> None:
        """
        Print a summary when files failed and exit non-zero.

        Raises:
            typer.Exit: If any file failed
        """
        failed = self.failed
        if not failed:
            return

        console.print()
        console.print(f"[red]{len(failed)} of {len(self.results)} file(s) failed:[/red]")
        for result in failed:
            console.print(f"[red]  - {result.path}: {result.message}[/red]")
        raise typer.Exit(1)
