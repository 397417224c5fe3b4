"""Console output for matches and run summaries (rich)."""
from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Sequence

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from .config import SearchConfig
    from .runtime import RunSummary
    from .tools.matcher import MatchLine


class Reporter:
    def __init__(self, console: Optional[Console] = None, line_numbers: bool = False) -> None:
        self.console: Console = console or Console(highlight=False, soft_wrap=True)
        self.line_numbers = line_numbers

    def header(self, config: "SearchConfig") -> None:
        self.console.print(Text(f'From directory "{config.directory}"'))
        self.console.print(Text(f'Searching for "{config.query}"'))
        self.console.print(Text(f'Replacing with "{config.replacement}"'))
        modes = [name for name, on in (("ignore-case", config.ignore_case), ("dry", config.dry_run)) if on]
        if modes:
            self.console.print(f"[dim]Modes: {', '.join(modes)}[/dim]")

    def missing_directory(self, directory: str) -> None:
        self.console.print(Text(f'"{directory}" is not a directory. Correct the path?', style="yellow"))

    def file_matches(self, path: str, matches: Sequence["MatchLine"]) -> None:
        self.console.print()
        self.console.print(Text(f'Matches in "{path}":', style="bold"))
        for m in matches:
            prefix = f"{m.number}: " if self.line_numbers else ""
            # Text() keeps file content out of markup parsing
            self.console.print(Text(f'- {prefix}"{m.text}"'))

    def summary(self, summary: "RunSummary", config: "SearchConfig") -> None:
        if config.dry_run:
            self.console.print()
            self.console.print(f"[dim]Dry run: {summary.files_matched} of {summary.files_scanned} files matched, nothing written[/dim]")
            return
        self.console.print()
        self.console.print(f"Updated {summary.updated_count} files")
        if summary.failed:
            self.console.print(f"[red]Failed to write {len(summary.failed)} files:[/red]")
            for path in summary.failed:
                self.console.print(Text(f"  {path}", style="red"))
