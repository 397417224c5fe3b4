from __future__ import annotations
import logging
from typing import List, Optional

import typer
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from .config import ConfigError, SearchConfig
from .reporting import Reporter
from .runtime import run as run_search

app = typer.Typer(add_completion=False)
console = Console(highlight=False, soft_wrap=True)


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def run(directory: str = typer.Argument(..., help="Root directory to scan"),
        query: str = typer.Argument(..., help="Text to find (plain substring)"),
        replacement: str = typer.Argument(..., help="Text to substitute, may be empty"),
        flags: Optional[List[str]] = typer.Argument(None, help="Trailing flags: ignore-case, dry"),
        ignore_case: bool = typer.Option(False, "--ignore-case", "-i", help="Case-insensitive matching (env: IGNORE_CASE)"),
        dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Report matches without writing (env: DRY)"),
        line_numbers: bool = typer.Option(False, "--line-numbers", help="Prefix matching lines with their line number"),
        debug: bool = typer.Option(False, help="Enable debug output")):
    configure_logging(debug)
    # IGNORE_CASE / DRY may come from a .env file
    load_dotenv(find_dotenv(usecwd=True))
    try:
        config = SearchConfig.build(directory, query, replacement,
                                    ignore_case=ignore_case, dry_run=dry_run, flags=flags or ())
    except ConfigError as e:
        console.print(Text(f"Problem parsing arguments: {e}", style="red"))
        raise typer.Exit(code=1)

    reporter = Reporter(console=console, line_numbers=line_numbers)
    reporter.header(config)
    summary = run_search(config, reporter)
    if not summary.ok:
        raise typer.Exit(code=1)


def main():
    app()


if __name__ == "__main__":
    main()
