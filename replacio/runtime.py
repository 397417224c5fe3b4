from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .config import SearchConfig
from .reporting import Reporter
from .tools.filesystem import list_files, read_file, write_file
from .tools.matcher import MatchLine, text_search
from .tools.replacer import NO_CHANGE, ReplaceResult, text_replace

logger = logging.getLogger(__name__)


@dataclass
class FileOutcome:
    path: str
    matches: List[MatchLine]
    result: ReplaceResult = NO_CHANGE


@dataclass
class RunSummary:
    files_scanned: int = 0
    files_skipped: int = 0
    files_matched: int = 0
    updated: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def updated_count(self) -> int:
        return len(self.updated)

    @property
    def ok(self) -> bool:
        return not self.failed


def process_text(config: SearchConfig, text: str, path: str = "") -> FileOutcome:
    """Run the engine over one file's content. Never touches storage."""
    _, matches = text_search(config, text)
    if not config.operation_replace:
        return FileOutcome(path=path, matches=matches)
    return FileOutcome(path=path, matches=matches, result=text_replace(config, text))


def files_search_replace(config: SearchConfig, paths: Iterable[str],
                         reporter: Optional[Reporter] = None) -> RunSummary:
    summary = RunSummary()
    for path in paths:
        summary.files_scanned += 1
        try:
            contents = read_file(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Skipping %s: %s", path, e)
            summary.files_skipped += 1
            continue

        outcome = process_text(config, contents, path)
        if outcome.matches:
            summary.files_matched += 1
            if reporter:
                reporter.file_matches(path, outcome.matches)

        if not outcome.result.changed:
            continue
        try:
            write_file(path, outcome.result.text)
        except OSError as e:
            logger.error("Failed to write %s: %s", path, e)
            summary.failed.append(path)
            continue
        logger.debug("Updated %s (%d occurrences)", path, outcome.result.occurrences)
        summary.updated.append(path)

    if reporter:
        reporter.summary(summary, config)
    return summary


def run(config: SearchConfig, reporter: Optional[Reporter] = None) -> RunSummary:
    if not os.path.isdir(config.directory) and reporter:
        reporter.missing_directory(config.directory)
    paths = list_files(config.directory)
    return files_search_replace(config, paths, reporter)
