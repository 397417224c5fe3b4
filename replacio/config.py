from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

# Trailing positional words accepted after DIRECTORY QUERY REPLACEMENT
FLAG_IGNORE_CASE = "ignore-case"
FLAG_DRY = "dry"
KNOWN_FLAGS = (FLAG_IGNORE_CASE, FLAG_DRY)

# Environment variables that switch a mode on when present (value is ignored)
ENV_IGNORE_CASE = "IGNORE_CASE"
ENV_DRY = "DRY"


class ConfigError(ValueError):
    """Invalid or incomplete configuration. Fatal to the whole run."""


@dataclass(frozen=True)
class SearchConfig:
    directory: str
    query: str
    replacement: str
    ignore_case: bool = False
    dry_run: bool = False

    @property
    def operation_replace(self) -> bool:
        return not self.dry_run

    @classmethod
    def build(cls, directory: str, query: Optional[str], replacement: Optional[str],
              ignore_case: bool = False, dry_run: bool = False,
              flags: Iterable[str] = (), env: Optional[Mapping[str, str]] = None) -> "SearchConfig":
        """Resolve flags, options and environment into one config.

        An explicitly enabled option always wins. The environment can only
        switch a mode on, never off.
        """
        if env is None:
            env = os.environ
        if query is None or replacement is None:
            raise ConfigError("not enough arguments")
        if query == "":
            raise ConfigError("query must not be empty")

        for flag in flags or ():
            if flag == FLAG_IGNORE_CASE:
                ignore_case = True
            elif flag == FLAG_DRY:
                dry_run = True
            else:
                raise ConfigError(f"unknown flag: {flag!r} (expected one of {', '.join(KNOWN_FLAGS)})")

        if not ignore_case and ENV_IGNORE_CASE in env:
            ignore_case = True
        if not dry_run and ENV_DRY in env:
            dry_run = True

        return cls(directory=directory or ".", query=query, replacement=replacement,
                   ignore_case=ignore_case, dry_run=dry_run)
