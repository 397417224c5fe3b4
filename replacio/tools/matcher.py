from __future__ import annotations
from typing import List, NamedTuple, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import SearchConfig

"""
Matcher: line-level substring search.

Case folding is the full lowercase mapping applied one scalar at a time, so
fold(a + b) == fold(a) + fold(b). It is not length-preserving for every
scalar: U+0130 (LATIN CAPITAL LETTER I WITH DOT ABOVE) folds to two.
"""


class MatchLine(NamedTuple):
    number: int  # 1-based
    text: str


def fold(text: str) -> str:
    # per-scalar on purpose: str.lower() applies the final-sigma context rule
    return "".join(ch.lower() for ch in text)


def split_lines(text: str) -> List[str]:
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def search_case_sensitive(query: str, text: str) -> List[MatchLine]:
    return [MatchLine(i, line) for i, line in enumerate(split_lines(text), 1) if query in line]


def search_case_insensitive(query: str, text: str) -> List[MatchLine]:
    folded_query = fold(query)
    return [MatchLine(i, line) for i, line in enumerate(split_lines(text), 1)
            if folded_query in fold(line)]


def find_matching_lines(query: str, text: str, ignore_case: bool = False) -> List[MatchLine]:
    if ignore_case:
        return search_case_insensitive(query, text)
    return search_case_sensitive(query, text)


def text_search(config: "SearchConfig", text: str) -> Tuple[bool, List[MatchLine]]:
    results = find_matching_lines(config.query, text, config.ignore_case)
    return bool(results), results
