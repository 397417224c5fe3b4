from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, TYPE_CHECKING

from .matcher import fold

if TYPE_CHECKING:
    from ..config import SearchConfig

"""
Replacer: substitute every non-overlapping occurrence of a query.

Occurrences are located in the original text only, left to right, so a
replacement that itself contains the query is never substituted again.
"""


@dataclass(frozen=True)
class ReplaceResult:
    changed: bool
    text: str = ""  # meaningful only when changed is True
    occurrences: int = 0


NO_CHANGE = ReplaceResult(changed=False)


def _check_query(query: str) -> None:
    if not query:
        raise ValueError("query must be non-empty")


def replace_case_sensitive(query: str, replacement: str, text: str) -> ReplaceResult:
    _check_query(query)
    count = text.count(query)
    if count == 0:
        return NO_CHANGE
    return ReplaceResult(changed=True, text=text.replace(query, replacement), occurrences=count)


def _fold_with_boundaries(text: str):
    """Fold text and map each scalar boundary in the folded copy back to the original.

    Returns (folded, boundaries) where boundaries[folded_offset] == original_index
    for every offset that starts an original scalar's expansion, plus the end.
    """
    parts: List[str] = []
    boundaries: Dict[int, int] = {}
    offset = 0
    for i, ch in enumerate(text):
        boundaries[offset] = i
        lowered = ch.lower()
        parts.append(lowered)
        offset += len(lowered)
    boundaries[offset] = len(text)
    return "".join(parts), boundaries


def replace_case_insensitive(query: str, replacement: str, text: str) -> ReplaceResult:
    _check_query(query)
    folded_query = fold(query)
    folded, boundaries = _fold_with_boundaries(text)
    if folded_query not in folded:
        return NO_CHANGE

    out: List[str] = []
    cursor = 0   # original scalar index, everything before it is already emitted
    search = 0   # folded offset to resume searching from
    occurrences = 0
    while True:
        pos = folded.find(folded_query, search)
        if pos < 0:
            break
        end = pos + len(folded_query)
        if pos not in boundaries or end not in boundaries:
            # match begins or ends inside one scalar's expansion
            search = pos + 1
            continue
        start_idx, end_idx = boundaries[pos], boundaries[end]
        assert cursor <= start_idx < end_idx, "cursor must strictly advance"
        out.append(text[cursor:start_idx])
        out.append(replacement)
        cursor = end_idx
        search = end
        occurrences += 1

    if occurrences == 0:
        return NO_CHANGE
    out.append(text[cursor:])
    return ReplaceResult(changed=True, text="".join(out), occurrences=occurrences)


def replace_all(query: str, replacement: str, text: str, ignore_case: bool = False) -> ReplaceResult:
    if ignore_case:
        return replace_case_insensitive(query, replacement, text)
    return replace_case_sensitive(query, replacement, text)


def text_replace(config: "SearchConfig", text: str) -> ReplaceResult:
    return replace_all(config.query, config.replacement, text, config.ignore_case)
