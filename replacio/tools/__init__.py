from __future__ import annotations
from .matcher import MatchLine, fold, split_lines, find_matching_lines, text_search
from .replacer import ReplaceResult, NO_CHANGE, replace_all, text_replace
from .filesystem import list_files, read_file, write_file

__all__ = [
    "MatchLine", "fold", "split_lines", "find_matching_lines", "text_search",
    "ReplaceResult", "NO_CHANGE", "replace_all", "text_replace",
    "list_files", "read_file", "write_file",
]
