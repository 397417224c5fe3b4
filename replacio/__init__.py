from .config import SearchConfig, ConfigError
from .tools import MatchLine, ReplaceResult, find_matching_lines, replace_all
from .runtime import RunSummary, run

__all__ = ["SearchConfig", "ConfigError", "MatchLine", "ReplaceResult",
           "find_matching_lines", "replace_all", "RunSummary", "run"]
