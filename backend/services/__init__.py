"""Services module - Diff engine and workbench state"""

from .config_manager import ConfigManager
from .diff_generator import DiffGenerator, summarize
from .hunk_locator import HunkNavigator, clamp_cursor, locate_hunks, navigate
from .line_differ import LineDiffer, split_lines
from .row_aligner import RowAligner, compute_side_by_side_rows
from .word_differ import WordDiffer, tokenize
from .workbench_session import (
    SessionNotFoundError,
    SessionStore,
    WorkbenchSession,
    get_session_store,
    set_session_store,
)

__all__ = [
    "ConfigManager",
    "DiffGenerator",
    "summarize",
    "HunkNavigator",
    "clamp_cursor",
    "locate_hunks",
    "navigate",
    "LineDiffer",
    "split_lines",
    "RowAligner",
    "compute_side_by_side_rows",
    "WordDiffer",
    "tokenize",
    "SessionNotFoundError",
    "SessionStore",
    "WorkbenchSession",
    "get_session_store",
    "set_session_store",
]
