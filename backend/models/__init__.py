"""Models module - Pydantic data models"""

from .diff import (
    CellKind,
    ChangeKind,
    DiffHunk,
    DiffRequest,
    DiffResult,
    DiffSegment,
    DiffSummary,
    Direction,
    LineChange,
    NavigateRequest,
    NavigationResult,
    SideBySideRow,
    SideCell,
)
from .workbench import (
    DocumentUpdateRequest,
    SessionCreateRequest,
    SessionEvent,
    SessionNavigateRequest,
    SessionState,
)

__all__ = [
    # Diff models
    "CellKind",
    "ChangeKind",
    "DiffHunk",
    "DiffRequest",
    "DiffResult",
    "DiffSegment",
    "DiffSummary",
    "Direction",
    "LineChange",
    "NavigateRequest",
    "NavigationResult",
    "SideBySideRow",
    "SideCell",
    # Workbench models
    "DocumentUpdateRequest",
    "SessionCreateRequest",
    "SessionEvent",
    "SessionNavigateRequest",
    "SessionState",
]
