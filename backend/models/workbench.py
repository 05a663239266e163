"""Workbench session data models"""

from __future__ import annotations

from pydantic import BaseModel

from .diff import DiffHunk, DiffSummary, Direction


class SessionCreateRequest(BaseModel):
    """Request to open a comparison session"""

    baseline: str = ""
    working: str = ""


class DocumentUpdateRequest(BaseModel):
    """Replace one of the two documents"""

    text: str


class SessionNavigateRequest(BaseModel):
    """Move the session's hunk cursor"""

    direction: Direction


class SessionState(BaseModel):
    """Snapshot of a session (documents, hunks and cursor)"""

    session_id: str
    baseline: str
    working: str
    has_baseline: bool
    hunks: list[DiffHunk]
    summary: DiffSummary
    cursor: int | None = None
    active_hunk: DiffHunk | None = None


class SessionEvent(BaseModel):
    """Notification pushed to session subscribers"""

    type: str  # "diff", "navigate", "closed"
    session_id: str
    state: SessionState | None = None
