"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class CellKind(str, Enum):
    """What one side of a row shows"""

    CONTEXT = "context"
    ADDED = "added"
    REMOVED = "removed"
    BLANK = "blank"


class ChangeKind(str, Enum):
    """Kind of a line-level change record"""

    UNCHANGED = "unchanged"
    REMOVED = "removed"
    ADDED = "added"


class Direction(str, Enum):
    """Hunk navigation direction"""

    NEXT = "next"
    PREVIOUS = "previous"


class DiffSegment(BaseModel):
    """A run of characters inside one cell"""

    text: str
    highlighted: bool = False


class SideCell(BaseModel):
    """One cell in the side-by-side grid"""

    line_number: int | None = None  # None only for blank filler cells
    kind: CellKind
    segments: list[DiffSegment] = []

    @classmethod
    def blank(cls) -> SideCell:
        return cls(line_number=None, kind=CellKind.BLANK, segments=[])

    @property
    def is_blank(self) -> bool:
        return self.kind == CellKind.BLANK

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)


class SideBySideRow(BaseModel):
    """One horizontal row with a left and a right cell"""

    left: SideCell
    right: SideCell

    @property
    def is_changed(self) -> bool:
        return self.left.kind != CellKind.CONTEXT or self.right.kind != CellKind.CONTEXT


class LineChange(BaseModel):
    """A block of lines from the line-level edit script"""

    kind: ChangeKind
    lines: list[str]  # each line keeps its trailing newline, if it had one


class DiffHunk(BaseModel):
    """A contiguous run of changed rows"""

    start_index: int  # inclusive
    end_index: int  # inclusive

    @property
    def size(self) -> int:
        return self.end_index - self.start_index + 1


class DiffSummary(BaseModel):
    """Counts shown next to the comparison view"""

    added_count: int = 0
    removed_count: int = 0
    has_changes: bool = False
    hunk_count: int = 0
    row_count: int = 0


class DiffResult(BaseModel):
    """Complete side-by-side comparison of two documents"""

    rows: list[SideBySideRow]
    hunks: list[DiffHunk]
    summary: DiffSummary


class NavigationResult(BaseModel):
    """Cursor after a navigation step and the row to scroll to"""

    cursor: int | None = None  # None means no selection
    target_row_index: int | None = None


class DiffRequest(BaseModel):
    """Request for a stateless comparison"""

    baseline: str
    working: str


class NavigateRequest(BaseModel):
    """Request for a stateless navigation step"""

    hunks: list[DiffHunk]
    cursor: int | None = Field(default=None, ge=0)
    direction: Direction
