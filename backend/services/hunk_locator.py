"""
Hunk Locator - Group changed rows into hunks and navigate between them
"""

from __future__ import annotations

from models.diff import DiffHunk, Direction, NavigationResult, SideBySideRow


def locate_hunks(rows: list[SideBySideRow]) -> list[DiffHunk]:
    """Find maximal runs of changed rows"""
    hunks: list[DiffHunk] = []
    in_hunk = False
    start = 0

    for index, row in enumerate(rows):
        changed = row.is_changed
        if changed and not in_hunk:
            in_hunk = True
            start = index
        elif not changed and in_hunk:
            in_hunk = False
            hunks.append(DiffHunk(start_index=start, end_index=index - 1))

    if in_hunk:
        hunks.append(DiffHunk(start_index=start, end_index=len(rows) - 1))

    return hunks


def clamp_cursor(cursor: int | None, hunk_count: int) -> int | None:
    """Keep a cursor valid after the hunk list changed; negative means no selection"""
    if cursor is None or cursor < 0 or hunk_count == 0:
        return None
    return min(cursor, hunk_count - 1)


def navigate(
    hunks: list[DiffHunk],
    cursor: int | None,
    direction: Direction,
) -> NavigationResult:
    """
    Step the cursor to the next or previous hunk, wrapping around.

    With no hunks the cursor stays unset and there is no target row.
    """
    count = len(hunks)
    if count == 0:
        return NavigationResult(cursor=None, target_row_index=None)

    current = clamp_cursor(cursor, count)
    if direction == Direction.NEXT:
        target = 0 if current is None or current >= count - 1 else current + 1
    else:
        target = count - 1 if current is None or current <= 0 else current - 1

    return NavigationResult(cursor=target, target_row_index=hunks[target].start_index)


class HunkNavigator:
    """Owns the current-hunk cursor for one row sequence"""

    def __init__(self, hunks: list[DiffHunk] | None = None):
        self.hunks: list[DiffHunk] = list(hunks or [])
        self.cursor: int | None = None

    def update(self, hunks: list[DiffHunk]) -> None:
        """Swap in a recomputed hunk list, clamping the cursor"""
        self.hunks = list(hunks)
        self.cursor = clamp_cursor(self.cursor, len(self.hunks))

    def reset(self) -> None:
        self.cursor = None

    def move(self, direction: Direction) -> NavigationResult:
        result = navigate(self.hunks, self.cursor, direction)
        self.cursor = result.cursor
        return result

    def next(self) -> NavigationResult:
        return self.move(Direction.NEXT)

    def previous(self) -> NavigationResult:
        return self.move(Direction.PREVIOUS)

    @property
    def active_hunk(self) -> DiffHunk | None:
        if self.cursor is None or self.cursor >= len(self.hunks):
            return None
        return self.hunks[self.cursor]

    def is_active_row(self, row_index: int) -> bool:
        hunk = self.active_hunk
        return hunk is not None and hunk.start_index <= row_index <= hunk.end_index
