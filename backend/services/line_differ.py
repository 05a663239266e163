"""
Line Differ - Line-level edit script between two documents
"""

from __future__ import annotations

from difflib import SequenceMatcher

from models.diff import ChangeKind, LineChange


def split_lines(text: str) -> list[str]:
    """Split on newlines, keeping each line's terminator.

    A document without a trailing newline yields no empty final line,
    and the empty document yields no lines at all.
    """
    if not text:
        return []

    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


class LineDiffer:
    """Compute unchanged/removed/added line blocks"""

    def diff(self, baseline: str, working: str) -> list[LineChange]:
        """Edit script whose unchanged+removed lines rebuild baseline and unchanged+added rebuild working"""
        original = split_lines(baseline)
        modified = split_lines(working)

        # autojunk would treat frequent lines (braces, blank lines) as junk
        matcher = SequenceMatcher(None, original, modified, autojunk=False)
        changes: list[LineChange] = []

        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                self._append(changes, ChangeKind.UNCHANGED, original[i1:i2])
            elif tag == "delete":
                self._append(changes, ChangeKind.REMOVED, original[i1:i2])
            elif tag == "insert":
                self._append(changes, ChangeKind.ADDED, modified[j1:j2])
            else:
                # replace: removed block first, then its replacement
                self._append(changes, ChangeKind.REMOVED, original[i1:i2])
                self._append(changes, ChangeKind.ADDED, modified[j1:j2])

        return changes

    @staticmethod
    def _append(changes: list[LineChange], kind: ChangeKind, lines: list[str]) -> None:
        if not lines:
            return
        if changes and changes[-1].kind == kind:
            changes[-1].lines.extend(lines)
            return
        changes.append(LineChange(kind=kind, lines=list(lines)))
