"""
Row Aligner - Turn a line edit script into a gap-filled two-column grid
"""

from __future__ import annotations

from models.diff import (
    CellKind,
    ChangeKind,
    DiffSegment,
    LineChange,
    SideBySideRow,
    SideCell,
)

from .line_differ import LineDiffer, strip_newline
from .word_differ import WordDiffer


class RowAligner:
    """Build side-by-side rows from line change records"""

    def __init__(self, word_differ: WordDiffer | None = None, inline_highlight: bool = True):
        self.word_differ = word_differ or WordDiffer()
        self.inline_highlight = inline_highlight

    def align(self, changes: list[LineChange]) -> list[SideBySideRow]:
        rows: list[SideBySideRow] = []
        left_num = 1
        right_num = 1

        i = 0
        while i < len(changes):
            change = changes[i]

            # Modification: removed immediately followed by added
            if (
                change.kind == ChangeKind.REMOVED
                and i + 1 < len(changes)
                and changes[i + 1].kind == ChangeKind.ADDED
            ):
                removed = [strip_newline(line) for line in change.lines]
                added = [strip_newline(line) for line in changes[i + 1].lines]

                for j in range(max(len(removed), len(added))):
                    old_text = removed[j] if j < len(removed) else None
                    new_text = added[j] if j < len(added) else None
                    rows.append(self._modification_row(old_text, new_text, left_num, right_num))
                    if old_text is not None:
                        left_num += 1
                    if new_text is not None:
                        right_num += 1

                i += 2
                continue

            texts = [strip_newline(line) for line in change.lines]

            if change.kind == ChangeKind.ADDED:
                for text in texts:
                    rows.append(
                        SideBySideRow(
                            left=SideCell.blank(),
                            right=_cell(right_num, CellKind.ADDED, text),
                        )
                    )
                    right_num += 1
            elif change.kind == ChangeKind.REMOVED:
                for text in texts:
                    rows.append(
                        SideBySideRow(
                            left=_cell(left_num, CellKind.REMOVED, text),
                            right=SideCell.blank(),
                        )
                    )
                    left_num += 1
            else:
                for text in texts:
                    rows.append(
                        SideBySideRow(
                            left=_cell(left_num, CellKind.CONTEXT, text),
                            right=_cell(right_num, CellKind.CONTEXT, text),
                        )
                    )
                    left_num += 1
                    right_num += 1
            i += 1

        return rows

    def _modification_row(
        self,
        old_text: str | None,
        new_text: str | None,
        left_num: int,
        right_num: int,
    ) -> SideBySideRow:
        if old_text is not None and new_text is not None:
            if self.inline_highlight:
                left_segments, right_segments = self.word_differ.diff(old_text, new_text)
            else:
                left_segments, right_segments = _plain(old_text), _plain(new_text)
            return SideBySideRow(
                left=SideCell(line_number=left_num, kind=CellKind.REMOVED, segments=left_segments),
                right=SideCell(line_number=right_num, kind=CellKind.ADDED, segments=right_segments),
            )

        if old_text is not None:
            return SideBySideRow(
                left=_cell(left_num, CellKind.REMOVED, old_text),
                right=SideCell.blank(),
            )
        return SideBySideRow(
            left=SideCell.blank(),
            right=_cell(right_num, CellKind.ADDED, new_text),
        )


def _plain(text: str) -> list[DiffSegment]:
    # empty lines carry no segments, same as the word differ output
    return [DiffSegment(text=text, highlighted=False)] if text else []


def _cell(line_number: int, kind: CellKind, text: str) -> SideCell:
    return SideCell(line_number=line_number, kind=kind, segments=_plain(text))


def compute_side_by_side_rows(
    baseline: str,
    working: str,
    inline_highlight: bool = True,
) -> list[SideBySideRow]:
    """Rows for the two-column view; empty when there is no baseline or nothing changed"""
    if not baseline or baseline == working:
        return []

    changes = LineDiffer().diff(baseline, working)
    return RowAligner(inline_highlight=inline_highlight).align(changes)
