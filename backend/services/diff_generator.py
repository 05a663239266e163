"""
Diff Generator Service - Side-by-side comparison of a baseline and a working document
"""

from __future__ import annotations

import logging
from collections import OrderedDict

from models.diff import CellKind, DiffHunk, DiffResult, DiffSummary, SideBySideRow

from .hunk_locator import locate_hunks
from .row_aligner import compute_side_by_side_rows

logger = logging.getLogger(__name__)


def summarize(rows: list[SideBySideRow], hunks: list[DiffHunk]) -> DiffSummary:
    """Derived counts for the comparison view"""
    return DiffSummary(
        added_count=sum(1 for row in rows if row.right.kind == CellKind.ADDED),
        removed_count=sum(1 for row in rows if row.left.kind == CellKind.REMOVED),
        has_changes=any(row.is_changed for row in rows),
        hunk_count=len(hunks),
        row_count=len(rows),
    )


class DiffGenerator:
    """Generate side-by-side diffs, memoized on the (baseline, working) pair"""

    def __init__(self, inline_highlight: bool = True, cache_size: int = 64):
        self.inline_highlight = inline_highlight
        self.cache_size = max(0, cache_size)
        self._cache: OrderedDict[tuple[str, str], DiffResult] = OrderedDict()

    @classmethod
    def from_settings(cls, settings: dict) -> "DiffGenerator":
        """Build from the "diff" section of the backend config"""
        return cls(
            inline_highlight=bool(settings.get("inlineHighlight", True)),
            cache_size=int(settings.get("cacheSize", 64)),
        )

    def generate_diff(self, baseline: str, working: str) -> DiffResult:
        """Rows, hunks and summary for two documents"""
        key = (baseline, working)
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            return cached

        rows = compute_side_by_side_rows(baseline, working, self.inline_highlight)
        hunks = locate_hunks(rows)
        result = DiffResult(rows=rows, hunks=hunks, summary=summarize(rows, hunks))

        logger.debug(
            "Diff computed: %d rows, %d hunks (+%d, -%d)",
            len(rows),
            len(hunks),
            result.summary.added_count,
            result.summary.removed_count,
        )

        if self.cache_size:
            self._cache[key] = result
            if len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)

        return result

    def clear_cache(self) -> None:
        self._cache.clear()

    @property
    def cache_len(self) -> int:
        return len(self._cache)
