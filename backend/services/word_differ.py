"""
Word Differ - Inline highlighting for a removed/added line pair
"""

from __future__ import annotations

import re

from models.diff import DiffSegment

# Runs of word characters, runs of whitespace, or one punctuation character
TOKEN_PATTERN = re.compile(r"\w+|\s+|[^\w\s]")


def tokenize(line: str) -> list[str]:
    """Split a line into tokens that concatenate back to the line"""
    return TOKEN_PATTERN.findall(line)


def lcs_script(old: list[str], new: list[str]) -> list[tuple[str, int, int]]:
    """
    Minimal edit script between two token lists.

    Returns ("equal", i, j), ("delete", i, -1) and ("insert", -1, j) steps in
    order. Matches are taken as early as possible and deletions come before
    insertions, so matched runs are the leftmost ones among equally long
    common subsequences.
    """
    n, m = len(old), len(new)

    prefix = 0
    while prefix < n and prefix < m and old[prefix] == new[prefix]:
        prefix += 1
    suffix = 0
    while suffix < n - prefix and suffix < m - prefix and old[n - 1 - suffix] == new[m - 1 - suffix]:
        suffix += 1

    a = old[prefix:n - suffix]
    b = new[prefix:m - suffix]

    # lengths[i][j] = LCS length of a[i:] and b[j:]
    lengths = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) - 1, -1, -1):
        row, below = lengths[i], lengths[i + 1]
        for j in range(len(b) - 1, -1, -1):
            if a[i] == b[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])

    script = [("equal", k, k) for k in range(prefix)]
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] == b[j]:
            script.append(("equal", prefix + i, prefix + j))
            i += 1
            j += 1
        elif lengths[i + 1][j] >= lengths[i][j + 1]:
            script.append(("delete", prefix + i, -1))
            i += 1
        else:
            script.append(("insert", -1, prefix + j))
            j += 1
    script.extend(("delete", prefix + k, -1) for k in range(i, len(a)))
    script.extend(("insert", -1, prefix + k) for k in range(j, len(b)))
    script.extend(("equal", n - suffix + k, m - suffix + k) for k in range(suffix))
    return script


class WordDiffer:
    """Token-level diff of two single lines"""

    def diff(self, old_line: str, new_line: str) -> tuple[list[DiffSegment], list[DiffSegment]]:
        """
        Diff two lines word by word.

        Returns (left_segments, right_segments): the left side carries the
        tokens of old_line with those missing from new_line highlighted, the
        right side carries the tokens of new_line with those missing from
        old_line highlighted.
        """
        old_tokens = tokenize(old_line)
        new_tokens = tokenize(new_line)

        left: list[DiffSegment] = []
        right: list[DiffSegment] = []

        for tag, i, j in lcs_script(old_tokens, new_tokens):
            if tag == "equal":
                self._append(left, old_tokens[i], False)
                self._append(right, new_tokens[j], False)
            elif tag == "delete":
                self._append(left, old_tokens[i], True)
            else:
                self._append(right, new_tokens[j], True)

        return left, right

    @staticmethod
    def _append(segments: list[DiffSegment], text: str, highlighted: bool) -> None:
        if not text:
            return
        if segments and segments[-1].highlighted == highlighted:
            segments[-1].text += text
            return
        segments.append(DiffSegment(text=text, highlighted=highlighted))
