"""Tests for line splitting and the line-level edit script."""

import pytest

from models.diff import ChangeKind
from services.line_differ import LineDiffer, split_lines, strip_newline


class TestSplitLines:
    """Tests for split_lines."""

    def test_empty_document(self):
        assert split_lines("") == []

    def test_no_trailing_newline(self):
        """No synthetic empty line at the end."""
        assert split_lines("a\nb") == ["a\n", "b"]

    def test_trailing_newline(self):
        assert split_lines("a\nb\n") == ["a\n", "b\n"]

    def test_blank_lines_preserved(self):
        assert split_lines("a\n\nb") == ["a\n", "\n", "b"]

    def test_only_newline(self):
        assert split_lines("\n") == ["\n"]

    def test_strip_newline(self):
        assert strip_newline("abc\n") == "abc"
        assert strip_newline("abc") == "abc"


class TestLineDiffer:
    """Tests for LineDiffer.diff."""

    @pytest.fixture
    def differ(self):
        return LineDiffer()

    def test_identical(self, differ):
        changes = differ.diff("a\nb", "a\nb")
        assert [c.kind for c in changes] == [ChangeKind.UNCHANGED]
        assert changes[0].lines == ["a\n", "b"]

    def test_deletion(self, differ):
        changes = differ.diff("a\nb\nc", "a\nc")
        assert [c.kind for c in changes] == [
            ChangeKind.UNCHANGED,
            ChangeKind.REMOVED,
            ChangeKind.UNCHANGED,
        ]
        assert changes[1].lines == ["b\n"]

    def test_insertion(self, differ):
        changes = differ.diff("a\nc", "a\nb\nc")
        assert [c.kind for c in changes] == [
            ChangeKind.UNCHANGED,
            ChangeKind.ADDED,
            ChangeKind.UNCHANGED,
        ]
        assert changes[1].lines == ["b\n"]

    def test_replacement_is_removed_then_added(self, differ):
        changes = differ.diff("a\nb", "a\nx")
        assert [c.kind for c in changes] == [
            ChangeKind.UNCHANGED,
            ChangeKind.REMOVED,
            ChangeKind.ADDED,
        ]
        assert changes[1].lines == ["b"]
        assert changes[2].lines == ["x"]

    def test_trailing_newline_only_difference(self, differ):
        """The last line differs by its terminator."""
        changes = differ.diff("a\nb", "a\nb\n")
        assert [c.kind for c in changes] == [
            ChangeKind.UNCHANGED,
            ChangeKind.REMOVED,
            ChangeKind.ADDED,
        ]

    @pytest.mark.parametrize(
        "baseline, working",
        [
            ("a\nb\nc", "a\nc"),
            ("one\ntwo\nthree\n", "zero\none\nTWO\nthree\nfour\n"),
            ("", "fresh\ncontent"),
            ("x\ny\nz", ""),
            ("{\n  \"a\": 1,\n  \"b\": 2\n}", "{\n  \"a\": 1,\n  \"c\": 3,\n  \"b\": 2\n}"),
        ],
    )
    def test_reconstructs_both_documents(self, differ, baseline, working):
        changes = differ.diff(baseline, working)
        old = "".join("".join(c.lines) for c in changes if c.kind != ChangeKind.ADDED)
        new = "".join("".join(c.lines) for c in changes if c.kind != ChangeKind.REMOVED)
        assert old == baseline
        assert new == working

    def test_no_adjacent_records_of_same_kind(self, differ):
        changes = differ.diff("a\nb\nc\nd", "x\nb\ny\nd\ne")
        kinds = [c.kind for c in changes]
        assert all(first != second for first, second in zip(kinds, kinds[1:]))

    def test_repeated_lines_not_treated_as_junk(self, differ):
        """Frequent lines in long documents still match."""
        baseline = "}\n" * 300 + "tail"
        working = "}\n" * 300 + "TAIL"
        changes = differ.diff(baseline, working)
        assert changes[0].kind == ChangeKind.UNCHANGED
        assert len(changes[0].lines) == 300
