"""Shared fixtures for the diff workbench tests."""

import pytest

from models.diff import CellKind, DiffSegment, SideBySideRow, SideCell
from services.config_manager import ConfigManager


def context_row(line: int, text: str = "x") -> SideBySideRow:
    segments = [DiffSegment(text=text)]
    return SideBySideRow(
        left=SideCell(line_number=line, kind=CellKind.CONTEXT, segments=segments),
        right=SideCell(line_number=line, kind=CellKind.CONTEXT, segments=segments),
    )


def removed_row(line: int, text: str = "x") -> SideBySideRow:
    return SideBySideRow(
        left=SideCell(line_number=line, kind=CellKind.REMOVED, segments=[DiffSegment(text=text)]),
        right=SideCell.blank(),
    )


def added_row(line: int, text: str = "x") -> SideBySideRow:
    return SideBySideRow(
        left=SideCell.blank(),
        right=SideCell(line_number=line, kind=CellKind.ADDED, segments=[DiffSegment(text=text)]),
    )


def rebuild(cells: list[SideCell], reference: str) -> str:
    """Join non-blank cell texts back into a document shaped like reference."""
    text = "".join(cell.text + "\n" for cell in cells if not cell.is_blank)
    if not reference.endswith("\n"):
        text = text[:-1]
    return text


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the config singleton at a throwaway directory."""
    monkeypatch.setenv("DIFF_WORKBENCH_CONFIG_DIR", str(tmp_path))
    ConfigManager.reset_instance()
    yield tmp_path
    ConfigManager.reset_instance()
