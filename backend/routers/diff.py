"""Stateless diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter

from models.diff import DiffRequest, DiffResult, NavigateRequest, NavigationResult
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.hunk_locator import navigate

router = APIRouter()

_generator: DiffGenerator | None = None


def get_generator() -> DiffGenerator:
    """Shared generator built from the diff settings"""
    global _generator
    if _generator is None:
        _generator = DiffGenerator.from_settings(ConfigManager.get_instance().diff_settings())
    return _generator


def reset_generator() -> None:
    """Forget the shared generator so new settings take effect"""
    global _generator
    _generator = None


@router.post("", response_model=DiffResult)
async def compute_diff(request: DiffRequest) -> DiffResult:
    """Compare a baseline and a working document side by side"""
    return get_generator().generate_diff(request.baseline, request.working)


@router.post("/navigate", response_model=NavigationResult)
async def navigate_hunks(request: NavigateRequest) -> NavigationResult:
    """Move a caller-held cursor to the next or previous hunk"""
    return navigate(request.hunks, request.cursor, request.direction)
