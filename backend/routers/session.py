"""Workbench session API endpoints"""

from __future__ import annotations

import asyncio
from typing import Callable

from fastapi import APIRouter, HTTPException
from sse_starlette.sse import EventSourceResponse

from models.diff import DiffResult, NavigationResult
from models.workbench import (
    DocumentUpdateRequest,
    SessionCreateRequest,
    SessionEvent,
    SessionNavigateRequest,
    SessionState,
)
from services.config_manager import ConfigManager
from services.workbench_session import SessionNotFoundError, WorkbenchSession, get_session_store

router = APIRouter()


def bounded_listener(queue: asyncio.Queue) -> Callable[[SessionEvent], None]:
    """Queue events for one subscriber, dropping the oldest when it falls behind"""

    def push(event: SessionEvent) -> None:
        # every event carries a full snapshot, so older ones are superseded
        if queue.full():
            queue.get_nowait()
        queue.put_nowait(event)

    return push


def get_session(session_id: str) -> WorkbenchSession:
    """Look up a session or answer 404"""
    try:
        return get_session_store().get(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")


@router.post("", response_model=SessionState, status_code=201)
async def create_session(request: SessionCreateRequest) -> SessionState:
    """Open a new comparison session"""
    session = get_session_store().create(request.baseline, request.working)
    return session.snapshot()


@router.get("/{session_id}", response_model=SessionState)
async def get_session_state(session_id: str) -> SessionState:
    """Current documents, hunks and cursor"""
    return get_session(session_id).snapshot()


@router.delete("/{session_id}")
async def delete_session(session_id: str) -> dict[str, str]:
    """Close a session"""
    get_session(session_id)
    get_session_store().delete(session_id)
    return {"status": "success", "message": "Session closed"}


@router.get("/{session_id}/diff", response_model=DiffResult)
async def get_session_diff(session_id: str) -> DiffResult:
    """Full side-by-side rows for the session"""
    return get_session(session_id).result


@router.put("/{session_id}/baseline", response_model=SessionState)
async def update_baseline(session_id: str, request: DocumentUpdateRequest) -> SessionState:
    """Replace the baseline document"""
    session = get_session(session_id)
    session.set_baseline(request.text)
    return session.snapshot()


@router.put("/{session_id}/working", response_model=SessionState)
async def update_working(session_id: str, request: DocumentUpdateRequest) -> SessionState:
    """Replace the working document"""
    session = get_session(session_id)
    session.set_working(request.text)
    return session.snapshot()


@router.post("/{session_id}/baseline-from-working", response_model=SessionState)
async def baseline_from_working(session_id: str) -> SessionState:
    """Use the working document as the new baseline"""
    session = get_session(session_id)
    if not session.set_baseline_from_working():
        raise HTTPException(status_code=409, detail="Working document is empty")
    return session.snapshot()


@router.post("/{session_id}/reset", response_model=SessionState)
async def reset_to_baseline(session_id: str) -> SessionState:
    """Replace the working document with the baseline"""
    session = get_session(session_id)
    if not session.reset_to_baseline():
        raise HTTPException(status_code=409, detail="No baseline to reset to")
    return session.snapshot()


@router.post("/{session_id}/navigate", response_model=NavigationResult)
async def navigate_session(session_id: str, request: SessionNavigateRequest) -> NavigationResult:
    """Move the session cursor to the next or previous hunk"""
    return get_session(session_id).navigate(request.direction)


@router.get("/{session_id}/events")
async def session_events(session_id: str):
    """Stream session changes (SSE)"""
    session = get_session(session_id)
    queue_size = int(ConfigManager.get_instance().session_settings()["eventQueueSize"])
    queue: asyncio.Queue[SessionEvent] = asyncio.Queue(maxsize=max(1, queue_size))
    unsubscribe = session.subscribe(bounded_listener(queue))

    async def event_generator():
        try:
            initial = SessionEvent(type="diff", session_id=session_id, state=session.snapshot())
            yield {"event": "message", "data": initial.model_dump_json()}

            while True:
                event = await queue.get()
                yield {"event": "message", "data": event.model_dump_json()}
                if event.type == "closed":
                    break
        finally:
            unsubscribe()

    return EventSourceResponse(event_generator())
