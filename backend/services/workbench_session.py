"""
Workbench Session - Baseline/working documents with a live diff and hunk cursor
"""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from typing import Callable

from models.diff import DiffHunk, DiffResult, DiffSummary, Direction, NavigationResult, SideBySideRow
from models.workbench import SessionEvent, SessionState

from .diff_generator import DiffGenerator
from .hunk_locator import HunkNavigator

logger = logging.getLogger(__name__)

Listener = Callable[[SessionEvent], None]


class SessionNotFoundError(KeyError):
    """Raised when a session id is not registered"""


class WorkbenchSession:
    """
    Owned state for one comparison.

    Documents change only through the setters; each change recomputes the
    diff (memoized by the generator), clamps the hunk cursor and notifies
    subscribers.
    """

    def __init__(
        self,
        session_id: str | None = None,
        baseline: str = "",
        working: str = "",
        generator: DiffGenerator | None = None,
    ):
        self.session_id = session_id or str(uuid.uuid4())
        self.generator = generator or DiffGenerator()
        self._baseline = baseline
        self._working = working
        self._navigator = HunkNavigator()
        self._listeners: list[Listener] = []
        self._result = self._recompute()

    # ========== Documents ==========

    @property
    def baseline(self) -> str:
        return self._baseline

    @property
    def working(self) -> str:
        return self._working

    def set_baseline(self, text: str) -> None:
        if text == self._baseline:
            return
        self._baseline = text
        self._documents_changed()

    def set_working(self, text: str) -> None:
        if text == self._working:
            return
        self._working = text
        self._documents_changed()

    def set_baseline_from_working(self) -> bool:
        """Make the working document the new baseline"""
        if not self._working:
            return False
        self.set_baseline(self._working)
        return True

    def reset_to_baseline(self) -> bool:
        """Discard working edits by copying the baseline back"""
        if not self._baseline:
            return False
        self.set_working(self._baseline)
        return True

    # ========== Derived views ==========

    @property
    def result(self) -> DiffResult:
        return self._result

    @property
    def rows(self) -> list[SideBySideRow]:
        return self._result.rows

    @property
    def hunks(self) -> list[DiffHunk]:
        return self._result.hunks

    @property
    def summary(self) -> DiffSummary:
        return self._result.summary

    @property
    def has_baseline(self) -> bool:
        return bool(self._baseline) and bool(self._working)

    @property
    def cursor(self) -> int | None:
        return self._navigator.cursor

    @property
    def active_hunk(self) -> DiffHunk | None:
        return self._navigator.active_hunk

    def is_active_row(self, row_index: int) -> bool:
        return self._navigator.is_active_row(row_index)

    # ========== Navigation ==========

    def navigate(self, direction: Direction) -> NavigationResult:
        result = self._navigator.move(direction)
        if result.cursor is not None:
            self._notify("navigate")
        return result

    def next_hunk(self) -> NavigationResult:
        return self.navigate(Direction.NEXT)

    def previous_hunk(self) -> NavigationResult:
        return self.navigate(Direction.PREVIOUS)

    # ========== Subscriptions ==========

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        self._notify("closed")
        self._listeners.clear()

    def snapshot(self) -> SessionState:
        return SessionState(
            session_id=self.session_id,
            baseline=self._baseline,
            working=self._working,
            has_baseline=self.has_baseline,
            hunks=self.hunks,
            summary=self.summary,
            cursor=self.cursor,
            active_hunk=self.active_hunk,
        )

    # ========== Internals ==========

    def _recompute(self) -> DiffResult:
        result = self.generator.generate_diff(self._baseline, self._working)
        self._navigator.update(result.hunks)
        return result

    def _documents_changed(self) -> None:
        self._result = self._recompute()
        self._notify("diff")

    def _notify(self, event_type: str) -> None:
        if not self._listeners:
            return
        state = self.snapshot() if event_type != "closed" else None
        event = SessionEvent(type=event_type, session_id=self.session_id, state=state)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.warning("Session %s listener failed", self.session_id, exc_info=True)


class SessionStore:
    """
    In-memory registry of workbench sessions.

    Holds at most max_sessions (0 means unbounded); creating one more closes
    the least recently used session.
    """

    def __init__(self, generator: DiffGenerator | None = None, max_sessions: int = 256):
        self.generator = generator or DiffGenerator()
        self.max_sessions = max(0, max_sessions)
        self._sessions: OrderedDict[str, WorkbenchSession] = OrderedDict()

    def create(self, baseline: str = "", working: str = "") -> WorkbenchSession:
        session = WorkbenchSession(baseline=baseline, working=working, generator=self.generator)
        self._sessions[session.session_id] = session
        logger.debug("Session %s created", session.session_id)
        self._evict()
        return session

    def get(self, session_id: str) -> WorkbenchSession:
        try:
            session = self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None
        self._sessions.move_to_end(session_id)
        return session

    def _evict(self) -> None:
        while self.max_sessions and len(self._sessions) > self.max_sessions:
            session_id, session = self._sessions.popitem(last=False)
            logger.info("Session %s evicted (limit %d)", session_id, self.max_sessions)
            session.close()

    def delete(self, session_id: str) -> None:
        session = self.get(session_id)
        del self._sessions[session_id]
        session.close()

    def list_ids(self) -> list[str]:
        return list(self._sessions)

    def clear(self) -> None:
        for session_id in self.list_ids():
            self.delete(session_id)


_store: SessionStore | None = None


def set_session_store(store: SessionStore | None) -> None:
    """Install the process-wide session store (done at startup)"""
    global _store
    _store = store


def get_session_store() -> SessionStore:
    """Get the process-wide session store, creating a default one if needed"""
    global _store
    if _store is None:
        _store = SessionStore()
    return _store
