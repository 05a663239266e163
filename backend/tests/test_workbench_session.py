"""Tests for workbench sessions and the session store."""

import pytest

from models.diff import Direction
from services.diff_generator import DiffGenerator
from services.workbench_session import (
    SessionNotFoundError,
    SessionStore,
    WorkbenchSession,
    get_session_store,
    set_session_store,
)

TWO_CHANGES = ("a\nb\nc\nd\ne", "a\nB\nc\nd\nE")


@pytest.fixture
def session():
    return WorkbenchSession(baseline=TWO_CHANGES[0], working=TWO_CHANGES[1])


class TestDocuments:
    """Setters and baseline helpers."""

    def test_initial_diff(self, session):
        assert len(session.hunks) == 2
        assert session.summary.has_changes
        assert session.cursor is None

    def test_set_working_recomputes(self, session):
        session.set_working(TWO_CHANGES[0])
        assert session.rows == []
        assert session.hunks == []

    def test_set_baseline_recomputes(self, session):
        session.set_baseline(TWO_CHANGES[1])
        assert session.summary.has_changes is False

    def test_baseline_from_working(self, session):
        assert session.set_baseline_from_working() is True
        assert session.baseline == session.working
        assert session.hunks == []

    def test_baseline_from_empty_working(self):
        session = WorkbenchSession(baseline="a", working="")
        assert session.set_baseline_from_working() is False
        assert session.baseline == "a"

    def test_reset_to_baseline(self, session):
        assert session.reset_to_baseline() is True
        assert session.working == TWO_CHANGES[0]

    def test_reset_without_baseline(self):
        session = WorkbenchSession(baseline="", working="draft")
        assert session.reset_to_baseline() is False
        assert session.working == "draft"

    def test_has_baseline(self):
        assert WorkbenchSession(baseline="a", working="b").has_baseline
        assert not WorkbenchSession(baseline="", working="b").has_baseline


class TestNavigation:
    """Cursor movement and clamping."""

    def test_next_targets_hunk_start(self, session):
        result = session.next_hunk()
        assert result.cursor == 0
        assert result.target_row_index == 1
        assert session.is_active_row(1)

    def test_previous_from_unset(self, session):
        assert session.previous_hunk().target_row_index == 4

    def test_cursor_clamped_after_edit(self, session):
        session.navigate(Direction.PREVIOUS)
        assert session.cursor == 1
        session.set_working("a\nB\nc\nd\ne")
        assert len(session.hunks) == 1
        assert session.cursor == 0

    def test_cursor_unset_when_no_hunks(self, session):
        session.next_hunk()
        session.set_working(TWO_CHANGES[0])
        assert session.cursor is None
        assert session.navigate(Direction.NEXT).cursor is None

    def test_snapshot(self, session):
        session.next_hunk()
        state = session.snapshot()
        assert state.session_id == session.session_id
        assert state.cursor == 0
        assert state.active_hunk.start_index == 1
        assert state.summary.hunk_count == 2


class TestSubscriptions:
    """Listener notifications."""

    def test_diff_and_navigate_events(self, session):
        events = []
        session.subscribe(events.append)
        session.set_working("a\nB\nc\nd\ne")
        session.next_hunk()
        assert [e.type for e in events] == ["diff", "navigate"]
        assert events[0].state.summary.hunk_count == 1

    def test_unchanged_text_does_not_notify(self, session):
        events = []
        session.subscribe(events.append)
        session.set_working(session.working)
        assert events == []

    def test_unsubscribe(self, session):
        events = []
        unsubscribe = session.subscribe(events.append)
        unsubscribe()
        session.set_working("changed")
        assert events == []

    def test_failing_listener_does_not_block_others(self, session):
        events = []

        def broken(event):
            raise RuntimeError("listener down")

        session.subscribe(broken)
        session.subscribe(events.append)
        session.set_working("changed")
        assert len(events) == 1

    def test_close_sends_closed_event(self, session):
        events = []
        session.subscribe(events.append)
        session.close()
        assert events[-1].type == "closed"
        assert events[-1].state is None


class TestSessionStore:
    """Tests for SessionStore."""

    def test_create_and_get(self):
        store = SessionStore()
        session = store.create("a", "b")
        assert store.get(session.session_id) is session
        assert store.list_ids() == [session.session_id]

    def test_sessions_share_generator(self):
        generator = DiffGenerator()
        store = SessionStore(generator)
        assert store.create().generator is generator

    def test_unknown_session(self):
        with pytest.raises(SessionNotFoundError):
            SessionStore().get("missing")

    def test_delete(self):
        store = SessionStore()
        session = store.create()
        store.delete(session.session_id)
        with pytest.raises(KeyError):
            store.get(session.session_id)

    def test_least_recently_used_session_evicted(self):
        store = SessionStore(max_sessions=2)
        first = store.create("a", "b")
        second = store.create("a", "c")
        store.get(first.session_id)
        events = []
        second.subscribe(events.append)
        third = store.create("a", "d")
        assert store.list_ids() == [first.session_id, third.session_id]
        assert [e.type for e in events] == ["closed"]
        with pytest.raises(SessionNotFoundError):
            store.get(second.session_id)

    def test_unbounded_store(self):
        store = SessionStore(max_sessions=0)
        for _ in range(5):
            store.create()
        assert len(store.list_ids()) == 5

    def test_process_store(self):
        store = SessionStore()
        set_session_store(store)
        try:
            assert get_session_store() is store
        finally:
            set_session_store(None)
        assert get_session_store() is not store
        set_session_store(None)
