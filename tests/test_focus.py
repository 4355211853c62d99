"""Tests for the single-focus task queue."""

from datetime import datetime

import pytest

from zenith.core.focus import FocusQueue
from zenith.core.parser import timestamp_id
from zenith.core.state import ApplicationState
from zenith.core.tasks import Priority, Status, Task


@pytest.fixture
def now():
    return datetime(2025, 1, 15, 10, 30)


@pytest.fixture
def make_task(now):
    """Factory for creating tasks."""
    def _make(task_id: int, priority: Priority = Priority.NORMAL, title: str = "") -> Task:
        return Task(
            id=task_id,
            title=title or f"Task {task_id}",
            created_at=now,
            priority=priority,
        )
    return _make


@pytest.fixture
def queue():
    return FocusQueue(ApplicationState())


class TestAddTask:
    def test_first_task_takes_focus(self, queue, make_task):
        task = make_task(1)
        queue.add_task(task)

        assert queue.focus is task
        assert queue.pending == [task]

    def test_equal_priority_does_not_usurp(self, queue, make_task):
        first = make_task(1)
        queue.add_task(first)
        queue.add_task(make_task(2))

        assert queue.focus is first

    def test_higher_priority_usurps(self, queue, make_task):
        queue.add_task(make_task(1))
        high = make_task(2, Priority.HIGH)
        queue.add_task(high)

        assert queue.focus is high

    def test_lower_priority_does_not_usurp(self, queue, make_task):
        high = make_task(1, Priority.HIGH)
        queue.add_task(high)
        queue.add_task(make_task(2))

        assert queue.focus is high

    def test_critical_focus_never_displaced(self, queue, make_task):
        critical = make_task(1, Priority.CRITICAL)
        queue.add_task(critical)

        for i, priority in enumerate([Priority.NORMAL, Priority.HIGH, Priority.CRITICAL], start=2):
            queue.add_task(make_task(i, priority))
            assert queue.focus is critical

    def test_appends_in_insertion_order(self, queue, make_task):
        tasks = [make_task(1), make_task(2, Priority.CRITICAL), make_task(3)]
        for t in tasks:
            queue.add_task(t)

        assert queue.pending == tasks


class TestCompleteCurrent:
    def test_moves_focus_to_history(self, queue, make_task, now):
        task = make_task(1, title="Write report")
        queue.add_task(task)

        completed = queue.complete_current(now)

        assert completed.id == 1
        assert completed.status == Status.COMPLETED
        assert completed.completed_at == now
        assert queue.state.history == [completed]
        assert queue.pending == []
        assert queue.focus is None

    def test_history_most_recent_first(self, queue, make_task, now):
        queue.add_task(make_task(1))
        queue.add_task(make_task(2))

        first = queue.complete_current(now)
        second = queue.complete_current(now)

        assert queue.state.history == [second, first]

    def test_no_focus_is_noop(self, queue, now):
        assert queue.complete_current(now) is None
        assert queue.state.history == []

    def test_priority_scenario(self, queue, make_task, now):
        a = make_task(1, Priority.NORMAL, "A")
        b = make_task(2, Priority.CRITICAL, "B")
        c = make_task(3, Priority.NORMAL, "C")
        for t in (a, b, c):
            queue.add_task(t)
        assert queue.focus is b

        queue.complete_current(now)
        # Ties go to the most recently created task
        assert queue.focus is c
        assert queue.pending == [c, a]

        queue.complete_current(now)
        assert queue.focus is a

        queue.complete_current(now)
        assert queue.focus is None
        assert [h.title for h in queue.state.history] == ["A", "C", "B"]

    def test_completed_task_never_pending(self, queue, make_task, now):
        queue.add_task(make_task(1))
        queue.add_task(make_task(2))
        completed = queue.complete_current(now)

        assert completed.id not in {t.id for t in queue.pending}


class TestDeferCurrent:
    def test_resets_priority_and_moves_to_back(self, queue, make_task):
        critical = make_task(1, Priority.CRITICAL)
        other = make_task(2)
        queue.add_task(critical)
        queue.add_task(other)

        deferred = queue.defer_current()

        assert deferred is critical
        assert critical.priority == Priority.NORMAL
        assert queue.pending[-1] is critical
        assert queue.focus is other

    def test_older_task_goes_to_back(self, queue, make_task):
        first = make_task(1)
        second = make_task(2)
        queue.add_task(first)
        queue.add_task(second)

        queue.defer_current()

        assert queue.pending == [second, first]
        assert queue.focus is second

    def test_newest_of_equals_regains_focus(self, queue, make_task):
        older = make_task(1)
        newer = make_task(2)
        queue.add_task(older)
        queue.add_task(newer)
        queue.set_focus(newer)

        queue.defer_current()

        # Promotion re-sorts by priority then id, so the newer task leads again
        assert queue.focus is newer

    def test_single_task_stays_in_focus(self, queue, make_task):
        task = make_task(1, Priority.HIGH)
        queue.add_task(task)

        queue.defer_current()

        assert queue.focus is task
        assert task.priority == Priority.NORMAL

    def test_deferred_task_can_be_usurped(self, queue, make_task):
        queue.add_task(make_task(1, Priority.CRITICAL))
        queue.defer_current()
        high = make_task(2, Priority.HIGH)
        queue.add_task(high)

        assert queue.focus is high

    def test_no_focus_is_noop(self, queue):
        assert queue.defer_current() is None
        assert queue.pending == []


class TestPromoteNextTask:
    def test_sorts_priority_then_newest(self, queue, make_task):
        tasks = [
            make_task(1, Priority.NORMAL),
            make_task(2, Priority.HIGH),
            make_task(3, Priority.NORMAL),
            make_task(4, Priority.CRITICAL),
            make_task(5, Priority.HIGH),
        ]
        for t in tasks:
            queue.add_task(t)

        queue.promote_next_task()

        assert [t.id for t in queue.pending] == [4, 5, 2, 3, 1]
        assert queue.focus.id == 4

    def test_idempotent(self, queue, make_task):
        for i, priority in enumerate([Priority.HIGH, Priority.NORMAL, Priority.HIGH], start=1):
            queue.add_task(make_task(i, priority))

        focus = queue.promote_next_task()
        order = list(queue.pending)

        assert queue.promote_next_task() is focus
        assert queue.pending == order

    def test_empty_queue_clears_focus(self, queue):
        assert queue.promote_next_task() is None
        assert queue.focus is None


class TestSetFocus:
    def test_overrides_priority(self, queue, make_task):
        queue.add_task(make_task(1, Priority.CRITICAL))
        normal = make_task(2)
        queue.add_task(normal)

        queue.set_focus(normal)

        assert queue.focus is normal


class TestNextId:
    def test_derived_from_time(self, queue, now):
        assert queue.next_id(now) == timestamp_id(now)

    def test_unique_within_same_instant(self, queue, now):
        first = queue.next_id(now)
        second = queue.next_id(now)
        assert second == first + 1

    def test_seeded_past_existing_ids(self, make_task, now):
        future_id = timestamp_id(now) + 1000
        state = ApplicationState(pending_tasks=[make_task(future_id)])
        queue = FocusQueue(state)

        assert queue.next_id(now) == future_id + 1


class TestEnsureFocus:
    def test_rederives_missing_focus(self, make_task):
        tasks = [make_task(1), make_task(2, Priority.HIGH)]
        queue = FocusQueue(ApplicationState(pending_tasks=tasks))

        assert queue.ensure_focus().id == 2

    def test_keeps_existing_focus(self, make_task):
        tasks = [make_task(1), make_task(2, Priority.HIGH)]
        queue = FocusQueue(ApplicationState(pending_tasks=tasks, current_focus=tasks[0]))

        assert queue.ensure_focus() is tasks[0]
        assert queue.pending == tasks
