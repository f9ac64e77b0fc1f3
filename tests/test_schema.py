"""Tests for task models and TaskList."""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from tasknote.errors import TaskNumberError
from tasknote.schema import (
    Deadline,
    Event,
    SortField,
    SortOrder,
    TaskList,
    TaskPriority,
    TaskType,
    Todo,
)


class TestEnums:
    """Tests for TaskType and TaskPriority."""

    def test_task_type_values_are_persisted_tags(self):
        """Test that task types are valued by their one-letter tag."""
        assert [t.value for t in TaskType] == ["T", "D", "E"]

    def test_priority_from_code(self):
        """Test mapping priority codes to members."""
        assert TaskPriority.from_code("L") == TaskPriority.LOW
        assert TaskPriority.from_code("M") == TaskPriority.MEDIUM
        assert TaskPriority.from_code("H") == TaskPriority.HIGH

    def test_priority_from_unknown_code(self):
        """Test that an unknown priority code is rejected."""
        with pytest.raises(ValueError):
            TaskPriority.from_code("X")

    def test_priority_rank_order(self):
        """Test that LOW < MEDIUM < HIGH."""
        assert TaskPriority.LOW.rank < TaskPriority.MEDIUM.rank < TaskPriority.HIGH.rank


class TestTask:
    """Tests for the task variants."""

    def test_defaults(self):
        """Test that a new task is not done and has LOW priority."""
        task = Todo(description="Read book")
        assert task.is_done is False
        assert task.priority == TaskPriority.LOW
        assert task.get_type() == TaskType.TODO

    def test_variant_types(self):
        """Test that each variant reports its own type."""
        at = datetime(2024, 1, 1, 9, 0)
        assert Deadline(description="d", by=at).get_type() == TaskType.DEADLINE
        assert Event(description="e", start=at, end=at).get_type() == TaskType.EVENT

    @pytest.mark.parametrize("description", ["", "  padded  ", "a | b", "two\nlines", "cr\rhere"])
    def test_invalid_description_rejected(self, description):
        """Test that descriptions that would break the line format are rejected."""
        with pytest.raises(ValidationError):
            Todo(description=description)

    def test_description_is_immutable(self):
        """Test that the description cannot be reassigned."""
        task = Todo(description="Read book")
        with pytest.raises(ValidationError):
            task.description = "Other"

    def test_mark_done_is_idempotent(self):
        """Test that marking twice reports no change the second time."""
        task = Todo(description="Read book")
        assert task.mark_done() is True
        assert task.mark_done() is False
        assert task.is_done is True

    def test_mark_undone(self):
        """Test unmarking a done task and an undone task."""
        task = Todo(description="Read book", is_done=True)
        assert task.mark_undone() is True
        assert task.mark_undone() is False
        assert task.is_done is False

    def test_set_priority(self):
        """Test that setting the same priority reports no change."""
        task = Todo(description="Read book")
        assert task.set_priority(TaskPriority.HIGH) is True
        assert task.set_priority(TaskPriority.HIGH) is False
        assert task.priority == TaskPriority.HIGH

    def test_equality_is_structural(self):
        """Test that tasks with the same fields are equal."""
        at = datetime(2024, 1, 2, 10, 0)
        assert Todo(description="x") == Todo(description="x")
        assert Deadline(description="x", by=at) == Deadline(description="x", by=at)

    def test_inequality(self):
        """Test that any differing field or variant breaks equality."""
        at = datetime(2024, 1, 2, 10, 0)
        assert Todo(description="x") != Todo(description="y")
        assert Todo(description="x") != Todo(description="x", is_done=True)
        assert Todo(description="x") != Todo(description="x", priority=TaskPriority.HIGH)
        assert Deadline(description="x", by=at) != Deadline(description="x", by=datetime(2024, 1, 3))
        assert Todo(description="x") != Deadline(description="x", by=at)

    def test_str_formats(self):
        """Test the display form of each variant."""
        todo = Todo(description="Read book", is_done=True, priority=TaskPriority.HIGH)
        deadline = Deadline(description="Return book", by=datetime(2024, 1, 2, 9, 0))
        event = Event(
            description="Trip",
            start=datetime(2024, 1, 1, 9, 0),
            end=datetime(2024, 1, 5, 10, 0),
            priority=TaskPriority.MEDIUM,
        )
        assert str(todo) == "[T][H][X] Read book"
        assert str(deadline) == "[D][L][ ] Return book (by: Jan 02 2024 09:00)"
        assert str(event) == "[E][M][ ] Trip (from: Jan 01 2024 09:00 to: Jan 05 2024 10:00)"

    def test_event_accepts_equal_start_and_end(self):
        """Test that the model itself does not enforce start < end."""
        at = datetime(2024, 1, 1, 9, 0)
        event = Event(description="Instant", start=at, end=at)
        assert event.start == event.end

    def test_occurs_on(self):
        """Test which calendar dates each variant covers."""
        todo = Todo(description="x")
        deadline = Deadline(description="d", by=datetime(2024, 1, 2, 23, 0))
        event = Event(
            description="e",
            start=datetime(2024, 1, 1, 9, 0),
            end=datetime(2024, 1, 3, 10, 0),
        )
        assert not todo.occurs_on(date(2024, 1, 2))
        assert deadline.occurs_on(date(2024, 1, 2))
        assert not deadline.occurs_on(date(2024, 1, 3))
        assert event.occurs_on(date(2024, 1, 1))
        assert event.occurs_on(date(2024, 1, 2))
        assert event.occurs_on(date(2024, 1, 3))
        assert not event.occurs_on(date(2024, 1, 4))


class TestTaskList:
    """Tests for TaskList operations."""

    def test_empty(self):
        """Test a new list is empty."""
        tasks = TaskList()
        assert tasks.is_empty()
        assert tasks.size() == 0

    def test_add_and_get(self):
        """Test that added tasks are kept in insertion order."""
        tasks = TaskList()
        a, b = Todo(description="a"), Todo(description="b")
        tasks.add(a)
        tasks.add(b)
        assert tasks.get(0) is a
        assert tasks.get(1) is b

    @pytest.mark.parametrize("index", [-1, 2, 10])
    def test_get_out_of_range(self, index):
        """Test that indexes outside [0, size) fail."""
        tasks = TaskList(tasks=[Todo(description="a"), Todo(description="b")])
        with pytest.raises(IndexError):
            tasks.get(index)

    def test_validates_from_plain_data(self):
        """Test that the tagged union restores each variant's class."""
        tasks = TaskList.model_validate({"tasks": [
            {"type": "T", "description": "a"},
            {"type": "D", "description": "b", "by": "2024-01-02T09:00:00"},
            {"type": "E", "description": "c", "start": "2024-01-01T09:00:00", "end": "2024-01-02T09:00:00"},
        ]})
        assert [type(t) for t in tasks.all()] == [Todo, Deadline, Event]

    def test_index_of_uses_identity(self):
        """Test that index_of finds the exact object, not an equal one."""
        first = Todo(description="x", is_done=True)
        second = Todo(description="x")
        tasks = TaskList()
        tasks.add(first)
        tasks.add(second)
        second.mark_done()
        assert first == second
        assert tasks.index_of(second) == 1
        assert tasks.index_of(Todo(description="x", is_done=True)) == -1

    def test_delete(self, task_list, sample_tasks):
        """Test deleting removes exactly that task."""
        task_list.delete(sample_tasks[1])
        assert task_list.size() == len(sample_tasks) - 1
        assert task_list.index_of(sample_tasks[1]) == -1

    def test_delete_absent_task(self, task_list):
        """Test deleting a task that is not in the list fails."""
        with pytest.raises(ValueError):
            task_list.delete(Todo(description="Not there"))

    def test_contains_uses_equality(self, task_list):
        """Test duplicate detection by structural equality."""
        assert task_list.contains(Todo(description="Read book"))
        assert not task_list.contains(Todo(description="Read book", is_done=True))

    def test_mark_done_by_index(self, task_list):
        """Test index-based marking reports newly-marked vs no change."""
        assert task_list.mark_done(0) is True
        assert task_list.mark_done(0) is False
        assert task_list.mark_undone(0) is True

    def test_find_returns_each_match_once_in_order(self):
        """Test find over multiple keywords keeps list order and no repeats."""
        tasks = TaskList(tasks=[
            Todo(description="Read book"),
            Todo(description="Buy milk"),
            Todo(description="File report"),
            Todo(description="book report"),
        ])
        found = tasks.find(["book", "report"])
        assert [t.description for t in found] == ["Read book", "File report", "book report"]

    def test_find_is_case_sensitive(self):
        """Test that keyword matching is case-sensitive."""
        tasks = TaskList(tasks=[Todo(description="Read Book")])
        assert tasks.find(["book"]) == []

    def test_on_date(self, task_list):
        """Test listing tasks that fall on a given calendar date."""
        found = task_list.on_date(date(2024, 11, 5))
        assert [t.description for t in found] == ["Submit report", "Attend workshop"]

    def test_resolve(self, task_list, sample_tasks):
        """Test mapping 1-based numbers to tasks, ignoring repeats."""
        resolved = task_list.resolve([3, 1, 3])
        assert resolved == [sample_tasks[2], sample_tasks[0]]

    def test_resolve_rejects_whole_batch(self, task_list):
        """Test that one bad number fails the batch and names it."""
        with pytest.raises(TaskNumberError) as exc_info:
            task_list.resolve([2, 99, 0])
        assert "99" in exc_info.value.detail
        assert "0" in exc_info.value.detail
        assert task_list.size() == 6


class TestSorting:
    """Tests for stable in-place sorting."""

    def test_sort_by_datetime_ascending_todo_last(self):
        """Test datetime sort puts Todo last and orders timed tasks."""
        todo = Todo(description="x")
        y = Deadline(description="y", by=datetime(2024, 1, 2))
        z = Deadline(description="z", by=datetime(2024, 1, 1))
        tasks = TaskList(tasks=[todo, y, z])
        tasks.sort_by_datetime(SortOrder.ASC)
        assert tasks.all() == [z, y, todo]

    def test_sort_by_datetime_descending_todo_still_last(self):
        """Test Todo stays last in a descending datetime sort."""
        todo = Todo(description="x")
        y = Deadline(description="y", by=datetime(2024, 1, 2))
        z = Deadline(description="z", by=datetime(2024, 1, 1))
        tasks = TaskList(tasks=[todo, z, y])
        tasks.sort_by_datetime(SortOrder.DESC)
        assert tasks.all() == [y, z, todo]

    def test_sort_by_datetime_uses_event_start(self):
        """Test Events sort by their start time."""
        event = Event(
            description="e",
            start=datetime(2024, 1, 1, 8, 0),
            end=datetime(2024, 1, 9),
        )
        deadline = Deadline(description="d", by=datetime(2024, 1, 1, 9, 0))
        tasks = TaskList(tasks=[deadline, event])
        tasks.sort(SortField.DATETIME, SortOrder.ASC)
        assert tasks.all() == [event, deadline]

    def test_sort_by_priority_is_stable(self):
        """Test equal priorities keep their order in both directions."""
        a = Todo(description="a", priority=TaskPriority.HIGH)
        b = Todo(description="b")
        c = Todo(description="c", priority=TaskPriority.HIGH)
        d = Todo(description="d")
        tasks = TaskList(tasks=[a, b, c, d])
        tasks.sort_by_priority(SortOrder.ASC)
        assert tasks.all() == [b, d, a, c]
        tasks.sort_by_priority(SortOrder.DESC)
        assert tasks.all() == [a, c, b, d]

    def test_sort_by_task_type(self, task_list):
        """Test sorting by type orders Todo, Deadline, Event."""
        task_list.sort(SortField.TASKTYPE, SortOrder.DESC)
        assert [t.get_type() for t in task_list.all()] == [
            TaskType.EVENT, TaskType.EVENT,
            TaskType.DEADLINE, TaskType.DEADLINE,
            TaskType.TODO, TaskType.TODO,
        ]
