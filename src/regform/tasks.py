"""Ordered task list — add, toggle, delete, reorder.

Holds the state behind a to-do list UI. Tasks are frozen dataclasses;
toggling replaces the task instead of mutating it. Reordering follows
drag-and-drop semantics: the dragged task is removed from its slot and
inserted at the target index.

New task text goes through the same ``ValidationResult`` contract as the
registration form, so a UI can show ``result.errors["text"]`` next to
its input::

    tasks = TaskList(["Revisar reporte semanal", ("Validar estructura Excel", True)])
    result = tasks.check_text(user_input)
    if result:
        tasks.add(user_input)
"""

import itertools
import logging
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from regform.errors import TaskError
from regform.messages import ES, ErrorCode, MessageCatalog
from regform.validation.result import ValidationResult

logger = logging.getLogger("regform.tasks")


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    completed: bool = False


class TaskList:
    """In-memory ordered task list. Mutations are serialized by a lock."""

    __slots__ = ("_ids", "_lock", "_messages", "_tasks")

    def __init__(
        self,
        texts: Iterable[str | tuple[str, bool]] = (),
        *,
        messages: MessageCatalog = ES,
    ) -> None:
        """Seed the list with *texts*; a ``(text, completed)`` pair sets the flag."""
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self._messages = messages
        self._tasks: list[Task] = []
        for seed in texts:
            if isinstance(seed, tuple):
                text, completed = seed
                self.add(text, completed=completed)
            else:
                self.add(seed)

    # -- Reading -----------------------------------------------------------

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the tasks in display order."""
        with self._lock:
            return tuple(self._tasks)

    @property
    def pending_count(self) -> int:
        """Number of tasks not yet completed."""
        with self._lock:
            return sum(1 for task in self._tasks if not task.completed)

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            for task in self._tasks:
                if task.id == task_id:
                    return task
            return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    # -- Validation --------------------------------------------------------

    def check_text(self, text: object) -> ValidationResult:
        """Validate the text of a new task. Blank or non-text input fails."""
        if not isinstance(text, str) or not text.strip():
            code = ErrorCode.TASK_TEXT_REQUIRED
            return ValidationResult(
                data={},
                errors={"text": self._messages.render("text", code)},
                codes={"text": code},
            )
        return ValidationResult(data={"text": text}, errors={})

    # -- Mutation ----------------------------------------------------------

    def add(self, text: str, *, completed: bool = False) -> Task:
        """Append a new task, uncompleted unless *completed* is set.

        Raises ``TaskError`` when *text* fails ``check_text``; call
        ``check_text`` first to get the message for the user.
        """
        result = self.check_text(text)
        if not result:
            raise TaskError(result.errors["text"])
        with self._lock:
            task = Task(id=next(self._ids), text=text, completed=completed)
            self._tasks.append(task)
        logger.debug("task %d added", task.id)
        return task

    def toggle(self, task_id: int) -> Task:
        """Flip the completed flag of *task_id* and return the updated task."""
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                raise TaskError(f"Unknown task id: {task_id}")
            updated = replace(self._tasks[index], completed=not self._tasks[index].completed)
            self._tasks[index] = updated
            return updated

    def delete(self, task_id: int) -> bool:
        """Remove *task_id*. Returns False if no such task existed."""
        with self._lock:
            before = len(self._tasks)
            self._tasks[:] = [task for task in self._tasks if task.id != task_id]
            removed = len(self._tasks) < before
        if removed:
            logger.debug("task %d deleted", task_id)
        return removed

    def move(self, from_index: int, to_index: int) -> None:
        """Move the task at *from_index* so it ends up at *to_index*."""
        with self._lock:
            size = len(self._tasks)
            if not (0 <= from_index < size and 0 <= to_index < size):
                raise TaskError(f"Move {from_index} -> {to_index} out of range for {size} tasks")
            task = self._tasks.pop(from_index)
            self._tasks.insert(to_index, task)

    def move_task(self, active_id: int, over_id: int) -> bool:
        """Drop task *active_id* onto the slot of task *over_id*.

        Returns False, leaving the order unchanged, when the ids are equal
        or either one is unknown.
        """
        if active_id == over_id:
            return False
        with self._lock:
            old_index = self._index_of(active_id)
            new_index = self._index_of(over_id)
            if old_index is None or new_index is None:
                return False
            task = self._tasks.pop(old_index)
            self._tasks.insert(new_index, task)
            return True

    def _index_of(self, task_id: int) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None
