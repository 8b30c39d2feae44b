# tasks.py - task records and the in-memory task list

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Iterator, List, Optional


@dataclass
class Task:
    text: str
    complete: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


class TaskList:
    """Ordered list of tasks. Indices are 0-based; bad indices raise IndexError."""

    def __init__(self, tasks: Optional[List[Task]] = None) -> None:
        self._tasks: List[Task] = list(tasks or [])

    def add(self, text: str) -> Optional[Task]:
        text = text.strip()
        if not text:
            return None
        task = Task(text)
        self._tasks.append(task)
        return task

    def toggle(self, index: int) -> Task:
        task = self._tasks[self._check(index)]
        task.complete = not task.complete
        return task

    def remove(self, index: int) -> Task:
        return self._tasks.pop(self._check(index))

    def texts(self) -> List[str]:
        return [t.text for t in self._tasks]

    def pending(self) -> int:
        return sum(1 for t in self._tasks if not t.complete)

    def _check(self, index: int) -> int:
        # negative indices would silently wrap around
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"no task at position {index + 1}")
        return index

    def __getitem__(self, index: int) -> Task:
        return self._tasks[self._check(index)]

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)
