"""Queue of pending file reads, polled by task id."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import BinaryIO

_ID_RANGE = 1_000_000
PENDING = -2137


@dataclass
class FileServiceTask:
    """A request to read ``size`` items of ``n`` bytes from ``file``."""

    id: int
    file: BinaryIO
    size: int
    n: int
    read_status: int = PENDING
    data: bytes = b""


class FileService:
    """Keeps read tasks until their result has been collected."""

    def __init__(self) -> None:
        self.tasks: list[FileServiceTask] = []

    def add_read_chunk(self, file: BinaryIO, size: int, n: int) -> int:
        """Queue a read and return the task id."""
        task = FileServiceTask(random.randrange(_ID_RANGE), file, size, n)
        self.tasks.append(task)
        return task.id

    def process_pending(self) -> None:
        """Perform every read that has not run yet."""
        for task in self.tasks:
            if task.read_status == PENDING:
                task.data = task.file.read(task.size * task.n)
                task.read_status = len(task.data) // task.n if task.n else 0

    def is_task_done(self, task_id: int) -> int | None:
        """Return the read status of a finished task, forgetting it; None while pending."""
        index = self.index_of(task_id)
        if index is None:
            raise KeyError(f"Task was not found: {task_id}")
        status = self.tasks[index].read_status
        if status == PENDING:
            return None
        del self.tasks[index]
        return status

    def remove_by_id(self, task_id: int) -> None:
        index = self.index_of(task_id)
        if index is None:
            raise KeyError(f"Cant remove task, because it was not found: {task_id}")
        del self.tasks[index]

    def index_of(self, task_id: int) -> int | None:
        """Position of the task in the queue, or None when it is absent."""
        return next(
            (index for index, task in enumerate(self.tasks) if task.id == task_id), None
        )