"""Core task and project records."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskStatus(enum.Enum):
    """Completion state of a task."""

    TODO = "Todo"
    DONE = "Done"

    @classmethod
    def parse(cls, value: str) -> "TaskStatus":
        """Read a stored status; anything other than ``"Done"`` is TODO."""
        return cls.DONE if value == cls.DONE.value else cls.TODO

    def toggled(self) -> "TaskStatus":
        """Return the opposite status."""
        return TaskStatus.TODO if self is TaskStatus.DONE else TaskStatus.DONE

    def __str__(self) -> str:
        return self.value


@dataclass
class Task:
    """A single to-do item, optionally belonging to a project."""

    title: str
    project_id: int | None = None
    id: int | None = None
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    due_date: datetime | None = None
    created_at: datetime = field(default_factory=_utc_now)


@dataclass
class Project:
    """A named, coloured group of tasks."""

    name: str
    color: str
    id: int | None = None
    created_at: datetime = field(default_factory=_utc_now)