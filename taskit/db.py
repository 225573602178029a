"""SQLite storage for tasks and projects."""

from __future__ import annotations

import re
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from types import TracebackType

from platformdirs import user_data_path

from taskit.domain import Project, Task, TaskStatus

_APP_NAME = "taskit"
_APP_AUTHOR = "maskedsyntax"
_DB_FILE = "taskit.db"
_MEMORY = ":memory:"

_TIMESTAMP_RE = re.compile(r"^(.*?[Tt ]\d{2}:\d{2}:\d{2})(?:\.(\d+))?(.*)$")

_CREATE_PROJECTS = """
    CREATE TABLE IF NOT EXISTS projects (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL,
        color TEXT NOT NULL DEFAULT '#3584e4',
        created_at TEXT NOT NULL
    )
"""

_MIGRATE_PROJECT_COLOR = (
    "ALTER TABLE projects ADD COLUMN color TEXT NOT NULL DEFAULT '#3584e4'"
)

_CREATE_TASKS = """
    CREATE TABLE IF NOT EXISTS tasks (
        id INTEGER PRIMARY KEY,
        title TEXT NOT NULL,
        description TEXT,
        status TEXT NOT NULL,
        due_date TEXT,
        project_id INTEGER REFERENCES projects(id),
        created_at TEXT NOT NULL
    )
"""


def default_db_path() -> Path:
    """Location of the database file for the current user."""
    return user_data_path(_APP_NAME, _APP_AUTHOR) / _DB_FILE


def _format_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def _parse_timestamp(text: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware UTC datetime."""
    value = text.strip()
    match = _TIMESTAMP_RE.match(value)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    head, fraction, offset = match.groups()
    if offset in ("Z", "z"):
        offset = "+00:00"
    if fraction is not None:
        head = f"{head}.{fraction[:6].ljust(6, '0')}"
    parsed = datetime.fromisoformat(head.replace("t", "T") + offset)
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp without offset: {text!r}")
    return parsed.astimezone(timezone.utc)


def _parse_optional_timestamp(text: str | None) -> datetime | None:
    if text is None:
        return None
    try:
        return _parse_timestamp(text)
    except ValueError:
        return None


class Database:
    """Connection to the task database, creating the schema on open."""

    def __init__(self, path: Path | str | None = None) -> None:
        if path is None:
            path = default_db_path()
        if str(path) != _MEMORY:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(str(path), isolation_level=None)
        self._create_tables()

    def __enter__(self) -> "Database":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def _create_tables(self) -> None:
        self._conn.execute(_CREATE_PROJECTS)
        try:
            self._conn.execute(_MIGRATE_PROJECT_COLOR)
        except sqlite3.OperationalError:
            pass  # column already present
        self._conn.execute(_CREATE_TASKS)

    def create_task(self, task: Task) -> int:
        """Insert a task and return its new id."""
        due = _format_timestamp(task.due_date) if task.due_date else None
        cursor = self._conn.execute(
            "INSERT INTO tasks (title, description, status, due_date, project_id, created_at)"
            " VALUES (?, ?, ?, ?, ?, ?)",
            (
                task.title,
                task.description,
                str(task.status),
                due,
                task.project_id,
                _format_timestamp(task.created_at),
            ),
        )
        return int(cursor.lastrowid)

    def update_task_status(self, task_id: int, status: TaskStatus) -> None:
        """Set the status of one task."""
        self._conn.execute(
            "UPDATE tasks SET status = ? WHERE id = ?", (str(status), task_id)
        )

    def update_task(self, task: Task) -> None:
        """Write back a stored task's editable fields."""
        if task.id is None:
            raise ValueError("Task ID is missing")
        due = _format_timestamp(task.due_date) if task.due_date else None
        self._conn.execute(
            "UPDATE tasks SET title = ?, description = ?, status = ?, due_date = ?,"
            " project_id = ? WHERE id = ?",
            (task.title, task.description, str(task.status), due, task.project_id, task.id),
        )

    def delete_task(self, task_id: int) -> None:
        """Remove a task."""
        self._conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))

    def update_task_due_date(self, task_id: int, due_date: datetime | None) -> None:
        """Set or clear the due date of one task."""
        due = _format_timestamp(due_date) if due_date else None
        self._conn.execute("UPDATE tasks SET due_date = ? WHERE id = ?", (due, task_id))

    def get_all_tasks(self) -> list[Task]:
        """All tasks, newest first."""
        rows = self._conn.execute(
            "SELECT id, title, description, status, due_date, project_id, created_at"
            " FROM tasks ORDER BY created_at DESC"
        )
        return [
            Task(
                id=row_id,
                title=title,
                description=description,
                status=TaskStatus.parse(status),
                due_date=_parse_optional_timestamp(due),
                project_id=project_id,
                created_at=_parse_timestamp(created_at),
            )
            for row_id, title, description, status, due, project_id, created_at in rows
        ]

    def create_project(self, project: Project) -> int:
        """Insert a project and return its new id."""
        cursor = self._conn.execute(
            "INSERT INTO projects (name, color, created_at) VALUES (?, ?, ?)",
            (project.name, project.color, _format_timestamp(project.created_at)),
        )
        return int(cursor.lastrowid)

    def update_project(self, project: Project) -> None:
        """Write back a stored project's name and colour."""
        if project.id is None:
            raise ValueError("Project ID is missing")
        self._conn.execute(
            "UPDATE projects SET name = ?, color = ? WHERE id = ?",
            (project.name, project.color, project.id),
        )

    def delete_project(self, project_id: int) -> None:
        """Remove a project, moving its tasks to the inbox."""
        self._conn.execute(
            "UPDATE tasks SET project_id = NULL WHERE project_id = ?", (project_id,)
        )
        self._conn.execute("DELETE FROM projects WHERE id = ?", (project_id,))

    def get_projects(self) -> list[Project]:
        """All projects in storage order."""
        rows = self._conn.execute("SELECT id, name, color, created_at FROM projects")
        return [
            Project(id=row_id, name=name, color=color, created_at=_parse_timestamp(created))
            for row_id, name, color, created in rows
        ]