"""Application state: cached tasks and projects plus the current view."""

from __future__ import annotations

import enum
import sqlite3
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar

from taskit.db import Database
from taskit.domain import Project, Task, TaskStatus

_PROJECT_COLORS = ("#3584e4", "#33d17a", "#f6d32d", "#ff7800", "#e01b24", "#9141ac")


class FilterKind(enum.Enum):
    """Which view of the task list is shown."""

    INBOX = "inbox"
    TODAY = "today"
    UPCOMING = "upcoming"
    PROJECT = "project"


@dataclass(frozen=True)
class Filter:
    """A task-list view; project views carry the project's id."""

    kind: FilterKind
    project_id: int | None = None

    INBOX: ClassVar["Filter"]
    TODAY: ClassVar["Filter"]
    UPCOMING: ClassVar["Filter"]

    @classmethod
    def project(cls, project_id: int) -> "Filter":
        """View of the tasks in one project."""
        return cls(FilterKind.PROJECT, project_id)


Filter.INBOX = Filter(FilterKind.INBOX)
Filter.TODAY = Filter(FilterKind.TODAY)
Filter.UPCOMING = Filter(FilterKind.UPCOMING)


@dataclass
class AppState:
    """Tasks and projects loaded from the database, with view settings."""

    db: Database
    tasks: list[Task] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    active_filter: Filter = Filter.INBOX
    search_query: str = ""
    is_dark_mode: bool = False

    def refresh(self) -> None:
        """Reload tasks and projects, keeping the old lists if a read fails."""
        try:
            self.tasks = self.db.get_all_tasks()
        except (sqlite3.Error, ValueError):
            pass
        try:
            self.projects = self.db.get_projects()
        except (sqlite3.Error, ValueError):
            pass

    def add_task(self, title: str, due_date: datetime | None = None) -> None:
        """Create a task in the current view's project.

        In the Today view a task without a due date is due now.
        """
        project_id = (
            self.active_filter.project_id
            if self.active_filter.kind is FilterKind.PROJECT
            else None
        )
        task = Task(title=title, project_id=project_id)
        if due_date is not None:
            task.due_date = due_date
        elif self.active_filter == Filter.TODAY:
            task.due_date = datetime.now(timezone.utc)
        self.db.create_task(task)
        self.refresh()

    def toggle_task(self, task_id: int, current_status: TaskStatus) -> None:
        """Flip a task between to-do and done."""
        try:
            self.db.update_task_status(task_id, current_status.toggled())
        except sqlite3.Error:
            pass
        self.refresh()

    def delete_task(self, task_id: int) -> None:
        """Remove a task."""
        try:
            self.db.delete_task(task_id)
        except sqlite3.Error:
            pass
        self.refresh()

    def update_task_title(self, task_id: int, new_title: str) -> None:
        """Rename a cached task and store the change."""
        task = next((t for t in self.tasks if t.id == task_id), None)
        if task is not None:
            task.title = new_title
            try:
                self.db.update_task(task)
            except (sqlite3.Error, ValueError):
                pass
        self.refresh()

    def update_task_due_date(self, task_id: int, due_date: datetime | None) -> None:
        """Set or clear a task's due date."""
        try:
            self.db.update_task_due_date(task_id, due_date)
        except sqlite3.Error:
            pass
        self.refresh()

    def add_project(self, name: str) -> None:
        """Create a project, picking the next colour from a fixed palette."""
        color = _PROJECT_COLORS[len(self.projects) % len(_PROJECT_COLORS)]
        self.db.create_project(Project(name=name, color=color))
        self.refresh()

    def update_project_name(self, project_id: int, name: str) -> None:
        """Rename a cached project and store the change."""
        project = next((p for p in self.projects if p.id == project_id), None)
        if project is not None:
            project.name = name
            self.db.update_project(project)
        self.refresh()

    def delete_project(self, project_id: int) -> None:
        """Remove a project; leave its view if it was active."""
        self.db.delete_project(project_id)
        if self.active_filter == Filter.project(project_id):
            self.active_filter = Filter.INBOX
        self.refresh()

    def _matches_filter(self, task: Task, today) -> bool:
        kind = self.active_filter.kind
        if kind is FilterKind.INBOX:
            return task.project_id is None
        if kind is FilterKind.PROJECT:
            return task.project_id == self.active_filter.project_id
        if task.due_date is None:
            return False
        due_day = task.due_date.astimezone().date()
        if kind is FilterKind.TODAY:
            return due_day == today
        return due_day > today

    def filtered_tasks(self) -> list[Task]:
        """Tasks in the active view whose titles contain the search text."""
        query = self.search_query.lower()
        today = datetime.now().astimezone().date()
        return [
            task
            for task in self.tasks
            if (not query or query in task.title.lower())
            and self._matches_filter(task, today)
        ]