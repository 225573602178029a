import sqlite3
from datetime import datetime, timedelta, timezone

import pytest

from taskit.db import Database
from taskit.domain import Project, Task, TaskStatus

BASE = datetime(2024, 3, 1, 9, 30, 15, 123456, tzinfo=timezone.utc)


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "nested" / "taskit.db"


@pytest.fixture
def db(db_path):
    with Database(db_path) as database:
        yield database


def test_creates_parent_directory(db_path):
    with Database(db_path):
        assert db_path.exists()


def test_task_round_trip(db):
    due = BASE + timedelta(days=2)
    task = Task(title="Write report", project_id=None, description="quarterly",
                due_date=due, created_at=BASE)
    new_id = db.create_task(task)
    [stored] = db.get_all_tasks()
    assert stored.id == new_id
    assert stored.title == "Write report"
    assert stored.description == "quarterly"
    assert stored.status is TaskStatus.TODO
    assert stored.due_date == due
    assert stored.created_at == BASE
    assert stored.project_id is None


def test_non_utc_times_are_stored_as_utc(db):
    offset = timezone(timedelta(hours=5))
    local = datetime(2024, 3, 1, 14, 30, tzinfo=offset)
    db.create_task(Task(title="t", created_at=local, due_date=local))
    [stored] = db.get_all_tasks()
    assert stored.created_at == local
    assert stored.created_at.utcoffset() == timedelta(0)


def test_tasks_newest_first(db):
    db.create_task(Task(title="old", created_at=BASE))
    db.create_task(Task(title="new", created_at=BASE + timedelta(hours=1)))
    db.create_task(Task(title="mid", created_at=BASE + timedelta(minutes=30)))
    assert [t.title for t in db.get_all_tasks()] == ["new", "mid", "old"]


def test_update_status(db):
    task_id = db.create_task(Task(title="t"))
    db.update_task_status(task_id, TaskStatus.DONE)
    assert db.get_all_tasks()[0].status is TaskStatus.DONE
    db.update_task_status(task_id, TaskStatus.TODO)
    assert db.get_all_tasks()[0].status is TaskStatus.TODO


def test_update_task_fields(db):
    project_id = db.create_project(Project(name="Home", color="#33d17a"))
    task_id = db.create_task(Task(title="t"))
    [task] = db.get_all_tasks()
    task.title = "renamed"
    task.description = "details"
    task.status = TaskStatus.DONE
    task.project_id = project_id
    task.due_date = BASE
    db.update_task(task)
    [stored] = db.get_all_tasks()
    assert stored.id == task_id
    assert (stored.title, stored.description, stored.status) == ("renamed", "details", TaskStatus.DONE)
    assert stored.project_id == project_id
    assert stored.due_date == BASE


def test_update_task_without_id_raises(db):
    with pytest.raises(ValueError):
        db.update_task(Task(title="unsaved"))


def test_update_project_without_id_raises(db):
    with pytest.raises(ValueError):
        db.update_project(Project(name="p", color="#3584e4"))


def test_delete_task(db):
    keep = db.create_task(Task(title="keep"))
    gone = db.create_task(Task(title="gone"))
    db.delete_task(gone)
    assert [t.id for t in db.get_all_tasks()] == [keep]


def test_update_due_date_set_and_clear(db):
    task_id = db.create_task(Task(title="t"))
    db.update_task_due_date(task_id, BASE)
    assert db.get_all_tasks()[0].due_date == BASE
    db.update_task_due_date(task_id, None)
    assert db.get_all_tasks()[0].due_date is None


def test_project_round_trip_and_update(db):
    project_id = db.create_project(Project(name="Work", color="#e01b24", created_at=BASE))
    [project] = db.get_projects()
    assert (project.id, project.name, project.color, project.created_at) == (
        project_id, "Work", "#e01b24", BASE)
    project.name = "Office"
    project.color = "#9141ac"
    db.update_project(project)
    [stored] = db.get_projects()
    assert (stored.name, stored.color) == ("Office", "#9141ac")


def test_delete_project_moves_tasks_to_inbox(db):
    project_id = db.create_project(Project(name="Work", color="#3584e4"))
    other_id = db.create_project(Project(name="Home", color="#33d17a"))
    db.create_task(Task(title="a", project_id=project_id, created_at=BASE))
    db.create_task(Task(title="b", project_id=other_id, created_at=BASE + timedelta(1)))
    db.delete_project(project_id)
    assert [p.id for p in db.get_projects()] == [other_id]
    by_title = {t.title: t.project_id for t in db.get_all_tasks()}
    assert by_title == {"a": None, "b": other_id}


def test_reopen_keeps_data(db_path):
    with Database(db_path) as first:
        first.create_project(Project(name="Work", color="#3584e4"))
    with Database(db_path) as second:
        assert [p.name for p in second.get_projects()] == ["Work"]


def test_legacy_projects_table_gets_color_column(tmp_path):
    path = tmp_path / "legacy.db"
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE projects (id INTEGER PRIMARY KEY, name TEXT NOT NULL, created_at TEXT NOT NULL)")
    conn.execute("INSERT INTO projects (name, created_at) VALUES ('Old', '2024-03-01T09:30:15+00:00')")
    conn.commit()
    conn.close()
    with Database(path) as database:
        [project] = database.get_projects()
    assert project.color == "#3584e4"
    assert project.name == "Old"


def test_rfc3339_variants_are_read(tmp_path):
    path = tmp_path / "v.db"
    Database(path).close()
    conn = sqlite3.connect(path)
    conn.execute(
        "INSERT INTO tasks (title, status, due_date, created_at) VALUES (?, ?, ?, ?)",
        ("t", "Done", "2024-03-01T09:30:15Z", "2024-03-01T09:30:15.123456789+00:00"),
    )
    conn.commit()
    conn.close()
    with Database(path) as database:
        [task] = database.get_all_tasks()
    assert task.due_date == datetime(2024, 3, 1, 9, 30, 15, tzinfo=timezone.utc)
    assert task.created_at == BASE
    assert task.status is TaskStatus.DONE


def test_bad_due_date_reads_as_none(tmp_path):
    path = tmp_path / "bad.db"
    Database(path).close()
    conn = sqlite3.connect(path)
    conn.execute(
        "INSERT INTO tasks (title, status, due_date, created_at) VALUES (?, ?, ?, ?)",
        ("t", "weird", "not a date", "2024-03-01T09:30:15+00:00"),
    )
    conn.commit()
    conn.close()
    with Database(path) as database:
        [task] = database.get_all_tasks()
    assert task.due_date is None
    assert task.status is TaskStatus.TODO


def test_bad_created_at_raises(tmp_path):
    path = tmp_path / "bad.db"
    Database(path).close()
    conn = sqlite3.connect(path)
    conn.execute(
        "INSERT INTO tasks (title, status, created_at) VALUES (?, ?, ?)",
        ("t", "Todo", "garbage"),
    )
    conn.commit()
    conn.close()
    with Database(path) as database:
        with pytest.raises(ValueError):
            database.get_all_tasks()


def test_in_memory_database():
    with Database(":memory:") as database:
        task_id = database.create_task(Task(title="t"))
        assert [t.id for t in database.get_all_tasks()] == [task_id]