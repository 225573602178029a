# taskit

taskit keeps tasks and projects in a local SQLite database and holds the
in-memory view of them a to-do front end works from: the active filter, a
search text and the cached lists. It also builds the stylesheet text and the
SVG icon markup such a front end would display.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Concepts

- **Task** (`taskit.domain.Task`): a title, an optional description, a status
  (`TaskStatus.TODO` or `TaskStatus.DONE`), an optional due date, an optional
  project id and a creation time (UTC).
- **Project** (`taskit.domain.Project`): a name, a colour and a creation time.
- **Filter** (`taskit.state.Filter`): which tasks `AppState.filtered_tasks()`
  returns:
  - `Filter.INBOX`: tasks that belong to no project.
  - `Filter.TODAY`: tasks due on the current local date.
  - `Filter.UPCOMING`: tasks due after the current local date.
  - `Filter.project(id)`: the tasks of one project.

## Storage

`taskit.db.Database(path=None)` opens (or creates) the database, by default at
`default_db_path()` in the user's data directory, creating the directory if
needed. Pass `":memory:"` for a throw-away database. It can be used as a
context manager and closes its connection on exit.

- Tasks come back from `get_all_tasks()` newest first; projects from
  `get_projects()` in storage order.
- Dates are stored as RFC 3339 text in UTC and read back as aware UTC
  datetimes. An unreadable due date is read as no due date.
- `update_task` and `update_project` raise `ValueError` for a record without an
  id.
- `delete_project` moves the project's tasks back to the Inbox; the tasks are
  not deleted.

## Usage

```python
from taskit.db import Database
from taskit.state import AppState, Filter

with Database() as db:
    state = AppState(db)
    state.refresh()

    state.add_project("Home")
    home = state.projects[0]

    state.active_filter = Filter.project(home.id)
    state.add_task("Buy milk", None)     # added to the active project

    for task in state.filtered_tasks():
        print(task.title, task.status)
        state.toggle_task(task.id, task.status)
```

Tasks added while `Filter.TODAY` is active get the current time as their due
date unless one is given. New projects take their colours from a fixed
palette of six, in turn. Deleting the project that is the active filter
switches the filter back to `Filter.INBOX`.

`AppState.search_query` narrows `filtered_tasks()` further: a case-insensitive
substring match on the task title.

`add_task`, `add_project`, `update_project_name` and `delete_project` let
database errors propagate; `toggle_task`, `delete_task`, `update_task_title`
and `update_task_due_date` ignore them and just refresh.

## Appearance

`taskit.config.Config` holds the chosen theme (default `"System"`) and font
(default none). It is stored as JSON at `default_config_path()` in the user's
config directory, or at a path you give. `Config.load` falls back to the
defaults if the file is missing or invalid.

```python
from taskit.config import Config
from taskit.style import build_css, font_css, prefers_dark
from taskit.themes import get_all_themes, get_theme_css

config = Config.load(None)
config.theme = "Dark"
config.font = "Sans 12"
config.save(None)

css = build_css(config)       # theme rules, font rule and the done-task rule
print(font_css("Sans 12"))    # * { font-family: "Sans"; font-size: 12pt; }
dark = prefers_dark(config)   # True only for the "Dark" theme
print(get_all_themes())       # ['System', 'Dark']
```

`get_theme_css` returns the common stylesheet for any name other than
`"Dark"`, which adds dark colour overrides in front of it.

`taskit.icons.get_svg(name)` returns a complete 24×24 SVG document for the
known icon names (`inbox`, `inbox_alt`, `calendar`, `calendar-days`, `folder`,
`plus`, `settings`, `trash-2`, `pencil`, `check`, `circle`) and `None` for any
other name.

## What it does not do

taskit has no window, screen or command-line program: nothing here displays
tasks or takes input from a user. It provides the storage, the state and the
stylesheet and icon text that a front end would use. Icons are returned as SVG
text only; taskit does not render them to images.