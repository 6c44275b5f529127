# taskboard

taskboard holds the data layer of a small project and task board: the
records it works with, reading projects, tasks and users from a relational
database, adding tasks, and checking bcrypt passwords.

It works with any DB-API connection that uses the `qmark` (`?`) parameter
style, such as `sqlite3`.

## Modules

### `taskboard.models`

Dataclasses for the stored records: `User`, `UserInfo`, `Task`,
`ProjectTask`, `Project`, `TaskForm`, `PageData`, `Role`, `Address`,
`StructuralDivision`, `Employee`, `TaskEmployee` and `ProjectEmployee`.
`Task`, `ProjectTask` and `Project` have a `to_dict()` method that returns a
JSON-ready mapping with dates in ISO form.

### `taskboard.db`

`connect(factory)` calls `factory()` to open a connection, runs `SELECT 1`
on it and returns it. If opening or checking fails it raises
`DatabaseError`.

```python
import sqlite3
from taskboard.db import connect

conn = connect(lambda: sqlite3.connect("board.db"))
```

### `taskboard.auth`

- `generate_bcrypt_hash(password)` hashes a password with bcrypt at cost 10.
- `compare_password_with_hash(password, hashed_password)` returns whether
  the password matches; a malformed hash raises `ValueError`.
- `check_user_exists(conn, username)` returns the `User` row from the
  `users` table, or raises `UserNotFoundError`.

```python
from taskboard.auth import generate_bcrypt_hash, compare_password_with_hash

password = "password"
hashed = generate_bcrypt_hash(password)
assert compare_password_with_hash(password, hashed)
```

### `taskboard.queries`

- `list_projects(conn)` returns every `Project`.
- `tasks_for_user(conn, username)` returns the `Task`s assigned to a user.
- `tasks_for_project(conn, project_id)` returns the `ProjectTask`s of a
  project; a project id given as text that is not a decimal integer raises
  `ValueError`.
- `list_users(conn)` returns `UserInfo` records with a `/tasks/<name>` link.
- `task_form_options(conn)` returns `{"employees": [...], "projects": [...]}`.
- `add_task(conn, form)` inserts the task described by a `TaskForm`, assigns
  it to the employee whose user name is in `form.employee_id`, commits and
  returns the new task id. An unknown employee or project raises
  `UnknownEmployeeError` or `UnknownProjectError`; other failures roll back.
- `format_date(value)` formats a date as `YYYY-MM-DD`.

The queries expect the tables `projects`, `tasks`, `task_employee`,
`employee` and `users`, and the view `user_info_view`.

## What it does not do

taskboard has no web server, no HTML pages or templates and no command to
run. It does not create the database schema. It supplies the data and
password functions that such an application would call.

## Installation

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```