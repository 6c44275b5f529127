"""Reading and writing projects, tasks and users for the task-board pages."""

from __future__ import annotations

import logging
import re
from contextlib import closing
from datetime import date, datetime
from typing import Any, Iterable, Sequence

from taskboard.models import Project, ProjectTask, Task, TaskForm, UserInfo

logger = logging.getLogger(__name__)

_PROJECT_ID = re.compile(r"[+-]?[0-9]+")

_PROJECTS_SQL = (
    "SELECT project_id, project_name, project_goal, project_status, deadlines "
    "FROM projects"
)

_USER_TASKS_SQL = """
SELECT t.task_id, t.task_point, t.task_status, t.deadline,
       p.project_name AS project_name
FROM tasks t
INNER JOIN task_employee te ON t.task_id = te.task_id
INNER JOIN employee e ON te.employee_id = e.employee_id
INNER JOIN user_info_view uv ON e.id_user = uv.id
INNER JOIN projects p ON t.project_id = p.project_id
WHERE uv.username = ?
"""

_PROJECT_TASKS_SQL = """
SELECT t.task_id, t.task_point, t.task_status, t.deadline,
       uv.username AS user_name
FROM tasks t
INNER JOIN task_employee te ON t.task_id = te.task_id
INNER JOIN employee e ON te.employee_id = e.employee_id
INNER JOIN user_info_view uv ON e.id_user = uv.id
INNER JOIN projects p ON t.project_id = p.project_id
WHERE t.project_id = ?
"""

_USERS_SQL = """
SELECT u.username AS name, u.assigned_role AS role,
       '/tasks/' || u.username AS task_link
FROM user_info_view u
LEFT JOIN employee e ON u.id = e.id_user
LEFT JOIN task_employee te ON e.employee_id = te.employee_id
GROUP BY u.username, u.assigned_role
"""


class UnknownEmployeeError(LookupError):
    """Raised when no employee has the selected name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"could not determine the employee id for {name!r}")
        self.name = name


class UnknownProjectError(LookupError):
    """Raised when no project has the selected name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"could not determine the project id for {name!r}")
        self.name = name


def format_date(value: date) -> str:
    """Format a date or datetime as ``YYYY-MM-DD``."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _to_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bytes):
        value = value.decode("ascii")
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"cannot read a date from {value!r}")


def _rows(conn: Any, sql: str, params: Sequence[Any] = ()) -> list[tuple]:
    with closing(conn.cursor()) as cursor:
        cursor.execute(sql, tuple(params))
        return [tuple(row) for row in cursor.fetchall()]


def _scalar(conn: Any, sql: str, params: Sequence[Any]) -> Any | None:
    with closing(conn.cursor()) as cursor:
        cursor.execute(sql, tuple(params))
        row = cursor.fetchone()
    return None if row is None else row[0]


def _parse_project_id(project_id: int | str) -> int:
    if isinstance(project_id, bool):
        raise ValueError("Invalid project ID")
    if isinstance(project_id, int):
        return project_id
    if isinstance(project_id, str) and _PROJECT_ID.fullmatch(project_id):
        return int(project_id)
    raise ValueError("Invalid project ID")


def list_projects(conn: Any) -> list[Project]:
    """Return every project."""
    return [
        Project(
            project_id=int(pid),
            project_name=name,
            project_goal=goal,
            project_status=status,
            deadlines=_to_date(deadline),
        )
        for pid, name, goal, status, deadline in _rows(conn, _PROJECTS_SQL)
    ]


def tasks_for_user(conn: Any, username: str) -> list[Task]:
    """Return the tasks assigned to the user called ``username``."""
    return [
        Task(
            tasks_id=int(task_id),
            task_point=point,
            task_status=status,
            deadline=_to_date(deadline),
            project_name=project,
        )
        for task_id, point, status, deadline, project in _rows(
            conn, _USER_TASKS_SQL, (username,)
        )
    ]


def tasks_for_project(conn: Any, project_id: int | str) -> list[ProjectTask]:
    """Return the tasks of a project with the names of their assignees.

    A project id given as text must be a plain decimal integer; otherwise
    ValueError is raised.
    """
    pid = _parse_project_id(project_id)
    return [
        ProjectTask(
            task_id=int(task_id),
            task_point=point,
            task_status=status,
            deadline=_to_date(deadline),
            employee_name=employee,
        )
        for task_id, point, status, deadline, employee in _rows(
            conn, _PROJECT_TASKS_SQL, (pid,)
        )
    ]


def list_users(conn: Any) -> list[UserInfo]:
    """Return every user with their role and a link to their task page."""
    return [
        UserInfo(name=name, roles=role, tasks_link=link)
        for name, role, link in _rows(conn, _USERS_SQL)
    ]


def _first_column(rows: Iterable[tuple]) -> list[str]:
    return [row[0] for row in rows]


def task_form_options(conn: Any) -> dict[str, list[str]]:
    """Return the employee and project names offered by the add-task form."""
    employees = _first_column(_rows(conn, "SELECT username FROM user_info_view"))
    projects = _first_column(_rows(conn, "SELECT project_name FROM projects"))
    return {"employees": employees, "projects": projects}


def add_task(conn: Any, form: TaskForm) -> int:
    """Store a new task and assign it to an employee; return the task id.

    ``form.employee_id`` carries the selected employee's user name and
    ``form.project_name`` the selected project's name.
    """
    employee_id = _scalar(
        conn, "SELECT employee_id FROM employee WHERE username = ?", (form.employee_id,)
    )
    if employee_id is None:
        raise UnknownEmployeeError(form.employee_id)

    project_id = _scalar(
        conn, "SELECT project_id FROM projects WHERE project_name = ?", (form.project_name,)
    )
    if project_id is None:
        raise UnknownProjectError(form.project_name)

    try:
        with closing(conn.cursor()) as cursor:
            cursor.execute(
                "INSERT INTO tasks(task_point, task_status, deadline, project_id) "
                "VALUES (?, ?, ?, ?)",
                (form.task_point, form.task_status, form.deadline, project_id),
            )
            task_id = cursor.lastrowid
            cursor.execute(
                "INSERT INTO task_employee(task_id, employee_id) VALUES (?, ?)",
                (task_id, employee_id),
            )
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    logger.info("Added task %s for employee %s", task_id, employee_id)
    return int(task_id)