"""Records stored in and read from the task-board database."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any


@dataclass(frozen=True)
class User:
    """A login account with its bcrypt password hash."""

    username: str
    hashed_password: bytes


@dataclass(frozen=True)
class UserInfo:
    """A user as shown in the user list, with a link to their tasks."""

    name: str
    roles: str
    tasks_link: str = ""


@dataclass
class ProjectTask:
    """A task of a project together with the employee it is assigned to."""

    task_id: int
    task_point: str
    task_status: str
    deadline: date
    employee_name: str

    def to_dict(self) -> dict[str, Any]:
        """Return the task as a JSON-ready mapping."""
        return {
            "task_id": self.task_id,
            "task_point": self.task_point,
            "task_status": self.task_status,
            "deadline": self.deadline.isoformat(),
            "employee_name": self.employee_name,
        }


@dataclass
class TaskForm:
    """The raw fields submitted by the add-task form."""

    task_point: str = ""
    task_status: str = ""
    deadline: str = ""
    employee_id: str = ""
    project_name: str = ""


@dataclass
class PageData:
    """What a page needs to decide what the current user may see."""

    role: str = ""
    projects: list[str] = field(default_factory=list)
    tasks: list[str] = field(default_factory=list)
    username: str = ""


@dataclass
class Role:
    """A role in the system."""

    rol_id: int
    rol_name: str
    rol_point: str


@dataclass
class Address:
    """A physical address."""

    address_id: int
    country: str
    city: str
    street: str
    house: str
    flat: str


@dataclass
class Task:
    """A task with the name of the project it belongs to."""

    tasks_id: int
    task_point: str
    task_status: str
    deadline: date
    project_name: str

    def to_dict(self) -> dict[str, Any]:
        """Return the task as a JSON-ready mapping."""
        return {
            "tasks_id": self.tasks_id,
            "task_point": self.task_point,
            "task_status": self.task_status,
            "deadline": self.deadline.isoformat(),
            "project_id": self.project_name,
        }


@dataclass
class StructuralDivision:
    """A structural division within the company."""

    structural_divisions_id: int
    structural_divisions_name: str
    address_id: int


@dataclass
class Project:
    """A project with its goal, status and deadline."""

    project_id: int
    project_name: str
    project_goal: str
    project_status: str
    deadlines: date

    def to_dict(self) -> dict[str, Any]:
        """Return the project as a JSON-ready mapping."""
        return {
            "project_id": self.project_id,
            "project_name": self.project_name,
            "project_goal": self.project_goal,
            "project_status": self.project_status,
            "deadlines": self.deadlines.isoformat(),
        }


@dataclass
class Employee:
    """An employee of the company."""

    employee_id: int
    surname: str
    firstname: str
    passport_series: str
    passport_number: str
    post: str
    contacts: str
    photo: str
    rol_id: int
    address_id: int
    structural_divisions_id: int
    middlename: str = ""


@dataclass(frozen=True)
class TaskEmployee:
    """Assignment of a task to an employee."""

    task_employee_id: int
    employee_id: int
    task_id: int


@dataclass(frozen=True)
class ProjectEmployee:
    """Membership of an employee in a project."""

    project_employee_id: int
    employee_id: int
    project_id: int