"""Records, database access and bcrypt password helpers for a project and task board."""

__version__ = "0.1.0"