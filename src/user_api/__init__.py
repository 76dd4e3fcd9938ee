"""User management API: create users and fetch them by identifier."""

__version__ = "1.0.0"
