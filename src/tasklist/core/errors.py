# src/tasklist/core/errors.py

"""
Error taxonomy shared by the service and every adapter.

Adapters map these to their transport (GraphQL errors[], HTTP status codes,
console text) but must keep `message` as-is: clients match on the text.
"""

from __future__ import annotations

TITLE_REQUIRED = "Title is required"
TITLE_TOO_LONG = "Title must be 255 characters or less"
INVALID_TASK_ID = "Valid task ID is required"
TASK_NOT_FOUND = "Task not found"


class TaskError(Exception):
    """Base class for errors surfaced to callers."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TaskError):
    """Caller-supplied input violates a precondition."""

    code = "BAD_USER_INPUT"


class NotFoundError(TaskError):
    """Referenced task id does not exist."""

    code = "NOT_FOUND"


class StoreError(TaskError):
    """Underlying store call failed (connectivity, constraint violation, ...)."""

    code = "INTERNAL_SERVER_ERROR"


InfrastructureError = StoreError
