# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

TITLE_MAX_LENGTH = 255


@dataclass(slots=True, frozen=True)
class Task:
    id: int
    title: str
    completed: bool
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Wire shape used by the HTTP controller."""
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "created_at": self.created_at.isoformat(),
        }


def parse_timestamp(raw: str | None) -> datetime:
    """Parse a stored ISO timestamp; naive values are treated as UTC."""
    if not raw:
        return datetime.fromtimestamp(0, tz=UTC)
    ts = datetime.fromisoformat(raw)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return ts
