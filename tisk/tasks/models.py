"""Task and note dataclasses plus their on-disk JSON schema.

WHY: Every command reads tasks from disk, changes a few fields, and writes
them back. A typed in-memory form keeps field access honest, and a JSON
schema checked on both read and write keeps a hand-edited or half-written
task file from being silently misread.

HOW: Three types form the model:
  Status: open or closed
  Note: a timestamped free-text comment on a task
  Task: id, name, status, creation time, priority and notes
Task.to_dict() / Task.from_dict() convert to and from the JSON document
stored in <id>.json; both validate against TASK_SCHEMA with jsonschema.

RULES:
- Timestamps are timezone-aware UTC datetimes, stored as ISO 8601 strings
- Missing created_at on disk defaults to "now"; missing priority to 0;
  missing notes to an empty list
- Status is stored as "Open" / "Closed"
- IDs and priorities are non-negative integers
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

import jsonschema

TASK_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "tisk task",
    "type": "object",
    "required": ["id", "name", "status"],
    "properties": {
        "id": {"type": "integer", "minimum": 0},
        "name": {"type": "string"},
        "status": {"enum": ["Open", "Closed"]},
        "created_at": {"type": "string"},
        "priority": {"type": "integer", "minimum": 0},
        "notes": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["note"],
                "properties": {
                    "created_at": {"type": "string"},
                    "note": {"type": "string"},
                },
            },
        },
    },
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(value: str | None) -> datetime:
    if not value:
        return utc_now()
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class Status(Enum):
    OPEN = "Open"
    CLOSED = "Closed"


@dataclass
class Note:
    """A free-text comment attached to a task."""

    note: str
    created_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict[str, Any]:
        return {"created_at": self.created_at.isoformat(), "note": self.note}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Note:
        return cls(note=data["note"], created_at=_parse_timestamp(data.get("created_at")))


@dataclass
class Task:
    """A single tracked task.

    WHY: The unit the tool stores (one file each), lists, and edits.

    RULES:
    - id is assigned by TaskList.next_id() and never reused within a list
    - priority: higher numbers sort first in listings
    - notes are kept in the order they were added
    """

    id: int
    name: str
    status: Status = Status.OPEN
    priority: int = 0
    created_at: datetime = field(default_factory=utc_now)
    notes: list[Note] = field(default_factory=list)

    def add_note(self, text: str) -> Note:
        note = Note(note=text)
        self.notes.append(note)
        return note

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON document stored on disk.

        Raises:
            jsonschema.ValidationError: If the task holds values the schema
                rejects (e.g. a negative priority).
        """
        data = {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "priority": self.priority,
            "notes": [n.to_dict() for n in self.notes],
        }
        jsonschema.validate(instance=data, schema=TASK_SCHEMA)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        """Build a Task from a JSON document, filling in optional fields.

        Raises:
            jsonschema.ValidationError: If the document does not match
                TASK_SCHEMA.
        """
        jsonschema.validate(instance=data, schema=TASK_SCHEMA)
        return cls(
            id=data["id"],
            name=data["name"],
            status=Status(data["status"]),
            priority=data.get("priority", 0),
            created_at=_parse_timestamp(data.get("created_at")),
            notes=[Note.from_dict(n) for n in data.get("notes", [])],
        )
