"""
Records kept by the tracker.

Projects, entries and ideas are stored as plain dicts in the key-value store;
the dataclasses here are the in-memory shape. Tasks are never stored, they are
derived from entries for the board view.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field, asdict
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

TASK_TYPES = ("accomplished", "next", "blocker")

# entry field holding the items of each task type
TASK_FIELDS = {
    "accomplished": "accomplished",
    "next": "next",
    "blocker": "blockers",
}

UNTITLED = "Untitled"


def split_lines(text: Optional[str]) -> List[str]:
    """Split multi-line form input into items, dropping blank lines."""
    if not text:
        return []
    return [line.strip() for line in str(text).splitlines() if line.strip()]


def format_date(value: date) -> str:
    return f"{value.month}/{value.day}/{value.year}"


def new_id(existing: Iterable[str] = ()) -> str:
    """Time-based id in milliseconds, bumped past any id already taken."""
    taken = set(existing)
    candidate = int(time.time() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


@dataclass
class Project:
    name: str
    archived: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        return cls(name=str(data.get("name", "")), archived=bool(data.get("archived", False)))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Entry:
    id: str
    date: str
    accomplished: List[str] = field(default_factory=list)
    next: List[str] = field(default_factory=list)
    blockers: List[str] = field(default_factory=list)
    projects: List[str] = field(default_factory=list)
    notes: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        return cls(
            id=str(data.get("id", "")),
            date=str(data.get("date", "")),
            accomplished=list(data.get("accomplished") or []),
            next=list(data.get("next") or []),
            blockers=list(data.get("blockers") or []),
            projects=list(data.get("projects") or []),
            notes=data.get("notes") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def items(self, task_type: str) -> List[str]:
        return getattr(self, TASK_FIELDS[task_type])


@dataclass
class Idea:
    id: str
    title: str
    description: str = ""
    projects: List[str] = field(default_factory=list)
    date: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Idea":
        return cls(
            id=str(data.get("id", "")),
            title=data.get("title") or UNTITLED,
            description=data.get("description") or "",
            projects=list(data.get("projects") or []),
            date=str(data.get("date", "")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Task:
    id: str
    text: str
    type: str
    date: str
    entry_id: str


def tasks_for_entry(entry: Entry) -> List[Task]:
    """One task per accomplished/next/blocker item, ids indexed within each category."""
    tasks = []
    for task_type in TASK_TYPES:
        for index, text in enumerate(entry.items(task_type)):
            tasks.append(Task(
                id=f"{entry.id}-{task_type}-{index}",
                text=text,
                type=task_type,
                date=entry.date,
                entry_id=entry.id,
            ))
    return tasks
