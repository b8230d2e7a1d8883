"""
Tracker: the single owner of the three collections.

Every mutating method updates the in-memory lists and writes the full
affected collection(s) back to the store before returning. Invalid input is
rejected silently: the method returns False and nothing changes.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Dict, Iterable, List, Optional

from standup.config import STORE_KEYS
from standup.data.demo import demo_data
from standup.data.models import (
    Entry,
    Idea,
    Project,
    Task,
    UNTITLED,
    format_date,
    new_id,
    split_lines,
    tasks_for_entry,
)

logger = logging.getLogger(__name__)

UNASSIGNED_LABEL = "Unassigned"


class Tracker:
    def __init__(self, store, today=None):
        self.store = store
        self._today = today or date.today
        self.projects: List[Project] = []
        self.entries: List[Entry] = []
        self.ideas: List[Idea] = []
        self.reload()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def _load(self, key: str) -> list:
        raw = self.store.get(key)
        if not raw:
            return []
        return json.loads(raw)

    def reload(self) -> None:
        """Re-read all three collections from the store."""
        self.projects = [Project.from_dict(p) for p in self._load("projects")]
        self.entries = [Entry.from_dict(e) for e in self._load("entries")]
        self.ideas = [Idea.from_dict(i) for i in self._load("ideas")]

    def _save(self, key: str, records: Iterable) -> None:
        self.store.set(key, json.dumps([r.to_dict() for r in records], ensure_ascii=False))

    def _save_projects(self) -> None:
        self._save("projects", self.projects)

    def _save_entries(self) -> None:
        self._save("entries", self.entries)

    def _save_ideas(self) -> None:
        self._save("ideas", self.ideas)

    def _today_str(self) -> str:
        return format_date(self._today())

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    def project_names(self) -> List[str]:
        return [p.name for p in self.projects]

    def get_project(self, name: str) -> Optional[Project]:
        for project in self.projects:
            if project.name == name:
                return project
        return None

    def active_projects(self) -> List[Project]:
        return [p for p in self.projects if not p.archived]

    def archived_projects(self) -> List[Project]:
        return [p for p in self.projects if p.archived]

    def display_projects(self, show_archived: bool = False) -> List[Project]:
        return list(self.projects) if show_archived else self.active_projects()

    def add_project(self, name: str) -> bool:
        name = (name or "").strip()
        if not name or self.get_project(name) is not None:
            logger.debug("Rejected project name %r", name)
            return False
        self.projects.append(Project(name=name))
        self._save_projects()
        logger.info("Created project %r", name)
        return True

    def rename_project(self, old_name: str, new_name: str) -> bool:
        """Rename a project and rewrite the tags of every entry that used the old name."""
        new_name = (new_name or "").strip()
        project = self.get_project(old_name)
        if project is None or not new_name or self.get_project(new_name) is not None:
            logger.debug("Rejected rename %r -> %r", old_name, new_name)
            return False
        project.name = new_name
        for entry in self.entries:
            if old_name in entry.projects:
                entry.projects = [new_name if p == old_name else p for p in entry.projects]
        self._save_projects()
        self._save_entries()
        logger.info("Renamed project %r to %r", old_name, new_name)
        return True

    def delete_project(self, name: str) -> bool:
        """Remove the project record only; entry and idea tags are left as they are."""
        remaining = [p for p in self.projects if p.name != name]
        if len(remaining) == len(self.projects):
            return False
        self.projects = remaining
        self._save_projects()
        logger.info("Deleted project %r", name)
        return True

    def toggle_archive(self, name: str) -> bool:
        project = self.get_project(name)
        if project is None:
            return False
        project.archived = not project.archived
        self._save_projects()
        logger.info("%s project %r", "Archived" if project.archived else "Unarchived", name)
        return True

    def move_project(self, name: str, direction: str, show_archived: bool = True) -> bool:
        """Swap a project with its neighbour in the displayed list.

        Hidden (archived) projects keep their positions when they are not shown.
        """
        if direction not in ("up", "down"):
            raise ValueError(f"direction must be 'up' or 'down', got {direction!r}")
        visible = self.display_projects(show_archived)
        names = [p.name for p in visible]
        if name not in names:
            return False
        index = names.index(name)
        neighbour = index - 1 if direction == "up" else index + 1
        if neighbour < 0 or neighbour >= len(visible):
            return False
        i = self.projects.index(visible[index])
        j = self.projects.index(visible[neighbour])
        self.projects[i], self.projects[j] = self.projects[j], self.projects[i]
        self._save_projects()
        return True

    def entry_counts(self) -> Dict[str, int]:
        """Entries tagged with each project, archived projects included."""
        return {p.name: sum(1 for e in self.entries if p.name in e.projects) for p in self.projects}

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------
    def add_entry(self, accomplished: str = "", next_steps: str = "", blockers: str = "",
                  projects: Optional[List[str]] = None, notes: str = "") -> Entry:
        entry = Entry(
            id=new_id(e.id for e in self.entries),
            date=self._today_str(),
            accomplished=split_lines(accomplished),
            next=split_lines(next_steps),
            blockers=split_lines(blockers),
            projects=list(dict.fromkeys(projects or [])),
            notes=notes or "",
        )
        self.entries.insert(0, entry)
        self._save_entries()
        logger.info("Added entry %s tagged %s", entry.id, entry.projects)
        return entry

    def delete_entry(self, entry_id: str) -> bool:
        remaining = [e for e in self.entries if e.id != entry_id]
        if len(remaining) == len(self.entries):
            return False
        self.entries = remaining
        self._save_entries()
        logger.info("Deleted entry %s", entry_id)
        return True

    def filter_entries(self, project: Optional[str] = None) -> List[Entry]:
        if not project:
            return list(self.entries)
        return [e for e in self.entries if project in e.projects]

    def board(self) -> Dict[Optional[str], List[Task]]:
        """Task columns keyed by active project name.

        Tasks from untagged entries go under the None key, present only when non-empty.
        """
        columns: Dict[Optional[str], List[Task]] = {}
        for project in self.active_projects():
            tasks: List[Task] = []
            for entry in self.entries:
                if project.name in entry.projects:
                    tasks.extend(tasks_for_entry(entry))
            columns[project.name] = tasks
        unassigned: List[Task] = []
        for entry in self.entries:
            if not entry.projects:
                unassigned.extend(tasks_for_entry(entry))
        if unassigned:
            columns[None] = unassigned
        return columns

    # ------------------------------------------------------------------
    # Ideas
    # ------------------------------------------------------------------
    def add_idea(self, title: str = "", description: str = "", projects: Optional[List[str]] = None) -> Idea:
        idea = Idea(
            id=new_id(i.id for i in self.ideas),
            title=(title or "").strip() or UNTITLED,
            description=description or "",
            projects=list(dict.fromkeys(projects or [])),
            date=self._today_str(),
        )
        self.ideas.insert(0, idea)
        self._save_ideas()
        logger.info("Added idea %s", idea.id)
        return idea

    def delete_idea(self, idea_id: str) -> bool:
        remaining = [i for i in self.ideas if i.id != idea_id]
        if len(remaining) == len(self.ideas):
            return False
        self.ideas = remaining
        self._save_ideas()
        logger.info("Deleted idea %s", idea_id)
        return True

    # ------------------------------------------------------------------
    # Demo / reset
    # ------------------------------------------------------------------
    def load_demo_data(self) -> None:
        projects, entries, ideas = demo_data()
        self.projects = [Project.from_dict(p) for p in projects]
        self.entries = [Entry.from_dict(e) for e in entries]
        self.ideas = [Idea.from_dict(i) for i in ideas]
        self._save_projects()
        self._save_entries()
        self._save_ideas()
        logger.info("Loaded demo data")

    def clear_all(self) -> None:
        for key in STORE_KEYS:
            self.store.remove(key)
        self.projects, self.entries, self.ideas = [], [], []
        logger.info("Cleared all data")
