"""Shared test fixtures."""

from datetime import date

import pytest

from standup.data.storage import MemoryStore
from standup.data.tracker import Tracker

TODAY = date(2026, 2, 14)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def tracker(store) -> Tracker:
    """Empty tracker over an in-memory store with a fixed date."""
    return Tracker(store, today=lambda: TODAY)


@pytest.fixture
def seeded_tracker(tracker) -> Tracker:
    """Tracker with three projects (one archived) and three entries."""
    for name in ("Alpha", "Beta", "Gamma"):
        tracker.add_project(name)
    tracker.toggle_archive("Gamma")
    tracker.add_entry("a1\na2", "n1", "", ["Alpha"], "first")
    tracker.add_entry("b1", "", "blocked", ["Alpha", "Beta"])
    tracker.add_entry("loose", "", "", [])
    return tracker
