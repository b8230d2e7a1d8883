"""Smoke tests for the Streamlit pages."""

import json
from pathlib import Path

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

ROOT = Path(__file__).resolve().parents[1]
DASHBOARD = str(ROOT / "pages" / "10_Dashboard.py")


@pytest.fixture
def store_path(tmp_path, monkeypatch):
    path = tmp_path / "store.json"
    monkeypatch.setenv("STANDUP_STORE_BACKEND", "local")
    monkeypatch.setenv("STANDUP_STORE_PATH", str(path))
    st.cache_resource.clear()
    yield path
    st.cache_resource.clear()


@pytest.fixture
def dashboard(store_path):
    at = AppTest.from_file(DASHBOARD, default_timeout=30)
    at.run()
    return at


def stored(path, key):
    document = json.loads(path.read_text(encoding="utf-8"))
    return json.loads(document.get(key, "[]"))


def button(at, label):
    return next(b for b in at.button if b.label == label)


class TestDashboard:
    def test_empty_dashboard_renders(self, dashboard):
        assert not dashboard.exception
        assert any("No entries yet" in info.value for info in dashboard.info)

    def test_create_project(self, dashboard, store_path):
        button(dashboard, "+ New Project").click().run()
        dashboard.text_input(key="new_project_name").input("Website")
        button(dashboard, "Add").click().run()
        assert not dashboard.exception
        assert stored(store_path, "projects") == [{"name": "Website", "archived": False}]

    def test_demo_data_needs_confirmation(self, dashboard, store_path):
        button(dashboard, "🎲 Demo Data").click().run()
        assert not store_path.exists()
        dashboard.button(key="confirm-yes-demo-data").click().run()
        assert not dashboard.exception
        assert len(stored(store_path, "projects")) == 5
        assert len(stored(store_path, "entries")) == 5
        assert len(stored(store_path, "ideas")) == 5

    def test_clear_all_cancel_then_confirm(self, dashboard, store_path):
        button(dashboard, "🎲 Demo Data").click().run()
        dashboard.button(key="confirm-yes-demo-data").click().run()

        button(dashboard, "🗑️ Clear All").click().run()
        dashboard.button(key="confirm-no-clear-all").click().run()
        assert len(stored(store_path, "entries")) == 5

        button(dashboard, "🗑️ Clear All").click().run()
        dashboard.button(key="confirm-yes-clear-all").click().run()
        assert not dashboard.exception
        for key in ("projects", "entries", "ideas"):
            assert stored(store_path, key) == []

    def test_submit_standup(self, dashboard, store_path):
        button(dashboard, "+ Add Today's Standup").click().run()
        dashboard.text_area(key="entry_accomplished").input("x\n\ny")
        dashboard.text_area(key="entry_notes").input("notes here")
        button(dashboard, "Save Entry").click().run()
        assert not dashboard.exception
        entries = stored(store_path, "entries")
        assert len(entries) == 1
        assert entries[0]["accomplished"] == ["x", "y"]
        assert entries[0]["notes"] == "notes here"

    def test_timeline_skips_empty_sections(self, dashboard):
        button(dashboard, "+ Add Today's Standup").click().run()
        dashboard.text_area(key="entry_accomplished").input("shipped")
        button(dashboard, "Save Entry").click().run()
        rendered = " ".join(md.value for md in dashboard.markdown)
        assert "shipped" in rendered
        assert "Working on" not in rendered
        assert "Blockers" not in rendered
        assert "Nothing noted" not in rendered
