import html
from typing import List

import streamlit as st

from standup.data.models import Entry
from standup.data.tracker import Tracker
from standup.ui import confirm

SECTIONS = [
    ("accomplished", "✓ Accomplished"),
    ("next", "→ Working on"),
    ("blockers", "⚠️ Blockers"),
]


def tags_html(projects: List[str]) -> str:
    return "".join(f"<span class='tag'>{html.escape(p)}</span>" for p in projects)


def section_html(title: str, items: List[str]) -> str:
    rows = "".join(f"<li>{html.escape(item)}</li>" for item in items)
    return f"<p><strong>{html.escape(title)}</strong></p><ul>{rows}</ul>"


def _entry_card(tracker: Tracker, entry: Entry):
    with st.container(border=True):
        head, action = st.columns([10, 1])
        head.markdown(f"**{html.escape(entry.date)}** {tags_html(entry.projects)}", unsafe_allow_html=True)
        if action.button("🗑️", key=f"entry-delete-{entry.id}", help="Delete entry"):
            confirm.ask(f"delete-entry-{entry.id}", "Delete this entry? This action cannot be undone.")
            st.rerun()
        confirm.confirm_gate(f"delete-entry-{entry.id}", lambda: tracker.delete_entry(entry.id))

        for field, title in SECTIONS:
            items = getattr(entry, field)
            if items:
                st.markdown(section_html(title, items), unsafe_allow_html=True)
        if entry.notes:
            st.markdown(f"<p class='muted' style='white-space:pre-wrap'>{html.escape(entry.notes)}</p>",
                        unsafe_allow_html=True)


def timeline_view(tracker: Tracker, entries: List[Entry]):
    if not entries:
        st.info("No entries yet. Add today's standup to get started.")
        return
    for entry in entries:
        _entry_card(tracker, entry)
