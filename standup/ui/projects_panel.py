from typing import MutableMapping

import streamlit as st

from standup.data.tracker import Tracker
from standup.ui import confirm


def rename_project(tracker: Tracker, state: MutableMapping, old_name: str, new_name: str) -> bool:
    """Rename and keep the selected-project filter pointing at the same project."""
    if not tracker.rename_project(old_name, new_name):
        return False
    if state.get("selected_project") == old_name:
        state["selected_project"] = new_name.strip()
    state["editing_project"] = None
    return True


def delete_project(tracker: Tracker, state: MutableMapping, name: str) -> bool:
    if not tracker.delete_project(name):
        return False
    if state.get("selected_project") == name:
        state["selected_project"] = None
    return True


def _select(name):
    st.session_state.selected_project = name


def _new_project_form(tracker: Tracker):
    if not st.session_state.show_new_project:
        if st.button("+ New Project", use_container_width=True):
            st.session_state.show_new_project = True
            st.rerun()
        return
    with st.form("new_project_form", clear_on_submit=True):
        name = st.text_input("Project name", placeholder="Project name...", key="new_project_name")
        add_col, cancel_col = st.columns(2)
        added = add_col.form_submit_button("Add", type="primary", use_container_width=True)
        cancelled = cancel_col.form_submit_button("Cancel", use_container_width=True)
    if added and tracker.add_project(name):
        st.session_state.show_new_project = False
        st.rerun()
    if cancelled:
        st.session_state.show_new_project = False
        st.rerun()


def _rename_row(tracker: Tracker, name: str):
    new_name = st.text_input("Rename project", value=name, key=f"rename-input-{name}")
    save_col, cancel_col = st.columns(2)
    if save_col.button("Save", key=f"rename-save-{name}", type="primary", use_container_width=True):
        if new_name.strip() and new_name.strip() != name:
            rename_project(tracker, st.session_state, name, new_name)
        else:
            st.session_state.editing_project = None
        st.rerun()
    if cancel_col.button("Cancel", key=f"rename-cancel-{name}", use_container_width=True):
        st.session_state.editing_project = None
        st.rerun()


def _project_row(tracker: Tracker, project, index: int, total: int, count: int):
    name = project.name
    selected = st.session_state.selected_project == name
    up, down, label, edit, archive, delete = st.columns([1, 1, 5, 1, 1, 1])
    if up.button("▲", key=f"proj-up-{name}", disabled=index == 0):
        tracker.move_project(name, "up", st.session_state.show_archived)
        st.rerun()
    if down.button("▼", key=f"proj-down-{name}", disabled=index == total - 1):
        tracker.move_project(name, "down", st.session_state.show_archived)
        st.rerun()
    text = f"{'📦 ' if project.archived else ''}{name} ({count})"
    label.button(text, key=f"proj-select-{name}", on_click=_select, args=(name,),
                 type="primary" if selected else "secondary", use_container_width=True)
    if edit.button("✏️", key=f"proj-edit-{name}", help="Rename"):
        st.session_state.editing_project = name
        st.rerun()
    if archive.button("📤" if project.archived else "📦", key=f"proj-archive-{name}",
                      help="Unarchive" if project.archived else "Archive"):
        tracker.toggle_archive(name)
        st.rerun()
    if delete.button("🗑️", key=f"proj-delete-{name}", help="Delete"):
        confirm.ask(f"delete-project-{name}",
                    f'Delete project "{name}"? All entries will keep their project tags.')
        st.rerun()
    confirm.confirm_gate(f"delete-project-{name}",
                         lambda: delete_project(tracker, st.session_state, name))


def projects_panel(tracker: Tracker):
    st.subheader(f"Projects ({len(tracker.projects)})" if tracker.projects else "Projects")
    _new_project_form(tracker)

    archived = tracker.archived_projects()
    if archived:
        label = f"📦 {'Hide' if st.session_state.show_archived else 'Show'} Archived ({len(archived)})"
        if st.button(label, use_container_width=True):
            st.session_state.show_archived = not st.session_state.show_archived
            st.rerun()

    display = tracker.display_projects(st.session_state.show_archived)
    if not display:
        st.caption("No projects yet. Create one to organize your standups.")
        return

    st.button("All Entries", key="proj-select-all", on_click=_select, args=(None,),
              type="primary" if not st.session_state.selected_project else "secondary",
              use_container_width=True)
    counts = tracker.entry_counts()
    for index, project in enumerate(display):
        if st.session_state.editing_project == project.name:
            _rename_row(tracker, project.name)
        else:
            _project_row(tracker, project, index, len(display), counts.get(project.name, 0))
