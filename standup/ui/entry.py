import streamlit as st

from standup.data.tracker import Tracker


def entry_form(tracker: Tracker):
    active = [p.name for p in tracker.active_projects()]
    with st.form("standup_form", clear_on_submit=True):
        accomplished = st.text_area("✓ What did you accomplish since last time?",
                                    placeholder="Enter each item on a new line...", height=120, key="entry_accomplished")
        next_steps = st.text_area("→ What will you work on today?",
                                  placeholder="Enter each item on a new line...", height=120, key="entry_next")
        blockers = st.text_area("⚠️ Any blockers or issues?",
                                placeholder="Enter each blocker on a new line (or leave empty)...", height=100, key="entry_blockers")
        if active:
            selected = st.multiselect("🏷️ Select Projects", active, key="entry_projects")
        else:
            selected = []
            st.caption('No projects yet. Open "Projects" in the sidebar to create one.')
        notes = st.text_area("📝 Additional notes (optional)", placeholder="Any other thoughts or context...", key="entry_notes")
        save_col, cancel_col = st.columns(2)
        submitted = save_col.form_submit_button("Save Entry", type="primary", use_container_width=True)
        cancelled = cancel_col.form_submit_button("Cancel", use_container_width=True)

    if submitted:
        tracker.add_entry(accomplished, next_steps, blockers, selected, notes)
        st.session_state.show_entry_form = False
        st.toast("Entry saved")
        st.rerun()
    if cancelled:
        st.session_state.show_entry_form = False
        st.rerun()
