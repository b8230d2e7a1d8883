import html

import streamlit as st

from standup.data.tracker import Tracker
from standup.ui import confirm
from standup.ui.timeline import tags_html


def idea_form(tracker: Tracker):
    active = [p.name for p in tracker.active_projects()]
    with st.form("idea_form", clear_on_submit=True):
        title = st.text_input("Title", placeholder="What's your idea?", key="idea_title")
        description = st.text_area("Description", placeholder="Describe your idea in detail...", height=200, key="idea_description")
        if active:
            selected = st.multiselect("🏷️ Link to Projects", active, key="idea_projects")
        else:
            selected = []
            st.caption("No projects yet. Create projects in the dashboard first.")
        save_col, cancel_col = st.columns(2)
        submitted = save_col.form_submit_button("Save Idea", type="primary", use_container_width=True)
        cancelled = cancel_col.form_submit_button("Cancel", use_container_width=True)

    if submitted:
        tracker.add_idea(title, description, selected)
        st.session_state.show_idea_form = False
        st.toast("Idea saved")
        st.rerun()
    if cancelled:
        st.session_state.show_idea_form = False
        st.rerun()


def ideas_list(tracker: Tracker):
    if not tracker.ideas:
        with st.container(border=True):
            st.markdown("<div style='text-align:center;font-size:3rem;opacity:.4'>💡</div>", unsafe_allow_html=True)
            st.markdown("<h3 style='text-align:center'>No ideas yet</h3>", unsafe_allow_html=True)
            st.markdown("<p class='muted' style='text-align:center'>Start capturing your thoughts</p>",
                        unsafe_allow_html=True)
        return
    for idea in tracker.ideas:
        with st.container(border=True):
            head, action = st.columns([10, 1])
            head.markdown(f"### {html.escape(idea.title)}")
            if action.button("🗑️", key=f"idea-delete-{idea.id}", help="Delete idea"):
                confirm.ask(f"delete-idea-{idea.id}", "Delete this idea?")
                st.rerun()
            confirm.confirm_gate(f"delete-idea-{idea.id}", lambda idea_id=idea.id: tracker.delete_idea(idea_id))
            if idea.projects:
                st.markdown(tags_html(idea.projects), unsafe_allow_html=True)
            if idea.description:
                st.markdown(f"<p class='muted' style='white-space:pre-wrap'>{html.escape(idea.description)}</p>",
                            unsafe_allow_html=True)
            st.caption(idea.date)
