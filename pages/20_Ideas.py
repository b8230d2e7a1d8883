import streamlit as st

from standup.config import APP_NAME, APP_ICON, configure_logging
from standup.state import init_state, get_tracker
from standup.style_utils import apply_theme
from standup.ui.ideas import idea_form, ideas_list

st.set_page_config(page_title=f"Ideas - {APP_NAME}", page_icon="💡", layout="wide")
configure_logging()
apply_theme()
init_state()

tracker = get_tracker()

with st.sidebar:
    st.markdown(f"### {APP_ICON} {APP_NAME}")
    st.page_link("pages/10_Dashboard.py", label="Dashboard", icon="📊")

title_col, action_col = st.columns([4, 1])
title_col.title("💡 Ideas")
title_col.caption("Capture your thoughts and connect them to projects")

if st.session_state.show_idea_form:
    st.subheader("New Idea")
    idea_form(tracker)
elif action_col.button("+ New Idea", type="primary", use_container_width=True):
    st.session_state.show_idea_form = True
    st.rerun()

st.divider()
ideas_list(tracker)
