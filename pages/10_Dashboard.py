import streamlit as st

from standup.config import APP_NAME, APP_ICON, configure_logging
from standup.state import init_state, get_tracker
from standup.style_utils import apply_theme
from standup.ui.board import board_view
from standup.ui.data_tools import data_tools
from standup.ui.entry import entry_form
from standup.ui.export_panel import export_panel
from standup.ui.landing import greeting
from standup.ui.projects_panel import projects_panel
from standup.ui.timeline import timeline_view

st.set_page_config(page_title=f"Dashboard - {APP_NAME}", page_icon="📊", layout="wide")
configure_logging()
apply_theme()
init_state()

tracker = get_tracker()

with st.sidebar:
    st.markdown(f"### {APP_ICON} {APP_NAME}")
    data_tools(tracker)
    export_panel(tracker)
    st.divider()
    projects_panel(tracker)

text, emoji = greeting()
st.title(f"{emoji} {text}")
st.caption("Ready for today's standup?")

if st.session_state.show_entry_form:
    st.subheader("Today's Standup")
    entry_form(tracker)
elif st.button("+ Add Today's Standup", type="primary"):
    st.session_state.show_entry_form = True
    st.rerun()

st.divider()

selected = st.session_state.selected_project
heading_col, mode_col = st.columns([3, 2])
heading_col.subheader(selected or "All Entries")
view_mode = mode_col.radio(
    "View",
    ["timeline", "board"],
    format_func=lambda m: "📋 Timeline" if m == "timeline" else "📊 Board",
    horizontal=True,
    key="view_mode",
    label_visibility="collapsed",
)

if view_mode == "board":
    board_view(tracker)
else:
    timeline_view(tracker, tracker.filter_entries(selected))
