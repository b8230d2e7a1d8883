from typing import MutableMapping

import streamlit as st

from standup.data.tracker import Tracker
from standup.ui import confirm


def load_demo(tracker: Tracker, state: MutableMapping):
    tracker.load_demo_data()
    state["selected_project"] = None


def clear_everything(tracker: Tracker, state: MutableMapping):
    tracker.clear_all()
    state["selected_project"] = None
    state["editing_project"] = None


def data_tools(tracker: Tracker):
    demo_col, clear_col = st.columns(2)
    if demo_col.button("🎲 Demo Data", use_container_width=True):
        confirm.ask("demo-data", "This will generate demo data. Continue?")
        st.rerun()
    if clear_col.button("🗑️ Clear All", use_container_width=True):
        confirm.ask("clear-all", "This will delete ALL data. Are you sure?")
        st.rerun()

    def _demo():
        load_demo(tracker, st.session_state)
        st.toast("✅ Demo data generated! Switch to Board view to see it organized by project.")

    def _clear():
        clear_everything(tracker, st.session_state)
        st.toast("🗑️ All data cleared!")

    confirm.confirm_gate("demo-data", _demo)
    confirm.confirm_gate("clear-all", _clear)
