from dataclasses import dataclass, asdict
from typing import Optional

import streamlit as st

from standup.data.storage import get_store
from standup.data.tracker import Tracker

TRACKER_KEY = "tracker"


@dataclass
class AppState:
    selected_project: Optional[str] = None
    show_archived: bool = False
    view_mode: str = "timeline"
    editing_project: Optional[str] = None
    pending_confirm: Optional[dict] = None
    show_entry_form: bool = False
    show_idea_form: bool = False
    show_new_project: bool = False


def init_state():
    # Initialize keys once
    if "initialized" in st.session_state:
        return
    st.session_state.initialized = True
    for k, v in asdict(AppState()).items():
        setattr(st.session_state, k, v)


def get_tracker() -> Tracker:
    """Tracker for this session, loaded from the configured store on first use."""
    if TRACKER_KEY not in st.session_state:
        st.session_state[TRACKER_KEY] = Tracker(get_store())
    return st.session_state[TRACKER_KEY]
