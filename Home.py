import streamlit as st

from standup.config import APP_NAME, APP_ICON, configure_logging
from standup.style_utils import apply_theme
from standup.ui.landing import landing

# Configure page
st.set_page_config(
    page_title=f"{APP_NAME} - Standup Tracker",
    page_icon=APP_ICON,
    layout="wide"
)

configure_logging()
apply_theme()

with st.sidebar:
    st.markdown(f"### {APP_ICON} {APP_NAME}")
    st.page_link("pages/10_Dashboard.py", label="Dashboard", icon="📊")
    st.page_link("pages/20_Ideas.py", label="Ideas", icon="💡")

landing()
