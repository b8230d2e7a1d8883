from datetime import datetime

import streamlit as st

from standup.config import APP_NAME, APP_ICON

FEATURES = [
    ("📝", "Daily Standups",
     "Start each day with intention. Reflect on yesterday, plan today, note what's blocking you."),
    ("💡", "Idea Capture",
     "Quickly capture ideas without breaking flow. Your thoughts deserve a peaceful home."),
    ("🎯", "Multi-Project View",
     "Organize by project. Filter, search, and visualize momentum across your work."),
]

STATS = [
    ("2 min", "Daily check-in"),
    ("∞", "Projects to track"),
    ("100%", "Your data"),
    ("0", "Meetings needed"),
]


def greeting_for_hour(hour: int):
    if hour < 12:
        return "Good morning", "☀️"
    if hour < 18:
        return "Good afternoon", "🌤️"
    return "Good evening", "🌙"


def greeting(now=None):
    return greeting_for_hour((now or datetime.now()).hour)


def landing():
    text, emoji = greeting()
    _, mid, _ = st.columns([1, 3, 1])
    with mid:
        st.markdown(f"<p class='muted' style='text-align:center'>{emoji} {text}</p>", unsafe_allow_html=True)
        st.markdown(
            "<h1 style='text-align:center;font-weight:300'>Your sanctuary for<br>"
            "<span style='font-weight:400'>juggling multiple projects</span></h1>",
            unsafe_allow_html=True,
        )
        st.markdown(
            "<p class='muted' style='text-align:center'>Track daily progress, capture fleeting ideas, "
            "and find clarity across all your work. A mindful space for solo developers.</p>",
            unsafe_allow_html=True,
        )
        left, right = st.columns(2)
        left.page_link("pages/10_Dashboard.py", label="Start Your First Standup", icon="📝")
        right.page_link("pages/20_Ideas.py", label="Capture an Idea", icon="💡")

    st.divider()
    for col, (icon, title, body) in zip(st.columns(len(FEATURES)), FEATURES):
        with col.container(border=True):
            st.markdown(f"### {icon}")
            st.markdown(f"**{title}**")
            st.markdown(f"<span class='muted'>{body}</span>", unsafe_allow_html=True)

    st.divider()
    for col, (value, label) in zip(st.columns(len(STATS)), STATS):
        col.metric(label, value)

    st.divider()
    st.caption(f"Built with intention for solo developers {APP_ICON} · {APP_NAME}")
