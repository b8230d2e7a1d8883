import html

import streamlit as st

from standup.data.models import Task
from standup.data.tracker import Tracker, UNASSIGNED_LABEL
from standup.style_utils import TASK_ICONS

COLUMNS_PER_ROW = 3


def task_card_html(task: Task) -> str:
    return (
        f"<div class='task-card {task.type}' id='task-{html.escape(task.id)}'>"
        f"{TASK_ICONS[task.type]} {html.escape(task.text)}"
        f"<div class='task-date'>{html.escape(task.date)}</div></div>"
    )


def board_view(tracker: Tracker):
    columns = tracker.board()
    if not columns:
        st.info("No active projects yet. Create a project to see its board.")
        return
    names = list(columns)
    for start in range(0, len(names), COLUMNS_PER_ROW):
        row = names[start:start + COLUMNS_PER_ROW]
        for col, name in zip(st.columns(COLUMNS_PER_ROW), row):
            tasks = columns[name]
            title = f"📦 {UNASSIGNED_LABEL}" if name is None else f"🏷️ {html.escape(name)}"
            with col.container(border=True):
                st.markdown(f"**{title}** · {len(tasks)}")
                if tasks:
                    st.markdown("".join(task_card_html(t) for t in tasks), unsafe_allow_html=True)
                else:
                    st.caption("No tasks yet")
