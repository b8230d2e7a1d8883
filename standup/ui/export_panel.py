import datetime as dt

import streamlit as st

from standup.data.tracker import Tracker
from standup.exports.standup_export import export_file_name, standup_workbook


def export_panel(tracker: Tracker):
    if not (tracker.entries or tracker.ideas):
        st.caption("Nothing to export yet.")
        return
    file_name = export_file_name(dt.date.today())
    st.download_button(
        "📤 Export to Excel",
        data=standup_workbook(tracker),
        file_name=file_name,
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )
