import io
from datetime import date
from typing import List

import pandas as pd
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

from standup.data.tracker import Tracker, UNASSIGNED_LABEL

ENTRY_HEADERS = ["ID", "Date", "Projects", "Accomplished", "Next", "Blockers", "Notes"]
BOARD_HEADERS = ["Project", "Type", "Task", "Date", "Entry ID"]
IDEA_HEADERS = ["ID", "Date", "Title", "Description", "Projects"]
MAX_COL_WIDTH = 60


def entries_frame(tracker: Tracker) -> pd.DataFrame:
    rows = [{
        "ID": e.id,
        "Date": e.date,
        "Projects": ", ".join(e.projects),
        "Accomplished": "\n".join(e.accomplished),
        "Next": "\n".join(e.next),
        "Blockers": "\n".join(e.blockers),
        "Notes": e.notes,
    } for e in tracker.entries]
    return pd.DataFrame(rows, columns=ENTRY_HEADERS)


def board_frame(tracker: Tracker) -> pd.DataFrame:
    rows = []
    for column, tasks in tracker.board().items():
        for task in tasks:
            rows.append({
                "Project": UNASSIGNED_LABEL if column is None else column,
                "Type": task.type,
                "Task": task.text,
                "Date": task.date,
                "Entry ID": task.entry_id,
            })
    return pd.DataFrame(rows, columns=BOARD_HEADERS)


def ideas_frame(tracker: Tracker) -> pd.DataFrame:
    rows = [{
        "ID": i.id,
        "Date": i.date,
        "Title": i.title,
        "Description": i.description,
        "Projects": ", ".join(i.projects),
    } for i in tracker.ideas]
    return pd.DataFrame(rows, columns=IDEA_HEADERS)


def _style_sheet(ws, df: pd.DataFrame):
    bold = Font(bold=True)
    for cell in ws[1]:
        cell.font = bold
    ws.freeze_panes = "A2"
    for idx, col in enumerate(df.columns, start=1):
        lengths: List[int] = [len(str(col))]
        for value in df[col].astype(str):
            lengths.extend(len(line) for line in value.splitlines() or [""])
        ws.column_dimensions[get_column_letter(idx)].width = min(max(lengths) + 2, MAX_COL_WIDTH)
    for row in ws.iter_rows(min_row=2):
        for cell in row:
            cell.alignment = Alignment(wrap_text=True, vertical="top")


def standup_workbook(tracker: Tracker) -> bytes:
    """Entries, board tasks and ideas as an .xlsx workbook."""
    sheets = {
        "Entries": entries_frame(tracker),
        "Board": board_frame(tracker),
        "Ideas": ideas_frame(tracker),
    }
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        for name, df in sheets.items():
            df.to_excel(writer, sheet_name=name, index=False)
            _style_sheet(writer.sheets[name], df)
    return out.getvalue()


def export_file_name(export_date: date) -> str:
    return f"{export_date.strftime('%m-%d-%Y')} - Standup Log.xlsx"
