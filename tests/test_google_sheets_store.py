"""Tests for the Sheets-backed store (manager mocked)."""

import time
from unittest.mock import MagicMock, call

import pandas as pd
import pytest
from gspread.exceptions import APIError
from requests.exceptions import HTTPError

from standup.data.tracker import Tracker
from standup.integrations import google_sheets
from standup.integrations.google_sheets import (
    STORE_HEADERS,
    GoogleSheetsManager,
    SheetsStore,
    _normalize_title,
)


class FakeManager:
    """Stands in for GoogleSheetsManager, holding one worksheet per name."""

    def __init__(self):
        self.sheets = {}
        self.writes = 0

    def read_worksheet(self, name, spreadsheet_id):
        return self.sheets.get(name, pd.DataFrame()).copy()

    def write_worksheet(self, name, data, spreadsheet_id):
        self.sheets[name] = data.copy()
        self.writes += 1
        return True


@pytest.fixture
def manager():
    return FakeManager()


@pytest.fixture
def sheets_store(manager):
    return SheetsStore(manager, "sheet-id", "Store")


class TestSheetsStore:
    def test_empty_worksheet_reads_none(self, sheets_store):
        assert sheets_store.get("projects") is None

    def test_set_writes_key_value_rows(self, sheets_store, manager):
        sheets_store.set("projects", "[]")
        sheets_store.set("ideas", "[1]")
        df = manager.sheets["Store"]
        assert list(df.columns) == STORE_HEADERS
        assert df.values.tolist() == [["projects", "[]"], ["ideas", "[1]"]]

    def test_get_after_set(self, sheets_store):
        sheets_store.set("entries", '[{"id": "1"}]')
        assert sheets_store.get("entries") == '[{"id": "1"}]'

    def test_remove(self, sheets_store, manager):
        sheets_store.set("entries", "[]")
        sheets_store.remove("entries")
        assert sheets_store.get("entries") is None

    def test_remove_missing_skips_write(self, sheets_store, manager):
        sheets_store.remove("entries")
        assert manager.writes == 0

    def test_failed_write_is_reported_not_raised(self):
        manager = MagicMock()
        manager.read_worksheet.return_value = pd.DataFrame(columns=STORE_HEADERS)
        manager.write_worksheet.return_value = False
        SheetsStore(manager, "sheet-id").set("projects", "[]")
        manager.write_worksheet.assert_called_once()

    def test_tracker_round_trip(self, sheets_store):
        tracker = Tracker(sheets_store)
        tracker.add_project("Remote")
        tracker.add_entry("done", projects=["Remote"])
        fresh = Tracker(sheets_store)
        assert fresh.project_names() == ["Remote"]
        assert fresh.entries[0].accomplished == ["done"]


class TestNormalizeTitle:
    def test_ignores_case_and_punctuation(self):
        assert _normalize_title(" Store-Data ") == _normalize_title("storedata")

    def test_empty(self):
        assert _normalize_title("") == ""


def _worksheet(title, records=()):
    ws = MagicMock()
    ws.title = title
    ws.get_all_records.return_value = list(records)
    return ws


def _rate_limit_error():
    response = MagicMock(status_code=429)
    response.json.return_value = {"error": {"code": 429, "message": "Quota exceeded", "status": "RESOURCE_EXHAUSTED"}}
    return APIError(response)


@pytest.fixture
def ui(monkeypatch):
    """Captures the st.* messages raised by the manager."""
    fake = MagicMock()
    monkeypatch.setattr(google_sheets, "st", fake)
    return fake


@pytest.fixture
def connected():
    """Manager with a live (mocked) gspread client and HTTP session."""
    mgr = GoogleSheetsManager()
    mgr.gc = MagicMock()
    mgr._last_connection_time = time.time()
    mgr._session = MagicMock()
    return mgr


def _spreadsheet(mgr):
    return mgr.gc.open_by_key.return_value


class TestGoogleSheetsManager:
    def test_reads_records_by_normalized_title(self, connected, ui):
        _spreadsheet(connected).worksheets.return_value = [
            _worksheet("Other"),
            _worksheet(" store ", [{"key": "projects", "value": "[]"}]),
        ]
        df = connected.read_worksheet("Store", "sheet-id")
        assert df.values.tolist() == [["projects", "[]"]]
        connected.gc.open_by_key.assert_called_once_with("sheet-id")

    def test_missing_worksheet_reads_empty_without_error(self, connected, ui):
        _spreadsheet(connected).worksheets.return_value = []
        connected._session.get.return_value.raise_for_status.side_effect = HTTPError("400 Client Error")

        df = connected.read_worksheet("Store", "sheet-id")

        assert df.empty
        assert list(df.columns) == STORE_HEADERS
        connected._session.get.assert_not_called()
        ui.error.assert_not_called()

    def test_fresh_spreadsheet_loads_empty_tracker(self, connected, ui):
        _spreadsheet(connected).worksheets.return_value = []
        tracker = Tracker(SheetsStore(connected, "sheet-id"))
        assert tracker.projects == [] and tracker.entries == [] and tracker.ideas == []
        ui.error.assert_not_called()

    def test_cache_hit_within_ttl(self, connected, ui):
        ws = _worksheet("Store", [{"key": "ideas", "value": "[]"}])
        _spreadsheet(connected).worksheets.return_value = [ws]
        connected.read_worksheet("Store", "sheet-id")
        again = connected.read_worksheet("Store", "sheet-id")
        assert again.values.tolist() == [["ideas", "[]"]]
        ws.get_all_records.assert_called_once()

    def test_expired_cache_is_refetched(self, connected, ui):
        ws = _worksheet("Store", [{"key": "ideas", "value": "[]"}])
        _spreadsheet(connected).worksheets.return_value = [ws]
        connected.read_worksheet("Store", "sheet-id")
        stamp, df = connected._data_cache["Store"]
        connected._data_cache["Store"] = (stamp - google_sheets.CACHE_TTL - 1, df)
        connected.read_worksheet("Store", "sheet-id")
        assert ws.get_all_records.call_count == 2

    def test_rate_limit_serves_stale_cache(self, connected, ui):
        ws = _worksheet("Store", [{"key": "entries", "value": "[1]"}])
        _spreadsheet(connected).worksheets.return_value = [ws]
        connected.read_worksheet("Store", "sheet-id")
        connected._data_cache["Store"] = (0.0, connected._data_cache["Store"][1])
        ws.get_all_records.side_effect = _rate_limit_error()

        df = connected.read_worksheet("Store", "sheet-id")

        assert df.values.tolist() == [["entries", "[1]"]]
        ui.info.assert_called_once()
        ui.error.assert_not_called()

    def test_rate_limit_without_cache_warns(self, connected, ui):
        ws = _worksheet("Store")
        ws.get_all_records.side_effect = _rate_limit_error()
        _spreadsheet(connected).worksheets.return_value = [ws]
        df = connected.read_worksheet("Store", "sheet-id")
        assert df.empty
        ui.warning.assert_called_once()

    def test_write_creates_missing_worksheet(self, connected, ui):
        created = _worksheet("Store")
        sheet = _spreadsheet(connected)
        sheet.worksheets.return_value = []
        sheet.add_worksheet.return_value = created
        data = pd.DataFrame([["projects", "[]"]], columns=STORE_HEADERS)

        assert connected.write_worksheet("Store", data, "sheet-id") is True

        sheet.add_worksheet.assert_called_once_with(title="Store", rows=100, cols=2)
        created.clear.assert_called_once()
        assert created.update.call_args_list[-1] == call([["key", "value"], ["projects", "[]"]])
        connected._session.put.assert_not_called()

    def test_write_refreshes_cache(self, connected, ui):
        ws = _worksheet("Store")
        _spreadsheet(connected).worksheets.return_value = [ws]
        data = pd.DataFrame([["ideas", "[]"]], columns=STORE_HEADERS)
        connected.write_worksheet("Store", data, "sheet-id")
        assert connected.read_worksheet("Store", "sheet-id").values.tolist() == [["ideas", "[]"]]
        ws.get_all_records.assert_not_called()

    def test_http_fallback_only_without_gspread(self, ui, monkeypatch):
        mgr = GoogleSheetsManager()
        monkeypatch.setattr(mgr, "_ensure_gspread_client", lambda: False)
        mgr._session = MagicMock()
        response = mgr._session.get.return_value
        response.status_code = 200
        response.json.return_value = {"values": [["key", "value"], ["projects", "[]"], ["ideas"]]}

        df = mgr.read_worksheet("Store", "sheet-id")

        assert df.values.tolist() == [["projects", "[]"], ["ideas", ""]]
        url = mgr._session.get.call_args.args[0]
        assert url.endswith("/spreadsheets/sheet-id/values/Store")

    def test_http_missing_worksheet_reads_empty(self, ui, monkeypatch):
        mgr = GoogleSheetsManager()
        monkeypatch.setattr(mgr, "_ensure_gspread_client", lambda: False)
        mgr._session = MagicMock()
        mgr._session.get.return_value.status_code = 400
        df = mgr.read_worksheet("Store", "sheet-id")
        assert df.empty
        ui.error.assert_not_called()

    def test_http_write_clears_then_puts(self, ui, monkeypatch):
        mgr = GoogleSheetsManager()
        monkeypatch.setattr(mgr, "_ensure_gspread_client", lambda: False)
        mgr._session = MagicMock()
        data = pd.DataFrame([["projects", "[]"]], columns=STORE_HEADERS)

        assert mgr.write_worksheet("Store", data, "sheet-id") is True

        assert mgr._session.post.call_args.args[0].endswith("Store!A1:clear")
        kwargs = mgr._session.put.call_args.kwargs
        assert kwargs["json"] == {"values": [["key", "value"], ["projects", "[]"]]}
        assert kwargs["params"] == {"valueInputOption": "RAW"}
