"""
Google Sheets backend for the standup store.
Keeps each store key as one row of a two-column (key, value) worksheet.
Supports both gspread and direct Sheets API access.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Optional, Dict, Any, Tuple
from urllib.parse import quote

import gspread
import pandas as pd
import streamlit as st
from google.oauth2.service_account import Credentials
from google.auth.transport.requests import AuthorizedSession
from gspread.exceptions import APIError, WorksheetNotFound
from requests.exceptions import HTTPError

logger = logging.getLogger(__name__)

SCOPES = (
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive",
)

STORE_HEADERS = ["key", "value"]
CACHE_TTL = 30


def _normalize_title(name: str) -> str:
    """Normalize worksheet titles for comparison"""
    if not name:
        return ""
    return ''.join(ch for ch in str(name).strip().lower() if ch.isalnum())


def _is_rate_limited(exc: APIError) -> bool:
    response = getattr(exc, "response", None)
    return getattr(response, "status_code", None) == 429


class GoogleSheetsManager:
    """Manages the Google Sheets connection used by the store"""

    def __init__(self):
        self.gc = None
        self.spreadsheet = None
        self._session: Optional[AuthorizedSession] = None
        self._credentials_info: Optional[Dict[str, Any]] = None
        self._last_connection_time = 0.0
        self._data_cache: Dict[str, Tuple[float, pd.DataFrame]] = {}

    # ------------------------------------------------------------------
    # Credential / client helpers
    # ------------------------------------------------------------------
    def _load_credentials(self) -> Optional[Credentials]:
        if self._credentials_info is None:
            if "google_sheets" not in st.secrets:
                st.error("Google Sheets credentials not found in secrets. Please configure Google Sheets integration.")
                return None
            # Convert secrets object to plain dict
            self._credentials_info = json.loads(json.dumps(dict(st.secrets["google_sheets"])))
        try:
            return Credentials.from_service_account_info(self._credentials_info, scopes=SCOPES)
        except Exception as exc:  # pragma: no cover - misconfigured secrets
            st.error(f"Failed to load Google credentials: {exc}")
            return None

    def _ensure_gspread_client(self) -> bool:
        if self.gc and (time.time() - self._last_connection_time) < 300:
            return True
        creds = self._load_credentials()
        if creds is None:
            return False
        try:
            self.gc = gspread.authorize(creds)
            self._last_connection_time = time.time()
            self.spreadsheet = None
            self._data_cache.clear()
            return True
        except Exception as exc:  # pragma: no cover - gspread auth failure
            logger.warning("gspread authorization failed, using Sheets API directly: %s", exc)
            self.gc = None
            return False

    def _ensure_session(self) -> Optional[AuthorizedSession]:
        if self._session is not None:
            return self._session
        creds = self._load_credentials()
        if creds is None:
            return None
        try:
            self._session = AuthorizedSession(creds)
            self._last_connection_time = time.time()
            self._data_cache.clear()
            return self._session
        except Exception as exc:  # pragma: no cover - transport failure
            st.error(f"Failed to establish Google Sheets session: {exc}")
            self._session = None
            return None

    # ------------------------------------------------------------------
    # Worksheet helpers
    # ------------------------------------------------------------------
    def find_worksheet(self, worksheet_name: str, spreadsheet_id: str, create: bool = False):
        """Locate (optionally create) a gspread worksheet by normalized title."""
        if not self._ensure_gspread_client():
            return None
        try:
            if not self.spreadsheet:
                self.spreadsheet = self.gc.open_by_key(spreadsheet_id)
            key = _normalize_title(worksheet_name)
            for ws in self.spreadsheet.worksheets():
                if _normalize_title(ws.title) == key:
                    return ws
            if create:
                ws = self.spreadsheet.add_worksheet(title=worksheet_name, rows=100, cols=len(STORE_HEADERS))
                ws.update([STORE_HEADERS])
                logger.info("Created worksheet '%s'", worksheet_name)
                return ws
        except WorksheetNotFound:
            return None
        except APIError as exc:
            if _is_rate_limited(exc):
                st.warning("Google Sheets rate limit reached while listing worksheets. Please wait a few seconds and try again.")
            else:
                st.error(f"Failed to inspect worksheets: {exc}")
        except Exception as exc:
            st.error(f"Failed to inspect worksheets: {exc}")
        return None

    # ------------------------------------------------------------------
    # Data operations
    # ------------------------------------------------------------------
    def read_worksheet(self, worksheet_name: str, spreadsheet_id: str) -> pd.DataFrame:
        """Read data from a worksheet and return as DataFrame"""
        cache_entry = self._data_cache.get(worksheet_name)
        if cache_entry and (time.time() - cache_entry[0]) < CACHE_TTL:
            return cache_entry[1].copy()

        if self._ensure_gspread_client():
            worksheet = self.find_worksheet(worksheet_name, spreadsheet_id)
            if worksheet is None:
                # Not created until the first write
                return pd.DataFrame(columns=STORE_HEADERS)
            try:
                df = pd.DataFrame(worksheet.get_all_records())
            except APIError as exc:
                if _is_rate_limited(exc):
                    cache_entry = self._data_cache.get(worksheet_name)
                    if cache_entry:
                        st.info("Using cached Google Sheets data while rate limit resets.")
                        return cache_entry[1].copy()
                    st.warning("Google Sheets rate limit reached while reading data. Please wait a few seconds and try again.")
                    return pd.DataFrame(columns=STORE_HEADERS)
                st.error(f"Failed to read worksheet '{worksheet_name}': {exc}")
                return pd.DataFrame(columns=STORE_HEADERS)
        else:
            df = self._read_worksheet_http(worksheet_name, spreadsheet_id)

        if not df.empty:
            df.columns = [str(col).strip() for col in df.columns]
        self._data_cache[worksheet_name] = (time.time(), df.copy())
        return df

    def _read_worksheet_http(self, worksheet_name: str, spreadsheet_id: str) -> pd.DataFrame:
        session = self._ensure_session()
        if session is None:
            return pd.DataFrame(columns=STORE_HEADERS)
        url = f"https://sheets.googleapis.com/v4/spreadsheets/{spreadsheet_id}/values/{quote(worksheet_name)}"
        params = {"valueRenderOption": "UNFORMATTED_VALUE"}
        try:
            response = session.get(url, params=params)
            if response.status_code == 400:
                # Range does not parse until the worksheet exists
                return pd.DataFrame(columns=STORE_HEADERS)
            response.raise_for_status()
        except HTTPError as exc:
            st.error(f"Failed to read worksheet '{worksheet_name}': {exc}")
            return pd.DataFrame(columns=STORE_HEADERS)
        values = response.json().get("values", [])
        if not values:
            return pd.DataFrame(columns=STORE_HEADERS)
        headers = [str(col).strip() for col in values[0]]
        rows = [row + ["" for _ in range(len(headers) - len(row))] for row in values[1:]]
        return pd.DataFrame(rows, columns=headers)

    def write_worksheet(self, worksheet_name: str, data: pd.DataFrame, spreadsheet_id: str) -> bool:
        """Replace the worksheet contents with the DataFrame"""
        values = [[str(col) for col in data.columns]]
        values += [["" if pd.isna(val) else val for val in row] for row in data.itertuples(index=False)]

        if self._ensure_gspread_client():
            worksheet = self.find_worksheet(worksheet_name, spreadsheet_id, create=True)
            if worksheet is None:
                return False
            try:
                worksheet.clear()
                worksheet.update(values)
            except APIError as exc:
                if _is_rate_limited(exc):
                    st.warning("Google Sheets rate limit reached while writing data. Please wait a few seconds and try again.")
                else:
                    st.error(f"Failed to write to worksheet '{worksheet_name}': {exc}")
                return False
        else:
            session = self._ensure_session()
            if session is None:
                return False
            base = f"https://sheets.googleapis.com/v4/spreadsheets/{spreadsheet_id}/values/{quote(worksheet_name)}"
            try:
                session.post(f"{base}!A1:clear").raise_for_status()
                session.put(f"{base}!A1", params={"valueInputOption": "RAW"}, json={"values": values}).raise_for_status()
            except HTTPError as exc:
                st.error(f"Failed to write to worksheet '{worksheet_name}': {exc}")
                return False

        self._data_cache[worksheet_name] = (time.time(), data.copy())
        return True


class SheetsStore:
    """Key-value store over a (key, value) worksheet.

    Every set/remove rewrites the whole worksheet, matching the
    write-everything model of the tracker.
    """

    def __init__(self, manager: GoogleSheetsManager, spreadsheet_id: str, worksheet_name: str = "Store"):
        self.manager = manager
        self.spreadsheet_id = spreadsheet_id
        self.worksheet_name = worksheet_name

    def _read_all(self) -> Dict[str, str]:
        df = self.manager.read_worksheet(self.worksheet_name, self.spreadsheet_id)
        if df.empty or "key" not in df.columns or "value" not in df.columns:
            return {}
        return {str(k): str(v) for k, v in zip(df["key"], df["value"]) if str(k).strip()}

    def _write_all(self, data: Dict[str, str]) -> bool:
        df = pd.DataFrame(list(data.items()), columns=STORE_HEADERS)
        ok = self.manager.write_worksheet(self.worksheet_name, df, self.spreadsheet_id)
        if not ok:
            logger.warning("Could not write store worksheet '%s'", self.worksheet_name)
        return ok

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)


# Global instance
sheets_manager = GoogleSheetsManager()


def get_sheets_manager() -> GoogleSheetsManager:
    """Get the global sheets manager instance"""
    return sheets_manager
