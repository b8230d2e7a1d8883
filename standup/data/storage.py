from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

import streamlit as st

from standup.config import STORE_WORKSHEET, get_default_store_path, get_store_backend

logger = logging.getLogger(__name__)


class MemoryStore:
    """Key-value store living only as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class LocalJsonStore:
    """Key-value store persisted as a single JSON document on disk.

    Each value is already a serialized string, mirroring browser local
    storage; the document maps key -> string.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        text = self.path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        return json.loads(text)

    def _write_all(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".standup-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)


def build_store(backend: str, path: str | Path | None = None):
    if backend == "memory":
        return MemoryStore()
    if backend == "sheets":
        from standup.integrations.google_sheets import SheetsStore, get_sheets_manager

        sheet_id = str(st.secrets.get("google_sheets_id", "")).strip()
        return SheetsStore(get_sheets_manager(), sheet_id, STORE_WORKSHEET)
    return LocalJsonStore(path or get_default_store_path())


@st.cache_resource(show_spinner=False)
def get_store():
    """Process-wide store chosen from configuration."""
    backend = get_store_backend(st.secrets)
    store = build_store(backend)
    logger.info("Using %s store backend", backend)
    return store
