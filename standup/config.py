import logging
import os
from pathlib import Path

APP_DIR = Path(__file__).resolve().parent.parent

APP_NAME = "Solo Command"
APP_ICON = "⚡"

STORE_KEYS = ("projects", "entries", "ideas")

STORE_WORKSHEET = os.getenv("STANDUP_STORE_WORKSHEET", "Store")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_default_store_path() -> str:
    """Locate the JSON file backing the local store."""
    sidecar = APP_DIR / "standup_store_path.txt"
    if sidecar.exists():
        try:
            candidate = sidecar.read_text().strip()
            if candidate:
                return candidate
        except OSError:
            pass
    env_path = os.getenv("STANDUP_STORE_PATH", "")
    if env_path:
        return env_path
    return str(APP_DIR / "standup_data.json")


def get_store_backend(secrets=None) -> str:
    """Pick the store backend: explicit env setting, else Sheets when a sheet id is configured."""
    backend = os.getenv("STANDUP_STORE_BACKEND", "").strip().lower()
    if backend in {"local", "memory", "sheets"}:
        return backend
    try:
        if secrets is not None and str(secrets.get("google_sheets_id", "")).strip():
            return "sheets"
    except Exception:
        # st.secrets raises when no secrets.toml exists
        pass
    return "local"


def configure_logging() -> None:
    level_name = os.getenv("STANDUP_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger("standup")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
