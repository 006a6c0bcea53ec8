"""Configuration: env, data paths, spreadsheet endpoint, backend selection."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of filmlist package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so FILMLIST_SHEET_API_URL etc. are set
load_dotenv(BASE_DIR / ".env")

DATA_DIR = Path(os.getenv("FILMLIST_DATA_DIR", str(BASE_DIR / "data")))
LOCAL_STORE_PATH = DATA_DIR / "film_data.json"
# Same key the browser version used in localStorage
LOCAL_STORE_KEY = "filmData"

# Google Apps Script web app that fronts the spreadsheet
SHEET_API_URL = os.getenv("FILMLIST_SHEET_API_URL", "")
HTTP_TIMEOUT_SEC = float(os.getenv("FILMLIST_HTTP_TIMEOUT", "15"))

# "sheet" or "local"; chosen once at startup
BACKEND = os.getenv("FILMLIST_BACKEND", "sheet" if SHEET_API_URL else "local").lower()

# API
API_HOST = os.getenv("FILMLIST_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("FILMLIST_API_PORT", "8000"))
CORS_ORIGINS = [o.strip() for o in os.getenv("FILMLIST_CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("FILMLIST_LOG_LEVEL", "INFO").upper()

# Notices kept for the UI (toast feed)
MAX_NOTICES = 50


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
