from __future__ import annotations

import os
import tempfile
from pathlib import Path


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[2]


REPO_ROOT = _repo_root()

TEMPLATES_DIR = Path(os.getenv("CV_TEMPLATES_DIR", str(REPO_ROOT / "templates")))

_RAW_BASE = "https://raw.githubusercontent.com/RubenCiveira/RubenCiveira/main"

SOURCE_URLS = {
    "es": os.getenv("CV_SOURCE_URL_ES", f"{_RAW_BASE}/README.md"),
    "en": os.getenv("CV_SOURCE_URL_EN", f"{_RAW_BASE}/README.en.md"),
}
DEFAULT_LANG = "es"

CONTENT_LANGUAGES = {
    "es": "es-ES",
    "en": "en-EN",
}

FETCH_TIMEOUT_S = float(os.getenv("CV_FETCH_TIMEOUT_S", "10"))
FETCH_MAX_BYTES = int(os.getenv("CV_FETCH_MAX_BYTES", "2000000"))

DOCUMENT_TITLE = os.getenv("CV_DOCUMENT_TITLE", "CV – Ruben Civeira Iglesias")
PDF_FILENAME = os.getenv("CV_PDF_FILENAME", "CV_RubenCiveira.pdf")
PDF_TEMP_DIR = Path(os.getenv("CV_PDF_TEMP_DIR") or tempfile.gettempdir())

ROOT_PATH = os.getenv("CV_ROOT_PATH", "").rstrip("/")
LOG_LEVEL = os.getenv("CV_LOG_LEVEL", "INFO").upper()
