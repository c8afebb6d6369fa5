from __future__ import annotations

import os
from pathlib import Path

_BASE = Path(__file__).resolve().parent

SEED_PATH = Path(os.getenv("QUIZ_SEED_PATH", str(_BASE / "data" / "question-bank.json")))
TEMPLATES_DIR = _BASE / "templates"
STATIC_DIR = _BASE / "static"

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
