"""
DIMSYNC - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent

# ── Database ───────────────────────────────────────────────────────────
DB_URL = os.environ.get("DIMSYNC_DB", f"sqlite:///{BASE_DIR / 'dimsync.sqlite'}")

# ── Server ─────────────────────────────────────────────────────────────
HOST   = os.environ.get("DIMSYNC_HOST", "0.0.0.0")
PORT   = int(os.environ.get("DIMSYNC_PORT", "5000"))
DEBUG  = os.environ.get("DIMSYNC_DEBUG", "0") == "1"
SECRET = os.environ.get("DIMSYNC_SECRET", "dimsync-dev-key-change-in-prod")

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("DIMSYNC_LOG_LEVEL", "INFO").upper()

# ── Import limits ──────────────────────────────────────────────────────
# Full exports with years of tags can be a few MB of JSON
MAX_IMPORT_BYTES = int(os.environ.get("DIMSYNC_MAX_IMPORT_MB", "10")) * 1024 * 1024

# ── Identity headers ───────────────────────────────────────────────────
API_KEY_HEADER    = "X-API-Key"
MEMBERSHIP_HEADER = "X-Bungie-Membership-Id"
