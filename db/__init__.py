"""
db - Database layer.

Public API:
    init_db()       → create engine + tables
    get_session()   → new Session
    Settings, Loadout, ItemAnnotation → ORM models
"""

from db.engine import init_db, get_session                      # noqa: F401
from db.models import Base, Settings, Loadout, ItemAnnotation   # noqa: F401
