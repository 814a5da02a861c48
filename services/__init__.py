"""
services - Storage operations sitting between API / import engine and DB.
"""

from services.settings_service import SettingsService         # noqa: F401
from services.loadout_service import LoadoutService           # noqa: F401
from services.annotation_service import AnnotationService     # noqa: F401
