"""
schema - Shapes of the data a user can sync.

Public API:
    settings.DEFAULT_SETTINGS / apply_defaults
    loadouts.LoadoutClass / DestinyClass / PlatformLoadout / ItemRef
    loadouts.loadout_class_to_class_type / class_type_to_loadout_class
    item_annotations.PlatformItemAnnotation
"""

from schema.settings import DEFAULT_SETTINGS, apply_defaults, default_settings   # noqa: F401
from schema.loadouts import (                                                    # noqa: F401
    LoadoutClass,
    DestinyClass,
    ItemRef,
    PlatformLoadout,
    loadout_class_to_class_type,
    class_type_to_loadout_class,
)
from schema.item_annotations import PlatformItemAnnotation                      # noqa: F401
