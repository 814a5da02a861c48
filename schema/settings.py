"""
schema.settings - Canonical user settings and their defaults.

Settings are persisted as a diff against DEFAULT_SETTINGS: an option
that is not stored falls back to the value here.  Only keys listed in
DEFAULT_SETTINGS are recognised; anything else in an import is dropped.
"""

from __future__ import annotations

import copy

DEFAULT_SETTINGS: dict = {
    # ── Display ────────────────────────────────────────────────────────
    "itemSize": 50,
    "charCol": 3,
    "charColMobile": 3,
    "colorA11y": "-",
    "language": "en",
    "showNewItems": False,
    "sidecarCollapsed": False,
    "collapsedSections": {},

    # ── Sorting ────────────────────────────────────────────────────────
    "itemSortOrderCustom": ["primStat", "name"],
    "itemSortReversals": [],
    "characterOrder": "mostRecent",
    "customCharacterSort": [],

    # ── Records ────────────────────────────────────────────────────────
    "completedRecordsHidden": False,
    "redactedRecordsRevealed": False,

    # ── Farming / inventory ────────────────────────────────────────────
    "farmingMakeRoomForItems": True,
    "inventoryClearSpaces": 1,

    # ── Reviews ────────────────────────────────────────────────────────
    "allowIdPostToDtr": True,
    "showReviews": True,
    "reviewsPlatformSelectionV2": 0,
    "reviewsModeSelection": 0,

    # ── Misc ───────────────────────────────────────────────────────────
    "wishListSource": "",
    "compareBaseStats": False,
    "organizerColumnsWeapons": [],
    "organizerColumnsArmor": [],
    "organizerColumnsGhost": [],
}


def default_settings() -> dict:
    """Return a fresh deep copy of the defaults (safe to mutate)."""
    return copy.deepcopy(DEFAULT_SETTINGS)


def apply_defaults(diff: dict) -> dict:
    """Overlay a stored settings diff onto the defaults."""
    merged = default_settings()
    for key, value in diff.items():
        if key in merged:
            merged[key] = value
    return merged
