"""
import_engine.keys - Top-level key names of a legacy export.

    settings-v1.0                 → partial settings mapping
    membershipId, destinyVersion  → platform account last selected in the
                                    client; fallback for loadouts without one
    loadouts-v3.0                 → ordered list of loadout ids; each id is
                                    itself a top-level key holding the loadout
    dimItemInfo-m<id>-d<1|2>      → {item id: {tag, notes}} for one platform
                                    account and Destiny version
"""

from __future__ import annotations

import re
from typing import Optional

SETTINGS_KEY      = "settings-v1.0"
LOADOUT_INDEX_KEY = "loadouts-v3.0"

# Platform account last selected in the exporting client
MEMBERSHIP_KEY      = "membershipId"
DESTINY_VERSION_KEY = "destinyVersion"

ANNOTATION_KEY_RE = re.compile(r"dimItemInfo-m(\d+)-d(1|2)")


def parse_annotation_key(key: str) -> Optional[tuple[int, int]]:
    """
    'dimItemInfo-m123-d2' → (123, 2).
    Returns None for any key that is not an annotation group.
    """
    m = ANNOTATION_KEY_RE.fullmatch(key)
    if not m:
        return None
    return int(m.group(1)), int(m.group(2))
