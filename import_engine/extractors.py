"""
import_engine.extractors - Turn a decoded ImportBag into normalised records.

Three independent, pure functions:
  extract_settings          → settings diff against defaults
  extract_loadouts          → [PlatformLoadout] in index order
  extract_item_annotations  → [PlatformItemAnnotation]

Missing or malformed pieces are skipped or defaulted, never raised.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from import_engine.bag import ImportBag
from schema.item_annotations import PlatformItemAnnotation
from schema.loadouts import ItemRef, PlatformLoadout, loadout_class_to_class_type
from schema.settings import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


# ── Settings ──────────────────────────────────────────────────────────

def _differs(value: Any, default: Any) -> bool:
    # True == 1 in Python; a bool replacing a number is still a change.
    # 50.0 and 50 are the same JSON number.
    if isinstance(value, bool) != isinstance(default, bool):
        return True
    return value != default


def subtract_defaults(obj: Mapping, defaults: Mapping) -> dict:
    """
    Key/values of obj whose key is also in defaults and whose value
    differs from the default.  None counts as absent.
    """
    return {
        key: obj[key]
        for key in defaults
        if obj.get(key) is not None and _differs(obj[key], defaults[key])
    }


def extract_settings(bag: ImportBag, defaults: Mapping = DEFAULT_SETTINGS) -> dict:
    return subtract_defaults(bag.settings or {}, defaults)


# ── Loadouts ──────────────────────────────────────────────────────────

def _item_ref(item: Mapping) -> ItemRef:
    return ItemRef(
        id=str(item.get("id") or "0"),
        hash=item.get("hash"),
        amount=item.get("amount", 1),
    )


def _partition(raw: Mapping, bag: ImportBag) -> tuple[int, int]:
    """
    (platform membership id, destiny version) of a raw loadout.

    Loadouts saved before they carried their own account fall back to
    the export's selected account.  Raises TypeError / ValueError /
    OverflowError when no usable membership id exists.
    """
    if raw.get("membershipId") is not None:
        return int(raw["membershipId"]), int(raw.get("destinyVersion") or 1)
    return int(bag.membership_id), int(bag.destiny_version or 1)


def _normalise_loadout(loadout_id: str, raw: Mapping, bag: ImportBag) -> Optional[PlatformLoadout]:
    try:
        platform_membership_id, destiny_version = _partition(raw, bag)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Dropping loadout %s: no usable membershipId", loadout_id)
        return None
    if destiny_version not in (1, 2):
        logger.debug("Dropping loadout %s: destinyVersion %s", loadout_id, destiny_version)
        return None

    items = raw.get("items")
    if not isinstance(items, (list, tuple)):
        items = []
    items = [i for i in items if isinstance(i, Mapping)]

    return PlatformLoadout(
        platform_membership_id=platform_membership_id,
        destiny_version=destiny_version,
        id=str(raw.get("id") or loadout_id),
        name=str(raw.get("name") or ""),
        class_type=loadout_class_to_class_type(raw.get("classType")),
        clear_space=bool(raw.get("clearSpace") or False),
        equipped=[_item_ref(i) for i in items if i.get("equipped")],
        unequipped=[_item_ref(i) for i in items if not i.get("equipped")],
    )


def extract_loadouts(bag: ImportBag) -> list[PlatformLoadout]:
    """
    Normalised loadouts in index order.  Ids with no payload, or a falsy
    or non-object one, are skipped.  A loadout with no usable membership
    id (its own or the export's) or a destinyVersion other than 1 / 2 is
    also skipped, since it cannot be stored under any platform account.
    """
    if not bag.loadout_ids:
        return []

    loadouts: list[PlatformLoadout] = []
    for loadout_id in bag.loadout_ids:
        raw = bag.resolve(loadout_id)
        if not raw:
            continue
        if not isinstance(raw, Mapping):
            logger.debug("Dropping loadout %s: payload is not an object", loadout_id)
            continue
        loadout = _normalise_loadout(loadout_id, raw, bag)
        if loadout:
            loadouts.append(loadout)
    return loadouts


# ── Item annotations ──────────────────────────────────────────────────

def extract_item_annotations(bag: ImportBag) -> list[PlatformItemAnnotation]:
    annotations: list[PlatformItemAnnotation] = []
    for group in bag.annotation_groups:
        for item_id, value in group.entries.items():
            if not isinstance(value, Mapping):
                continue
            annotations.append(PlatformItemAnnotation(
                platform_membership_id=group.platform_membership_id,
                destiny_version=group.destiny_version,
                id=str(item_id),
                tag=value.get("tag"),
                notes=value.get("notes"),
            ))
    return annotations
