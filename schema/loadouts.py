"""
schema.loadouts - Loadout shapes and class-type enumerations.

Legacy exports tag each loadout with a LoadoutClass; storage and the
Bungie.net API use DestinyClass codes.  The two mapping functions below
are total: every member maps, and None / unknown codes map to the
"any" variant instead of raising.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class LoadoutClass(enum.IntEnum):
    """Class selector used by legacy loadout exports."""
    any = -1
    warlock = 0
    titan = 1
    hunter = 2


class DestinyClass(enum.IntEnum):
    """Bungie.net class-type codes."""
    Titan = 0
    Hunter = 1
    Warlock = 2
    Unknown = 3


_LOADOUT_CLASS_TO_CLASS_TYPE: dict[LoadoutClass, DestinyClass] = {
    LoadoutClass.hunter:  DestinyClass.Hunter,
    LoadoutClass.titan:   DestinyClass.Titan,
    LoadoutClass.warlock: DestinyClass.Warlock,
    LoadoutClass.any:     DestinyClass.Unknown,
}

_CLASS_TYPE_TO_LOADOUT_CLASS: dict[DestinyClass, LoadoutClass] = {
    v: k for k, v in _LOADOUT_CLASS_TO_CLASS_TYPE.items()
}


def _coerce(enum_cls, value, fallback):
    if value is None:
        return fallback
    try:
        return enum_cls(int(value))
    except (TypeError, ValueError, OverflowError):
        return fallback


def loadout_class_to_class_type(loadout_class) -> DestinyClass:
    """Map a LoadoutClass (or its raw int, or None) to a DestinyClass."""
    key = _coerce(LoadoutClass, loadout_class, LoadoutClass.any)
    return _LOADOUT_CLASS_TO_CLASS_TYPE[key]


def class_type_to_loadout_class(class_type) -> LoadoutClass:
    """Map a DestinyClass (or its raw int, or None) to a LoadoutClass."""
    key = _coerce(DestinyClass, class_type, DestinyClass.Unknown)
    return _CLASS_TYPE_TO_LOADOUT_CLASS[key]


# ── Normalised records ────────────────────────────────────────────────

@dataclass(frozen=True)
class ItemRef:
    id: str
    hash: int
    amount: int = 1

    def to_dict(self) -> dict:
        return {"id": self.id, "hash": self.hash, "amount": self.amount}


@dataclass
class PlatformLoadout:
    """A loadout plus the platform account it belongs to."""
    platform_membership_id: int
    destiny_version: int
    id: str
    name: str
    class_type: DestinyClass
    clear_space: bool = False
    equipped: list[ItemRef] = field(default_factory=list)
    unequipped: list[ItemRef] = field(default_factory=list)
