"""
import_engine.bag - Decode the raw export object once, up front.

Responsibilities:
  • Reject bodies that are not a key/value object
  • Classify every top-level key (settings, loadout index,
    annotation group, or loadout payload)
  • Drop values of the wrong shape so extractors never inspect them
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from import_engine.keys import (
    SETTINGS_KEY, LOADOUT_INDEX_KEY, MEMBERSHIP_KEY, DESTINY_VERSION_KEY,
    parse_annotation_key,
)

logger = logging.getLogger(__name__)


class BagError(ValueError):
    """Raised when the import body is not a key/value object."""
    pass


@dataclass
class AnnotationGroup:
    platform_membership_id: int
    destiny_version: int
    entries: dict


@dataclass
class ImportBag:
    settings: Optional[dict] = None
    loadout_ids: Optional[list[str]] = None
    payloads: dict[str, Any] = field(default_factory=dict)
    annotation_groups: list[AnnotationGroup] = field(default_factory=list)
    # last selected platform account of the exporting client
    membership_id: Any = None
    destiny_version: Any = None

    def resolve(self, key: str) -> Any:
        """Look up a loadout payload by id; None if absent."""
        return self.payloads.get(key)


def decode_bag(raw: Any) -> ImportBag:
    """Split a raw export mapping into an ImportBag."""
    if not isinstance(raw, Mapping):
        raise BagError(f"import data must be an object, got {type(raw).__name__}")

    bag = ImportBag()
    for key, value in raw.items():
        if key == SETTINGS_KEY:
            if isinstance(value, Mapping):
                bag.settings = dict(value)
            else:
                logger.debug("Ignoring %s: not an object", key)
            continue

        if key == LOADOUT_INDEX_KEY:
            if isinstance(value, (list, tuple)):
                bag.loadout_ids = [i for i in value if isinstance(i, str)]
            else:
                logger.debug("Ignoring %s: not a list", key)
            continue

        if key == MEMBERSHIP_KEY:
            bag.membership_id = value
            continue

        if key == DESTINY_VERSION_KEY:
            bag.destiny_version = value
            continue

        parsed = parse_annotation_key(key)
        if parsed:
            if isinstance(value, Mapping):
                bag.annotation_groups.append(
                    AnnotationGroup(parsed[0], parsed[1], dict(value))
                )
            else:
                logger.debug("Ignoring %s: not an object", key)
            continue

        # Anything else may be a loadout referenced from the index
        bag.payloads[key] = value

    return bag
