"""
import_engine.report - Counts of what one import wrote.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ImportReport:
    settings: int = 0        # overridden setting keys
    loadouts: int = 0
    annotations: int = 0

    def to_dict(self) -> dict:
        return {
            "settings": self.settings,
            "loadouts": self.loadouts,
            "annotations": self.annotations,
        }
