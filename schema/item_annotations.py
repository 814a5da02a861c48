"""
schema.item_annotations - Per-item tag and notes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class PlatformItemAnnotation:
    """Tag / notes for one inventory item on one platform account."""
    platform_membership_id: int
    destiny_version: int
    id: str
    tag: Optional[str] = None
    notes: Optional[str] = None
