"""
db.models - SQLAlchemy ORM declarations.

Tables
------
settings          - one row per Bungie.net account.  Only the values that
                    differ from schema.settings.DEFAULT_SETTINGS are stored.
loadouts          - one row per loadout, partitioned by platform membership
                    and Destiny version.  Items are kept as a JSON document.
item_annotations  - tag / notes for a single inventory item, partitioned the
                    same way as loadouts.

Every row records which application created and last touched it.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

from sqlalchemy import (
    Column, String, BigInteger, SmallInteger, Integer, Boolean, DateTime,
    Text, Index,
)
from sqlalchemy.orm import DeclarativeBase


def _utcnow():
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class Settings(Base):
    __tablename__ = "settings"

    membership_id   = Column(BigInteger, primary_key=True, autoincrement=False)
    settings_json   = Column(Text, nullable=False, default="{}")

    # ── Audit ──────────────────────────────────────────────────────────
    created_by      = Column(String(60), nullable=False)
    last_updated_by = Column(String(60), nullable=False)
    created_at      = Column(DateTime, default=_utcnow)
    updated_at      = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    @property
    def settings(self) -> dict:
        try:
            return json.loads(self.settings_json or "{}")
        except (json.JSONDecodeError, TypeError):
            return {}


class Loadout(Base):
    __tablename__ = "loadouts"

    # ── Composite primary key ──────────────────────────────────────────
    membership_id          = Column(BigInteger, primary_key=True, autoincrement=False)
    platform_membership_id = Column(BigInteger, primary_key=True, autoincrement=False)
    destiny_version        = Column(SmallInteger, primary_key=True, autoincrement=False)
    id                     = Column(String(120), primary_key=True)

    name        = Column(String(200), nullable=False, default="")
    class_type  = Column(Integer, nullable=False)                # DestinyClass code
    clear_space = Column(Boolean, nullable=False, default=False)
    items_json  = Column(Text, nullable=False, default="{}")     # {equipped, unequipped}

    # ── Audit ──────────────────────────────────────────────────────────
    created_by      = Column(String(60), nullable=False)
    last_updated_by = Column(String(60), nullable=False)
    created_at      = Column(DateTime, default=_utcnow)
    updated_at      = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        Index("ix_loadouts_account", "membership_id", "platform_membership_id",
              "destiny_version"),
    )

    # ── Serialisation ──────────────────────────────────────────────────
    def to_dict(self) -> dict:
        try:
            items = json.loads(self.items_json or "{}")
        except (json.JSONDecodeError, TypeError):
            items = {}
        return {
            "id": self.id,
            "name": self.name or "",
            "classType": self.class_type,
            "clearSpace": bool(self.clear_space),
            "equipped": items.get("equipped", []),
            "unequipped": items.get("unequipped", []),
        }


class ItemAnnotation(Base):
    __tablename__ = "item_annotations"

    # ── Composite primary key ──────────────────────────────────────────
    membership_id          = Column(BigInteger, primary_key=True, autoincrement=False)
    platform_membership_id = Column(BigInteger, primary_key=True, autoincrement=False)
    destiny_version        = Column(SmallInteger, primary_key=True, autoincrement=False)
    inventory_item_id      = Column(String(64), primary_key=True)

    tag   = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)

    # ── Audit ──────────────────────────────────────────────────────────
    created_by      = Column(String(60), nullable=False)
    last_updated_by = Column(String(60), nullable=False)
    created_at      = Column(DateTime, default=_utcnow)
    updated_at      = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        Index("ix_annotations_account", "membership_id", "platform_membership_id",
              "destiny_version"),
    )

    def to_dict(self) -> dict:
        d = {"id": self.inventory_item_id}
        if self.tag is not None:
            d["tag"] = self.tag
        if self.notes is not None:
            d["notes"] = self.notes
        return d
