"""
services.loadout_service - Loadout upserts and listing.
"""

from __future__ import annotations

import json
from sqlalchemy.orm import Session

from db.models import Loadout
from schema.loadouts import PlatformLoadout


class LoadoutService:

    @staticmethod
    def update(
        session: Session,
        app_id: str,
        account_id: int,
        platform_membership_id: int,
        destiny_version: int,
        loadout: PlatformLoadout,
    ) -> Loadout:
        """Insert or update one loadout, keyed by account + platform + version + id."""
        items_json = json.dumps({
            "equipped": [i.to_dict() for i in loadout.equipped],
            "unequipped": [i.to_dict() for i in loadout.unequipped],
        }, ensure_ascii=False)

        key = (account_id, platform_membership_id, destiny_version, loadout.id)
        row = session.get(Loadout, key)
        if row is None:
            row = Loadout(
                membership_id=account_id,
                platform_membership_id=platform_membership_id,
                destiny_version=destiny_version,
                id=loadout.id,
                created_by=app_id,
            )
            session.add(row)

        row.name = loadout.name
        row.class_type = int(loadout.class_type)
        row.clear_space = loadout.clear_space
        row.items_json = items_json
        row.last_updated_by = app_id

        session.flush()
        return row

    @staticmethod
    def list_for_account(session: Session, account_id: int) -> list[dict]:
        """All loadouts of an account, across platforms and versions."""
        rows = (
            session.query(Loadout)
            .filter(Loadout.membership_id == account_id)
            .order_by(Loadout.platform_membership_id, Loadout.destiny_version,
                      Loadout.name, Loadout.id)
            .all()
        )
        return [
            {
                "platformMembershipId": str(r.platform_membership_id),
                "destinyVersion": r.destiny_version,
                "loadout": r.to_dict(),
            }
            for r in rows
        ]
