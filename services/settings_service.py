"""
services.settings_service - Per-account settings storage.

All session management is the caller's responsibility (open before,
close/commit after), so replace() can take part in a larger import
transaction.
"""

from __future__ import annotations

import json
from sqlalchemy.orm import Session

from db.models import Settings
from schema.settings import apply_defaults


class SettingsService:

    @staticmethod
    def replace(session: Session, app_id: str, account_id: int, settings: dict) -> Settings:
        """
        Overwrite the stored settings diff for an account.

        Full replace, not a merge: keys missing from ``settings`` fall
        back to their defaults when read.
        """
        payload = json.dumps(settings, ensure_ascii=False, sort_keys=True)
        row = session.get(Settings, account_id)
        if row:
            row.settings_json = payload
            row.last_updated_by = app_id
        else:
            row = Settings(
                membership_id=account_id,
                settings_json=payload,
                created_by=app_id,
                last_updated_by=app_id,
            )
            session.add(row)
        session.flush()
        return row

    @staticmethod
    def get(session: Session, account_id: int) -> dict:
        """Return the full settings for an account, defaults included."""
        row = session.get(Settings, account_id)
        return apply_defaults(row.settings if row else {})
