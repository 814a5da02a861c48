"""
services.annotation_service - Item tag / notes upserts and listing.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from db.models import ItemAnnotation
from schema.item_annotations import PlatformItemAnnotation


class AnnotationService:

    @staticmethod
    def update(
        session: Session,
        app_id: str,
        account_id: int,
        platform_membership_id: int,
        destiny_version: int,
        annotation: PlatformItemAnnotation,
    ) -> ItemAnnotation:
        """Insert or update the tag / notes of one item."""
        key = (account_id, platform_membership_id, destiny_version, annotation.id)
        row = session.get(ItemAnnotation, key)
        if row is None:
            row = ItemAnnotation(
                membership_id=account_id,
                platform_membership_id=platform_membership_id,
                destiny_version=destiny_version,
                inventory_item_id=annotation.id,
                created_by=app_id,
            )
            session.add(row)

        row.tag = annotation.tag
        row.notes = annotation.notes
        row.last_updated_by = app_id

        session.flush()
        return row

    @staticmethod
    def list_for_account(session: Session, account_id: int) -> list[dict]:
        rows = (
            session.query(ItemAnnotation)
            .filter(ItemAnnotation.membership_id == account_id)
            .order_by(ItemAnnotation.platform_membership_id,
                      ItemAnnotation.destiny_version,
                      ItemAnnotation.inventory_item_id)
            .all()
        )
        return [
            {
                "platformMembershipId": str(r.platform_membership_id),
                "destinyVersion": r.destiny_version,
                "annotation": r.to_dict(),
            }
            for r in rows
        ]
