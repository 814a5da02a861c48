"""
import_engine.importer - Top-level orchestrator.

Coordinates bag → extractors → one DB transaction and produces an
ImportReport.  Either every record of the import is committed or none is.
"""

from __future__ import annotations

import logging
from typing import Any

from db.engine import get_session
from import_engine.bag import decode_bag
from import_engine.extractors import (
    extract_settings,
    extract_loadouts,
    extract_item_annotations,
)
from import_engine.report import ImportReport
from services.settings_service import SettingsService
from services.loadout_service import LoadoutService
from services.annotation_service import AnnotationService

logger = logging.getLogger(__name__)


def run_import(import_data: Any, app_id: str, account_id: int) -> ImportReport:
    """
    Import a legacy export for one Bungie.net account.

    Parameters
    ----------
    import_data : the decoded JSON body of the export
    app_id      : calling application, recorded on every written row
    account_id  : Bungie.net membership id of the caller

    Returns
    -------
    ImportReport with the number of records written

    Raises BagError for a non-object body.  Any storage error rolls the
    whole import back and is re-raised unchanged.
    """
    bag = decode_bag(import_data)
    settings = extract_settings(bag)
    loadouts = extract_loadouts(bag)
    annotations = extract_item_annotations(bag)

    session = get_session()
    try:
        session.begin()

        SettingsService.replace(session, app_id, account_id, settings)

        # Upsert only: rows missing from the import are left in place
        for loadout in loadouts:
            LoadoutService.update(
                session, app_id, account_id,
                loadout.platform_membership_id, loadout.destiny_version,
                loadout,
            )

        for annotation in annotations:
            AnnotationService.update(
                session, app_id, account_id,
                annotation.platform_membership_id, annotation.destiny_version,
                annotation,
            )

        session.commit()
    except Exception:
        session.rollback()
        logger.exception("Import for account %s rolled back", account_id)
        raise
    finally:
        session.close()

    report = ImportReport(
        settings=len(settings),
        loadouts=len(loadouts),
        annotations=len(annotations),
    )
    logger.info("Imported for account %s (app %s): %s",
                account_id, app_id, report.to_dict())
    return report
