"""
api.routes_export - /api/v1/export endpoint.
"""

from flask import jsonify

from api import api_bp
from api.auth import get_user
from db import get_session
from services import SettingsService, LoadoutService, AnnotationService


@api_bp.route("/export")
def export_data():
    """
    GET /api/v1/export

    Everything stored for the calling account: full settings (defaults
    applied), loadouts and item tags, each tagged with its platform
    membership id and Destiny version.
    """
    user = get_user()
    session = get_session()
    try:
        account_id = user.bungie_membership_id
        return jsonify({
            "settings": SettingsService.get(session, account_id),
            "loadouts": LoadoutService.list_for_account(session, account_id),
            "tags": AnnotationService.list_for_account(session, account_id),
        })
    finally:
        session.close()
