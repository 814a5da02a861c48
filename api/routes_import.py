"""
api.routes_import - /api/v1/import endpoint.

Accepts a full legacy export as a JSON object and writes it for the
calling account in one transaction.
"""

from flask import request, jsonify

from api import api_bp
from api.auth import get_user
from import_engine import run_import, BagError


@api_bp.route("/import", methods=["POST"])
def import_data():
    """
    POST /api/v1/import

    JSON body: {"settings-v1.0": {...}, "loadouts-v3.0": [...],
                "<loadout id>": {...}, "dimItemInfo-m<id>-d<1|2>": {...}}
    200 with an empty body on success.
    """
    user = get_user()

    data = request.get_json(force=True, silent=True)
    if data is None:
        return jsonify({"error": "body must be JSON"}), 400

    try:
        run_import(data, user.app_id, user.bungie_membership_id)
    except BagError as exc:
        return jsonify({"error": str(exc)}), 400

    return "", 200
