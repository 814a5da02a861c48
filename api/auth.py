"""
api.auth - Resolve the calling application and Bungie.net account.

The API key identifies the application; the membership header names the
account the request acts for.  Anything missing or malformed is a 401.
"""

from __future__ import annotations

from dataclasses import dataclass

from flask import request, abort

import config


@dataclass(frozen=True)
class UserInfo:
    app_id: str
    bungie_membership_id: int


def get_user() -> UserInfo:
    app_id = request.headers.get(config.API_KEY_HEADER, "").strip()
    membership = request.headers.get(config.MEMBERSHIP_HEADER, "").strip()
    if not app_id or not membership.isdigit():
        abort(401)
    return UserInfo(app_id=app_id, bungie_membership_id=int(membership))
