import copy

import pytest

from db import init_db, get_session
from main import create_app

ACCOUNT_ID = 7094
APP_ID = "dim-app"
PLATFORM_ID = 4611686018429783292

AUTH_HEADERS = {
    "X-API-Key": APP_ID,
    "X-Bungie-Membership-Id": str(ACCOUNT_ID),
}

SAMPLE_EXPORT = {
    "membershipId": str(PLATFORM_ID),
    "destinyVersion": 2,
    "ignoredUsers": [],
    "settings-v1.0": {
        "itemSize": 66,
        "charCol": 3,
        "showNewItems": True,
        "notARealSetting": 1,
    },
    "loadouts-v3.0": ["a1", "missing", "b2"],
    "a1": {
        "id": "a1",
        "name": "PvP",
        "classType": 2,
        "membershipId": str(PLATFORM_ID),
        "destinyVersion": 2,
        "clearSpace": True,
        "items": [
            {"id": "6917529", "hash": 1345, "amount": 1, "equipped": True},
            {"id": "0", "hash": 999, "amount": 5, "equipped": False},
        ],
    },
    "b2": {
        "id": "b2",
        "name": "Raid",
        "membershipId": PLATFORM_ID,
        "destinyVersion": 2,
        "items": [],
    },
    "dimItemInfo-m4611686018429783292-d2": {
        "123": {"tag": "favorite", "notes": "x"},
        "456": {"tag": "junk"},
    },
    "dimItemInfo-m4611686018429783292-d1": {
        "789": {"notes": "old"},
    },
}


@pytest.fixture
def db_url(tmp_path):
    """SQLite file unique to each test."""
    return f"sqlite:///{tmp_path / 'dimsync-test.sqlite'}"


@pytest.fixture
def database(db_url):
    init_db(db_url)
    return db_url


@pytest.fixture
def session(database):
    s = get_session()
    yield s
    s.close()


@pytest.fixture
def app(db_url):
    app = create_app(db_url)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sample_export():
    """A fresh copy of a realistic legacy export."""
    return copy.deepcopy(SAMPLE_EXPORT)
