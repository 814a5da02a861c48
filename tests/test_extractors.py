import json

import pytest

from import_engine.bag import decode_bag, BagError
from import_engine.extractors import (
    extract_settings,
    extract_loadouts,
    extract_item_annotations,
    subtract_defaults,
)
from schema.loadouts import DestinyClass, ItemRef
from schema.settings import DEFAULT_SETTINGS


# ── Settings ──────────────────────────────────────────────────────────

def test_settings_keeps_only_known_changed_keys(sample_export):
    diff = extract_settings(decode_bag(sample_export))
    assert diff == {"itemSize": 66, "showNewItems": True}
    for key, value in diff.items():
        assert key in DEFAULT_SETTINGS
        assert value != DEFAULT_SETTINGS[key]


def test_settings_absent_key_gives_empty_diff():
    assert extract_settings(decode_bag({"loadouts-v3.0": []})) == {}


def test_settings_not_an_object_gives_empty_diff():
    assert extract_settings(decode_bag({"settings-v1.0": "oops"})) == {}


def test_settings_null_values_are_ignored():
    bag = decode_bag({"settings-v1.0": {"itemSize": None, "charCol": 4}})
    assert extract_settings(bag) == {"charCol": 4}


def test_subtract_defaults_treats_bool_and_number_as_different():
    assert subtract_defaults({"clear": True}, {"clear": 1}) == {"clear": True}
    assert subtract_defaults({"clear": 1}, {"clear": 1}) == {}


def test_subtract_defaults_compares_int_and_float_by_value():
    assert subtract_defaults({"x": 2.0}, {"x": 2}) == {}
    assert subtract_defaults({"x": 2}, {"x": 2.0}) == {}
    assert subtract_defaults({"x": 2.5}, {"x": 2}) == {"x": 2.5}


def test_settings_float_equal_to_default_is_not_a_change():
    bag = decode_bag(json.loads('{"settings-v1.0": {"itemSize": 50.0, "charCol": 4.0}}'))
    assert extract_settings(bag) == {"charCol": 4.0}


def test_subtract_defaults_compares_lists_by_value():
    defaults = {"sort": ["primStat", "name"]}
    assert subtract_defaults({"sort": ["primStat", "name"]}, defaults) == {}
    assert subtract_defaults({"sort": ["name"]}, defaults) == {"sort": ["name"]}


# ── Loadouts ──────────────────────────────────────────────────────────

def test_dangling_loadout_ids_are_dropped(sample_export):
    loadouts = extract_loadouts(decode_bag(sample_export))
    assert [l.id for l in loadouts] == ["a1", "b2"]


def test_falsy_loadout_payloads_are_dropped():
    bag = decode_bag({
        "loadouts-v3.0": ["x", "y", "z"],
        "x": None,
        "y": {},
        "z": {"id": "z", "membershipId": "1", "destinyVersion": 2, "items": []},
    })
    assert [l.id for l in extract_loadouts(bag)] == ["z"]


def test_no_loadout_index_gives_empty_list(sample_export):
    del sample_export["loadouts-v3.0"]
    assert extract_loadouts(decode_bag(sample_export)) == []


def test_loadout_is_normalised(sample_export):
    pvp = extract_loadouts(decode_bag(sample_export))[0]
    assert pvp.platform_membership_id == 4611686018429783292
    assert pvp.destiny_version == 2
    assert pvp.name == "PvP"
    assert pvp.class_type == DestinyClass.Hunter
    assert pvp.clear_space is True
    assert pvp.equipped == [ItemRef(id="6917529", hash=1345, amount=1)]
    assert pvp.unequipped == [ItemRef(id="0", hash=999, amount=5)]


def test_loadout_defaults(sample_export):
    raid = extract_loadouts(decode_bag(sample_export))[1]
    assert raid.class_type == DestinyClass.Unknown
    assert raid.clear_space is False
    assert raid.equipped == []
    assert raid.unequipped == []


def test_loadout_items_are_projected():
    bag = decode_bag({
        "loadouts-v3.0": ["q"],
        "q": {
            "id": "q", "membershipId": 5, "destinyVersion": 1, "classType": None,
            "items": [{"id": "11", "hash": 22, "amount": 1, "equipped": True,
                       "perks": [1, 2], "bucket": "Kinetic"}],
        },
    })
    [loadout] = extract_loadouts(bag)
    assert [i.to_dict() for i in loadout.equipped] == [{"id": "11", "hash": 22, "amount": 1}]


def test_loadout_without_membership_is_dropped():
    bag = decode_bag({
        "loadouts-v3.0": ["q"],
        "q": {"id": "q", "name": "orphan", "items": []},
    })
    assert extract_loadouts(bag) == []


def test_loadout_without_membership_uses_export_account():
    bag = decode_bag({
        "membershipId": "4611686018429783292",
        "destinyVersion": 2,
        "loadouts-v3.0": ["q", "r"],
        "q": {"id": "q", "name": "legacy", "items": []},
        "r": {"id": "r", "membershipId": "42", "destinyVersion": 1, "items": []},
    })
    legacy, own = extract_loadouts(bag)
    assert (legacy.platform_membership_id, legacy.destiny_version) == (4611686018429783292, 2)
    assert (own.platform_membership_id, own.destiny_version) == (42, 1)


def test_every_truthy_loadout_with_an_account_is_kept():
    bag = decode_bag({
        "membershipId": 7,
        "loadouts-v3.0": ["a", "b", "c", "missing"],
        "a": {"id": "a"},
        "b": {"id": "b", "membershipId": 8, "destinyVersion": 2},
        "c": {"name": "no id"},
    })
    loadouts = extract_loadouts(bag)
    assert [l.id for l in loadouts] == ["a", "b", "c"]
    assert [l.platform_membership_id for l in loadouts] == [7, 8, 7]


def test_loadout_with_unsupported_destiny_version_is_dropped():
    bag = decode_bag({
        "loadouts-v3.0": ["q"],
        "q": {"id": "q", "membershipId": "42", "destinyVersion": 3, "items": []},
    })
    assert extract_loadouts(bag) == []


def test_loadout_with_non_list_items_has_no_items():
    bag = decode_bag({
        "loadouts-v3.0": ["q"],
        "q": {"id": "q", "membershipId": "42", "destinyVersion": 2, "items": 5},
    })
    [loadout] = extract_loadouts(bag)
    assert loadout.equipped == []
    assert loadout.unequipped == []


def test_loadout_with_out_of_range_numbers_does_not_raise():
    # 1e400 decodes to inf
    bag = decode_bag(json.loads("""{
        "loadouts-v3.0": ["bad", "ok"],
        "bad": {"id": "bad", "membershipId": 1e400, "items": []},
        "ok": {"id": "ok", "membershipId": 42, "destinyVersion": 2, "classType": 1e400}
    }"""))
    [loadout] = extract_loadouts(bag)
    assert loadout.id == "ok"
    assert loadout.class_type == DestinyClass.Unknown


def test_loadout_missing_destiny_version_defaults_to_d1():
    bag = decode_bag({
        "loadouts-v3.0": ["q"],
        "q": {"id": "q", "membershipId": "42", "items": []},
    })
    [loadout] = extract_loadouts(bag)
    assert loadout.destiny_version == 1


# ── Item annotations ──────────────────────────────────────────────────

def test_annotation_key_is_parsed():
    bag = decode_bag({
        "dimItemInfo-m4611686018429783292-d2": {"123": {"tag": "favorite", "notes": "x"}},
    })
    [annotation] = extract_item_annotations(bag)
    assert annotation.platform_membership_id == 4611686018429783292
    assert annotation.destiny_version == 2
    assert annotation.id == "123"
    assert annotation.tag == "favorite"
    assert annotation.notes == "x"


@pytest.mark.parametrize("key", [
    "dimItemInfo-mabc-d2",
    "dimItemInfo-m123-d3",
    "dimItemInfo-m123",
    "itemInfo-m123-d2",
    "dimItemInfo-m123-d2-extra",
])
def test_non_annotation_keys_are_ignored(key):
    bag = decode_bag({key: {"1": {"tag": "junk"}}})
    assert extract_item_annotations(bag) == []


def test_annotations_keep_group_order(sample_export):
    annotations = extract_item_annotations(decode_bag(sample_export))
    assert [(a.destiny_version, a.id) for a in annotations] == [
        (2, "123"), (2, "456"), (1, "789"),
    ]
    assert annotations[1].notes is None
    assert annotations[2].tag is None


def test_annotation_entries_that_are_not_objects_are_skipped():
    bag = decode_bag({"dimItemInfo-m1-d2": {"1": "junk", "2": {"tag": "keep"}}})
    assert [a.id for a in extract_item_annotations(bag)] == ["2"]


# ── Whole bag ─────────────────────────────────────────────────────────

def test_extractors_are_idempotent(sample_export):
    bag = decode_bag(sample_export)
    assert extract_settings(bag) == extract_settings(bag)
    assert extract_loadouts(bag) == extract_loadouts(bag)
    assert extract_item_annotations(bag) == extract_item_annotations(decode_bag(sample_export))


@pytest.mark.parametrize("body", [[1, 2], "text", 3, None])
def test_non_object_bag_is_rejected(body):
    with pytest.raises(BagError):
        decode_bag(body)
