from datetime import datetime, timedelta

import pytest

from app.db.store import UnknownCollection


def add_otp(store, email, code, minutes=10, used=False, created=None):
    created = created or datetime(2025, 1, 1, 12, 0)
    return store.insert_one("otps", {
        "email": email,
        "otp_code": code,
        "expires_at": created + timedelta(minutes=minutes),
        "is_used": used,
        "created_at": created,
    })


def test_insert_and_find_one(store):
    record = add_otp(store, "a@example.com", "123456")
    assert record.id is not None

    found = store.find_one("otps", {"email": "a@example.com", "otp_code": "123456"})
    assert found.id == record.id
    assert store.find_one("otps", {"email": "missing@example.com"}) is None


def test_comparison_operators(store):
    base = datetime(2025, 1, 1, 12, 0)
    for i in range(5):
        add_otp(store, f"user{i}@example.com", f"10000{i}", created=base + timedelta(minutes=i))

    assert store.count("otps", {"created_at": {"$gte": base + timedelta(minutes=2)}}) == 3
    assert store.count("otps", {"created_at": {"$gt": base + timedelta(minutes=2)}}) == 2
    assert store.count("otps", {"created_at": {"$lt": base + timedelta(minutes=2)}}) == 2
    assert store.count("otps", {"created_at": {"$lte": base + timedelta(minutes=2)}}) == 3
    assert store.count("otps", {"email": {"$ne": "user0@example.com"}}) == 4
    assert store.count("otps", {"email": {"$in": ["user1@example.com", "user3@example.com"]}}) == 2


def test_find_many_sort_limit_skip(store):
    base = datetime(2025, 1, 1, 12, 0)
    for i in range(5):
        add_otp(store, "a@example.com", f"20000{i}", created=base + timedelta(minutes=i))

    newest = store.find_many("otps", {"email": "a@example.com"}, sort=[("created_at", -1)], limit=2)
    assert [r.otp_code for r in newest] == ["200004", "200003"]

    page = store.find_many("otps", sort=[("created_at", 1)], limit=2, skip=2)
    assert [r.otp_code for r in page] == ["200002", "200003"]


def test_update_one_is_conditional(store):
    record = add_otp(store, "a@example.com", "123456")

    updated = store.update_one("otps", {"id": record.id, "is_used": False}, {"is_used": True})
    assert updated is not None
    assert updated.is_used is True

    # Same condition no longer matches
    assert store.update_one("otps", {"id": record.id, "is_used": False}, {"is_used": True}) is None


def test_update_many_and_delete(store):
    add_otp(store, "a@example.com", "111111")
    add_otp(store, "a@example.com", "222222")
    add_otp(store, "b@example.com", "333333")

    assert store.update_many("otps", {"email": "a@example.com"}, {"is_used": True}) == 2
    assert store.count("otps", {"is_used": True}) == 2

    assert store.delete_one("otps", {"email": "b@example.com"}) == 1
    assert store.delete_one("otps", {"email": "b@example.com"}) == 0
    assert store.delete_many("otps", {"email": "a@example.com"}) == 2
    assert store.count("otps") == 0


def test_case_insensitive_operators(store):
    store.insert_many("colleges", [
        {"name": "IIM Ahmedabad", "tier": 1, "aliases": ["iim a"]},
        {"name": "MICA Ahmedabad", "tier": 2, "aliases": ["mica"]},
    ])

    assert store.find_one("colleges", {"name": {"$ieq": "iim ahmedabad"}}).name == "IIM Ahmedabad"
    assert store.count("colleges", {"name": {"$icontains": "AHMEDABAD"}}) == 2
    # Wildcards in the needle are matched literally
    assert store.count("colleges", {"name": {"$icontains": "%"}}) == 0


def test_none_means_is_null(store):
    store.insert_one("colleges", {"name": "FMS Delhi", "tier": None})
    store.insert_one("colleges", {"name": "IIM Lucknow", "tier": 1})
    assert [c.name for c in store.find_many("colleges", {"tier": None})] == ["FMS Delhi"]


def test_unknown_collection_field_and_operator(store):
    with pytest.raises(UnknownCollection):
        store.find_one("nope", {})
    with pytest.raises(ValueError):
        store.find_one("otps", {"no_such_field": 1})
    with pytest.raises(ValueError):
        store.find_one("otps", {"email": {"$regex": ".*"}})


def test_collections_lifecycle(store):
    assert store.collection_exists("users")
    assert store.create_collections() == []

    dropped = store.drop_collections()
    assert set(dropped) == {"users", "otps", "colleges", "articles", "sessions"}
    assert not store.collection_exists("otps")

    assert set(store.create_collections()) == set(dropped)
