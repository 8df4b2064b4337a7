"""Tests for user CRUD and the explicit merge."""

import pytest

from luma_wisp.models import UserUpdate
from luma_wisp.storage import DEMO_PASSWORD, merge_user


def test_create_user_defaults(store):
    user = store.create_user("mira")
    assert user.id
    assert user.username == "mira"
    assert user.password == DEMO_PASSWORD
    assert user.wispstars == 0
    assert user.crystal_crumbs == 0
    assert user.current_realm == "aether"
    assert user.created_at is not None


def test_get_user(store):
    user = store.create_user("mira")
    assert store.get_user(user.id) == user


def test_get_user_missing(store):
    assert store.get_user("nope") is None


def test_get_user_by_username(store):
    store.create_user("mira")
    bo = store.create_user("bo")
    assert store.get_user_by_username("bo") == bo
    assert store.get_user_by_username("zed") is None


def test_username_unique(store):
    store.create_user("mira")
    with pytest.raises(ValueError, match="already exists"):
        store.create_user("mira")


def test_update_user_applies_only_given_fields(store):
    user = store.create_user("mira")
    updated = store.update_user(user.id, UserUpdate(current_realm="fire"))
    assert updated.current_realm == "fire"
    assert updated.wispstars == 0
    assert updated.username == "mira"
    assert store.get_user(user.id) == updated


def test_update_user_missing(store):
    assert store.update_user("nope", UserUpdate(wispstars=3)) is None


def test_merge_user_returns_new_record(store):
    user = store.create_user("mira")
    merged = merge_user(user, UserUpdate(wispstars=2, crystal_crumbs=5))
    assert merged is not user
    assert (merged.wispstars, merged.crystal_crumbs) == (2, 5)
    assert (user.wispstars, user.crystal_crumbs) == (0, 0)
    assert merged.id == user.id


def test_merge_user_empty_update_is_identity(store):
    user = store.create_user("mira")
    assert merge_user(user, UserUpdate()) == user
