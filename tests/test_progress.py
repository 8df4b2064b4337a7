"""Tests for challenge completion, progress and realm transformation."""

from luma_wisp import progress
from luma_wisp.models import UserUpdate


def test_complete_challenge_awards_points(store):
    user = store.create_user("mira")
    store.update_user(user.id, UserUpdate(wispstars=2, crystal_crumbs=3))

    challenge = progress.complete_challenge(store, user.id, "breathwork", "air")

    updated = store.get_user(user.id)
    assert (updated.wispstars, updated.crystal_crumbs) == (3, 4)
    assert challenge.completed is not None
    assert challenge.user_id == user.id
    assert store.get_user_challenges(user.id) == [challenge]


def test_complete_challenge_unknown_user_still_records(store):
    challenge = progress.complete_challenge(store, "ghost", "journaling")
    assert challenge.completed is not None
    assert store.get_user("ghost") is None


def test_progress_counts(store):
    user = store.create_user("mira")
    progress.complete_challenge(store, user.id, "a")
    progress.complete_challenge(store, user.id, "b")
    store.create_challenge(user.id, "pending")
    store.create_conversation(user.id, [], "fire")

    result = progress.get_progress(store, user.id)
    assert result.wispstars == 2
    assert result.crystal_crumbs == 2
    assert result.current_realm == "aether"
    assert result.challenges_completed == 2
    assert result.total_conversations == 1


def test_progress_unknown_user(store):
    assert progress.get_progress(store, "ghost") is None


def test_transform_sets_current_realm(store):
    user = store.create_user("mira")
    progress.transform(store, "water", user.id)
    assert store.get_user(user.id).current_realm == "water"


def test_transform_without_user_is_noop(store):
    progress.transform(store, "water")
    progress.transform(store, "water", "ghost")
    assert store.get_user("ghost") is None
