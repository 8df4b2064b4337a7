"""Wispstars, crystal crumbs and realm transformation."""

from __future__ import annotations

from dataclasses import dataclass

from luma_wisp.models import Challenge, Realm, UserUpdate
from luma_wisp.storage import MemoryStore

WISPSTARS_PER_CHALLENGE = 1
CRYSTAL_CRUMBS_PER_CHALLENGE = 1


@dataclass(frozen=True)
class Progress:
    wispstars: int
    crystal_crumbs: int
    current_realm: Realm
    challenges_completed: int
    total_conversations: int


def complete_challenge(
    store: MemoryStore, user_id: str, challenge_type: str, realm: Realm | None = None
) -> Challenge:
    """Record a challenge as completed and award points.

    The challenge is created already completed; there is no pending state.
    Points go to the user only if the user exists.
    """
    challenge = store.create_challenge(user_id, challenge_type, realm, completed=True)
    user = store.get_user(user_id)
    if user is not None:
        store.update_user(user_id, UserUpdate(
            wispstars=user.wispstars + WISPSTARS_PER_CHALLENGE,
            crystal_crumbs=user.crystal_crumbs + CRYSTAL_CRUMBS_PER_CHALLENGE,
        ))
    return challenge


def get_progress(store: MemoryStore, user_id: str) -> Progress | None:
    user = store.get_user(user_id)
    if user is None:
        return None
    challenges = store.get_user_challenges(user_id)
    return Progress(
        wispstars=user.wispstars,
        crystal_crumbs=user.crystal_crumbs,
        current_realm=user.current_realm,
        challenges_completed=sum(1 for c in challenges if c.completed is not None),
        total_conversations=len(store.get_conversations_by_user(user_id)),
    )


def transform(store: MemoryStore, realm: Realm, user_id: str | None = None) -> None:
    """Move a known user's current realm. Unknown or missing users are ignored."""
    if user_id:
        store.update_user(user_id, UserUpdate(current_realm=realm))
