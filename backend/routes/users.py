"""Demo users, progress and challenge completion endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from luma_wisp import progress
from luma_wisp.storage import MemoryStore

from .deps import get_store
from .models import CompleteChallengeBody, CreateUserBody

router = APIRouter()


@router.post("/user")
async def get_or_create_user(body: CreateUserBody, store: MemoryStore = Depends(get_store)):
    """Return the user with this username, creating it (demo password) if new."""
    user = store.get_user_by_username(body.username)
    if user is None:
        user = store.create_user(body.username)
    return {"user": user}


@router.get("/user/{user_id}/progress")
async def user_progress(user_id: str, store: MemoryStore = Depends(get_store)):
    """Points, current realm and activity counts for a user."""
    result = progress.get_progress(store, user_id)
    if result is None:
        raise HTTPException(404, "User not found")
    return {
        "user": {
            "wispstars": result.wispstars,
            "crystalCrumbs": result.crystal_crumbs,
            "currentRealm": result.current_realm,
        },
        "challengesCompleted": result.challenges_completed,
        "totalConversations": result.total_conversations,
    }


@router.post("/challenges/complete")
async def complete_challenge(body: CompleteChallengeBody, store: MemoryStore = Depends(get_store)):
    """Record a completed challenge and award one wispstar and one crystal crumb."""
    challenge = progress.complete_challenge(store, body.user_id, body.challenge_type, body.realm)
    return {
        "challenge": challenge,
        "pointsAwarded": {
            "wispstars": progress.WISPSTARS_PER_CHALLENGE,
            "crystalCrumbs": progress.CRYSTAL_CRUMBS_PER_CHALLENGE,
        },
    }
