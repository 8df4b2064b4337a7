"""Chat, transform and thought-of-the-day endpoints."""

from fastapi import APIRouter, Depends

from luma_wisp import progress
from luma_wisp.chat import run_chat_turn
from luma_wisp.engine import LumaEngine
from luma_wisp.storage import MemoryStore

from .deps import get_engine, get_store, parse_realm
from .models import ChatBody, TransformBody

router = APIRouter()


@router.post("/luma/chat")
async def chat(
    body: ChatBody,
    store: MemoryStore = Depends(get_store),
    engine: LumaEngine = Depends(get_engine),
):
    """Send a message to Luma. Always answers, even when the LLM is down."""
    turn = await run_chat_turn(
        store=store,
        engine=engine,
        message=body.message,
        realm=body.realm,
        user_id=body.user_id,
        conversation_id=body.conversation_id,
    )
    return {
        "response": turn.response,
        "conversationId": turn.conversation_id,
        "messages": turn.messages,
    }


@router.post("/luma/transform")
async def transform(
    body: TransformBody,
    store: MemoryStore = Depends(get_store),
    engine: LumaEngine = Depends(get_engine),
):
    """Switch Luma to another realm, remembering it for the user if given."""
    progress.transform(store, body.realm, body.user_id)
    personality = engine.get_personality(body.realm)
    return {
        "realm": body.realm,
        "personality": personality,
        "greeting": personality.greeting,
    }


@router.get("/luma/thought/{realm}")
async def wisp_thought(realm: str, engine: LumaEngine = Depends(get_engine)):
    """Wisp Thought of the Day for a realm."""
    parsed = parse_realm(realm)
    thought = await engine.get_wisp_thought(parsed)
    return {"thought": thought, "realm": parsed}
