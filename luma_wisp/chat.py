"""Chat turn orchestration: runs one user message end-to-end.

Turn flow:
  1. Load prior messages for conversation_id (unknown id → empty history).
  2. Append the user message.
  3. Ask the engine for a reply, passing the history including step 2.
  4. Append the companion message.
  5. Persist: replace the list on an existing conversation, or create a new
     conversation when a user_id is given. Anonymous one-off turns are not
     stored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from luma_wisp.engine import LumaEngine
from luma_wisp.models import Message, Realm
from luma_wisp.storage import MemoryStore

logger = logging.getLogger(__name__)

# Number of messages returned to the client after a turn.
RECENT_MESSAGES = 10


@dataclass(frozen=True)
class ChatTurn:
    response: str
    conversation_id: str | None
    messages: list[Message]


async def run_chat_turn(
    *,
    store: MemoryStore,
    engine: LumaEngine,
    message: str,
    realm: Realm,
    user_id: str | None = None,
    conversation_id: str | None = None,
) -> ChatTurn:
    """Execute one chat turn and return the reply plus the recent messages."""
    conversation = store.get_conversation(conversation_id) if conversation_id else None
    if conversation_id and conversation is None:
        logger.info("unknown conversation_id=%s, starting fresh", conversation_id)

    messages: list[Message] = list(conversation.messages) if conversation else []
    messages.append(Message(role="user", content=message, realm=realm))

    reply = await engine.get_chat_response(message, realm, messages)
    messages.append(Message(role="luma", content=reply, realm=realm))

    if conversation is not None:
        conversation = store.update_conversation(conversation.id, messages)
    elif user_id:
        conversation = store.create_conversation(user_id, messages, realm)
        logger.debug("created conversation id=%s user_id=%s", conversation.id, user_id)

    return ChatTurn(
        response=reply,
        conversation_id=conversation.id if conversation else None,
        messages=messages[-RECENT_MESSAGES:],
    )
