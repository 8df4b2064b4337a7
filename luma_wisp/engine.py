"""Response engine: Luma's replies and thoughts of the day.

Every public coroutine here always returns text. The LLM is reached only
through llm.generate(), whose GenerationFailed result is turned into the
deterministic fallback for the same inputs. There are no retries.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from luma_wisp.llm import LLM, Generated, GenerationFailed, GenerationResult, generate
from luma_wisp.models import Message, Personality, Realm
from luma_wisp.personalities import DEFAULT_RESPONSES, FALLBACK_THOUGHTS, lookup
from luma_wisp.prompts import THOUGHT_USER_PROMPT, build_system_prompt, build_thought_prompt

logger = logging.getLogger(__name__)

CHAT_MAX_TOKENS = 150
CHAT_TEMPERATURE = 0.8
THOUGHT_MAX_TOKENS = 50
THOUGHT_TEMPERATURE = 0.9

EMPTY_CHAT_PLACEHOLDER = "✨ *sparkles mysteriously* ✨"
EMPTY_THOUGHT_PLACEHOLDER = "Every moment holds a spark of magic waiting to be discovered! ✨"


def get_fallback_response(message: str, realm: Realm) -> str:
    """Keyword-matched canned reply. First matching rule wins."""
    personality = lookup(realm)
    lower = message.lower()

    if "hello" in lower or "hi" in lower:
        return personality.greeting

    if "help" in lower or "what" in lower:
        return (
            f"I'm here to guide you through the {realm} realm, little starlighter! "
            f"Ask me about {', '.join(personality.teachings)} or simply share "
            f"what's in your heart. ✨"
        )

    if "challenge" in lower or "activity" in lower:
        return (
            f"Let's try a {personality.special_phrases[0]} challenge! Take three deep "
            f"breaths and imagine yourself filled with {realm} energy. "
            f"How does that feel? ✨"
        )

    if "name" in lower:
        return (
            f"I'm Luma Wisp, your {realm} guide! My name comes from the first spark "
            f"of light in the cosmos. What does your name mean to you, dear one? ✨"
        )

    return DEFAULT_RESPONSES[realm]


def _text_or(result: Generated, placeholder: str) -> str:
    return result.text if result.text.strip() else placeholder


class LumaEngine:
    """Builds prompts, calls the LLM and degrades to local text on failure.

    Args:
        llm: Any callable matching luma_wisp.llm.LLM.
    """

    def __init__(self, llm: LLM) -> None:
        self._llm = llm

    def get_personality(self, realm: Realm) -> Personality:
        return lookup(realm)

    async def get_chat_response(
        self, message: str, realm: Realm, history: Sequence[Message]
    ) -> str:
        """Reply to `message` in `realm`'s voice. Never raises, never empty."""
        result: GenerationResult = await generate(
            self._llm,
            "chat",
            build_system_prompt(realm, history),
            message,
            max_tokens=CHAT_MAX_TOKENS,
            temperature=CHAT_TEMPERATURE,
        )
        if isinstance(result, GenerationFailed):
            logger.warning("chat fallback realm=%s reason=%s", realm, result.reason)
            return get_fallback_response(message, realm)
        return _text_or(result, EMPTY_CHAT_PLACEHOLDER)

    async def get_wisp_thought(self, realm: Realm) -> str:
        """Short daily inspiration for `realm`. Never raises, never empty."""
        result: GenerationResult = await generate(
            self._llm,
            "thought",
            build_thought_prompt(realm),
            THOUGHT_USER_PROMPT,
            max_tokens=THOUGHT_MAX_TOKENS,
            temperature=THOUGHT_TEMPERATURE,
        )
        if isinstance(result, GenerationFailed):
            logger.warning("thought fallback realm=%s reason=%s", realm, result.reason)
            return FALLBACK_THOUGHTS[realm]
        return _text_or(result, EMPTY_THOUGHT_PLACEHOLDER)
