"""Tests for the response engine: fallback rules, chat and thought replies."""

import pytest

from luma_wisp.engine import (
    CHAT_MAX_TOKENS,
    CHAT_TEMPERATURE,
    EMPTY_CHAT_PLACEHOLDER,
    EMPTY_THOUGHT_PLACEHOLDER,
    THOUGHT_MAX_TOKENS,
    THOUGHT_TEMPERATURE,
    get_fallback_response,
)
from luma_wisp.models import REALMS, Message
from luma_wisp.personalities import DEFAULT_RESPONSES, FALLBACK_THOUGHTS, lookup

# Matches none of the fallback keywords.
NEUTRAL = "tell me about the ocean"


# ── get_fallback_response ────────────────────────────────────


@pytest.mark.parametrize("realm", REALMS)
def test_greeting_keyword_returns_greeting(realm):
    assert get_fallback_response("Hello Luma", realm) == lookup(realm).greeting
    assert get_fallback_response("HI!", realm) == lookup(realm).greeting


def test_help_keyword_names_teachings():
    reply = get_fallback_response("can you help me", "earth")
    assert reply.startswith("I'm here to guide you through the earth realm")
    assert "grounding, growth, patience, natural wisdom" in reply


def test_what_keyword_matches_help_rule():
    assert get_fallback_response("WHAT should I learn", "air") == get_fallback_response("help", "air")


def test_challenge_keyword_uses_first_special_phrase():
    reply = get_fallback_response("give me a challenge", "water")
    assert reply.startswith("Let's try a ripple-whispers challenge!")
    assert "water energy" in reply


def test_activity_keyword_matches_challenge_rule():
    assert get_fallback_response("an activity please", "fire") == get_fallback_response("challenge", "fire")


def test_name_keyword_introduces_luma():
    reply = get_fallback_response("your name?", "aether")
    assert reply.startswith("I'm Luma Wisp, your aether guide!")


def test_greeting_beats_challenge():
    assert get_fallback_response("hello, I need a challenge", "fire") == lookup("fire").greeting


def test_help_beats_challenge():
    reply = get_fallback_response("help me pick a challenge", "earth")
    assert reply.startswith("I'm here to guide you")


@pytest.mark.parametrize("realm", REALMS)
def test_unmatched_message_returns_default(realm):
    reply = get_fallback_response(NEUTRAL, realm)
    assert reply == DEFAULT_RESPONSES[realm]
    assert reply


def test_fallback_is_deterministic():
    assert get_fallback_response("a challenge!", "air") == get_fallback_response("a challenge!", "air")


def test_substring_match_counts():
    # "this" contains "hi"
    assert get_fallback_response("this is fun", "water") == lookup("water").greeting


# ── LumaEngine.get_chat_response ─────────────────────────────


async def test_chat_returns_llm_text(engine, stub_llm):
    stub_llm.reply = "Ember-dreams await! 🔥"
    assert await engine.get_chat_response("hello", "fire", []) == "Ember-dreams await! 🔥"


async def test_chat_passes_prompt_and_limits(engine, stub_llm):
    history = [Message(role="user", content="I like stars")]
    await engine.get_chat_response("I like stars", "aether", history)
    call = stub_llm.calls[0]
    assert call["stage"] == "chat"
    assert call["user"] == "I like stars"
    assert "Current form: AETHER Luma" in call["system"]
    assert "user: I like stars" in call["system"]
    assert call["max_tokens"] == CHAT_MAX_TOKENS
    assert call["temperature"] == CHAT_TEMPERATURE


async def test_chat_empty_reply_uses_placeholder(engine, stub_llm):
    stub_llm.reply = ""
    assert await engine.get_chat_response("hello", "fire", []) == EMPTY_CHAT_PLACEHOLDER


async def test_chat_failure_hello_fire_returns_fire_greeting(failing_engine):
    reply = await failing_engine.get_chat_response("hello", "fire", [])
    assert reply == lookup("fire").greeting


@pytest.mark.parametrize("message", ["hello", "help", "a challenge", "my name", NEUTRAL])
async def test_chat_failure_matches_fallback(failing_engine, message):
    reply = await failing_engine.get_chat_response(message, "earth", [])
    assert reply
    assert reply == get_fallback_response(message, "earth")


async def test_chat_unexpected_error_still_falls_back(failing_engine, failing_llm):
    failing_llm.error = RuntimeError("boom")
    assert await failing_engine.get_chat_response(NEUTRAL, "air", []) == DEFAULT_RESPONSES["air"]


async def test_chat_failure_does_not_retry(failing_engine, failing_llm):
    await failing_engine.get_chat_response("hello", "water", [])
    assert failing_llm.calls == 1


# ── LumaEngine.get_wisp_thought ──────────────────────────────


async def test_thought_returns_llm_text(engine, stub_llm):
    stub_llm.reply = "Every root drinks the rain."
    assert await engine.get_wisp_thought("earth") == "Every root drinks the rain."
    call = stub_llm.calls[0]
    assert call["stage"] == "thought"
    assert call["max_tokens"] == THOUGHT_MAX_TOKENS
    assert call["temperature"] == THOUGHT_TEMPERATURE
    assert "grounding and growth and patience and natural wisdom" in call["system"]


async def test_thought_empty_reply_uses_placeholder(engine, stub_llm):
    stub_llm.reply = "   "
    assert await engine.get_wisp_thought("air") == EMPTY_THOUGHT_PLACEHOLDER


async def test_thought_failure_water_returns_water_fallback(failing_engine):
    assert await failing_engine.get_wisp_thought("water") == FALLBACK_THOUGHTS["water"]


def test_get_personality(engine):
    assert engine.get_personality("air") == lookup("air")
