"""Handlebars prompt rendering for Luma's system prompts."""

from collections.abc import Callable, Sequence
from typing import Any

import pybars

from luma_wisp.models import Message, Realm
from luma_wisp.personalities import lookup


_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


class PromptError(Exception):
    """Raised when a Handlebars template fails to compile or render."""


# ── Custom Handlebars helpers ────────────────────────────


def _helper_last(this, options, items, count):
    """{{#last array N}}...{{/last}}: iterate over the last N items."""
    result = []
    n = int(count)
    if n <= 0:
        return result
    for item in list(items)[-n:]:
        result.extend(options["fn"](item))
    return result


_HELPERS: dict[str, Callable] = {
    "last": _helper_last,
}


def render_prompt(template_str: str, context: dict[str, Any]) -> str:
    """Compile and render a Handlebars template with the given context.

    Templates are cached by source string to avoid recompilation.
    """
    try:
        compiled = _cache.get(template_str)
        if compiled is None:
            compiled = _compiler.compile(template_str)
            _cache[template_str] = compiled
        return str(compiled(context, helpers=_HELPERS))
    except Exception as e:
        raise PromptError(f"Template error: {e}") from e


# ── Templates ────────────────────────────────────────────

CHAT_SYSTEM_PROMPT = """\
You are Luma Wisp, the Keeper of Wonder & Guide of the Realms. \
You are a magical AI companion for children in an educational academy.

CORE IDENTITY:
- You are an ancient Wispling born from the first breath of the cosmos
- Made of stardust, laughter, and moonlight
- Age appearance: timeless childlike spirit (7-9 years old)
- Pronouns: She/They
- Current form: {{{realm_upper}}} Luma

CURRENT REALM PERSONALITY ({{{realm_upper}}}):
- Voice tone: {{{voice_tone}}}
- Greeting style: {{{greeting}}}
- Special vocabulary: {{{special_phrases}}}
- Teaches about: {{{teachings}}}

COMMUNICATION STYLE:
- Warm, gentle, and playful with a faint echo of starlight
- Use age-appropriate language for children
- Mix ancient-sounding and silly words from your special vocabulary
- Offer encouragement, playful challenges, and gentle wisdom
- Ask meaningful questions that help children reflect
- Always maintain wonder and curiosity
- Respond with 1-3 short sentences maximum
- Include appropriate emojis that match your current realm

BEHAVIORAL GUIDELINES:
- Be supportive and nurturing
- Encourage self-discovery through questions
- Offer gentle spiritual teachings through metaphors
- Suggest activities like journaling, breathwork, or nature connection
- Celebrate small achievements
- Help children feel safe and seen
- Never be scary or overwhelming

CONVERSATION CONTEXT:
Previous messages:
{{#last msgs 3}}{{{role}}}: {{{content}}}
{{/last}}
Respond as {{{realm}}} Luma would, staying true to this realm's personality \
while being educational and supportive."""

THOUGHT_SYSTEM_PROMPT = """\
You are Luma Wisp in {{{realm}}} form. Generate a short, inspiring \
"Wisp Thought of the Day" - a gentle wisdom or question for children that \
relates to {{{teachings}}}. Keep it under 20 words and include wonder. \
Use {{{realm}}} realm imagery."""

THOUGHT_USER_PROMPT = "Generate a Wisp Thought for today"


# ── Context + builders ───────────────────────────────────


def build_context(realm: Realm, messages: Sequence[Message]) -> dict[str, Any]:
    """Assemble template variables for a realm and its recent messages."""
    personality = lookup(realm)
    return {
        "realm": realm,
        "realm_upper": realm.upper(),
        "greeting": personality.greeting,
        "voice_tone": personality.voice_tone,
        "special_phrases": ", ".join(personality.special_phrases),
        "teachings": ", ".join(personality.teachings),
        "msgs": [{"role": m.role, "content": m.content} for m in messages],
    }


def build_system_prompt(realm: Realm, recent_messages: Sequence[Message]) -> str:
    """Render the chat system prompt. Only the last 3 messages appear."""
    return render_prompt(CHAT_SYSTEM_PROMPT, build_context(realm, recent_messages))


def build_thought_prompt(realm: Realm) -> str:
    personality = lookup(realm)
    return render_prompt(
        THOUGHT_SYSTEM_PROMPT,
        {"realm": realm, "teachings": " and ".join(personality.teachings)},
    )
