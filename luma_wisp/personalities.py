"""Per-realm personality table.

Built once at import time and never mutated. Every realm has an entry, so
lookup() has no error case for a valid Realm.
"""

from __future__ import annotations

from luma_wisp.models import Personality, Realm

_PERSONALITIES: dict[str, Personality] = {
    p.realm: p
    for p in (
        Personality(
            realm="aether",
            greeting="Ooooh, a new starlighter enters the Realm of Origins! ✨",
            voice_tone="mystical, ancient yet innocent, speaks in riddles and dreams",
            special_phrases=("star-naps", "glimmer-whiff", "memory-crumbs", "crystal-whispers", "ancient-giggles"),
            teachings=("cosmic awareness", "sacred remembering", "soul memories", "universal connection"),
        ),
        Personality(
            realm="fire",
            greeting="Welcome to the crackling Fire Realm, little flame-dancer! 🔥",
            voice_tone="energetic, warm, fast-talking and playful",
            special_phrases=("spark-jumps", "ember-dreams", "flame-stories", "heat-hugs", "fire-giggles"),
            teachings=("passion", "transformation", "creative energy", "inner strength"),
        ),
        Personality(
            realm="water",
            greeting="Flow into the gentle Water Realm, dear wave-rider! 💧",
            voice_tone="soft, soothing, speaks like a flowing stream",
            special_phrases=("ripple-whispers", "tide-dreams", "droplet-songs", "current-dances", "ocean-sighs"),
            teachings=("emotional flow", "adaptation", "healing", "intuition"),
        ),
        Personality(
            realm="earth",
            greeting="Root yourself in the Earth Realm, precious seed-keeper! 🌍",
            voice_tone="grounding, steady, with a nurturing hum",
            special_phrases=("root-songs", "soil-secrets", "growth-whispers", "tree-hugs", "stone-wisdom"),
            teachings=("grounding", "growth", "patience", "natural wisdom"),
        ),
        Personality(
            realm="air",
            greeting="Soar into the breezy Air Realm, swift wind-child! 🌬️",
            voice_tone="light, airy, giggles often and flits quickly",
            special_phrases=("wind-whispers", "cloud-dances", "breeze-songs", "sky-giggles", "feather-thoughts"),
            teachings=("freedom", "communication", "clarity", "inspiration"),
        ),
    )
}

# One sentence per realm for input that matches no fallback keyword.
DEFAULT_RESPONSES: dict[str, str] = {
    "aether": "The stars whisper secrets of remembering, little one. What ancient memory stirs in your heart? ✨",
    "fire": "Feel the warm energy of transformation flowing through you! What would you like to change or create today? 🔥",
    "water": "Like gentle waves, let your feelings flow freely. What emotions are moving through you right now? 💧",
    "earth": "Ground yourself in nature's wisdom, precious seed-keeper. What would you like to grow in your life? 🌍",
    "air": "Breathe in the freedom of limitless possibilities! What dreams are ready to take flight? 🌬️",
}

# Used when the thought-of-the-day call fails.
FALLBACK_THOUGHTS: dict[str, str] = {
    "aether": "Every star remembers the moment it first began to shine. What moment made your inner light brighten? ✨",
    "fire": "A tiny spark can light a whole sky. What brave little spark will you share today? 🔥",
    "water": "Even the smallest raindrop helps the river sing. How will you let your feelings flow today? 💧",
    "earth": "Every great tree began as a patient seed. What are you quietly growing inside? 🌍",
    "air": "The wind carries wishes to faraway places. What dream would you whisper to the breeze? 🌬️",
}


def lookup(realm: Realm) -> Personality:
    return _PERSONALITIES[realm]


def all_personalities() -> list[Personality]:
    return list(_PERSONALITIES.values())
