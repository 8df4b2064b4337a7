"""Tests for LMS/Twine snippet generation."""

import pytest

from luma_wisp.integrations import (
    IntegrationError,
    available_integrations,
    render_integration,
    twine_state_macros,
)
from luma_wisp.personalities import lookup

BASE = "https://luma.example"


def test_available_integrations():
    assert available_integrations() == {
        "lms": ["widget", "iframe", "api"],
        "twine": ["macros", "widget", "story"],
    }


@pytest.mark.parametrize("platform,kind", [
    ("lms", "widget"), ("lms", "iframe"), ("lms", "api"),
    ("twine", "macros"), ("twine", "widget"), ("twine", "story"),
])
def test_every_snippet_mentions_realm_and_base_url(platform, kind):
    snippet = render_integration(platform, kind, "earth", BASE)
    assert snippet.platform == platform
    assert snippet.kind == kind
    assert "earth" in snippet.code
    assert BASE in snippet.code
    assert "{{{" not in snippet.code


def test_trailing_slash_stripped_from_base_url():
    snippet = render_integration("lms", "widget", "fire", BASE + "/")
    assert f"{BASE}/luma-widget.js" in snippet.code


def test_lms_placeholders_survive():
    code = render_integration("lms", "iframe", "air", BASE).code
    assert "user={{student_id}}&course={{course_id}}" in code
    assert f"src=\"{BASE}?embed=true&realm=air" in code


def test_twine_widget_story_id_placeholder():
    code = render_integration("twine", "widget", "water", BASE).code
    assert 'data-story-id="{{STORY_ID}}"' in code


def test_twine_story_has_passage_per_realm():
    code = render_integration("twine", "story", "aether", BASE).code
    assert '<<set $lumaRealm to "aether">>' in code
    for title in ("Aether", "Fire", "Water", "Earth", "Air"):
        assert f":: {title}Intro" in code
        assert f":: {title}Question" in code


def test_twine_macros_escape_greeting_for_js():
    code = render_integration("twine", "macros", "earth", BASE).code
    assert "greeting: 'Root yourself in the Earth Realm" in code


def test_filenames():
    assert render_integration("lms", "api", "air", BASE).filename == "luma-lms-api-integration.js"
    assert render_integration("lms", "widget", "air", BASE).filename == "luma-lms-widget-integration.html"
    assert render_integration("twine", "story", "air", BASE).filename == "luma-twine-story-integration.tw"


@pytest.mark.parametrize("platform,kind", [("lms", "story"), ("moodle", "widget")])
def test_unknown_integration(platform, kind):
    with pytest.raises(IntegrationError, match="Unknown integration"):
        render_integration(platform, kind, "air", BASE)


def test_twine_state_macros():
    macros = twine_state_macros("fire")
    assert macros["lumaGreet"] == f'<<set $lumaGreeting to "{lookup("fire").greeting}">>'
    assert macros["lumaTransform"] == '<<set $lumaRealm to "fire">>'
    assert macros["lumaSpeak"].startswith('<<widget "lumaSpeak">>')
