"""Twine state and LMS/Twine snippet endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from luma_wisp.integrations import (
    IntegrationError,
    available_integrations,
    render_integration,
    twine_state_macros,
)
from luma_wisp.personalities import lookup

from .deps import get_settings, parse_realm

router = APIRouter()


@router.get("/twine/luma-state/{realm}")
async def twine_luma_state(realm: str):
    """Personality plus SugarCube macros for a Twine story."""
    parsed = parse_realm(realm, "Invalid realm for Twine integration")
    return {
        "realm": parsed,
        "personality": lookup(parsed),
        "macros": twine_state_macros(parsed),
    }


@router.get("/integrations")
async def list_integrations():
    """Platforms and the snippet kinds each one offers."""
    return available_integrations()


@router.get("/integrations/{platform}/{kind}")
async def integration_snippet(
    platform: str,
    kind: str,
    realm: str = "aether",
    base_url: str | None = Query(None, alias="baseUrl"),
    settings: dict[str, Any] = Depends(get_settings),
):
    """Render a copy-pasteable snippet for an LMS or Twine host."""
    parsed = parse_realm(realm)
    try:
        snippet = render_integration(
            platform, kind, parsed, base_url or settings["public_base_url"]
        )
    except IntegrationError as e:
        raise HTTPException(404, str(e))
    return {
        "platform": snippet.platform,
        "kind": snippet.kind,
        "realm": snippet.realm,
        "filename": snippet.filename,
        "code": snippet.code,
    }
