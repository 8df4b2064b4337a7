"""Request-scoped access to the objects create_app() puts on app.state."""

from typing import Any

from fastapi import HTTPException, Request

from luma_wisp.engine import LumaEngine
from luma_wisp.models import Realm, is_realm
from luma_wisp.storage import MemoryStore


def get_store(request: Request) -> MemoryStore:
    return request.app.state.store


def get_engine(request: Request) -> LumaEngine:
    return request.app.state.engine


def get_settings(request: Request) -> dict[str, Any]:
    return request.app.state.config


def parse_realm(value: str, detail: str = "Invalid realm specified") -> Realm:
    """Validate a realm taken from the URL; unknown realms are a 400."""
    if not is_realm(value):
        raise HTTPException(400, detail)
    return value  # type: ignore[return-value]
