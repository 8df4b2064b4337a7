"""Core domain models.

The engine, the store and the HTTP layer all operate on these types.
Pydantic is used for validation and serialisation at every data boundary;
fields are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Realm = Literal["aether", "fire", "water", "earth", "air"]

REALMS: tuple[str, ...] = get_args(Realm)

MessageRole = Literal["user", "luma"]


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_realm(value: str) -> bool:
    return value in REALMS


class WireModel(BaseModel):
    """Base for every model that crosses the JSON boundary."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Personality(WireModel):
    """Static descriptor driving prompt tone and fallback text for a realm."""

    model_config = ConfigDict(frozen=True)

    realm: Realm
    greeting: str
    voice_tone: str
    special_phrases: tuple[str, ...]
    teachings: tuple[str, ...]


class Message(WireModel):
    """A single chat entry. Conversations only ever append these."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    role: MessageRole
    content: str
    timestamp: str = Field(default_factory=lambda: utcnow().isoformat())
    realm: Realm | None = None


class Conversation(WireModel):
    id: str
    user_id: str | None = None
    messages: list[Message] = Field(default_factory=list)
    realm: Realm
    created_at: datetime
    updated_at: datetime


class User(WireModel):
    id: str
    username: str
    password: str = Field(exclude=True)  # demo-only, never checked or returned
    wispstars: int = Field(default=0, ge=0)
    crystal_crumbs: int = Field(default=0, ge=0)
    current_realm: Realm = "aether"
    created_at: datetime


class UserUpdate(WireModel):
    """The fixed set of user fields that may change after creation."""

    wispstars: int | None = Field(default=None, ge=0)
    crystal_crumbs: int | None = Field(default=None, ge=0)
    current_realm: Realm | None = None


class Challenge(WireModel):
    id: str
    user_id: str
    challenge_type: str
    realm: Realm | None = None
    completed: datetime | None = None
