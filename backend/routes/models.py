"""Pydantic request models for API endpoints.

Bodies are camelCase on the wire (userId, conversationId, challengeType);
snake_case names are accepted too.
"""

from pydantic import Field

from luma_wisp.models import Realm, WireModel


class ChatBody(WireModel):
    message: str = Field(min_length=1)
    realm: Realm
    user_id: str | None = None
    conversation_id: str | None = None


class TransformBody(WireModel):
    realm: Realm
    user_id: str | None = None


class CompleteChallengeBody(WireModel):
    user_id: str
    challenge_type: str = Field(min_length=1)
    realm: Realm | None = None


class CreateUserBody(WireModel):
    username: str = Field(min_length=1)
