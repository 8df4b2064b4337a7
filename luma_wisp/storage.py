"""In-memory storage for users, conversations and challenges.

All state lives in three dicts keyed by generated ids. There is no
persistence, indexing or eviction. Records are pydantic models and are
never mutated in place: every write stores a new value under its key, so a
reader sees either the old record or the new one. Concurrent read-modify-
write of one conversation is last-write-wins.

One MemoryStore is constructed per process (see backend.app.create_app) and
passed to whatever needs it; tests build their own.
"""

from __future__ import annotations

from collections.abc import Sequence

from luma_wisp.models import (
    Challenge,
    Conversation,
    Message,
    Realm,
    User,
    UserUpdate,
    new_id,
    utcnow,
)

DEMO_PASSWORD = "demo"


def merge_user(user: User, updates: UserUpdate) -> User:
    """Return a copy of `user` with the non-None fields of `updates` applied."""
    fields = updates.model_dump(exclude_none=True)
    return user.model_copy(update=fields)


class MemoryStore:
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._conversations: dict[str, Conversation] = {}
        self._challenges: dict[str, Challenge] = {}

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def create_user(self, username: str, password: str = DEMO_PASSWORD) -> User:
        """Create a user with zeroed counters in the aether realm.

        Raises ValueError if the username is taken.
        """
        if self.get_user_by_username(username) is not None:
            raise ValueError(f"Username already exists: {username}")
        user = User(id=new_id(), username=username, password=password, created_at=utcnow())
        self._users[user.id] = user
        return user

    def update_user(self, user_id: str, updates: UserUpdate) -> User | None:
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = merge_user(user, updates)
        self._users[user_id] = updated
        return updated

    # ------------------------------------------------------------------
    # Conversations
    # ------------------------------------------------------------------

    def get_conversation(self, conversation_id: str) -> Conversation | None:
        return self._conversations.get(conversation_id)

    def get_conversations_by_user(self, user_id: str) -> list[Conversation]:
        return [c for c in self._conversations.values() if c.user_id == user_id]

    def create_conversation(
        self, user_id: str | None, messages: Sequence[Message], realm: Realm
    ) -> Conversation:
        now = utcnow()
        conversation = Conversation(
            id=new_id(),
            user_id=user_id,
            messages=list(messages),
            realm=realm,
            created_at=now,
            updated_at=now,
        )
        self._conversations[conversation.id] = conversation
        return conversation

    def update_conversation(
        self, conversation_id: str, messages: Sequence[Message]
    ) -> Conversation | None:
        """Replace the message list wholesale and refresh updated_at."""
        conversation = self._conversations.get(conversation_id)
        if conversation is None:
            return None
        updated = conversation.model_copy(
            update={"messages": list(messages), "updated_at": utcnow()}
        )
        self._conversations[conversation_id] = updated
        return updated

    # ------------------------------------------------------------------
    # Challenges
    # ------------------------------------------------------------------

    def get_user_challenges(self, user_id: str) -> list[Challenge]:
        return [c for c in self._challenges.values() if c.user_id == user_id]

    def create_challenge(
        self,
        user_id: str,
        challenge_type: str,
        realm: Realm | None = None,
        completed: bool = False,
    ) -> Challenge:
        challenge = Challenge(
            id=new_id(),
            user_id=user_id,
            challenge_type=challenge_type,
            realm=realm,
            completed=utcnow() if completed else None,
        )
        self._challenges[challenge.id] = challenge
        return challenge

    def complete_challenge(self, challenge_id: str) -> Challenge | None:
        challenge = self._challenges.get(challenge_id)
        if challenge is None:
            return None
        completed = challenge.model_copy(update={"completed": utcnow()})
        self._challenges[challenge_id] = completed
        return completed
