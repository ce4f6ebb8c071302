from __future__ import annotations

from typing import Any

import logfire
import pytest

from cordkit.discord import Channel, Member, Role, State
from cordkit.errors import NotFound

logfire.configure(send_to_logfire=False, console=False)

GUILD_ID = 100
TEXT_CHANNEL_ID = 200
GENERAL_CHANNEL_ID = 8
VOICE_CHANNEL_ID = 7
MODS_ROLE_ID = 300
ADMINS_ROLE_ID = 301
ALICE_ID = 42
BOB_ID = 43


def user_payload(user_id: int, username: str) -> dict[str, Any]:
    return {
        "id": str(user_id),
        "username": username,
        "discriminator": "0",
        "global_name": None,
        "avatar": None,
    }


def member_payload(user_id: int, username: str, nick: str | None) -> dict[str, Any]:
    return {
        "user": user_payload(user_id, username),
        "nick": nick,
        "roles": [],
        "joined_at": "2024-01-01T00:00:00+00:00",
        "deaf": False,
        "mute": False,
        "flags": 0,
    }


def role_payload(role_id: int, name: str, mentionable: bool) -> dict[str, Any]:
    return {
        "id": str(role_id),
        "name": name,
        "color": 0,
        "hoist": False,
        "position": 1,
        "permissions": "0",
        "managed": False,
        "mentionable": mentionable,
        "flags": 0,
    }


def channel_payload(channel_id: int, name: str, channel_type: int = 0, **extra: Any) -> dict[str, Any]:
    return {
        "id": str(channel_id),
        "type": channel_type,
        "name": name,
        **extra,
    }


def message_payload(**overrides: Any) -> dict[str, Any]:
    return {
        "id": "1000",
        "channel_id": str(TEXT_CHANNEL_ID),
        "guild_id": str(GUILD_ID),
        "author": user_payload(1, "author"),
        "content": "",
        "timestamp": "2024-01-01T00:00:00+00:00",
        "edited_timestamp": None,
        "tts": False,
        "mention_everyone": False,
        "mentions": [],
        "mention_roles": [],
        "attachments": [],
        "embeds": [],
        "pinned": False,
        "type": 0,
        "flags": 0,
        **overrides,
    }


def guild_create_payload() -> dict[str, Any]:
    return {
        "id": str(GUILD_ID),
        "name": "physics",
        "channels": [
            channel_payload(TEXT_CHANNEL_ID, "lobby"),
            channel_payload(GENERAL_CHANNEL_ID, "general"),
            channel_payload(VOICE_CHANNEL_ID, "lounge", channel_type=2),
        ],
        "roles": [
            role_payload(MODS_ROLE_ID, "mods", mentionable=True),
            role_payload(ADMINS_ROLE_ID, "admins", mentionable=False),
        ],
        "members": [
            member_payload(ALICE_ID, "alice", "Al"),
            member_payload(BOB_ID, "bob", None),
        ],
    }


class RecordingLookup:
    """Lookup double that forwards to a State and records every call."""

    def __init__(self, state: State) -> None:
        self.state = state
        self.calls: list[tuple] = []

    def channel(self, channel_id: int) -> Channel:
        self.calls.append(("channel", channel_id))
        return self.state.channel(channel_id)

    def member(self, guild_id: int | None, user_id: int) -> Member:
        self.calls.append(("member", guild_id, user_id))
        return self.state.member(guild_id, user_id)

    def role(self, guild_id: int | None, role_id: int) -> Role:
        self.calls.append(("role", guild_id, role_id))
        return self.state.role(guild_id, role_id)


class EmptyLookup:
    """Lookup double where every entity is missing."""

    def channel(self, channel_id: int) -> Channel:
        raise NotFound(f"channel {channel_id} not found")

    def member(self, guild_id: int | None, user_id: int) -> Member:
        raise NotFound(f"member {user_id} not found")

    def role(self, guild_id: int | None, role_id: int) -> Role:
        raise NotFound(f"role {role_id} not found")


@pytest.fixture
def state() -> State:
    state = State()
    state.guild_add(guild_create_payload())
    return state


@pytest.fixture
def lookup(state: State) -> RecordingLookup:
    return RecordingLookup(state)
