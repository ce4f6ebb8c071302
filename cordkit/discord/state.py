from __future__ import annotations
from .models import Channel, GatewayEvent, GatewayEventName, Member, Role
from typing import Protocol, TYPE_CHECKING
from pydantic import ValidationError
from cordkit.errors import NotFound
from threading import RLock
import logfire

if TYPE_CHECKING:
    from .types import Snowflake


__all__ = (
    'State',
    'StateLookup',
)


class StateLookup(Protocol):
    def channel(
        self,
        channel_id: Snowflake | int
    ) -> Channel: ...

    def member(
        self,
        guild_id: Snowflake | int | None,
        user_id: Snowflake | int
    ) -> Member: ...

    def role(
        self,
        guild_id: Snowflake | int | None,
        role_id: Snowflake | int
    ) -> Role: ...


class State:
    """in-memory cache of channels, members, and roles

    kept current by `on_event` or the add/remove methods directly.
    lookups raise `NotFound` on a miss.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._channels: dict[int, Channel] = {}
        self._members: dict[tuple[int, int], Member] = {}
        self._roles: dict[tuple[int, int], Role] = {}
        self._guilds: set[int] = set()

    def __repr__(self) -> str:
        return (
            f'<State guilds={len(self._guilds)} '
            f'channels={len(self._channels)} '
            f'members={len(self._members)} '
            f'roles={len(self._roles)}>')

    @property
    def guild_ids(self) -> frozenset[int]:
        with self._lock:
            return frozenset(self._guilds)

    def channel(self, channel_id: Snowflake | int) -> Channel:
        with self._lock:
            channel = self._channels.get(int(channel_id))

        if channel is None:
            raise NotFound(f'channel {channel_id} not found')

        return channel

    def member(
        self,
        guild_id: Snowflake | int | None,
        user_id: Snowflake | int
    ) -> Member:
        member = None

        if guild_id is not None:
            with self._lock:
                member = self._members.get((int(guild_id), int(user_id)))

        if member is None:
            raise NotFound(f'member {user_id} not found in guild {guild_id}')

        return member

    def role(
        self,
        guild_id: Snowflake | int | None,
        role_id: Snowflake | int
    ) -> Role:
        role = None

        if guild_id is not None:
            with self._lock:
                role = self._roles.get((int(guild_id), int(role_id)))

        if role is None:
            raise NotFound(f'role {role_id} not found in guild {guild_id}')

        return role

    def channel_add(self, channel: Channel) -> None:
        with self._lock:
            self._channels[channel.id] = channel

    def channel_remove(self, channel_id: Snowflake | int) -> None:
        with self._lock:
            self._channels.pop(int(channel_id), None)

    def member_add(self, guild_id: Snowflake | int, member: Member) -> None:
        if member.user is None:
            raise ValueError('member must have a user to be cached')

        with self._lock:
            key = (int(guild_id), member.user.id)
            existing = self._members.get(key)

            # ? updates can be partial, merge over what's cached
            if existing is not None:
                member = existing.model_copy(update={
                    field: getattr(member, field)
                    for field in member.model_fields_set
                })

            self._members[key] = member

    def member_remove(
        self,
        guild_id: Snowflake | int,
        user_id: Snowflake | int
    ) -> None:
        with self._lock:
            self._members.pop((int(guild_id), int(user_id)), None)

    def role_add(self, guild_id: Snowflake | int, role: Role) -> None:
        with self._lock:
            self._roles[(int(guild_id), role.id)] = role

    def role_remove(
        self,
        guild_id: Snowflake | int,
        role_id: Snowflake | int
    ) -> None:
        with self._lock:
            self._roles.pop((int(guild_id), int(role_id)), None)

    def guild_add(self, data: dict) -> None:
        """cache a guild create payload's channels, threads, roles, and members"""
        guild_id = int(data['id'])

        with self._lock:
            self._guilds.add(guild_id)

            for channel_data in (
                *data.get('channels', []),
                *data.get('threads', [])
            ):
                # ? channels in a guild payload omit guild_id
                self.channel_add(Channel(**{
                    'guild_id': guild_id,
                    **channel_data}))

            for role_data in data.get('roles', []):
                self.role_add(guild_id, Role(**role_data))

            for member_data in data.get('members', []):
                self.member_add(guild_id, Member(**member_data))

    def guild_remove(self, guild_id: Snowflake | int) -> None:
        guild_id = int(guild_id)

        with self._lock:
            self._guilds.discard(guild_id)

            self._channels = {
                channel_id: channel
                for channel_id, channel in self._channels.items()
                if channel.guild_id != guild_id
            }

            self._members = {
                key: member
                for key, member in self._members.items()
                if key[0] != guild_id
            }

            self._roles = {
                key: role
                for key, role in self._roles.items()
                if key[0] != guild_id
            }

    def on_event(self, event: GatewayEvent) -> None:
        if event.data is None:
            return

        try:
            self._apply(event.name, event.data)
        except (KeyError, ValidationError, ValueError) as e:
            logfire.debug(
                'malformed {event_name} event ignored by state',
                event_name=event.name,
                error=str(e))

    def _apply(self, name: GatewayEventName | str | None, data: dict) -> None:
        match name:
            case GatewayEventName.GUILD_CREATE:
                if data.get('unavailable'):
                    return

                self.guild_add(data)
            case GatewayEventName.GUILD_DELETE:
                self.guild_remove(data['id'])
            case (
                GatewayEventName.CHANNEL_CREATE |
                GatewayEventName.CHANNEL_UPDATE |
                GatewayEventName.THREAD_CREATE |
                GatewayEventName.THREAD_UPDATE
            ):
                self.channel_add(Channel(**data))
            case GatewayEventName.CHANNEL_DELETE | GatewayEventName.THREAD_DELETE:
                self.channel_remove(data['id'])
            case GatewayEventName.GUILD_ROLE_CREATE | GatewayEventName.GUILD_ROLE_UPDATE:
                self.role_add(data['guild_id'], Role(**data['role']))
            case GatewayEventName.GUILD_ROLE_DELETE:
                self.role_remove(data['guild_id'], data['role_id'])
            case GatewayEventName.GUILD_MEMBER_ADD | GatewayEventName.GUILD_MEMBER_UPDATE:
                member_data = data.copy()
                guild_id = member_data.pop('guild_id')

                self.member_add(guild_id, Member(**member_data))
            case GatewayEventName.GUILD_MEMBER_REMOVE:
                self.member_remove(data['guild_id'], data['user']['id'])
            case GatewayEventName.GUILD_MEMBERS_CHUNK:
                for member_data in data['members']:
                    self.member_add(data['guild_id'], Member(**member_data))
            case _:
                logfire.debug(
                    'state ignored {event_name} event',
                    event_name=name)
