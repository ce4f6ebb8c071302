from __future__ import annotations
from cordkit.errors import NotFound, StateUnavailable
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING
import logfire
import regex

if TYPE_CHECKING:
    from .models import Message, User
    from .state import StateLookup
    from .types import Snowflake


__all__ = (
    'CHANNEL_MENTION_PATTERN',
    'channel_mention_id',
    'channel_mention_token',
    'replace_literals',
    'replace_mentions',
    'replace_user_mentions',
    'role_mention_token',
    'user_mention_tokens',
)


# ? matches any channel token, the id is checked per match
CHANNEL_MENTION_PATTERN = regex.compile(r'<#[^>]*>')


def user_mention_tokens(user_id: Snowflake | int) -> tuple[str, str]:
    """returns the bare `<@id>` and nickname `<@!id>` forms"""
    return f'<@{user_id}>', f'<@!{user_id}>'


def role_mention_token(role_id: Snowflake | int) -> str:
    return f'<@&{role_id}>'


def channel_mention_token(channel_id: Snowflake | int) -> str:
    return f'<#{channel_id}>'


def channel_mention_id(token: str) -> str:
    return token[2:-1]


def replace_literals(
    content: str,
    replacements: Mapping[str, str]
) -> str:
    """replace every exact occurrence of each key in a single pass

    replaced text is never scanned again, so a replacement that happens
    to contain another key is left as is
    """
    if not replacements:
        return content

    pattern = regex.compile('|'.join(
        regex.escape(token)
        for token in sorted(replacements, key=len, reverse=True)
    ))

    return pattern.sub(
        lambda match: replacements[match.group()],
        content
    )


def _find[T](lookup: Callable[..., T], *args: object) -> T | None:
    try:
        return lookup(*args)
    except NotFound:
        return None


def replace_user_mentions(
    content: str,
    mentions: Iterable[User]
) -> str:
    for user in mentions:
        bare, nick = user_mention_tokens(user.id)

        content = replace_literals(content, {
            bare: f'@{user.username}',
            nick: f'@{user.username}'
        })

    return content


def _replace_member_mentions(
    content: str,
    mentions: Iterable[User],
    guild_id: Snowflake | None,
    state: StateLookup
) -> str:
    for user in mentions:
        nick = user.username

        member = _find(state.member, guild_id, user.id)

        if member is not None and member.nick:
            nick = member.nick

        bare, nick_token = user_mention_tokens(user.id)

        # ? the bare form always gets the username
        content = replace_literals(content, {
            bare: f'@{user.username}',
            nick_token: f'@{nick}'
        })

    return content


def _replace_role_mentions(
    content: str,
    role_ids: Iterable[Snowflake],
    guild_id: Snowflake | None,
    state: StateLookup
) -> str:
    for role_id in role_ids:
        role = _find(state.role, guild_id, role_id)

        if role is None or not role.mentionable:
            logfire.debug(
                'skipping role mention {role_id}',
                role_id=role_id,
                found=role is not None)
            continue

        content = replace_literals(content, {
            role_mention_token(role.id): f'@{role.name}'
        })

    return content


def _replace_channel_mentions(
    content: str,
    state: StateLookup
) -> str:
    def replace(match: regex.Match) -> str:
        token = match.group()
        channel_id = channel_mention_id(token)

        # ? ids are matched exactly, so <#008> is not channel 8
        if not (
            channel_id.isascii() and
            channel_id.isdecimal() and
            channel_id == str(int(channel_id))
        ):
            return token

        channel = _find(state.channel, int(channel_id))

        if channel is None or channel.is_voice:
            logfire.debug(
                'skipping channel mention {channel_id}',
                channel_id=channel_id,
                found=channel is not None)
            return token

        return f'#{channel.name or ""}'

    return CHANNEL_MENTION_PATTERN.sub(replace, content)


def replace_mentions(
    message: Message,
    state_enabled: bool,
    state: StateLookup | None
) -> str:
    """replace user, role, and channel mentions using cached guild data

    falls back to `replace_user_mentions` when the state is disabled or the
    message's channel isn't cached. individual lookup misses leave the
    token alone (roles, channels) or use the username (users).
    """
    if not state_enabled:
        return replace_user_mentions(message.content, message.mentions)

    if state is None:
        raise StateUnavailable(
            'state is enabled but no state was provided')

    channel = _find(state.channel, message.channel_id)

    if channel is None:
        logfire.debug(
            'channel {channel_id} not in state, using basic mention replacement',
            channel_id=message.channel_id)
        return replace_user_mentions(message.content, message.mentions)

    with logfire.span(
        'replacing mentions on {message_id}',
        message_id=message.id,
        guild_id=channel.guild_id
    ):
        content = _replace_member_mentions(
            message.content,
            message.mentions,
            channel.guild_id,
            state)

        content = _replace_role_mentions(
            content,
            message.mention_roles,
            channel.guild_id,
            state)

        return _replace_channel_mentions(content, state)
