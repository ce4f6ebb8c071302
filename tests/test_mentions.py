from __future__ import annotations

import pytest

from conftest import (
    ADMINS_ROLE_ID,
    ALICE_ID,
    BOB_ID,
    GENERAL_CHANNEL_ID,
    GUILD_ID,
    MODS_ROLE_ID,
    TEXT_CHANNEL_ID,
    VOICE_CHANNEL_ID,
    EmptyLookup,
    RecordingLookup,
    member_payload,
    message_payload,
    user_payload,
)
from cordkit.discord import Member, Message, State, User
from cordkit.discord.mentions import (
    CHANNEL_MENTION_PATTERN,
    channel_mention_id,
    channel_mention_token,
    replace_literals,
    replace_mentions,
    replace_user_mentions,
    role_mention_token,
    user_mention_tokens,
)
from cordkit.errors import StateUnavailable

ALICE = user_payload(ALICE_ID, "alice")
BOB = user_payload(BOB_ID, "bob")


def make_message(content: str, mentions: list[dict] | None = None, **overrides) -> Message:
    return Message(**message_payload(content=content, mentions=mentions or [], **overrides))


def test_token_forms() -> None:
    assert user_mention_tokens(42) == ("<@42>", "<@!42>")
    assert role_mention_token(300) == "<@&300>"
    assert channel_mention_token(7) == "<#7>"


def test_channel_pattern_matches_any_id() -> None:
    content = "see <#7>, <#abc> and <#> but not < #8> or <@8>"
    tokens = CHANNEL_MENTION_PATTERN.findall(content)

    assert tokens == ["<#7>", "<#abc>", "<#>"]
    assert [channel_mention_id(token) for token in tokens] == ["7", "abc", ""]


def test_replace_literals_is_a_single_pass() -> None:
    result = replace_literals("<@1> <@!1>", {"<@1>": "<@!1>", "<@!1>": "@one"})

    assert result == "<@!1> @one"


def test_replace_literals_treats_tokens_literally() -> None:
    assert replace_literals("a.b axb", {"a.b": "$1\\g<0>"}) == "$1\\g<0> axb"
    assert replace_literals("untouched", {}) == "untouched"


def test_basic_replaces_both_user_forms() -> None:
    message = make_message("hi <@42> and <@!42>", [ALICE])

    assert message.content_with_mentions_replaced() == "hi @alice and @alice"


def test_basic_leaves_unmentioned_and_malformed_tokens() -> None:
    content = "<@43> <@ 42> <@42 > <@&42> <#42> <@42"
    message = make_message(content, [ALICE])

    assert message.content_with_mentions_replaced() == content


def test_basic_is_idempotent() -> None:
    users = [User(**ALICE), User(**BOB)]
    once = replace_user_mentions("<@42> <@!43> <@42>", users)

    assert once == "@alice @bob @alice"
    assert replace_user_mentions(once, users) == once


def test_basic_does_not_rescan_a_users_own_replacement() -> None:
    tricky = User(**user_payload(1, "<@!1>"))

    assert replace_user_mentions("<@1>", [tricky]) == "@<@!1>"


def test_basic_follows_mention_order_across_users() -> None:
    first = User(**user_payload(1, "<@!2>"))
    second = User(**user_payload(2, "bob"))

    assert replace_user_mentions("<@1>", [first, second]) == "@@bob"


@pytest.mark.parametrize("state_enabled", [True, False])
def test_no_mentions_leaves_content_unchanged(state: State, state_enabled: bool) -> None:
    content = "nothing <@42> <@&300> to see"
    message = make_message(content)

    assert message.content_with_mentions_replaced() == content
    assert replace_mentions(message, state_enabled, state) == content


def test_enhanced_uses_nick_for_nickname_form_only(lookup: RecordingLookup) -> None:
    message = make_message("hi <@42> and <@!42>", [ALICE])

    assert replace_mentions(message, True, lookup) == "hi @alice and @Al"


def test_enhanced_member_without_nick_uses_username(lookup: RecordingLookup) -> None:
    message = make_message("<@43> <@!43>", [BOB])

    assert replace_mentions(message, True, lookup) == "@bob @bob"


def test_enhanced_empty_nick_uses_username(state: State) -> None:
    state.member_add(GUILD_ID, Member(**member_payload(BOB_ID, "bob", "")))
    message = make_message("<@!43>", [BOB])

    assert replace_mentions(message, True, state) == "@bob"


def test_enhanced_uncached_member_uses_username(lookup: RecordingLookup) -> None:
    message = make_message("<@!5> <@5>", [user_payload(5, "carol")])

    assert replace_mentions(message, True, lookup) == "@carol @carol"


def test_enhanced_replaces_mentionable_roles_only(lookup: RecordingLookup) -> None:
    message = make_message(
        f"<@&{MODS_ROLE_ID}> <@&{ADMINS_ROLE_ID}> <@&999> <@&{MODS_ROLE_ID}>",
        mention_roles=[str(MODS_ROLE_ID), str(ADMINS_ROLE_ID), "999"])

    assert replace_mentions(message, True, lookup) == (
        f"@mods <@&{ADMINS_ROLE_ID}> <@&999> @mods")


def test_enhanced_only_replaces_roles_in_mention_roles(lookup: RecordingLookup) -> None:
    message = make_message(f"<@&{MODS_ROLE_ID}>")

    assert replace_mentions(message, True, lookup) == f"<@&{MODS_ROLE_ID}>"


def test_enhanced_channel_mentions(lookup: RecordingLookup) -> None:
    message = make_message(
        f"<#{VOICE_CHANNEL_ID}> <#{GENERAL_CHANNEL_ID}> <#999> <#abc> <#>")

    assert replace_mentions(message, True, lookup) == (
        f"<#{VOICE_CHANNEL_ID}> #general <#999> <#abc> <#>")


def test_enhanced_channel_ids_are_matched_exactly(lookup: RecordingLookup) -> None:
    message = make_message(f"<#00{GENERAL_CHANNEL_ID}> <#{GENERAL_CHANNEL_ID}> <#+8> <# 8>")

    assert replace_mentions(message, True, lookup) == (
        f"<#00{GENERAL_CHANNEL_ID}> #general <#+8> <# 8>")
    assert lookup.calls == [
        ("channel", TEXT_CHANNEL_ID),
        ("channel", GENERAL_CHANNEL_ID),
    ]


def test_enhanced_disabled_matches_basic_without_lookups(lookup: RecordingLookup) -> None:
    message = make_message(
        f"<@42> <@!42> <@&{MODS_ROLE_ID}> <#{GENERAL_CHANNEL_ID}>",
        [ALICE],
        mention_roles=[str(MODS_ROLE_ID)])

    result = replace_mentions(message, False, lookup)

    assert result == message.content_with_mentions_replaced()
    assert result == f"@alice @alice <@&{MODS_ROLE_ID}> <#{GENERAL_CHANNEL_ID}>"
    assert lookup.calls == []


def test_enhanced_disabled_does_not_need_a_state() -> None:
    message = make_message("<@!42>", [ALICE])

    assert replace_mentions(message, False, None) == "@alice"


def test_enhanced_enabled_without_state_raises() -> None:
    message = make_message("<@!42>", [ALICE])

    with pytest.raises(StateUnavailable):
        replace_mentions(message, True, None)


def test_enhanced_uncached_channel_falls_back_to_basic(lookup: RecordingLookup) -> None:
    message = make_message(
        f"<@!42> <@&{MODS_ROLE_ID}> <#{GENERAL_CHANNEL_ID}>",
        [ALICE],
        channel_id="555",
        mention_roles=[str(MODS_ROLE_ID)])

    assert replace_mentions(message, True, lookup) == (
        f"@alice <@&{MODS_ROLE_ID}> <#{GENERAL_CHANNEL_ID}>")
    assert lookup.calls == [("channel", 555)]


def test_enhanced_empty_state_falls_back_to_basic() -> None:
    message = make_message("<@42> <@!42>", [ALICE])

    assert replace_mentions(message, True, EmptyLookup()) == "@alice @alice"


def test_enhanced_lookup_order(lookup: RecordingLookup) -> None:
    message = make_message(
        f"<@!42> <@!43> <@&{MODS_ROLE_ID}> <#{GENERAL_CHANNEL_ID}> <#{VOICE_CHANNEL_ID}>",
        [ALICE, BOB],
        mention_roles=[str(MODS_ROLE_ID)])

    assert replace_mentions(message, True, lookup) == (
        f"@Al @bob @mods #general <#{VOICE_CHANNEL_ID}>")
    assert lookup.calls == [
        ("channel", TEXT_CHANNEL_ID),
        ("member", GUILD_ID, ALICE_ID),
        ("member", GUILD_ID, BOB_ID),
        ("role", GUILD_ID, MODS_ROLE_ID),
        ("channel", GENERAL_CHANNEL_ID),
        ("channel", VOICE_CHANNEL_ID),
    ]


def test_enhanced_does_not_mutate_message(lookup: RecordingLookup) -> None:
    content = f"<@!42> <@&{MODS_ROLE_ID}> <#{GENERAL_CHANNEL_ID}>"
    message = make_message(content, [ALICE], mention_roles=[str(MODS_ROLE_ID)])

    replace_mentions(message, True, lookup)

    assert message.content == content


def test_enhanced_propagates_unexpected_lookup_errors(state: State) -> None:
    class BrokenLookup(RecordingLookup):
        def member(self, guild_id: int | None, user_id: int) -> Member:
            raise RuntimeError("cache backend went away")

    message = make_message("<@!42>", [ALICE])

    with pytest.raises(RuntimeError):
        replace_mentions(message, True, BrokenLookup(state))
