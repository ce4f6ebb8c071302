from .attachment import *
from .base import RawBaseModel
from .channel import *
from .embed import *
from .emoji import *
from .enums import *
from .event import *
from .member import *
from .message import *
from .reaction import *
from .role import *
from .user import *


__all__ = (
    # attachment.py
    'Attachment',
    # base.py
    'RawBaseModel',
    # channel.py
    'Channel',
    'ChannelMention',
    # embed.py
    'Embed',
    'EmbedAuthor',
    'EmbedField',
    'EmbedFooter',
    'EmbedImage',
    'EmbedProvider',
    'EmbedThumbnail',
    'EmbedVideo',
    # emoji.py
    'Emoji',
    # enums.py
    'AttachmentFlag',
    'ChannelType',
    'EmbedType',
    'GatewayEventName',
    'GatewayOpCode',
    'GuildMemberFlag',
    'MessageActivityType',
    'MessageFlag',
    'MessageReferenceType',
    'MessageType',
    'Permission',
    'PremiumType',
    'RoleFlag',
    'UserFlag',
    # event.py
    'GatewayEvent',
    # member.py
    'Member',
    # message.py
    'Message',
    'MessageActivity',
    'MessageApplication',
    'MessageReference',
    # reaction.py
    'CountDetails',
    'Reaction',
    # role.py
    'Role',
    'RoleTags',
    # user.py
    'User',
)
