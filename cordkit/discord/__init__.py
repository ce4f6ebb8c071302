from .mentions import replace_mentions, replace_user_mentions
from .state import State, StateLookup
from .types import Snowflake
from .session import Session
from .models import *  # noqa: F403


__all__ = (
    'Session',
    'Snowflake',
    'State',
    'StateLookup',
    'replace_mentions',
    'replace_user_mentions',
)
