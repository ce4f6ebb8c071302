from __future__ import annotations
from .models import Channel, GatewayEvent
from cordkit.errors import NotFound
from typing import TYPE_CHECKING
from cordkit.env import env
from .state import State

if TYPE_CHECKING:
    from .types import Snowflake


__all__ = ('Session',)


class Session:
    def __init__(
        self,
        state: State | None = None,
        state_enabled: bool = env.state_enabled
    ) -> None:
        self.state = state if state is not None else State()
        self.state_enabled = state_enabled

    def get_channel(self, channel_id: Snowflake | int) -> Channel | None:
        if not self.state_enabled:
            return None

        try:
            return self.state.channel(channel_id)
        except NotFound:
            return None

    def dispatch(self, event: GatewayEvent) -> None:
        if self.state_enabled:
            self.state.on_event(event)

    def dispatch_payload(self, payload: bytes | str) -> GatewayEvent:
        event = GatewayEvent.from_payload(payload)

        self.dispatch(event)

        return event
