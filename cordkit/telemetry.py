from __future__ import annotations
from cordkit.version import VERSION
from typing import TYPE_CHECKING
import logfire

if TYPE_CHECKING:
    from cordkit.env import Env


def configure(env: Env) -> None:
    logfire.configure(
        service_name='cordkit' + ('-dev' if env.dev else ''),
        service_version=VERSION,
        token=env.logfire_token or None,
        environment=env.environment,
        send_to_logfire='if-token-present',
        scrubbing=False if env.dev else None,
        console=False
    )
