from pydantic import BaseModel
from typing import Self
from os import environ


class Env(BaseModel):
    state_enabled: bool = True
    logfire_token: str = ''
    dev: bool = True

    @classmethod
    def new(cls) -> Self:
        return cls.model_validate({
            'state_enabled': environ.get('CORDKIT_STATE_ENABLED', '1') != '0',
            'logfire_token': environ.get('LOGFIRE_TOKEN', ''),
            'dev': environ.get('DEV', '1') != '0'
        })

    @property
    def environment(self) -> str:
        return 'development' if self.dev else 'production'


env = Env.new()
