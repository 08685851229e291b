from typing import Self
from os import environ

from pydantic import BaseModel


class Env(BaseModel):
    logfire_token: str
    service_name: str
    dev: bool

    @classmethod
    def new(cls) -> Self:
        return cls.model_validate({
            'logfire_token': environ.get('LOGFIRE_TOKEN', ''),
            'service_name': environ.get('SERVICE_NAME', 'interactor'),
            'dev': environ.get('DEV', '1') != '0',
        })

    @property
    def tracing(self) -> bool:
        return bool(self.logfire_token)


env = Env.new()
