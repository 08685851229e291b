import logfire

from .env import Env, env as default_env
from .version import VERSION


__all__ = (
    'init_logfire',
)


def init_logfire(env: Env | None = None) -> None:
    env = env or default_env

    logfire.configure(
        token=env.logfire_token or None,
        send_to_logfire='if-token-present',
        service_name=env.service_name,
        service_version=VERSION,
        environment='dev' if env.dev else 'prod',
        console=(
            logfire.ConsoleOptions(min_log_level='debug')
            if env.dev else
            False
        )
    )
