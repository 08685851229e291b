import logfire
import pytest


logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def anyio_backend() -> str:
    return 'asyncio'
