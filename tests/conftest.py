from collections.abc import Iterator

import pytest

from holidayapi.util.log import Log


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def _log_teardown() -> Iterator[None]:
    yield
    Log.reset()
