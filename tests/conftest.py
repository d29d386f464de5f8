import logging
import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Callable

import httpx
import pytest
from loguru import logger

from werr.container import set_container
from werr.ids import RandomIdProvider
from werr.sink import ResponseRecorder


@pytest.fixture(autouse=True)
def fresh_container(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Rebuild the process-wide container per test, away from any real .env."""
    monkeypatch.chdir(str(tmp_path))
    for name in list(os.environ):
        if name.startswith("WERR_"):
            monkeypatch.delenv(name)
    set_container(None)
    yield
    set_container(None)
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def logs(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Route loguru records into pytest's caplog."""
    caplog.set_level(logging.DEBUG)
    sink_id = logger.add(caplog.handler, level="DEBUG", format="{message}")
    yield caplog
    logger.remove(sink_id)


@pytest.fixture
def ids() -> RandomIdProvider:
    return RandomIdProvider(seed=1234)


@pytest.fixture
def recorder() -> ResponseRecorder:
    return ResponseRecorder()


@pytest.fixture
def httpx_transport() -> Callable[
    [Callable[[httpx.Request], httpx.Response]], httpx.Client
]:
    """Create httpx.Client with a custom MockTransport."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(handler))

    return factory
