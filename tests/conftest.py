"""Shared pytest fixtures."""

import pytest

from chatgptx.config.settings import Settings
from chatgptx.core.models.host import HostContext
from chatgptx.core.services.history_store import ChatHistoryStore
from tests.helpers import FakeClock, RecordingHost, make_settings


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> ChatHistoryStore:
    return ChatHistoryStore(ttl_minutes=20, clock=clock)


@pytest.fixture
def options() -> Settings:
    return make_settings()


@pytest.fixture
def context() -> HostContext:
    return HostContext(
        app_identifier="com.apple.TextEdit",
        app_name="TextEdit",
        can_paste=True,
        can_copy=True,
    )


@pytest.fixture
def host() -> RecordingHost:
    return RecordingHost()
