"""Pytest configuration and shared fixtures."""

import logging
from unittest.mock import AsyncMock, MagicMock

import hikari
import pytest

from commandset.core.options import ParseOptions
from commandset.localization import Localization

# Disable logging during tests
logging.disable(logging.CRITICAL)


class FakeClock:
    """Manually advanced clock for throttler tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Clock starting at a fixed time."""
    return FakeClock()


@pytest.fixture
def mock_user():
    """Mock Discord user."""
    user = MagicMock()
    user.id = hikari.Snowflake(111111111)
    user.username = "testuser"
    user.is_bot = False
    user.mention = "<@111111111>"
    return user


@pytest.fixture
def mock_member(mock_user):
    """Mock Discord member."""
    member = MagicMock()
    member.id = mock_user.id
    member.username = mock_user.username
    member.user = mock_user
    member.role_ids = [222222222, 333333333]
    return member


@pytest.fixture
def mock_message(mock_user, mock_member):
    """Mock guild message."""
    message = MagicMock()
    message.author = mock_user
    message.member = mock_member
    message.guild_id = hikari.Snowflake(123456789)
    message.channel_id = hikari.Snowflake(444444444)
    message.content = "!test command"
    message.respond = AsyncMock()
    return message


@pytest.fixture
def mock_dm_message(mock_user):
    """Mock direct message, without guild or member."""
    message = MagicMock()
    message.author = mock_user
    message.member = None
    message.guild_id = None
    message.channel_id = hikari.Snowflake(555555555)
    message.content = "!test command"
    message.respond = AsyncMock()
    return message


@pytest.fixture
def parse_options():
    """Dispatch options with the default prefix."""
    return ParseOptions(prefix="!", localization=Localization())


@pytest.fixture
def dev_options(mock_user):
    """Dispatch options where the mock user is a developer."""
    return ParseOptions(prefix="!", dev_ids=frozenset({int(mock_user.id)}))
