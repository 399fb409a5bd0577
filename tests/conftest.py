"""Root pytest configuration and shared fixtures."""

import pytest
from loguru import logger

from tests.helpers import make_forum, make_forum_like


@pytest.fixture
def book_club():
    return make_forum_like("Book Club", bytes([0x01, 0x02, 0x03]))


@pytest.fixture
def forums():
    return [make_forum("A", 1), make_forum("B", 2), make_forum("C", 3)]


@pytest.fixture
def log_messages():
    """Capture loguru messages at DEBUG and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
