"""Shared fixtures"""

import asyncio

import pytest

from remarklive.config import AppSettings


@pytest.fixture
def loop():
    """A private event loop, closed after the test"""
    event_loop = asyncio.new_event_loop()
    yield event_loop
    event_loop.close()


@pytest.fixture
def settle(loop):
    """Run the loop long enough for pending debounce timers to fire"""
    def loop_settle(seconds=0.2):
        loop.run_until_complete(asyncio.sleep(seconds))
    return loop_settle


@pytest.fixture
def settings():
    """Settings with a short debounce window"""
    return AppSettings(debounce_delay=0.05)


@pytest.fixture
def log_messages():
    """Messages emitted through loguru while the test runs"""
    from loguru import logger

    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
