"""Shared fixtures for the re_tester test suite."""

import sys

import pytest
from loguru import logger

from re_tester.engine import RegexEngine, StdReEngine
from re_tester.reactive import ReactiveController


@pytest.fixture(autouse=True)
def reset_loguru_sinks():
    """Restore loguru's default stderr sink after each test.

    The CLI replaces all sinks; without this a sink bound to a closed capture
    stream would outlive the test that created it.
    """
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def log_messages():
    """Collect loguru messages (DEBUG and up) emitted during the test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(params=["regex", "re"])
def engine(request):
    """Every engine that is always installed."""
    if request.param == "regex":
        return RegexEngine(timeout_seconds=1.0)
    return StdReEngine()


@pytest.fixture
def controller():
    return ReactiveController(engine=RegexEngine(timeout_seconds=1.0))
