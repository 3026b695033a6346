"""Shared pytest fixtures for all tests."""

import logging
import pytest

from config import Config
from services.base import Services


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "rolka",
        base_url="https://portal.test",
        user_agent="rolka-tests",
        timeout=5.0,
        username="tester",
        log_level="DEBUG",
        log_dir=tmp_path / "rolka" / "logs",
        output_dir=tmp_path / "rolka" / "exports",
    )


@pytest.fixture
def logger():
    """Logger handed to decoders; records reach pytest's caplog."""
    return logging.getLogger("rolka.tests")


class FakePortal:
    """Portal session stand-in that returns canned response bodies.

    Bodies are registered per data service method, either as bytes or as a
    callable taking the request payload and returning bytes.
    """

    def __init__(self):
        self.responses = {}
        self.calls = []
        self.logins = []

    def respond(self, method, body):
        self.responses[method] = body

    def post_grid(self, method, payload):
        self.calls.append((method, payload))
        body = self.responses[method]
        if callable(body):
            return body(payload)
        return body

    def login(self, username, password):
        self.logins.append((username, password))


@pytest.fixture
def fake_portal():
    return FakePortal()


@pytest.fixture
def services(test_config, fake_portal, logger):
    """Create a Services container backed by the fake portal.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, portal=fake_portal, logger=logger)
