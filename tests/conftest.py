import pytest

from slidenotes.config import ReviserConfig
from tests.fakes import FakeReviser


@pytest.fixture
def config():
    return ReviserConfig(provider="gemini", api_key="test-key-1234567890", model="gemini-test")


@pytest.fixture
def fake_reviser(config):
    return FakeReviser(config)
