"""
Shared fixtures for unit tests
"""

import pytest

from ionomy.api_client import IonomyAPIClient

from .mocks import FakeSession


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def public_client(fake_session):
    """Unauthenticated client wired to a FakeSession"""
    client = IonomyAPIClient()
    client.session = fake_session
    yield client


@pytest.fixture
def signed_client(fake_session, monkeypatch):
    """Authenticated client with a frozen clock"""
    monkeypatch.setattr("ionomy.api_client.current_utc_timestamp", lambda: 1704110400)
    client = IonomyAPIClient(api_key="test-key", api_secret="test-secret")
    client.session = fake_session
    yield client
