"""Shared fixtures for Signal SDK tests."""

from collections.abc import Iterator

import pytest

from signal_sdk import SignalClient

BASE_URL = "http://signal.test"


@pytest.fixture
def client() -> Iterator[SignalClient]:
    client = SignalClient(BASE_URL)
    yield client
    client.close()
