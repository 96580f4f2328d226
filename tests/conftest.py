"""Shared test configuration and fixtures for all tests."""

import threading

import pytest
import requests

from src.loadtester.client_pool import ClientPool, HttpClient
from src.loadtester.models import ClientSpec
from tests.test_const import STATUS_OK, CONNECTION_ERROR_MESSAGE


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        self.closed = False

    def close(self):
        self.closed = True


class FakeSession:
    """Session double that answers instantly, or fails every call."""

    def __init__(self, status_code: int = STATUS_OK, fail: bool = False, delay: float = 0.0):
        self.status_code = status_code
        self.fail = fail
        self.delay = delay
        self.calls = 0
        self.timeouts = set()
        self.closed = False
        self._lock = threading.Lock()

    def get(self, url, timeout=None):
        with self._lock:
            self.calls += 1
            self.timeouts.add(timeout)
        if self.delay:
            threading.Event().wait(self.delay)
        if self.fail:
            raise requests.ConnectionError(CONNECTION_ERROR_MESSAGE)
        return FakeResponse(self.status_code)

    def close(self):
        self.closed = True


def make_pool(*sessions):
    """Build a ClientPool of unbound clients over the given fake sessions."""
    return ClientPool([HttpClient(ClientSpec(), session=session) for session in sessions])


@pytest.fixture
def ok_session():
    return FakeSession()


@pytest.fixture
def failing_session():
    return FakeSession(fail=True)


@pytest.fixture
def ok_pool(ok_session):
    return make_pool(ok_session)


@pytest.fixture
def failing_pool(failing_session):
    return make_pool(failing_session)
