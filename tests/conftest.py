import json

import pytest
import requests

import mcauth.core.logging as logging
from mcauth.auth.session import _get_uuid


class FakeResponse:
    """Stands in for ``requests.Response`` with a fixed status and body."""

    def __init__(self, status_code: int, body=None, url: str = 'https://example.invalid'):
        self.status_code = status_code
        self.url = url
        self._text = '' if body is None else (body if isinstance(body, str) else json.dumps(body))

    def json(self):
        # `requests` raises a ValueError subclass for undecodable bodies
        return json.loads(self._text)


class FakeHTTP:
    """Records requests and replays queued responses."""

    def __init__(self):
        self.calls = []
        self.responses = []
        self.raises = None

    def reply(self, status_code: int, body=None):
        self.responses.append(FakeResponse(status_code, body))

    def __call__(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))

        if self.raises is not None:
            raise self.raises

        return self.responses.pop(0)


@pytest.fixture
def http(monkeypatch):
    fake = FakeHTTP()
    monkeypatch.setattr(requests, 'request', fake)

    return fake


@pytest.fixture(autouse=True)
def quiet():
    _get_uuid.cache_clear()
    logging.set_level('silent')

    yield

    logging.set_level('info')
