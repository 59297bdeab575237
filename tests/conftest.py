import pytest
import requests

from autotranslate.errors import TranslationError


class FakeClient:
    """In-memory stand-in for LibreTranslateClient."""

    def __init__(self, mapping=None, reachable=True, fail_on=()):
        self.mapping = mapping or {}
        self.reachable = reachable
        self.fail_on = set(fail_on)
        self.calls = []
        self.translated = 0
        self.closed = False

    def probe(self):
        return self.reachable

    def translate(self, text):
        self.calls.append(text)
        if text in self.fail_on:
            raise TranslationError(f"cannot translate {text!r}")
        self.translated += 1
        return self.mapping.get(text, text.upper())

    def close(self):
        self.closed = True


class FakeResponse:
    def __init__(self, status_code=200, payload=None, body_error=None):
        self.status_code = status_code
        self._payload = payload
        self._body_error = body_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._body_error is not None:
            raise self._body_error
        return self._payload


@pytest.fixture
def fake_client():
    return FakeClient


@pytest.fixture
def fake_response():
    return FakeResponse
