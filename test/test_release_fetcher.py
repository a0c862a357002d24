import pytest
import requests

from ghupdate.domain.errors import NetworkError
from ghupdate.services.release_fetcher import ReleaseFetcher


class FakeResponse:
    def __init__(self, status_code: int = 200, content: bytes = b"{}"):
        self.status_code = status_code
        self.content = content
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error: Not Found")

    def close(self):
        self.closed = True


def test_fetch_returns_body_and_sends_user_agent(monkeypatch):
    calls = []
    resp = FakeResponse(content=b'{"tag_name":"v1.0.0"}')

    def fake_get(url, headers=None, timeout=None):
        calls.append((url, headers, timeout))
        return resp

    monkeypatch.setattr(requests, "get", fake_get)

    body = ReleaseFetcher(user_agent="test-agent", timeout=2.5).fetch("https://api.github.com/x")

    assert body == b'{"tag_name":"v1.0.0"}'
    assert calls == [("https://api.github.com/x", {"User-Agent": "test-agent"}, 2.5)]
    assert resp.closed is True


def test_transport_failure_becomes_network_error(monkeypatch):
    def fail(url, headers=None, timeout=None):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "get", fail)

    with pytest.raises(NetworkError, match="connection refused"):
        ReleaseFetcher().fetch("https://api.github.com/x")


def test_http_error_status_becomes_network_error(monkeypatch):
    resp = FakeResponse(status_code=404, content=b'{"message":"Not Found"}')
    monkeypatch.setattr(requests, "get", lambda url, headers=None, timeout=None: resp)

    with pytest.raises(NetworkError, match="404"):
        ReleaseFetcher().fetch("https://api.github.com/x")

    assert resp.closed is True


def test_fetch_is_attempted_once(monkeypatch):
    attempts = []

    def fail(url, headers=None, timeout=None):
        attempts.append(url)
        raise requests.Timeout("timed out")

    monkeypatch.setattr(requests, "get", fail)

    with pytest.raises(NetworkError):
        ReleaseFetcher().fetch("https://api.github.com/x")

    assert len(attempts) == 1
