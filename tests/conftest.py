import json
from urllib.parse import parse_qs, urlsplit

import pytest

from GitHubApi.GitHub.GitHubFactory import GitHubFactory
from GitHubApi.Utility.config import ClientConfig

TOKEN = "t0ken"


class DummyResponse:
    def __init__(self, status_code=200, json_data=None, text=None, headers=None):
        self.status_code = status_code
        if text is None:
            text = "" if json_data is None else json.dumps(json_data)
        self.text = text
        self.content = text.encode("utf-8")
        self.headers = headers or {}

    def json(self):
        return json.loads(self.text)


class DummySession:
    """Records every request and answers with queued responses (default: 200 ``{}``)."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.headers = {}
        self.calls = []
        self.closed = False

    def _next(self):
        if self.responses:
            return self.responses.pop(0)
        return DummyResponse(200, json_data={})

    def request(self, method, url, data=None, headers=None, timeout=None, allow_redirects=True, verify=True):
        self.calls.append({
            "method": method,
            "url": url,
            "data": data,
            "headers": headers,
            "timeout": timeout,
            "allow_redirects": allow_redirects,
            "verify": verify,
        })
        return self._next()

    def post(self, url, data=None, headers=None, timeout=None, verify=True):
        self.calls.append({
            "method": "POST",
            "url": url,
            "data": data,
            "headers": headers,
            "timeout": timeout,
            "verify": verify,
        })
        return self._next()

    def close(self):
        self.closed = True

    @property
    def last(self):
        return self.calls[-1]


def split_call(call):
    """(method, path, params) of a recorded call, params taken from query or body."""
    parts = urlsplit(call["url"])
    raw = call["data"] if call["data"] is not None else parts.query
    return call["method"], parts.path, {k: v[0] for k, v in parse_qs(raw).items()}


@pytest.fixture
def session():
    return DummySession()


@pytest.fixture
def factory(session):
    return GitHubFactory(TOKEN, session=session, config=ClientConfig())
