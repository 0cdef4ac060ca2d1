import base64
import json

import pytest
import requests

from m365kit.auth import Session, Settings


def make_token(claims: dict) -> str:
    def part(obj):
        return base64.urlsafe_b64encode(json.dumps(obj).encode()).decode().rstrip("=")

    return f"{part({'alg': 'none'})}.{part(claims)}.signature"


DELEGATED_TOKEN = make_token({"idtyp": "user", "upn": "user@contoso.com"})
APP_ONLY_TOKEN = make_token({"idtyp": "app"})


def make_response(status_code=200, body=None, headers=None):
    resp = requests.Response()
    resp.status_code = status_code
    if body is None:
        resp._content = b""
    elif isinstance(body, (dict, list)):
        resp._content = json.dumps(body).encode()
    else:
        resp._content = str(body).encode()
    resp.headers.update(headers or {})
    return resp


class FakeHttp:
    """Stands in for requests.Session; routes by (method, url)."""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []

    def request(self, method, url, headers=None, **kwargs):
        self.calls.append({"method": method, "url": url, "headers": headers, **kwargs})
        route = self.routes.get((method, url))
        if route is None:
            return make_response(400, {"error": {"code": "BadRequest", "message": "Invalid Request"}})
        if callable(route):
            return route()
        return route

    @property
    def urls(self):
        return [c["url"] for c in self.calls]


class SpyLogger:
    def __init__(self):
        self.logged = []
        self.stderr = []
        self.is_verbose = False
        self.is_debug = False

    def log(self, obj):
        self.logged.append(obj)

    def log_to_stderr(self, message):
        self.stderr.append(message)

    def verbose(self, message):
        self.stderr.append(message)

    def debug(self, message):
        self.stderr.append(message)


@pytest.fixture
def logger():
    return SpyLogger()


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def make_session(logger, http):
    def _make(token=DELEGATED_TOKEN, **settings):
        settings.setdefault("retry_backoff", 0)
        return Session(Settings(access_token=token, **settings), logger, http=http)

    return _make
