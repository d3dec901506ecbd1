"""Shared fixtures for the package generator tests."""

import copy
import json
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

HELLO_WORLD = {
    "name": "Hello-World",
    "description": "My first repo",
    "html_url": "https://github.com/octocat/Hello-World",
    "topics": ["demo"],
    "owner": {"login": "octocat"},
    "license": {"spdx_id": "MIT"},
    "homepage": None,
}


@pytest.fixture
def hello_world_metadata():
    return copy.deepcopy(HELLO_WORLD)


class MockGitHubAPI:
    """
    Local HTTP server standing in for the GitHub REST API.

    Every GET is answered with ``status``/``body``/``content_type`` and
    recorded in ``requests`` as ``(path, headers)``.
    """

    def __init__(self):
        self.status = 200
        self.body = b"{}"
        self.content_type = "application/json"
        self.requests = []
        api = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                api.requests.append((self.path, dict(self.headers)))
                self.send_response(api.status)
                self.send_header("Content-Type", api.content_type)
                self.send_header("Content-Length", str(len(api.body)))
                self.end_headers()
                self.wfile.write(api.body)

            def log_message(self, format, *args):
                pass

        self._server = HTTPServer(("127.0.0.1", 0), Handler)
        self.url = f"http://127.0.0.1:{self._server.server_address[1]}"
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    def respond(self, status, body, content_type="application/json"):
        self.status = status
        self.body = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        self.content_type = content_type

    def start(self):
        self._thread.start()

    def stop(self):
        self._server.shutdown()
        self._server.server_close()


@pytest.fixture
def mock_api(monkeypatch):
    monkeypatch.setenv("NO_PROXY", "127.0.0.1,localhost")
    monkeypatch.setenv("no_proxy", "127.0.0.1,localhost")
    api = MockGitHubAPI()
    api.start()
    yield api
    api.stop()
