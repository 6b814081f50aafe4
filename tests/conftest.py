"""Pytest shared fixtures for directory object tests."""
import json
import pathlib
import sys
from typing import Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from azgraph.directory import GraphClient

BASE_URL = "https://graph.test/v1.0"
TENANT = "contoso.onmicrosoft.com"
TOKEN = "test-token"


def tenant_url(*segments: str) -> str:
    return "/".join([BASE_URL, TENANT, *segments])


# ─────────────────────────────────────────────────────────────────────────────
# Stub HTTP layer
# ─────────────────────────────────────────────────────────────────────────────
class StubResponse:
    def __init__(self, payload=None, status_code: int = 200, text: Optional[str] = None):
        self._payload = payload
        self.status_code = status_code
        if text is not None:
            self.text = text
        else:
            self.text = "" if payload is None else json.dumps(payload)
        self.content = self.text.encode("utf-8")

    def json(self):
        if self._payload is None and self.text:
            return json.loads(self.text)
        return self._payload


class GraphAPIStub:
    """Routes (verb, url) to queued responses and records every request."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, method: str, url: str, payload=None, status_code: int = 200, text: Optional[str] = None):
        self.routes.setdefault((method, url), []).append(StubResponse(payload, status_code, text))

    def calls_for(self, method: str):
        return [call for call in self.calls if call["method"] == method]

    def __call__(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        queue = self.routes.get((method, url))
        if not queue:
            raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")
        # The last queued response is sticky so repeated reads keep working
        return queue.pop(0) if len(queue) > 1 else queue[0]


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def graph_api(monkeypatch):
    """Replace requests.request so no test can reach the network."""
    stub = GraphAPIStub()
    monkeypatch.setattr(requests, "request", stub)
    return stub


class PromptRecorder:
    def __init__(self, answer: bool):
        self.answer = answer
        self.messages = []

    def __call__(self, message: str) -> bool:
        self.messages.append(message)
        return self.answer


@pytest.fixture()
def prompt():
    """Confirmation prompt that declines by default; set .answer to change."""
    return PromptRecorder(answer=False)


@pytest.fixture()
def client(prompt):
    return GraphClient(BASE_URL, timeout=5, confirm=prompt)
