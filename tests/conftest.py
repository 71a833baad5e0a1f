import json
from typing import Any, Dict, List

import pytest
import requests


def make_result(**overrides: Any) -> Dict[str, Any]:
    result = {
        "id": "environment/2024/mar/09/climate-story",
        "type": "article",
        "sectionId": "environment",
        "pillarId": "pillar/news",
        "webPublicationDate": "2024-03-09T10:15:00Z",
        "webTitle": "Climate story",
        "webUrl": "https://www.theguardian.com/environment/2024/mar/09/climate-story",
        "fields": {
            "thumbnail": "https://media.guim.co.uk/abc/500.jpg",
            "trailText": "The <strong>big</strong> picture",
            "byline": "Jane Doe",
        },
    }
    result.update(overrides)
    return result


def make_payload(results: List[Dict[str, Any]], status: str = "ok") -> Dict[str, Any]:
    return {"response": {"status": status, "total": len(results), "results": results}}


class FakeResponse:
    def __init__(self, body: Any, status_code: int = 200):
        self.status_code = status_code
        self._text = body if isinstance(body, str) else json.dumps(body)

    def json(self):
        return json.loads(self._text)


class FakeGet:
    """Stands in for `requests.get`, recording every call."""

    def __init__(self, body: Any = None, status_code: int = 200, exc: Exception | None = None):
        self.body = body
        self.status_code = status_code
        self.exc = exc
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return FakeResponse(self.body, self.status_code)


@pytest.fixture
def fake_get(monkeypatch):
    def install(**kwargs) -> FakeGet:
        fake = FakeGet(**kwargs)
        monkeypatch.setattr(requests, "get", fake)
        return fake

    return install
