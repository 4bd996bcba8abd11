from __future__ import annotations

from typing import List, Optional

import pytest
import requests


class FakeSession:
    """
    Stand-in for requests.Session that records prepared requests
    and answers with a canned response.
    """

    def __init__(self, status: int = 200, text: str = "", reason: str = "OK") -> None:
        self.status = status
        self.text = text
        self.reason = reason
        self.sent: List[requests.PreparedRequest] = []
        self.timeouts: List[Optional[float]] = []

    def send(self, prepared: requests.PreparedRequest, timeout=None) -> requests.Response:
        self.sent.append(prepared)
        self.timeouts.append(timeout)

        resp = requests.Response()
        resp.status_code = self.status
        resp.reason = self.reason
        resp._content = self.text.encode("utf-8")
        resp._content_consumed = True
        resp.encoding = "utf-8"
        resp.url = prepared.url
        resp.request = prepared
        return resp


@pytest.fixture
def fake_session():
    def _make(status: int = 200, text: str = "", reason: str = "OK") -> FakeSession:
        return FakeSession(status=status, text=text, reason=reason)

    return _make
