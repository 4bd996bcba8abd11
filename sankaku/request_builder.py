from __future__ import annotations

import logging
from typing import Mapping, Optional
from urllib.parse import urlsplit

import requests

from .auth import Credential, NoAuth
from .errors import RequestError

logger = logging.getLogger(__name__)


class RequestBuilder:
    """
    Builds and sends fully-addressed GET requests for one site.

    Responsibilities:
    - Join base host, optional locale segment, path and query string.
    - Attach the fixed User-Agent and exactly one credential.
    - Send on a shared requests.Session with a per-call timeout.

    Nothing is stored between calls: headers and cookies live on
    the prepared request, not on the session.
    """

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        credential: Optional[Credential] = None,
        lang: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._credential = credential or NoAuth()
        self._lang = lang
        self._session = session or requests.Session()

    def url_for(self, path: str) -> str:
        try:
            parts = urlsplit(self._base_url)
        except ValueError as exc:
            raise RequestError(f"Malformed base URL: {self._base_url!r}: {exc}") from exc
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise RequestError(f"Malformed base URL: {self._base_url!r}")

        if not path.startswith("/"):
            path = "/" + path
        if self._lang:
            path = f"/{self._lang}{path}"
        return self._base_url + path

    def build(
        self, path: str, params: Optional[Mapping[str, object]] = None
    ) -> requests.PreparedRequest:
        request = requests.Request(
            "GET",
            self.url_for(path),
            params=dict(params or {}),
            headers={"User-Agent": self._user_agent},
        )
        self._credential.apply(request)

        try:
            return request.prepare()
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema) as exc:
            raise RequestError(f"Cannot build request for {request.url!r}: {exc}") from exc

    def send(
        self, prepared: requests.PreparedRequest, timeout: Optional[float]
    ) -> requests.Response:
        """
        Execute a prepared request. Transport errors propagate unchanged.
        """
        logger.debug("%s %s (timeout=%s)", prepared.method, prepared.url, timeout)
        return self._session.send(prepared, timeout=timeout)
