from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import urlsplit

import requests
from requests.cookies import RequestsCookieJar

from .config import DEFAULT_LANG, SESSION_COOKIE_MAX_AGE, SESSION_COOKIE_NAME


@dataclass(frozen=True)
class NoAuth:
    """Anonymous access: nothing is attached to the request."""

    def apply(self, request: requests.Request) -> None:
        return None


@dataclass(frozen=True)
class BearerToken:
    """
    Access token for the JSON API, sent as `Authorization: Bearer <token>`.
    """

    token: str

    def apply(self, request: requests.Request) -> None:
        request.headers["Authorization"] = f"Bearer {self.token}"


@dataclass(frozen=True)
class SessionCookie:
    """
    Browser session for the HTML site.

    The session id travels in a site-specific cookie; `lang` is the
    locale path segment the session browses under.
    """

    session_id: str
    lang: str = DEFAULT_LANG

    def apply(self, request: requests.Request) -> None:
        host = urlsplit(request.url).hostname or ""
        jar = RequestsCookieJar()
        jar.set(
            SESSION_COOKIE_NAME,
            self.session_id,
            domain=host,
            path="/",
            expires=int(time.time() + SESSION_COOKIE_MAX_AGE.total_seconds()),
        )
        request.cookies = jar


Credential = Union[NoAuth, BearerToken, SessionCookie]


def credential_from_env(lang: Optional[str] = None) -> Credential:
    """
    Load a credential from environment variables.

    Expected variables (first match wins):
    - SANKAKU_TOKEN   -> BearerToken
    - SANKAKU_SESSION -> SessionCookie (locale from `lang` or SANKAKU_LANG)

    Returns NoAuth if neither is set.
    """
    token = os.getenv("SANKAKU_TOKEN")
    if token:
        return BearerToken(token=token)

    session_id = os.getenv("SANKAKU_SESSION")
    if session_id:
        lang = lang or os.getenv("SANKAKU_LANG") or DEFAULT_LANG
        return SessionCookie(session_id=session_id, lang=lang)

    return NoAuth()
