from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence, runtime_checkable

import requests

from ..auth import Credential
from ..config import ApiConfig, get_config
from ..errors import DecodeError, HTTPStatusError
from ..models import Post
from ..request_builder import RequestBuilder

logger = logging.getLogger(__name__)


@runtime_checkable
class PostClient(Protocol):
    """
    Minimal client abstraction for searching Sankaku posts.

    Implementations decide *how* the data is fetched (JSON API or
    HTML scraping) and which record type comes back.
    """

    def search(self, keyword: str, page: int = 1) -> Sequence[object]:
        """
        Fetch a single page of posts matching a tag query.
        """
        raise NotImplementedError


class SankakuApiClient(PostClient):
    """
    Client for the JSON API at capi-v2.sankakucomplex.com.

    Credentials are usually a BearerToken; NoAuth works for public
    searches.
    """

    def __init__(
        self,
        credential: Optional[Credential] = None,
        config: Optional[ApiConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._cfg = config or get_config().api
        self._builder = RequestBuilder(
            base_url=self._cfg.base_url,
            user_agent=self._cfg.user_agent,
            credential=credential,
            session=session,
        )

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def search_posts(
        self, keyword: str, page: int = 1, timeout: Optional[float] = None
    ) -> List[Post]:
        """
        Fetch one page of posts for a tag query via GET /posts.
        """
        params = {
            "page": page,
            "limit": self._cfg.search_limit,
            "language": self._cfg.language,
            "tags": keyword,
        }
        prepared = self._builder.build("/posts", params)
        payload = self._get_json(prepared, timeout)

        if not isinstance(payload, list):
            raise DecodeError(
                f"Expected a JSON array of posts, got {type(payload).__name__}"
            )

        try:
            posts = [Post.from_dict(item) for item in payload]
        except (KeyError, TypeError, ValueError) as exc:
            raise DecodeError(f"Malformed post record: {exc!r}") from exc

        logger.debug("Decoded %d posts for %r (page %d)", len(posts), keyword, page)
        return posts

    def search(self, keyword: str, page: int = 1) -> List[Post]:
        return self.search_posts(keyword, page)

    # -------------------------------------------------------------------------
    # Internal: HTTP
    # -------------------------------------------------------------------------

    def _get_json(
        self, prepared: requests.PreparedRequest, timeout: Optional[float]
    ) -> object:
        if timeout is None:
            timeout = self._cfg.timeout_seconds

        resp = self._builder.send(prepared, timeout)
        try:
            if resp.status_code >= 400:
                raise HTTPStatusError(resp.status_code, resp.reason or "", resp.text or None)

            try:
                return resp.json()
            except ValueError as exc:
                raise DecodeError(f"Invalid JSON from {prepared.url}: {exc}") from exc
        finally:
            resp.close()
