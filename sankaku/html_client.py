from __future__ import annotations

import logging
from typing import List, Optional

import requests

from .auth import Credential, SessionCookie
from .config import ScraperConfig, get_config
from .errors import HTTPStatusError
from .models import PostInfo
from .parsing import StatsLabels, labels_for, parse_detail, parse_listing
from .request_builder import RequestBuilder

logger = logging.getLogger(__name__)


class SankakuHtmlClient:
    """
    HTML scraper for chan.sankakucomplex.com.

    Responsibilities:
    - Fetch a search results page (/<lang>/?tags=...&page=N).
    - Fetch a single post page (/<lang>/post/show/<id>).
    - Hand the markup to the pure parsers in `parsing`.

    The locale segment comes from the SessionCookie when one is given,
    otherwise from the scraper config.
    """

    def __init__(
        self,
        credential: Optional[Credential] = None,
        config: Optional[ScraperConfig] = None,
        session: Optional[requests.Session] = None,
        labels: Optional[StatsLabels] = None,
    ) -> None:
        self._cfg = config or get_config().scraper

        if isinstance(credential, SessionCookie) and credential.lang:
            self._lang = credential.lang
        else:
            self._lang = self._cfg.lang

        self._labels = labels or labels_for(self._lang)
        self._builder = RequestBuilder(
            base_url=self._cfg.base_url,
            user_agent=self._cfg.user_agent,
            credential=credential,
            lang=self._lang,
            session=session,
        )

    @property
    def lang(self) -> str:
        return self._lang

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def search_post_infos(
        self, keyword: str, page: int = 1, timeout: Optional[float] = None
    ) -> List[PostInfo]:
        """
        Scrape one search results page. Only id, tags and preview_url
        are filled in.
        """
        html = self._get("/", {"tags": keyword, "page": page}, timeout)
        return parse_listing(html)

    def get_post(self, post_id: str, timeout: Optional[float] = None) -> PostInfo:
        """
        Scrape a post page for its file URL, hash, tags and source.
        """
        html = self._get(f"/post/show/{post_id}", None, timeout)
        return parse_detail(
            html, str(post_id), labels=self._labels, static_host=self._cfg.static_host
        )

    def search(self, keyword: str, page: int = 1) -> List[PostInfo]:
        return self.search_post_infos(keyword, page)

    # -------------------------------------------------------------------------
    # Internal: HTTP
    # -------------------------------------------------------------------------

    def _get(self, path: str, params, timeout: Optional[float]) -> str:
        """
        GET a page and return its text. Anything but 200 is an error.
        """
        if timeout is None:
            timeout = self._cfg.timeout_seconds

        prepared = self._builder.build(path, params)
        resp = self._builder.send(prepared, timeout)
        try:
            if resp.status_code != 200:
                raise HTTPStatusError(resp.status_code, resp.reason or "", resp.text or None)
            return resp.text
        finally:
            resp.close()
