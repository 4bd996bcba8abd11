from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timedelta


# ---------- Site constants ----------

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 6.3; WOW64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/36.0.1985.125 Safari/537.73"
)

API_BASE_URL = "https://capi-v2.sankakucomplex.com"
HTML_BASE_URL = "https://chan.sankakucomplex.com"
STATIC_HOST = "https://c.sankakucomplex.com"

SESSION_COOKIE_NAME = "_sankakucomplex_session"
SESSION_COOKIE_MAX_AGE = timedelta(days=365)

SEARCH_LIMIT = 100
API_LANGUAGE = "english"
DEFAULT_LANG = "en"
DEFAULT_TIMEOUT_SECONDS = 60.0


# ---------- API configuration ----------


@dataclass
class ApiConfig:
    """
    Settings for the JSON API (capi-v2).
    """

    base_url: str = API_BASE_URL
    user_agent: str = USER_AGENT
    search_limit: int = SEARCH_LIMIT  # posts per page
    language: str = API_LANGUAGE  # `language` query parameter
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


# ---------- Scraper configuration ----------


@dataclass
class ScraperConfig:
    """
    Settings for HTML scraping of chan.sankakucomplex.com.
    """

    base_url: str = HTML_BASE_URL
    static_host: str = STATIC_HOST  # host serving preview thumbnails
    user_agent: str = USER_AGENT
    lang: str = DEFAULT_LANG  # locale path segment ("en", "ja", ...)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


# ---------- Top-level application configuration ----------


@dataclass
class AppConfig:
    api: ApiConfig = field(default_factory=ApiConfig)
    scraper: ScraperConfig = field(default_factory=ScraperConfig)


def get_config() -> AppConfig:
    """
    Main entrypoint to get the full client config.

    Usage:
        from sankaku.config import get_config
        cfg = get_config()
        cfg.scraper.lang

    SANKAKU_LANG overrides the scraper locale segment.
    """
    cfg = AppConfig()

    lang = os.getenv("SANKAKU_LANG")
    if lang:
        cfg.scraper.lang = lang

    return cfg
