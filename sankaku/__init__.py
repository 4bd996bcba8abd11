from __future__ import annotations

"""
Client library for Sankaku post metadata.

Two interchangeable modes:
- SankakuApiClient: JSON API, returns Post records.
- SankakuHtmlClient: HTML scraping, returns PostInfo records.
"""

from .auth import BearerToken, NoAuth, SessionCookie, credential_from_env
from .clients import PostClient, SankakuApiClient, build_client
from .config import get_config
from .errors import (
    DecodeError,
    ExtractionError,
    HTTPStatusError,
    RequestError,
    SankakuError,
)
from .html_client import SankakuHtmlClient
from .models import Post, PostInfo, Rating, Tag

__all__ = [
    "BearerToken",
    "DecodeError",
    "ExtractionError",
    "HTTPStatusError",
    "NoAuth",
    "Post",
    "PostClient",
    "PostInfo",
    "Rating",
    "RequestError",
    "SankakuApiClient",
    "SankakuError",
    "SankakuHtmlClient",
    "SessionCookie",
    "Tag",
    "build_client",
    "credential_from_env",
    "get_config",
]
