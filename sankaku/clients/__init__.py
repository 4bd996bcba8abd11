from __future__ import annotations

"""
Client package for Sankaku post sources.

This package exposes:
- PostClient: minimal protocol for searching posts.
- SankakuApiClient: JSON API implementation (capi-v2).
- build_client: picks the API or HTML client from the environment.

HTML scraping is implemented in `sankaku/html_client.py`; it conforms
to the PostClient protocol structurally.
"""

from .factory import MODES, build_client
from .sankaku_client import PostClient, SankakuApiClient

__all__ = [
    "PostClient",
    "SankakuApiClient",
    "MODES",
    "build_client",
]
