from __future__ import annotations

import logging
import os
from typing import Optional, Union

import requests

from ..auth import Credential, credential_from_env
from ..config import AppConfig, get_config
from ..html_client import SankakuHtmlClient
from .sankaku_client import SankakuApiClient

logger = logging.getLogger(__name__)

MODES = ("api", "html")


def build_client(
    mode: Optional[str] = None,
    credential: Optional[Credential] = None,
    config: Optional[AppConfig] = None,
    session: Optional[requests.Session] = None,
) -> Union[SankakuApiClient, SankakuHtmlClient]:
    """
    Select a client implementation.

    Behavior:
    - `mode` wins; otherwise SANKAKU_MODE; otherwise "html".
    - "api"  -> SankakuApiClient against capi-v2.
    - "html" -> SankakuHtmlClient against the chan site.
    - Without an explicit credential, one is loaded from the environment.
    """
    mode = (mode or os.getenv("SANKAKU_MODE") or "html").lower()
    if mode not in MODES:
        raise ValueError(f"Unknown client mode {mode!r}, expected one of {MODES}")

    cfg = config or get_config()
    if credential is None:
        credential = credential_from_env(lang=cfg.scraper.lang)

    if mode == "api":
        logger.info("Using Sankaku API client (%s)", type(credential).__name__)
        return SankakuApiClient(credential=credential, config=cfg.api, session=session)

    logger.info("Using Sankaku HTML client (%s)", type(credential).__name__)
    return SankakuHtmlClient(credential=credential, config=cfg.scraper, session=session)
