from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from bs4 import BeautifulSoup

from .config import DEFAULT_LANG, STATIC_HOST
from .errors import ExtractionError
from .models import PostInfo

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Stats labels (locale dependent)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StatsLabels:
    """
    Leading texts of the detail page's #stats line items.

    The site renders these in the visitor's locale, so the table
    must match the language segment the page was fetched under.
    """

    source: str
    resized: str


STATS_LABELS: Dict[str, StatsLabels] = {
    "en": StatsLabels(source="Source:", resized="Resized:"),
    "ja": StatsLabels(source="ソース:", resized="リサイズ:"),
}


def labels_for(lang: Optional[str]) -> StatsLabels:
    """
    Pick the label table for a locale. Anything but English is served
    the Japanese labels.
    """
    if not lang or lang == DEFAULT_LANG:
        return STATS_LABELS[DEFAULT_LANG]
    return STATS_LABELS.get(lang, STATS_LABELS["ja"])


# ---------------------------------------------------------------------------
# URL helpers
# ---------------------------------------------------------------------------


def normalize_url(url: str) -> str:
    """
    Turn a protocol-relative URL ("//host/x") into an https one.
    Anything else is returned as is.
    """
    if url.startswith("//"):
        return "https:" + url
    return url


def content_hash(url: str) -> str:
    """
    Filename stem of a content URL: ".../abcdef123.jpg?e=1" -> "abcdef123".
    """
    filename = url.rsplit("/", 1)[-1]
    return filename.split(".", 1)[0]


def preview_url_for(md5: str, static_host: str = STATIC_HOST) -> str:
    return f"{static_host.rstrip('/')}/data/preview/{md5[0:2]}/{md5[2:4]}/{md5}.jpg"


# ---------------------------------------------------------------------------
# Listing pages
# ---------------------------------------------------------------------------


def parse_listing(html: str) -> List[PostInfo]:
    """
    Parse a search results page into PostInfo items.

    Each <span class="thumb" id="p123"> carries the post id, and its
    nested <img class="preview"> carries tags (title) and thumbnail (src).
    Thumbs with missing pieces keep empty values for them.
    """
    soup = BeautifulSoup(html, "html.parser")
    posts: List[PostInfo] = []

    for thumb in soup.select(".thumb"):
        raw_id = thumb.get("id") or ""
        post_id = raw_id[1:] if raw_id.startswith("p") else raw_id

        tags: List[str] = []
        preview_url = ""
        img = thumb.select_one("img.preview") or thumb.find("img")
        if img is not None:
            tags = (img.get("title") or "").split()
            preview_url = normalize_url(img.get("src") or "")
        else:
            logger.debug("Thumb %r has no preview image", raw_id)

        posts.append(PostInfo(id=post_id, tags=tags, preview_url=preview_url))

    logger.debug("Parsed %d thumbs from listing page", len(posts))
    return posts


# ---------------------------------------------------------------------------
# Detail pages
# ---------------------------------------------------------------------------


def parse_tags(soup: BeautifulSoup) -> List[str]:
    tags: List[str] = []
    for a in soup.select("#tag-sidebar a"):
        name = a.get_text(strip=True).replace(" ", "_")
        if name:
            tags.append(name)
    return tags


def parse_detail(
    html: str,
    post_id: str,
    labels: Optional[StatsLabels] = None,
    static_host: str = STATIC_HOST,
) -> PostInfo:
    """
    Parse a single post page (/post/show/<id>).

    Walks the #stats list:
    - "Source:" item      -> source title + URL (or plain text)
    - "Resized:" item     -> sample_url
    - item with a#highres -> file_url and md5

    Raises ExtractionError if no item links the original file.
    """
    labels = labels or labels_for(DEFAULT_LANG)
    soup = BeautifulSoup(html, "html.parser")
    post = PostInfo(id=post_id)

    for li in soup.select("#stats li"):
        text = li.get_text(" ", strip=True)
        link = li.find("a")

        if text.startswith(labels.source):
            if link is not None:
                post.source_title = link.get_text(strip=True)
                post.source_url = link.get("href") or ""
            else:
                post.source_title = text[len(labels.source):].strip()
            continue

        if text.startswith(labels.resized) and link is not None:
            post.sample_url = normalize_url(link.get("href") or "")

        highres = li.find("a", id="highres")
        if highres is not None and highres.get("href"):
            post.file_url = normalize_url(highres["href"])
            post.md5 = content_hash(post.file_url)

    if not post.file_url or not post.md5:
        raise ExtractionError(f"No original file link found for post {post_id}")

    post.tags = parse_tags(soup)
    post.preview_url = preview_url_for(post.md5, static_host)
    return post
