from __future__ import annotations

import pytest

from sankaku.errors import ExtractionError
from sankaku.parsing import (
    STATS_LABELS,
    StatsLabels,
    content_hash,
    labels_for,
    normalize_url,
    parse_detail,
    parse_listing,
    preview_url_for,
)


LISTING_HTML = """
<html><body><div class="content">
  <span class="thumb blacklisted" id="p123">
    <a href="/post/show/123"><img class="preview" src="//img.example/x.jpg" title="tag_a tag_b"></a>
  </span>
  <span class="thumb" id="p456">
    <a href="/post/show/456"><img class="preview" src="https://img.example/y.jpg"></a>
  </span>
  <span class="thumb" id="p789"></span>
</div></body></html>
"""


def make_detail_html(stats_items: str, sidebar: str = "") -> str:
    return f"""
<html><body>
  <ul id="tag-sidebar">{sidebar}</ul>
  <div id="stats"><ul>
    <li>Id: 6397602</li>
    {stats_items}
  </ul></div>
</body></html>
"""


ORIGINAL_ITEM = (
    '<li>Original: <a href="//cs.example/data/ab/cd/abcdef123.png?e=1&amp;m=2" '
    'id="highres">2000x1600</a></li>'
)


# ---------------------------------------------------------------------------
# URL helpers
# ---------------------------------------------------------------------------


def test_normalize_url_rewrites_protocol_relative():
    assert normalize_url("//img.example/x.jpg") == "https://img.example/x.jpg"


def test_normalize_url_is_idempotent():
    once = normalize_url("//img.example/x.jpg")
    assert normalize_url(once) == once
    assert normalize_url("https://img.example/x.jpg") == "https://img.example/x.jpg"
    assert normalize_url("") == ""


def test_content_hash_strips_extension():
    assert content_hash("https://cs.example/data/ab/cd/abcdef123.jpg") == "abcdef123"


def test_content_hash_without_extension_is_the_filename():
    assert content_hash("https://cs.example/data/ab/cd/abcdef123") == "abcdef123"


def test_content_hash_ignores_query_after_extension():
    assert content_hash("https://cs.example/data/abcdef123.png?e=1&m=2") == "abcdef123"


def test_preview_url_is_built_from_hash_prefixes():
    url = preview_url_for("abcdef123", "https://c.example")
    assert url == "https://c.example/data/preview/ab/cd/abcdef123.jpg"
    # Deterministic: same input, same output
    assert preview_url_for("abcdef123", "https://c.example") == url


# ---------------------------------------------------------------------------
# Listing pages
# ---------------------------------------------------------------------------


def test_listing_extracts_id_tags_and_thumbnail():
    posts = parse_listing(LISTING_HTML)

    first = posts[0]
    assert first.id == "123"
    assert first.tags == ["tag_a", "tag_b"]
    assert first.preview_url == "https://img.example/x.jpg"


def test_listing_tolerates_missing_structure():
    posts = parse_listing(LISTING_HTML)
    assert [p.id for p in posts] == ["123", "456", "789"]

    # No title attribute -> no tags, absolute src kept as is
    assert posts[1].tags == []
    assert posts[1].preview_url == "https://img.example/y.jpg"

    # No nested image at all -> empty fields, page still parsed
    assert posts[2].tags == []
    assert posts[2].preview_url == ""


def test_listing_without_thumbs_is_empty():
    assert parse_listing("<html><body><p>No posts</p></body></html>") == []


# ---------------------------------------------------------------------------
# Detail pages
# ---------------------------------------------------------------------------


def test_detail_extracts_file_hash_and_preview():
    html = make_detail_html(ORIGINAL_ITEM)
    post = parse_detail(html, "6397602", static_host="https://c.example")

    assert post.id == "6397602"
    assert post.file_url == "https://cs.example/data/ab/cd/abcdef123.png?e=1&m=2"
    assert post.md5 == "abcdef123"
    assert post.preview_url == "https://c.example/data/preview/ab/cd/abcdef123.jpg"


def test_detail_extracts_resized_and_linked_source():
    items = (
        '<li>Resized: <a href="//cs.example/data/sample/ab/cd/sample-abcdef123.jpg" '
        'id="lowres">1000x800</a></li>'
        + ORIGINAL_ITEM
        + '<li>Source: <a href="https://www.pixiv.net/artworks/1">pixiv artwork</a></li>'
    )
    post = parse_detail(make_detail_html(items), "1")

    assert post.sample_url == "https://cs.example/data/sample/ab/cd/sample-abcdef123.jpg"
    assert post.source_title == "pixiv artwork"
    assert post.source_url == "https://www.pixiv.net/artworks/1"


def test_detail_plain_text_source():
    items = ORIGINAL_ITEM + "<li>Source: Some Artbook</li>"
    post = parse_detail(make_detail_html(items), "1")

    assert post.source_title == "Some Artbook"
    assert post.source_url == ""


def test_detail_sidebar_tags_replace_spaces_and_skip_empty():
    sidebar = (
        '<li><a href="/?tags=tag_name">tag name</a></li>'
        '<li><a href="/?tags=solo">solo</a></li>'
        '<li><a href="#"> </a></li>'
    )
    post = parse_detail(make_detail_html(ORIGINAL_ITEM, sidebar), "1")

    assert post.tags == ["tag_name", "solo"]


def test_detail_without_tags_or_source_is_tolerated():
    post = parse_detail(make_detail_html(ORIGINAL_ITEM), "1")

    assert post.tags == []
    assert post.source_title == ""
    assert post.source_url == ""
    assert post.sample_url == ""


def test_detail_without_highres_link_fails():
    items = (
        '<li>Resized: <a href="//cs.example/sample.jpg" id="lowres">1000x800</a></li>'
        '<li>Source: <a href="https://example.com">x</a></li>'
    )
    with pytest.raises(ExtractionError):
        parse_detail(make_detail_html(items), "1")


def test_detail_uses_given_labels():
    items = ORIGINAL_ITEM + '<li>ソース: <a href="https://example.jp/1">作品</a></li>'
    post = parse_detail(make_detail_html(items), "1", labels=labels_for("ja"))

    assert post.source_title == "作品"
    assert post.source_url == "https://example.jp/1"


def test_detail_labels_can_be_overridden():
    labels = StatsLabels(source="Origin:", resized="Sample:")
    items = ORIGINAL_ITEM + '<li>Origin: <a href="https://example.com/a">a</a></li>'
    post = parse_detail(make_detail_html(items), "1", labels=labels)

    assert post.source_url == "https://example.com/a"


def test_labels_for_falls_back_to_japanese_for_other_locales():
    assert labels_for("en") == STATS_LABELS["en"]
    assert labels_for(None) == STATS_LABELS["en"]
    assert labels_for("ja") == STATS_LABELS["ja"]
    assert labels_for("zh-CN") == STATS_LABELS["ja"]
