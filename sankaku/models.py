from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional


class Rating(str, enum.Enum):
    SAFE = "s"
    QUESTIONABLE = "q"
    EXPLICIT = "e"
    UNKNOWN = ""

    @classmethod
    def _missing_(cls, value: object) -> "Rating":
        return cls.UNKNOWN

    @property
    def label(self) -> str:
        return _RATING_LABELS[self]


_RATING_LABELS = {
    Rating.SAFE: "safe",
    Rating.QUESTIONABLE: "questionable",
    Rating.EXPLICIT: "explicit",
    Rating.UNKNOWN: "unknown",
}


def _int_field(data: Mapping[str, Any], key: str, required: bool = False) -> int:
    """
    Read a JSON integer. Booleans, floats and numeric strings are rejected;
    a missing or null optional field reads as 0.
    """
    value = data[key] if required else data.get(key)
    if value is None and not required:
        return 0
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Expected an integer for {key!r}, got {value!r}")
    return value


def _str_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"Expected a string for {key!r}, got {value!r}")
    return value


@dataclass
class Tag:
    """
    A tag as returned by the JSON API.
    """

    id: int
    count: int  # Number of posts carrying the tag
    type: int  # Category code (general, artist, copyright, ...)
    name: str
    name_ja: Optional[str] = None  # Localized name, may be missing

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Tag":
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

        name_ja = data.get("name_ja")
        if name_ja is not None and not isinstance(name_ja, str):
            raise TypeError(f"Expected a string for 'name_ja', got {name_ja!r}")

        return cls(
            id=_int_field(data, "id", required=True),
            count=_int_field(data, "count"),
            type=_int_field(data, "type"),
            name=_str_field(data, "name"),
            name_ja=name_ja,
        )


@dataclass
class Post:
    """
    A single post decoded from the JSON API.

    The API gives the raw `source` string only; it is not split
    into title and URL the way the HTML detail page is.
    """

    id: int
    md5: str = ""
    rating: Rating = Rating.UNKNOWN
    file_url: str = ""
    preview_url: str = ""
    sample_url: str = ""
    source: str = ""
    tags: List[Tag] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Post":
        """
        Build a Post from one element of the /posts JSON array.

        Raises KeyError, TypeError or ValueError on a malformed record;
        callers turn those into a DecodeError.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

        raw_tags = data.get("tags") or []
        if not isinstance(raw_tags, list):
            raise TypeError(f"Expected a list of tags, got {type(raw_tags).__name__}")

        return cls(
            id=_int_field(data, "id", required=True),
            md5=_str_field(data, "md5"),
            rating=Rating(_str_field(data, "rating")),
            file_url=_str_field(data, "file_url"),
            preview_url=_str_field(data, "preview_url"),
            sample_url=_str_field(data, "sample_url"),
            source=_str_field(data, "source"),
            tags=[Tag.from_dict(t) for t in raw_tags],
        )


@dataclass
class PostInfo:
    """
    A post scraped from the HTML site.

    Listing pages fill id, tags and preview_url. Detail pages
    fill everything except what the page omits (source, resized image).
    """

    id: str
    md5: str = ""
    tags: List[str] = field(default_factory=list)
    preview_url: str = ""  # Thumbnail URL
    sample_url: str = ""  # Resized image URL
    file_url: str = ""  # Original image URL
    source_title: str = ""
    source_url: str = ""
