from __future__ import annotations

from typing import Optional

# Longest body excerpt carried in the error message
BODY_SNIPPET_LENGTH = 500


class SankakuError(Exception):
    """Base class for every error raised by this package."""


class RequestError(SankakuError):
    """The outgoing request could not be built (malformed host or URL)."""


class HTTPStatusError(SankakuError):
    """
    The server answered with a failing status.

    `body` holds the response text when it could be read, else None.
    """

    def __init__(self, status: int, reason: str = "", body: Optional[str] = None) -> None:
        self.status = status
        self.reason = reason
        self.body = body

        status_text = f"{status} {reason}".strip()
        if body is None:
            message = f"http error: {status_text} (body: unknown)"
        else:
            message = f"http error: {status_text}, {body[:BODY_SNIPPET_LENGTH]}"
        super().__init__(message)


class DecodeError(SankakuError):
    """The response body is not the JSON payload we expected."""


class ExtractionError(SankakuError):
    """A required element is missing from an HTML page."""
