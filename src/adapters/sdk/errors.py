"""SDK error values.

Every failure `send()` can report is an `Error` subclass, so callers that only
care about "did the request work" catch the base class.
"""

from __future__ import annotations

import httpx


class Error(Exception):
    """Base class for request failures."""


class InvalidRequest(Error):
    """The request could not be built (e.g. a setter got a value of the wrong type)."""


class CommunicationError(Error):
    """The transport failed before a response was received."""


class UnexpectedResponse(Error):
    """The server answered with a status the operation does not document."""

    def __init__(self, response: httpx.Response) -> None:
        super().__init__(f"unexpected response status {response.status_code}")
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status_code

    def __repr__(self) -> str:
        return f"UnexpectedResponse(status={self.response.status_code}, body={self.response.text!r})"
