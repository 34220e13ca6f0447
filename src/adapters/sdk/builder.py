"""Request builders, one per API operation.

A builder accumulates field values through fluent setters and issues the request
with `await builder.send()`. Setters never raise: a value of the wrong type is
recorded and reported as `InvalidRequest` when the request is sent.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from adapters.sdk.errors import CommunicationError, InvalidRequest, UnexpectedResponse
from core.domain.models import ResponseValue

if TYPE_CHECKING:
    from adapters.sdk.client import Client

logger = logging.getLogger(__name__)


class KeyGet:
    """Builder for `GET /key` (operation `key.get`)."""

    def __init__(self, client: "Client") -> None:
        self._client = client
        self._key: bool | None = None
        self._unique_key: str | None = None
        self._errors: dict[str, str] = {}

    def key(self, value: Any) -> "KeyGet":
        if isinstance(value, bool):
            self._key = value
            self._errors.pop("key", None)
        else:
            self._errors["key"] = "conversion to `bool` for key failed"
        return self

    def unique_key(self, value: Any) -> "KeyGet":
        if isinstance(value, str):
            self._unique_key = value
            self._errors.pop("unique_key", None)
        else:
            self._errors["unique_key"] = "conversion to `str` for unique_key failed"
        return self

    def query(self) -> list[tuple[str, str]]:
        """Query parameters for the request, only for fields that were set."""

        # First failing field wins, in declaration order.
        for field in ("key", "unique_key"):
            if field in self._errors:
                raise InvalidRequest(self._errors[field])

        params: list[tuple[str, str]] = []
        if self._key is not None:
            params.append(("key", "true" if self._key else "false"))
        if self._unique_key is not None:
            params.append(("uniqueKey", self._unique_key))
        return params

    async def send(self) -> ResponseValue:
        """Send the request.

        Returns a `ResponseValue` for status 200 and raises an `adapters.sdk.Error`
        subclass otherwise.
        """

        params = self.query()
        url = f"{self._client.baseurl}/key"
        logger.debug("GET %s params=%s", url, params)

        try:
            response = await self._client.http.get(url, params=params)
        except httpx.HTTPError as exc:
            raise CommunicationError(str(exc)) from exc

        if response.status_code == 200:
            return ResponseValue(
                inner=None,
                status=response.status_code,
                headers={k.lower(): v for k, v in response.headers.items()},
            )

        logger.warning("GET %s returned HTTP %s", url, response.status_code)
        raise UnexpectedResponse(response)
