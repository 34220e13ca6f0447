from __future__ import annotations

from io import StringIO
from typing import Any

import pytest
from rich.console import Console

from core.domain.models import ResponseValue


class RecordingKeyGet:
    """Stand-in for `adapters.sdk.KeyGet` that records every setter call."""

    def __init__(self, outcome: Any = None) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.fields: dict[str, Any] = {}
        self.sent = 0
        self._outcome = outcome

    def key(self, value: Any) -> "RecordingKeyGet":
        self.calls.append(("key", value))
        self.fields["key"] = value
        return self

    def unique_key(self, value: Any) -> "RecordingKeyGet":
        self.calls.append(("unique_key", value))
        self.fields["unique_key"] = value
        return self

    async def send(self) -> ResponseValue:
        self.sent += 1
        if isinstance(self._outcome, Exception):
            raise self._outcome
        return self._outcome or ResponseValue(status=200)


class FakeClient:
    def __init__(self, outcome: Any = None) -> None:
        self.builders: list[RecordingKeyGet] = []
        self._outcome = outcome

    def key_get(self) -> RecordingKeyGet:
        builder = RecordingKeyGet(self._outcome)
        self.builders.append(builder)
        return builder


@pytest.fixture()
def console() -> Console:
    return Console(file=StringIO(), force_terminal=False, color_system=None, width=120)


@pytest.fixture()
def make_client() -> type[FakeClient]:
    return FakeClient
