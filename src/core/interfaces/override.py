"""Per-command override hooks for the CLI dispatcher.

The dispatcher applies the flags it knows about to a fresh request builder and
then hands the builder to the embedder's override, which may read any parsed
value and call any setter before the request is sent. The dispatch code is never
edited by hand; customization lives here.

Rules:
- One method per command, `execute_<command>(matches, request)`.
- Every method defaults to a no-op, so subclasses override only what they need.
- A hook signals failure by raising (typically `OverrideError`). The dispatcher
  does not catch it: the invocation aborts before the request is sent.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from adapters.sdk.builder import KeyGet


class OverrideError(Exception):
    """Descriptive failure raised by an override hook."""


@runtime_checkable
class CliOverride(Protocol):
    """Customization point invoked after flag application and before send."""

    def execute_key_get(self, matches: Mapping[str, Any], request: "KeyGet") -> None:
        """Adjust or validate a `key-get` request in place."""

        return None


class NoOverride(CliOverride):
    """Identity override: leaves every request as the flags populated it."""
