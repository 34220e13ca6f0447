"""Domain models (Pydantic v2).

These describe *what* comes back from the API, not *how* it is fetched.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ResponseValue(BaseModel):
    """Successful response from an API operation.

    `inner` holds the decoded body; operations without a body leave it as `None`.
    """

    inner: Any = Field(
        default=None,
        description="Decoded response payload (None for empty responses).",
    )
    status: int = Field(
        ...,
        ge=100,
        le=599,
        description="HTTP status code.",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Response headers (lower-cased names).",
    )
