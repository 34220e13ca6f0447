"""SDK client for the key API.

`Client` returns per-operation builders; `send()` either returns a
`ResponseValue` or raises an `Error` subclass.
"""

from adapters.sdk.builder import KeyGet
from adapters.sdk.client import Client
from adapters.sdk.errors import CommunicationError, Error, InvalidRequest, UnexpectedResponse

__all__ = [
	"Client",
	"CommunicationError",
	"Error",
	"InvalidRequest",
	"KeyGet",
	"UnexpectedResponse",
]
