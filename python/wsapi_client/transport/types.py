"""Transport types and interfaces."""

from dataclasses import dataclass, field
from typing import Protocol

from wsapi_client.types import ResponseHeaders


@dataclass(frozen=True)
class TransportRequest:
    """Single HTTP exchange to be performed by a transport."""

    uri: str
    method: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    follow_redirects: bool = True


@dataclass(frozen=True)
class TransportResponse:
    """Raw result of a completed HTTP exchange."""

    status_code: int
    headers: ResponseHeaders = field(default_factory=dict)
    body: str = ""


class Transport(Protocol):
    """HTTP transport used by the client.

    Cookies are handled by the client, so a transport must not keep or add cookies of its own.
    """

    async def send(self, request: TransportRequest) -> TransportResponse:
        """Perform the exchange.

        Raises:
            TransportError: If the exchange could not be completed. HTTP error statuses are not errors.
        """
        ...

    async def close(self) -> None:
        """Release the transport resources."""
        ...
