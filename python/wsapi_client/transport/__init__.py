"""HTTP transports."""

from datetime import timedelta
from urllib.parse import urlsplit

from pyreqwest.client import Client, ClientBuilder
from pyreqwest.exceptions import RequestError

from wsapi_client.exceptions import TransportError
from wsapi_client.transport.types import Transport, TransportRequest, TransportResponse

__all__ = ["PyreqwestTransport", "Transport", "TransportRequest", "TransportResponse"]


class PyreqwestTransport:
    """Transport backed by an asynchronous pyreqwest client.

    The client is built without a cookie store. Redirects are followed by reqwest's default redirect policy, requests
    with `follow_redirects=False` are rejected.

    Every pyreqwest request failure (connect, timeout, redirect loop, truncated body, closed client) is raised as
    `TransportError`.

    Args:
        client: Client to use. Built from `timeout` and `user_agent` if not given.
        timeout: Total request timeout, None for no timeout
        user_agent: User-Agent header sent with every request
    """

    def __init__(
        self,
        client: Client | None = None,
        *,
        timeout: timedelta | None = None,
        user_agent: str | None = None,
    ) -> None:
        if client is None:
            builder = ClientBuilder()
            if timeout is not None:
                builder = builder.timeout(timeout)
            if user_agent is not None:
                builder = builder.user_agent(user_agent)
            client = builder.build()
        self._client = client

    async def send(self, request: TransportRequest) -> TransportResponse:
        """Perform the exchange and read the whole response body as text.

        Raises:
            ValueError: `request.follow_redirects` is False.
            TransportError: The exchange could not be completed.
        """
        if not request.follow_redirects:
            msg = "PyreqwestTransport always follows redirects, follow_redirects=False is not supported"
            raise ValueError(msg)

        builder = self._client.request(request.method, request.uri)
        for name, value in request.headers.items():
            builder = builder.header(name, value)
        if request.body is not None:
            builder = builder.body_bytes(request.body)

        try:
            resp = await builder.build().send()
            body = await resp.text()
        except RequestError as e:
            path = urlsplit(request.uri).path
            raise TransportError(f"{request.method} {request.uri} failed: {e}", path=path, uri=request.uri) from e

        return TransportResponse(status_code=resp.status, headers=resp.headers.dict_multi_value(), body=body)

    async def close(self) -> None:
        """Close the underlying client."""
        await self._client.close()
