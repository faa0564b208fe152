"""Client issuing requests on behalf of client contexts."""

import logging
from typing import Self
from urllib.parse import urlencode

import orjson

from wsapi_client.client.types import Envelope
from wsapi_client.config import ClientConfig
from wsapi_client.context import Context, clear_context, get_cookie
from wsapi_client.cookie import CookieSelector, extract_cookies, inject_cookies
from wsapi_client.exceptions import TransportError
from wsapi_client.session import CsrfNegotiator
from wsapi_client.transport import PyreqwestTransport, Transport, TransportRequest
from wsapi_client.types import Payload, QueryParams

__all__ = ["Envelope", "WsapiClient"]

logger = logging.getLogger(__name__)

CSRF_FIELD = "csrf"


class WsapiClient:
    """Issues GET and POST requests for client contexts.

    Cookies of a context are sent with every request and updated from every response. POST requests carry the
    context CSRF token, a session is negotiated first when the context has none.

    Calls sharing one context are not serialized. When issued concurrently the context ends up with the state of the
    response completing last.

    Args:
        config: Client configuration, read from the environment if not given
        transport: HTTP transport, a `PyreqwestTransport` built from config if not given
    """

    def __init__(self, config: ClientConfig | None = None, transport: Transport | None = None) -> None:
        self.config = config if config is not None else ClientConfig.from_env()
        if transport is None:
            transport = PyreqwestTransport(timeout=self.config.timeout, user_agent=self.config.user_agent)
        self._transport = transport
        self._negotiator = CsrfNegotiator(self.get)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the transport."""
        await self._transport.close()

    async def get(self, path: str, context: Context, query: QueryParams | None = None) -> Envelope:
        """Issue a GET request.

        Args:
            path: Request path, appended to the configured base URL
            context: Client context whose cookies are sent and updated
            query: Query parameters appended to the path

        Raises:
            TransportError: Request could not be completed. Cookies are not updated.
        """
        headers: dict[str, str] = {}
        inject_cookies(context, headers)

        if query is not None:
            path = f"{path}?{urlencode(query)}"

        request = TransportRequest(uri=self._uri(path), method="GET", headers=headers, follow_redirects=True)
        return await self._send(context, request)

    async def post(self, path: str, context: Context, payload: Payload | None = None) -> Envelope:
        """Issue a JSON POST request carrying the context CSRF token.

        A session is negotiated first if the context has none. The token is sent in the `csrf` field of the body.

        Args:
            path: Request path, appended to the configured base URL
            context: Client context whose cookies are sent and updated
            payload: JSON object to send. It is copied, not modified.

        Raises:
            SessionNegotiationError: Session could not be negotiated. No POST request is sent.
            TransportError: Request could not be completed.
        """
        csrf = await self._negotiator.ensure_token(context)

        body = orjson.dumps({**(payload or {}), CSRF_FIELD: csrf})
        headers = {"content-type": "application/json", "content-length": str(len(body))}
        inject_cookies(context, headers)

        request = TransportRequest(
            uri=self._uri(path), method="POST", headers=headers, body=body, follow_redirects=True
        )
        return await self._send(context, request)

    async def get_session_context(self, context: Context) -> str:
        """Make sure the context has a session without issuing a state changing request.

        Returns:
            CSRF token of the context session.
        """
        return await self._negotiator.ensure_token(context)

    def clear(self, context: Context) -> None:
        """Remove cookies and session from the context."""
        clear_context(context)

    def get_cookie(self, context: Context, selector: CookieSelector) -> str | None:
        """Get a cookie value of the context, see `wsapi_client.context.get_cookie`."""
        return get_cookie(context, selector)

    def _uri(self, path: str) -> str:
        return self.config.base_url + path

    async def _send(self, context: Context, request: TransportRequest) -> Envelope:
        logger.debug("%s %s", request.method, request.uri)
        try:
            resp = await self._transport.send(request)
        except TransportError:
            logger.exception("%s %s failed", request.method, request.uri)
            raise

        extract_cookies(context, resp.headers)
        return Envelope(status_code=resp.status_code, headers=resp.headers, body=resp.body)
