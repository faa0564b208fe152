"""wsapi_client - Session aware asyncio client for WSAPI style web services.

Lets scripts act as any number of simulated browser sessions against a remote service:
- Independent client contexts, each with its own cookie jar and session
- Cookie extraction and resending handled per context
- CSRF token negotiated on demand and attached to every POST
- Pluggable HTTP transport, backed by [pyreqwest](https://github.com/MarkusSintonen/pyreqwest) by default
"""

from wsapi_client.client import WsapiClient
from wsapi_client.client.types import Envelope
from wsapi_client.config import ClientConfig
from wsapi_client.context import Context, clear_context, get_cookie
from wsapi_client.exceptions import SessionNegotiationError, TransportError, WsapiError

__all__ = [
    "ClientConfig",
    "Context",
    "Envelope",
    "SessionNegotiationError",
    "TransportError",
    "WsapiClient",
    "WsapiError",
    "clear_context",
    "get_cookie",
]
