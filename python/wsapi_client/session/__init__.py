"""Session and CSRF token negotiation."""

import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wsapi_client.exceptions import SessionNegotiationError

if TYPE_CHECKING:
    from wsapi_client.client.types import Envelope
    from wsapi_client.context import Context

__all__ = ["SESSION_CONTEXT_PATH", "CsrfNegotiator", "SessionRecord"]

logger = logging.getLogger(__name__)

SESSION_CONTEXT_PATH = "/wsapi/session_context"


class SessionRecord(BaseModel):
    """Session context returned by the server.

    Only `csrf_token` is required. Any other fields the server sends are kept and available as attributes or via
    `model_extra`.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    csrf_token: str = Field(min_length=1)


class CsrfNegotiator:
    """Obtains and caches the CSRF token of a context.

    Args:
        get: Coroutine function issuing a GET through the orchestrator, called as `get(path, context)`. Cookies of
            the negotiation request are handled like for any other request of the context.
    """

    def __init__(self, get: Callable[[str, "Context"], Awaitable["Envelope"]]) -> None:
        self._get = get

    async def ensure_token(self, context: "Context") -> str:
        """Return the CSRF token of the context, negotiating a session first if there is none.

        A cached token is returned without any request and is never expired by this method.

        Raises:
            SessionNegotiationError: Session context answered with non-200 status or unparsable body.
            TransportError: Session context request could not be completed.
        """
        if context.session is not None:
            logger.debug("Context already has a session, reusing CSRF token")
            return context.session.csrf_token

        resp = await self._get(SESSION_CONTEXT_PATH, context)
        if resp.status_code != 200:
            logger.warning("Session negotiation failed: %s -> HTTP %d", SESSION_CONTEXT_PATH, resp.status_code)
            msg = f"{SESSION_CONTEXT_PATH} returned HTTP {resp.status_code}"
            raise SessionNegotiationError(msg, path=SESSION_CONTEXT_PATH, status_code=resp.status_code)

        try:
            session = SessionRecord.model_validate_json(resp.body)
        except ValidationError as e:
            logger.warning("Session negotiation failed: invalid body from %s: %s", SESSION_CONTEXT_PATH, e)
            msg = f"{SESSION_CONTEXT_PATH} returned an invalid session context"
            raise SessionNegotiationError(msg, path=SESSION_CONTEXT_PATH, status_code=resp.status_code) from e

        context.session = session
        context.session_started_at = datetime.now(UTC)
        return session.csrf_token
