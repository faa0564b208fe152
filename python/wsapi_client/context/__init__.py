"""Client contexts: the per simulated session state holders."""

from dataclasses import dataclass
from datetime import datetime
from re import Pattern
from typing import TYPE_CHECKING

from wsapi_client.cookie.types import CookieJar, CookieSelector

if TYPE_CHECKING:
    from wsapi_client.session import SessionRecord

__all__ = ["Context", "clear_context", "get_cookie"]


@dataclass(eq=False)
class Context:
    """One simulated client session.

    Contexts are plain objects owned by the caller. Create as many as needed, they share no state. A context is
    mutated in place by every request made through it.

    Attributes:
        cookie_jar: Cookie name to value mapping, None until the first response is received
        session: Session record fetched from the server, None until negotiated
        session_started_at: When the session was negotiated (UTC)
    """

    cookie_jar: CookieJar | None = None
    session: "SessionRecord | None" = None
    session_started_at: datetime | None = None

    @property
    def csrf_token(self) -> str | None:
        """CSRF token of the negotiated session, if any."""
        return self.session.csrf_token if self.session is not None else None

    def clear(self) -> None:
        """Reset to the empty state. Same as `clear_context(self)`."""
        clear_context(self)


def clear_context(context: Context | None) -> None:
    """Remove cookies and session from the context. Clearing an already clear context does nothing."""
    if context is None:
        return
    context.cookie_jar = None
    context.session = None
    context.session_started_at = None


def get_cookie(context: Context, selector: CookieSelector) -> str | None:
    """Get the value of the first cookie whose name matches the selector.

    Args:
        context: Context to look in
        selector: Exact cookie name as str, or a compiled regex matched with `search` against cookie names

    Returns:
        Cookie value, or None if the jar is absent or no cookie matches.
    """
    jar = context.cookie_jar or {}
    if isinstance(selector, str):
        return jar.get(selector)
    if isinstance(selector, Pattern):
        return next((value for name, value in jar.items() if selector.search(name)), None)

    msg = f"selector must be str or re.Pattern, got {type(selector).__name__}"
    raise TypeError(msg)
