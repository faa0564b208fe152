"""Conversion between Set-Cookie response headers, context cookie jars and outgoing Cookie headers.

Cookies are tracked by name only. Attributes such as Path, Domain or Expires are dropped, matching how a
single simulated client talks to a single service.
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from wsapi_client.cookie.types import CookieJar, CookieSelector
from wsapi_client.types import HeadersType, ResponseHeaders

if TYPE_CHECKING:
    from wsapi_client.context import Context

__all__ = [
    "CookieJar",
    "CookieSelector",
    "cookie_header",
    "extract_cookies",
    "inject_cookies",
    "parse_set_cookie",
    "set_cookie_values",
]

logger = logging.getLogger(__name__)


def cookie_header(jar: CookieJar | None) -> str | None:
    """Render a cookie jar as a Cookie header value, or None if there is nothing to send."""
    if not jar:
        return None
    return "; ".join(f"{name}={value}" for name, value in jar.items())


def parse_set_cookie(value: str) -> tuple[str, str] | None:
    """Parse the name and value of a single Set-Cookie header value.

    Only the part before the first `;` is considered. It is split on the first `=`, so values may contain `=`.

    Returns:
        `(name, value)` tuple, or None if the header value is malformed.
    """
    pair = value.split(";", 1)[0]
    name, sep, cookie_value = pair.partition("=")
    name = name.strip()
    if not sep or not name:
        return None
    return name, cookie_value.strip()


def set_cookie_values(headers: ResponseHeaders) -> list[str]:
    """Collect all Set-Cookie header values from response headers, in received order."""
    values: list[str] = []
    for name, value in headers.items():
        if name.lower() != "set-cookie":
            continue
        if isinstance(value, str):
            values.append(value)
        else:
            values.extend(value)
    return values


def inject_cookies(context: "Context", headers: HeadersType) -> None:
    """Set the Cookie header from the context cookie jar. Does nothing when the jar is absent or empty.

    Lower-case header name is used so that it replaces any cookie header the transport would add.
    """
    if (header := cookie_header(context.cookie_jar)) is not None:
        headers["cookie"] = header


def extract_cookies(context: "Context", headers: ResponseHeaders) -> None:
    """Store every Set-Cookie value of a response into the context cookie jar.

    The jar is created if absent. Later values overwrite earlier ones with the same name, also within a single
    response. Malformed values are skipped.
    """
    if context.cookie_jar is None:
        context.cookie_jar = {}
    _store(context.cookie_jar, set_cookie_values(headers))


def _store(jar: CookieJar, set_cookies: Iterable[str]) -> None:
    for set_cookie in set_cookies:
        if (parsed := parse_set_cookie(set_cookie)) is None:
            logger.debug("Skipping malformed Set-Cookie value %r", set_cookie)
            continue
        name, value = parsed
        jar[name] = value
