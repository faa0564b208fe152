"""Client result types."""

from dataclasses import dataclass, field
from typing import Any

import orjson

from wsapi_client.types import ResponseHeaders


@dataclass(frozen=True)
class Envelope:
    """Normalized result of every request.

    Attributes:
        status_code: HTTP status code of the final response (after redirects)
        headers: Response headers with lower-case names. Headers received multiple times map to a list of values.
        body: Response body decoded as text
    """

    status_code: int
    headers: ResponseHeaders = field(default_factory=dict)
    body: str = ""

    @property
    def ok(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body as JSON."""
        return orjson.loads(self.body)
