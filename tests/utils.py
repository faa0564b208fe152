import socket
from collections.abc import Callable
from contextlib import closing

import orjson

from wsapi_client.transport import TransportRequest, TransportResponse

Handler = Callable[[TransportRequest], TransportResponse]


class RecordingTransport:
    """Transport answering from a handler function and recording every request it gets."""

    def __init__(self, handler: Handler) -> None:
        self.handler = handler
        self.requests: list[TransportRequest] = []
        self.closed = False

    async def send(self, request: TransportRequest) -> TransportResponse:
        self.requests.append(request)
        return self.handler(request)

    async def close(self) -> None:
        self.closed = True


def find_free_port() -> int:
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind(("", 0))
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        return int(s.getsockname()[1])


BASE_URL = "http://wsapi.invalid"


def session_handler(request: TransportRequest) -> TransportResponse:
    """Answers the session context with token abc123 and cookie sid=xyz, everything else with empty 200."""
    if request.uri == f"{BASE_URL}/wsapi/session_context":
        return TransportResponse(
            status_code=200,
            headers={"content-type": "application/json", "set-cookie": "sid=xyz; Path=/; HttpOnly"},
            body=orjson.dumps({"csrf_token": "abc123"}).decode(),
        )
    return TransportResponse(status_code=200, headers={}, body="{}")
