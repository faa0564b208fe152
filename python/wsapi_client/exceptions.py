"""Errors raised by the client."""


class WsapiError(Exception):
    """Base class for all client errors.

    Args:
        message: Human readable description.
        path: Request path of the call that failed.
    """

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class TransportError(WsapiError):
    """The HTTP exchange could not be completed (connection, DNS, timeout, closed client)."""

    def __init__(self, message: str, *, path: str, uri: str) -> None:
        super().__init__(message, path=path)
        self.uri = uri


class SessionNegotiationError(WsapiError):
    """Session context could not be fetched or its body could not be parsed.

    `status_code` is set when the server answered with a non-success status.
    """

    def __init__(self, message: str, *, path: str, status_code: int | None = None) -> None:
        super().__init__(message, path=path)
        self.status_code = status_code
