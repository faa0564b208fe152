from collections.abc import AsyncGenerator

import pytest
from pyreqwest.client import ClientBuilder

from wsapi_client import ClientConfig, Context, WsapiClient
from wsapi_client.transport import PyreqwestTransport

from tests.servers.raw_server import RawServer, http_response
from tests.servers.wsapi_server import WsapiServer
from tests.utils import BASE_URL, RecordingTransport, session_handler


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url=BASE_URL)


@pytest.fixture
def context() -> Context:
    return Context()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport(session_handler)


@pytest.fixture
async def client(config: ClientConfig, transport: RecordingTransport) -> AsyncGenerator[WsapiClient, None]:
    async with WsapiClient(config, transport) as client:
        yield client


@pytest.fixture
def wsapi_server() -> WsapiServer:
    return WsapiServer()


@pytest.fixture
async def server_client(config: ClientConfig, wsapi_server: WsapiServer) -> AsyncGenerator[WsapiClient, None]:
    pyreqwest_client = ClientBuilder().with_middleware(wsapi_server.handle).build()
    async with WsapiClient(config, PyreqwestTransport(pyreqwest_client)) as client:
        yield client


@pytest.fixture
async def raw_server() -> AsyncGenerator[RawServer, None]:
    routes = {
        "/truncated": http_response("200 OK", {"Content-Length": "100"}, b"partial"),
        "/loop": http_response("302 Found", {"Location": "/loop", "Content-Length": "0"}),
        "/start": http_response("302 Found", {"Location": "/end", "Content-Length": "0"}),
        "/end": http_response("200 OK", {"Content-Type": "text/plain", "Content-Length": "4"}, b"done"),
    }
    async with RawServer(routes).serve_context() as server:
        yield server
