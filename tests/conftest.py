import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from catalog_gateway.app import create_app

ADMIN_URL = "http://admin"


class FakeAdmin:
    """Stands in for the administrator service. Records every request it
    receives and answers from canned replies keyed by method and path;
    anything without a reply gets a 404."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._replies: dict[tuple[str, str], dict | Exception] = {}

    def reply(self, method: str, path: str, status_code: int = 200, **kwargs) -> None:
        self._replies[(method, path)] = {"status_code": status_code, **kwargs}

    def fail(self, method: str, path: str, exc: Exception) -> None:
        self._replies[(method, path)] = exc

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self._replies.get((request.method, request.url.path))
        if reply is None:
            return httpx.Response(404, json={"detail": "Not found"})
        if isinstance(reply, Exception):
            raise reply
        return httpx.Response(**reply)


@pytest.fixture
def admin():
    return FakeAdmin()


@pytest.fixture
async def admin_http(admin):
    async with AsyncClient(transport=httpx.MockTransport(admin.handler), base_url=ADMIN_URL) as http:
        yield http


@pytest.fixture
async def client(admin_http):
    app = create_app(admin_http)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
