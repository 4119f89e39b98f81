"""HTTP client the MCP tools use to reach the gateway."""

from httpx import AsyncClient, Response


class CatalogUnavailable(RuntimeError):
    """The gateway answered 5xx: the catalog cannot be reached right now."""

    def __init__(self, status: int, detail: str) -> None:
        super().__init__(f"Catalog unavailable ({status}): {detail}")
        self.status = status
        self.detail = detail


def _detail(resp: Response) -> str:
    """Pull a readable message out of an error body.

    Handles FastAPI's ``detail`` (a string, or a list of validation errors),
    the administrator service's ``error`` field, and plain text.
    """
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if not isinstance(body, dict):
        return resp.text
    detail = body.get("detail", body.get("error"))
    if isinstance(detail, list):
        return "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', []))}: {err.get('msg', '')}"
            for err in detail
            if isinstance(err, dict)
        )
    return str(detail) if detail is not None else resp.text


class CatalogClient:
    """Calls gateway routes and turns each answer into a tool result: the
    parsed record(s) on success, ``{"ok": True}`` when there is no body, and
    an error dict for 4xx. 5xx answers raise CatalogUnavailable."""

    def __init__(self, http: AsyncClient) -> None:
        self.http = http

    async def get(self, path: str, **kwargs) -> dict | list:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs) -> dict | list:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs) -> dict | list:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs) -> dict | list:
        return await self.request("DELETE", path, **kwargs)

    async def request(self, method: str, path: str, **kwargs) -> dict | list:
        resp = await self.http.request(method, path, **kwargs)
        if resp.status_code >= 500:
            raise CatalogUnavailable(resp.status_code, _detail(resp))
        if resp.status_code >= 400:
            return {"error": True, "status": resp.status_code, "detail": _detail(resp)}
        if resp.status_code == 204 or not resp.content:
            return {"ok": True}
        return resp.json()
