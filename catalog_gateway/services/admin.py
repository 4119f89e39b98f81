"""Client for the administrator service, the system of record for catalog data.

Every gateway endpoint maps to exactly one call here, and every call here
maps to exactly one HTTP request downstream. No response is cached or retried.
"""

import logging
from dataclasses import dataclass, field
from functools import cache
from typing import Any, Generic, TypeVar

import httpx
from fastapi import Request
from pydantic import TypeAdapter, ValidationError

from catalog_gateway.errors import (
    RELAYED_HEADERS,
    DownstreamError,
    DownstreamTimeout,
    DownstreamUnavailable,
    MalformedDownstreamResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_HEADERS = {"Content-Type": "application/json"}


@cache
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def _relayed_headers(resp: httpx.Response) -> dict[str, str]:
    return {k: v for k, v in resp.headers.items() if k.lower() in RELAYED_HEADERS}


@dataclass
class AdminResult(Generic[T]):
    """Downstream status code and relayed headers, plus the deserialized body
    if there was one."""

    status_code: int
    payload: T | None = None
    headers: dict[str, str] = field(default_factory=dict)


class AdminService:
    def __init__(self, http: httpx.AsyncClient) -> None:
        self.http = http

    async def list_all(self, collection: str, shape: type[T]) -> AdminResult[list[T]]:
        resp = await self._send("GET", f"/{collection}/")
        return AdminResult(resp.status_code, self._parse(resp, list[shape]), _relayed_headers(resp))

    async def get(self, entity: str, entity_id: int, shape: type[T]) -> AdminResult[T]:
        resp = await self._send("GET", f"/{entity}/{entity_id}")
        return AdminResult(resp.status_code, self._parse(resp, shape), _relayed_headers(resp))

    async def create(self, entity: str, body: dict[str, Any], shape: type[T]) -> AdminResult[T]:
        resp = await self._send("POST", f"/{entity}", json=body, headers=JSON_HEADERS)
        return AdminResult(resp.status_code, self._parse(resp, shape), _relayed_headers(resp))

    async def update(
        self, entity: str, entity_id: int, body: dict[str, Any], shape: type[T]
    ) -> AdminResult[T]:
        resp = await self._send("PUT", f"/{entity}/{entity_id}", json=body)
        return AdminResult(resp.status_code, self._parse(resp, shape), _relayed_headers(resp))

    async def delete(self, entity: str, entity_id: int) -> AdminResult[None]:
        resp = await self._send("DELETE", f"/{entity}/{entity_id}")
        return AdminResult(resp.status_code, headers=_relayed_headers(resp))

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        logger.debug("Forwarding %s %s", method, path)
        try:
            resp = await self.http.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.error("Administrator service timed out: %s %s: %s", method, path, e)
            raise DownstreamTimeout(f"Administrator service timed out on {method} {path}") from e
        except httpx.TransportError as e:
            logger.error("Administrator service unreachable: %s %s: %s", method, path, e)
            raise DownstreamUnavailable(
                f"Administrator service unreachable on {method} {path}"
            ) from e

        if not resp.is_success:
            logger.warning("Administrator service: %s %s -> %d", method, path, resp.status_code)
            raise DownstreamError(resp.status_code, resp.content, _relayed_headers(resp))
        return resp

    def _parse(self, resp: httpx.Response, shape: Any) -> Any:
        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return _adapter(shape).validate_json(resp.content)
        except ValidationError as e:
            logger.error(
                "Unexpected body from administrator service for %s %s: %s",
                resp.request.method,
                resp.request.url.path,
                e,
            )
            raise MalformedDownstreamResponse(
                f"Unexpected response from administrator service for "
                f"{resp.request.method} {resp.request.url.path}"
            ) from e


def get_admin(request: Request) -> AdminService:
    return request.app.state.admin
