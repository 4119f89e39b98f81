"""Errors raised while talking to the administrator service, and the
FastAPI handlers that turn them into responses for the caller."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

# Downstream headers relayed to the caller along with the status code
RELAYED_HEADERS = ("content-type", "location", "retry-after", "etag", "last-modified", "cache-control")


class GatewayError(Exception):
    """Base class for failures of a forwarded call."""


class DownstreamError(GatewayError):
    """The administrator service answered with a non-2xx status."""

    def __init__(self, status_code: int, body: bytes, headers: dict[str, str] | None = None) -> None:
        super().__init__(f"Administrator service returned {status_code}")
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}


class DownstreamUnavailable(GatewayError):
    """The request never got an answer (connection refused, reset, ...)."""


class DownstreamTimeout(GatewayError):
    """The administrator service did not answer in time."""


class MalformedDownstreamResponse(GatewayError):
    """The body could not be read as the expected entity shape."""


async def _relay_downstream_error(request: Request, exc: DownstreamError) -> Response:
    return Response(content=exc.body, status_code=exc.status_code, headers=exc.headers)


async def _unavailable(request: Request, exc: DownstreamUnavailable) -> JSONResponse:
    return JSONResponse(status_code=502, content={"detail": str(exc)})


async def _timeout(request: Request, exc: DownstreamTimeout) -> JSONResponse:
    return JSONResponse(status_code=504, content={"detail": str(exc)})


async def _malformed(request: Request, exc: MalformedDownstreamResponse) -> JSONResponse:
    return JSONResponse(status_code=502, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DownstreamError, _relay_downstream_error)
    app.add_exception_handler(DownstreamUnavailable, _unavailable)
    app.add_exception_handler(DownstreamTimeout, _timeout)
    app.add_exception_handler(MalformedDownstreamResponse, _malformed)
