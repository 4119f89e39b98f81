from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from catalog_gateway.config import ADMIN_BASE_URL, ADMIN_TIMEOUT
from catalog_gateway.errors import register_exception_handlers
from catalog_gateway.routers import catalog
from catalog_gateway.services.admin import AdminService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared administrator-service client unless one was injected."""
    if getattr(app.state, "admin", None) is not None:
        yield
        return
    async with httpx.AsyncClient(base_url=ADMIN_BASE_URL, timeout=ADMIN_TIMEOUT) as http:
        app.state.admin = AdminService(http)
        yield
    app.state.admin = None


def create_app(http: httpx.AsyncClient | None = None) -> FastAPI:
    app = FastAPI(title="Catalog Gateway", version="0.1.0", lifespan=lifespan)
    if http is not None:
        app.state.admin = AdminService(http)
    register_exception_handlers(app)
    app.include_router(catalog.router)
    return app


app = create_app()
