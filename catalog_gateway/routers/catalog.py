"""Catalog endpoints for cataloging administrators.

Each endpoint forwards to the administrator service and relays its answer.
FIXME: these endpoints are open to any caller; restrict them to authorized
cataloging administrators.
"""

from typing import Any, Callable

from fastapi import APIRouter, Depends, Response

from catalog_gateway.schemas import (
    Author,
    AuthorCreate,
    Book,
    BookCreate,
    Publisher,
    PublisherCreate,
)
from catalog_gateway.services.admin import AdminResult, AdminService, get_admin

router = APIRouter(tags=["catalog"])


def _route(method: str, path: str, **kwargs) -> Callable:
    """Register ``path`` and ``path/`` for the same handler, so both spellings
    are served directly instead of through a redirect."""

    def decorator(func: Callable) -> Callable:
        router.add_api_route(path, func, methods=[method], **kwargs)
        router.add_api_route(f"{path}/", func, methods=[method], include_in_schema=False, **kwargs)
        return func

    return decorator


def _relay(result: AdminResult, response: Response) -> Any:
    # Content type follows the re-serialized body, not the downstream one.
    headers = {k: v for k, v in result.headers.items() if k.lower() != "content-type"}
    if result.payload is None:
        return Response(status_code=result.status_code, headers=headers)
    response.status_code = result.status_code
    response.headers.update(headers)
    return result.payload


def _body(data) -> dict[str, Any]:
    return data.model_dump(mode="json", exclude_unset=True)


# --- list ---

@_route("GET", "/authors", response_model=list[Author], response_model_exclude_unset=True)
async def get_authors(response: Response, admin: AdminService = Depends(get_admin)):
    return _relay(await admin.list_all("authors", Author), response)


# Overlaps the public book listing when both are mounted on one app.
@_route("GET", "/books", response_model=list[Book], response_model_exclude_unset=True)
async def get_books(response: Response, admin: AdminService = Depends(get_admin)):
    return _relay(await admin.list_all("books", Book), response)


@_route("GET", "/publishers", response_model=list[Publisher], response_model_exclude_unset=True)
async def get_publishers(response: Response, admin: AdminService = Depends(get_admin)):
    return _relay(await admin.list_all("publishers", Publisher), response)


# --- get by id ---

@_route("GET", "/author/{author_id}", response_model=Author, response_model_exclude_unset=True)
async def get_author(author_id: int, response: Response, admin: AdminService = Depends(get_admin)):
    return _relay(await admin.get("author", author_id, Author), response)


# Overlaps the public book detail route when both are mounted on one app.
@_route("GET", "/book/{book_id}", response_model=Book, response_model_exclude_unset=True)
async def get_book(book_id: int, response: Response, admin: AdminService = Depends(get_admin)):
    return _relay(await admin.get("book", book_id, Book), response)


@_route("GET", "/publisher/{publisher_id}", response_model=Publisher, response_model_exclude_unset=True)
async def get_publisher(
    publisher_id: int, response: Response, admin: AdminService = Depends(get_admin)
):
    return _relay(await admin.get("publisher", publisher_id, Publisher), response)


# --- update ---

@_route("PUT", "/author/{author_id}", response_model=Author, response_model_exclude_unset=True)
async def update_author(
    author_id: int, data: Author, response: Response, admin: AdminService = Depends(get_admin)
):
    return _relay(await admin.update("author", author_id, _body(data), Author), response)


@_route("PUT", "/publisher/{publisher_id}", response_model=Publisher, response_model_exclude_unset=True)
async def update_publisher(
    publisher_id: int, data: Publisher, response: Response, admin: AdminService = Depends(get_admin)
):
    return _relay(await admin.update("publisher", publisher_id, _body(data), Publisher), response)


@_route("PUT", "/book/{book_id}", response_model=Book, response_model_exclude_unset=True)
async def update_book(
    book_id: int, data: Book, response: Response, admin: AdminService = Depends(get_admin)
):
    """Update a book.

    A missing author or publisher leaves the current one in place. One whose
    id is unknown to the administrator service is an error; one whose id is
    known is used as stored, and any other fields sent for it are ignored.
    """
    return _relay(await admin.update("book", book_id, _body(data), Book), response)


# --- create ---

@_route("POST", "/author", response_model=Author, response_model_exclude_unset=True)
async def create_author(
    data: AuthorCreate, response: Response, admin: AdminService = Depends(get_admin)
):
    return _relay(await admin.create("author", _body(data), Author), response)


@_route("POST", "/publisher", response_model=Publisher, response_model_exclude_unset=True)
async def create_publisher(
    data: PublisherCreate, response: Response, admin: AdminService = Depends(get_admin)
):
    return _relay(await admin.create("publisher", _body(data), Publisher), response)


@_route("POST", "/book", response_model=Book, response_model_exclude_unset=True)
async def create_book(data: BookCreate, response: Response, admin: AdminService = Depends(get_admin)):
    """Create a book.

    The book's own id is ignored. Author and publisher are looked up by id;
    only when no record with that id exists is a new one created from the
    supplied fields, under a server-assigned id.
    """
    return _relay(await admin.create("book", _body(data), Book), response)


# --- delete ---
# A successful delete always answers 204 with no body, whatever the
# administrator service sent back.

@_route("DELETE", "/author/{author_id}", status_code=204)
async def delete_author(author_id: int, admin: AdminService = Depends(get_admin)):
    await admin.delete("author", author_id)


@_route("DELETE", "/publisher/{publisher_id}", status_code=204)
async def delete_publisher(publisher_id: int, admin: AdminService = Depends(get_admin)):
    await admin.delete("publisher", publisher_id)


@_route("DELETE", "/book/{book_id}", status_code=204)
async def delete_book(book_id: int, admin: AdminService = Depends(get_admin)):
    await admin.delete("book", book_id)
