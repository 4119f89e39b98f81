from catalog_gateway.mcp.client import CatalogClient


def _book_body(
    title: str | None,
    author_id: int | None,
    author_name: str | None,
    publisher_id: int | None,
    publisher_name: str | None,
) -> dict:
    body = {}
    if title is not None:
        body["title"] = title
    if author_id is not None or author_name is not None:
        body["author"] = {k: v for k, v in {"id": author_id, "name": author_name}.items() if v is not None}
    if publisher_id is not None or publisher_name is not None:
        body["publisher"] = {
            k: v for k, v in {"id": publisher_id, "name": publisher_name}.items() if v is not None
        }
    return body


async def list_books(client: CatalogClient) -> list[dict]:
    result = await client.get("/books")
    if isinstance(result, dict) and result.get("error"):
        return []
    return result


async def get_book(client: CatalogClient, book_id: int) -> dict:
    return await client.get(f"/book/{book_id}")


async def create_book(
    client: CatalogClient,
    title: str,
    author_id: int | None = None,
    author_name: str | None = None,
    publisher_id: int | None = None,
    publisher_name: str | None = None,
) -> dict:
    body = _book_body(title, author_id, author_name, publisher_id, publisher_name)
    return await client.post("/book", json=body)


async def update_book(
    client: CatalogClient,
    book_id: int,
    title: str | None = None,
    author_id: int | None = None,
    publisher_id: int | None = None,
) -> dict:
    body = {"id": book_id, **_book_body(title, author_id, None, publisher_id, None)}
    return await client.put(f"/book/{book_id}", json=body)


async def delete_book(client: CatalogClient, book_id: int) -> dict:
    return await client.delete(f"/book/{book_id}")
