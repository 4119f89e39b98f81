from catalog_gateway.mcp.client import CatalogClient


async def list_authors(client: CatalogClient) -> list[dict]:
    result = await client.get("/authors")
    if isinstance(result, dict) and result.get("error"):
        return []
    return result


async def get_author(client: CatalogClient, author_id: int) -> dict:
    return await client.get(f"/author/{author_id}")


async def create_author(client: CatalogClient, name: str) -> dict:
    return await client.post("/author", json={"name": name})


async def update_author(client: CatalogClient, author_id: int, name: str) -> dict:
    return await client.put(f"/author/{author_id}", json={"id": author_id, "name": name})


async def delete_author(client: CatalogClient, author_id: int) -> dict:
    return await client.delete(f"/author/{author_id}")
