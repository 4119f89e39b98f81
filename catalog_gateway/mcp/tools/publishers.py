from catalog_gateway.mcp.client import CatalogClient


def _fields(name: str | None, address: str | None, phone: str | None) -> dict:
    data = {"name": name, "address": address, "phone": phone}
    return {k: v for k, v in data.items() if v is not None}


async def list_publishers(client: CatalogClient) -> list[dict]:
    result = await client.get("/publishers")
    if isinstance(result, dict) and result.get("error"):
        return []
    return result


async def get_publisher(client: CatalogClient, publisher_id: int) -> dict:
    return await client.get(f"/publisher/{publisher_id}")


async def create_publisher(
    client: CatalogClient,
    name: str,
    address: str | None = None,
    phone: str | None = None,
) -> dict:
    return await client.post("/publisher", json=_fields(name, address, phone))


async def update_publisher(
    client: CatalogClient,
    publisher_id: int,
    name: str | None = None,
    address: str | None = None,
    phone: str | None = None,
) -> dict:
    body = {"id": publisher_id, **_fields(name, address, phone)}
    return await client.put(f"/publisher/{publisher_id}", json=body)


async def delete_publisher(client: CatalogClient, publisher_id: int) -> dict:
    return await client.delete(f"/publisher/{publisher_id}")
