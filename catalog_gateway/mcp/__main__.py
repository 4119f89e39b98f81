from httpx import AsyncClient

from catalog_gateway.config import GATEWAY_URL
from catalog_gateway.mcp.client import CatalogClient
from catalog_gateway.mcp.server import create_mcp_server


def main():
    http = AsyncClient(base_url=GATEWAY_URL)
    client = CatalogClient(http)
    mcp = create_mcp_server(client)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
