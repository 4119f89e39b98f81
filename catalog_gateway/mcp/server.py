from fastmcp import FastMCP

from catalog_gateway.mcp.client import CatalogClient
from catalog_gateway.mcp.tools import authors, books, publishers


def create_mcp_server(client: CatalogClient) -> FastMCP:
    mcp = FastMCP(
        name="catalog-gateway",
        instructions=(
            "Catalog administration for the library: list, look up, create, "
            "update and delete authors, books and publishers. Records are "
            "identified by numeric id. A book refers to its author and "
            "publisher by id."
        ),
    )

    # --- authors ---

    @mcp.tool()
    async def list_authors() -> list[dict]:
        """List every author in the catalog."""
        return await authors.list_authors(client)

    @mcp.tool()
    async def get_author(author_id: int) -> dict:
        """Get one author by id."""
        return await authors.get_author(client, author_id=author_id)

    @mcp.tool()
    async def create_author(name: str) -> dict:
        """Add an author. The catalog assigns the id."""
        return await authors.create_author(client, name=name)

    @mcp.tool()
    async def update_author(author_id: int, name: str) -> dict:
        """Rename an author."""
        return await authors.update_author(client, author_id=author_id, name=name)

    @mcp.tool()
    async def delete_author(author_id: int) -> dict:
        """Remove an author from the catalog."""
        return await authors.delete_author(client, author_id=author_id)

    # --- publishers ---

    @mcp.tool()
    async def list_publishers() -> list[dict]:
        """List every publisher in the catalog."""
        return await publishers.list_publishers(client)

    @mcp.tool()
    async def get_publisher(publisher_id: int) -> dict:
        """Get one publisher by id."""
        return await publishers.get_publisher(client, publisher_id=publisher_id)

    @mcp.tool()
    async def create_publisher(
        name: str, address: str | None = None, phone: str | None = None
    ) -> dict:
        """Add a publisher with an optional address and phone number."""
        return await publishers.create_publisher(client, name=name, address=address, phone=phone)

    @mcp.tool()
    async def update_publisher(
        publisher_id: int,
        name: str | None = None,
        address: str | None = None,
        phone: str | None = None,
    ) -> dict:
        """Change a publisher's name, address or phone number."""
        return await publishers.update_publisher(
            client, publisher_id=publisher_id, name=name, address=address, phone=phone
        )

    @mcp.tool()
    async def delete_publisher(publisher_id: int) -> dict:
        """Remove a publisher from the catalog."""
        return await publishers.delete_publisher(client, publisher_id=publisher_id)

    # --- books ---

    @mcp.tool()
    async def list_books() -> list[dict]:
        """List every book in the catalog."""
        return await books.list_books(client)

    @mcp.tool()
    async def get_book(book_id: int) -> dict:
        """Get one book by id, with its author and publisher."""
        return await books.get_book(client, book_id=book_id)

    @mcp.tool()
    async def create_book(
        title: str,
        author_id: int | None = None,
        author_name: str | None = None,
        publisher_id: int | None = None,
        publisher_name: str | None = None,
    ) -> dict:
        """Add a book. An existing author or publisher is referenced by id; when
        no record has that id, a new one is created from the given name."""
        return await books.create_book(
            client,
            title=title,
            author_id=author_id,
            author_name=author_name,
            publisher_id=publisher_id,
            publisher_name=publisher_name,
        )

    @mcp.tool()
    async def update_book(
        book_id: int,
        title: str | None = None,
        author_id: int | None = None,
        publisher_id: int | None = None,
    ) -> dict:
        """Change a book's title, or point it at a different existing author or
        publisher. Omitted fields keep their current value."""
        return await books.update_book(
            client, book_id=book_id, title=title, author_id=author_id, publisher_id=publisher_id
        )

    @mcp.tool()
    async def delete_book(book_id: int) -> dict:
        """Remove a book from the catalog."""
        return await books.delete_book(client, book_id=book_id)

    return mcp
