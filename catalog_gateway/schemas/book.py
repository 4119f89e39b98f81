from pydantic import BaseModel, ConfigDict

from catalog_gateway.schemas.author import Author
from catalog_gateway.schemas.publisher import Publisher


class Book(BaseModel):
    """A book as the administrator service sees it.

    Author and publisher are nested records; for an existing record only
    its ``id`` is significant downstream.
    """

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    title: str | None = None
    author: Author | None = None
    publisher: Publisher | None = None


class BookCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str
    id: int | None = None
    author: Author | None = None
    publisher: Publisher | None = None
