from catalog_gateway.schemas.author import Author, AuthorCreate
from catalog_gateway.schemas.book import Book, BookCreate
from catalog_gateway.schemas.publisher import Publisher, PublisherCreate

__all__ = ["Author", "AuthorCreate", "Book", "BookCreate", "Publisher", "PublisherCreate"]
