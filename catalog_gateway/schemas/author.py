from pydantic import BaseModel, ConfigDict


class Author(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int | None = None
    name: str | None = None


class AuthorCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
