from pydantic import BaseModel, ConfigDict


class Publisher(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int | None = None
    name: str | None = None
    address: str | None = None
    phone: str | None = None


class PublisherCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    address: str | None = None
    phone: str | None = None
