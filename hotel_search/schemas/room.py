from pydantic import BaseModel


class Room(BaseModel):
    id: int
    hotel_id: int
    title: str = ""
    surface: float | None = None
    price: float | None = None
    bedrooms_count: int | None = None
    bathrooms_count: int | None = None
    type: str | None = None