from pydantic import BaseModel, Field

from hotel_search.schemas.room import Room


class Address(BaseModel):
    address_1: str | None = None
    address_2: str | None = None
    address_city: str | None = None
    address_zip: str | None = None
    address_country: str | None = None


class HotelMetadata(BaseModel):
    """Typed projection of a hotel's key/value attribute rows."""
    address: Address = Field(default_factory=Address)
    geo_lat: str | None = None
    geo_lng: str | None = None
    image_url: str | None = None
    phone: str | None = None


class ReviewStats(BaseModel):
    rating: int | None = None
    count: int = 0


# This is what we RETURN to the caller (output).
class Hotel(BaseModel):
    id: int
    name: str
    address: Address = Field(default_factory=Address)
    geo_lat: str | None = None
    geo_lng: str | None = None
    image_url: str | None = None
    phone: str | None = None
    rating: int | None = None
    rating_count: int = 0
    cheapest_room: Room | None = None
    distance: float | None = None  # only set when a reference point + radius were given
