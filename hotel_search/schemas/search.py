from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Bounds(BaseModel):
    """Inclusive numeric range; either end may be left open."""
    min: Optional[float] = None
    max: Optional[float] = None

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


# This is the filter we EXPECT from the caller (input).
# Keys match the legacy request arguments; unknown keys are ignored.
class SearchFilter(BaseModel):
    search: Optional[str] = None  # reserved, not used for filtering

    # Reference point + radius (km)
    lat: Optional[float] = Field(default=None, ge=-90, le=90)
    lng: Optional[float] = Field(default=None, ge=-180, le=180)
    distance: Optional[float] = Field(default=None, ge=0)

    price: Bounds = Field(default_factory=Bounds)
    surface: Bounds = Field(default_factory=Bounds)

    rooms: Optional[int] = Field(default=None, validation_alias=AliasChoices("rooms", "bedrooms"))
    bath_rooms: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("bath_rooms", "bathRooms", "bathrooms"),
    )
    types: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        allow_inf_nan=False,
    )

    @field_validator("price", "surface", mode="before")
    @classmethod
    def _none_bounds(cls, v):
        return {} if v is None else v

    @field_validator("types", mode="before")
    @classmethod
    def _none_types(cls, v):
        return [] if v is None else v

    @property
    def has_distance_bound(self) -> bool:
        return self.lat is not None and self.lng is not None and self.distance is not None
