from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    category: str = "other"   # Free-form: ancient, religious, fountain, stairs...


class CityCollection(BaseModel):
    name: str = Field(min_length=1)
    places: List[Location] = []

    @field_validator("places")
    @classmethod
    def names_must_be_unique(cls, v):
        seen = set()
        for place in v:
            if place.name in seen:
                raise ValueError(f"duplicate place name: {place.name}")
            seen.add(place.name)
        return v
