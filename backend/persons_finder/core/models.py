"""Shared data models for person profiles and location lookups."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case accepted too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeoPoint(BaseModel):
    """GeoJSON point as stored in MongoDB (longitude first)."""

    type: Literal["Point"] = "Point"
    coordinates: List[float] = Field(min_length=2, max_length=2)

    @classmethod
    def from_lat_lon(cls, latitude: float, longitude: float) -> "GeoPoint":
        return cls(coordinates=[longitude, latitude])

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]


class PersonRecord(BaseModel):
    """Person document owned by the ``persons`` collection."""

    id: int
    name: str = ""
    email: str = ""
    job_title: str = ""
    hobbies: list[str] = Field(default_factory=list)
    location: GeoPoint | None = None
    bio: str = ""

    @classmethod
    def from_document(cls, doc: dict) -> "PersonRecord":
        data = dict(doc)
        data["id"] = data.pop("_id")
        return cls.model_validate(data)

    def to_document(self) -> dict:
        doc = self.model_dump(exclude={"id"})
        doc["_id"] = self.id
        return doc


class PersonRequest(ApiModel):
    """Incoming create-or-update payload."""

    id: int | None = None
    name: str = Field(max_length=500)
    email: str = Field(max_length=100)
    job_title: str = Field(max_length=500)
    hobbies: list[str] = Field(min_length=1, max_length=20)

    @field_validator("name", "email", "job_title")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("hobbies")
    @classmethod
    def hobbies_not_blank(cls, value: list[str]) -> list[str]:
        for hobby in value:
            if not hobby.strip():
                raise ValueError("hobbies must not contain blank entries")
            if len(hobby) > 500:
                raise ValueError("each hobby must not exceed 500 characters")
        return value


class Person(ApiModel):
    """Person as returned to API clients."""

    id: int
    name: str
    email: str
    job_title: str
    hobbies: list[str] = Field(default_factory=list)
    bio: str = ""

    @classmethod
    def from_record(cls, record: PersonRecord) -> "Person":
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            job_title=record.job_title,
            hobbies=list(record.hobbies),
            bio=record.bio,
        )


class LocationRequest(ApiModel):
    """Body of ``PUT /persons/{id}/location``."""

    latitude: float
    longitude: float


class Location(ApiModel):
    """Location update or proximity search hit for a person."""

    reference_id: int | None = None
    latitude: float
    longitude: float
    distance_in_km: float | None = None
    bio: str | None = None
