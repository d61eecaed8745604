"""Persistence for person documents."""

from __future__ import annotations

import logging
from typing import List, Tuple

from pymongo.collection import Collection

from ..core import PersonRecord

logger = logging.getLogger("persons_finder.services.repository")

DISTANCE_FIELD = "distance_km"
METERS_PER_KM = 1000.0


class PersonRepository:
    """Reads and writes ``PersonRecord`` documents keyed by integer id."""

    def __init__(self, persons: Collection) -> None:
        self.persons = persons

    def find_by_id(self, person_id: int) -> PersonRecord | None:
        doc = self.persons.find_one({"_id": person_id})
        return PersonRecord.from_document(doc) if doc else None

    def find_by_email(self, email: str) -> PersonRecord | None:
        doc = self.persons.find_one({"email": email})
        return PersonRecord.from_document(doc) if doc else None

    def save(self, record: PersonRecord) -> PersonRecord:
        self.persons.replace_one({"_id": record.id}, record.to_document(), upsert=True)
        logger.debug("Saved person id=%s", record.id)
        return record

    def geo_near(
        self,
        longitude: float,
        latitude: float,
        max_distance_km: float,
        skip: int,
        limit: int,
    ) -> List[Tuple[PersonRecord, float]]:
        """Return ``(record, distance_km)`` pairs nearest first."""

        pipeline = [
            {
                "$geoNear": {
                    "near": {"type": "Point", "coordinates": [longitude, latitude]},
                    "distanceField": DISTANCE_FIELD,
                    "maxDistance": max_distance_km * METERS_PER_KM,
                    "distanceMultiplier": 1 / METERS_PER_KM,
                    "spherical": True,
                    "key": "location",
                }
            },
            {"$skip": skip},
            {"$limit": limit},
        ]
        results: list[tuple[PersonRecord, float]] = []
        for doc in self.persons.aggregate(pipeline):
            distance = float(doc.pop(DISTANCE_FIELD))
            results.append((PersonRecord.from_document(doc), distance))
        return results
