"""Location attach/detach and radius-bounded proximity search."""

from __future__ import annotations

import logging
from typing import List

from ..core import GeoPoint, Location, PersonNotFoundError, PersonRecord
from .repository import PersonRepository

logger = logging.getLogger("persons_finder.services.locations")

DEFAULT_NEARBY_LIMIT = 1000


class LocationService:
    def __init__(
        self,
        repository: PersonRepository,
        default_limit: int = DEFAULT_NEARBY_LIMIT,
    ) -> None:
        self.repository = repository
        self.default_limit = default_limit

    def add_location(self, location: Location) -> None:
        record = self._require(location.reference_id)
        record.location = GeoPoint.from_lat_lon(location.latitude, location.longitude)
        self.repository.save(record)
        logger.info("Updated location for person id=%s", record.id)

    def remove_location(self, person_id: int) -> None:
        record = self._require(person_id)
        record.location = None
        self.repository.save(record)
        logger.info("Removed location for person id=%s", record.id)

    def find_around(
        self,
        latitude: float,
        longitude: float,
        radius_in_km: float,
        page: int | None = None,
        limit: int | None = None,
    ) -> List[Location]:
        """Persons within ``radius_in_km`` of the point, nearest first.

        ``page`` is 1-based; ``limit`` falls back to the configured default.
        """

        size = limit if limit is not None else self.default_limit
        skip = ((page or 1) - 1) * size

        matches = self.repository.geo_near(
            longitude=longitude,
            latitude=latitude,
            max_distance_km=radius_in_km,
            skip=skip,
            limit=size,
        )
        logger.info(
            "Nearby search lat=%s lon=%s radius=%skm returned %d persons",
            latitude,
            longitude,
            radius_in_km,
            len(matches),
        )
        return [
            Location(
                reference_id=record.id,
                latitude=record.location.latitude,
                longitude=record.location.longitude,
                distance_in_km=distance,
                bio=record.bio,
            )
            for record, distance in matches
            if record.location is not None
        ]

    def _require(self, person_id: int | None) -> PersonRecord:
        record = self.repository.find_by_id(person_id) if person_id is not None else None
        if record is None:
            raise PersonNotFoundError(person_id)
        return record
