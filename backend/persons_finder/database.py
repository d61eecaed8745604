"""MongoDB connection and collection bootstrap."""

from __future__ import annotations

import logging

from pymongo import ASCENDING, GEOSPHERE, MongoClient
from pymongo.database import Database

from .config import Settings

logger = logging.getLogger("persons_finder.database")

PERSONS_COLLECTION = "persons"
COUNTERS_COLLECTION = "counters"


def connect(settings: Settings) -> MongoClient:
    """Create a client for the configured cluster; pymongo connects lazily."""

    logger.info("Connecting to MongoDB database=%s", settings.mongodb_database)
    return MongoClient(settings.mongodb_uri, tz_aware=True)


def ensure_indexes(db: Database) -> None:
    """Create the unique email index and the 2dsphere index on location."""

    persons = db[PERSONS_COLLECTION]
    persons.create_index([("email", ASCENDING)], unique=True, name="email_unique")
    persons.create_index([("location", GEOSPHERE)], name="location_2dsphere")
    logger.info("Ensured indexes on %s.%s", db.name, PERSONS_COLLECTION)
