"""Named integer sequences backed by the ``counters`` collection."""

from __future__ import annotations

import logging

from pymongo import ReturnDocument
from pymongo.collection import Collection

logger = logging.getLogger("persons_finder.services.sequence")


class SequenceGenerator:
    """Issues increasing ids per counter name.

    Each call is a single ``findAndModify`` with ``$inc`` and upsert, so
    concurrent callers never share a value and a new counter starts at 1.
    """

    def __init__(self, counters: Collection) -> None:
        self.counters = counters

    def generate_sequence(self, name: str) -> int:
        counter = self.counters.find_one_and_update(
            {"_id": name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        value = int(counter["seq"])
        logger.debug("Issued sequence value %d for %s", value, name)
        return value
