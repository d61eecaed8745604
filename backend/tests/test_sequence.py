"""
Tests for the counter-backed sequence generator
"""
from unittest.mock import MagicMock

import mongomock
from pymongo import ReturnDocument

from persons_finder.services import SequenceGenerator


def test_returns_incremented_value():
    counters = MagicMock()
    counters.find_one_and_update.return_value = {"_id": "Person", "seq": 5}

    assert SequenceGenerator(counters).generate_sequence("Person") == 5


def test_uses_atomic_upsert_increment():
    counters = MagicMock()
    counters.find_one_and_update.return_value = {"_id": "new_sequence", "seq": 1}

    assert SequenceGenerator(counters).generate_sequence("new_sequence") == 1
    counters.find_one_and_update.assert_called_once_with(
        {"_id": "new_sequence"},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )


def test_sequential_calls_are_strictly_increasing():
    counters = mongomock.MongoClient().db.counters
    generator = SequenceGenerator(counters)

    values = [generator.generate_sequence("Person") for _ in range(4)]

    assert values == [1, 2, 3, 4]
    assert generator.generate_sequence("Order") == 1
    assert counters.find_one({"_id": "Person"})["seq"] == 4


def test_sequences_are_keyed_by_name():
    counters = MagicMock()
    counters.find_one_and_update.side_effect = [
        {"_id": "Person", "seq": 10},
        {"_id": "Order", "seq": 1},
    ]
    generator = SequenceGenerator(counters)

    assert generator.generate_sequence("Person") == 10
    assert generator.generate_sequence("Order") == 1
    names = [c.args[0]["_id"] for c in counters.find_one_and_update.call_args_list]
    assert names == ["Person", "Order"]
