"""
Tests for index bootstrap and the application's startup wiring
"""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from pymongo import ASCENDING, GEOSPHERE

from persons_finder import main
from persons_finder.bio import ExternalBioGenerator, MockBioGenerator
from persons_finder.config import Settings
from persons_finder.database import ensure_indexes


@pytest.fixture
def collections():
    return {"persons": MagicMock(name="persons"), "counters": MagicMock(name="counters")}


@pytest.fixture
def mongo_client(collections):
    db = MagicMock(name="db")
    db.name = "persons_finder"
    db.__getitem__.side_effect = lambda name: collections[name]
    client = MagicMock(name="client")
    client.__getitem__.return_value = db
    return client


def test_ensure_indexes_creates_email_and_geo_indexes(collections, mongo_client):
    ensure_indexes(mongo_client["persons_finder"])

    persons = collections["persons"]
    persons.create_index.assert_any_call([("email", ASCENDING)], unique=True, name="email_unique")
    persons.create_index.assert_any_call([("location", GEOSPHERE)], name="location_2dsphere")
    assert persons.create_index.call_count == 2


def test_lifespan_wires_services_to_collections(monkeypatch, collections, mongo_client):
    connected = []

    def fake_connect(settings):
        connected.append(settings)
        return mongo_client

    monkeypatch.setattr(main, "connect", fake_connect)
    settings = Settings(mongodb_database="persons_test", nearby_default_limit=30)
    app = main.create_app(settings=settings)

    with TestClient(app):
        person_service = app.state.person_service
        location_service = app.state.location_service

        assert connected == [settings]
        mongo_client.__getitem__.assert_called_with("persons_test")
        assert person_service.repository.persons is collections["persons"]
        assert person_service.sequence_generator.counters is collections["counters"]
        assert isinstance(person_service.bio_generator, MockBioGenerator)
        assert location_service.repository is person_service.repository
        assert location_service.default_limit == 30
        collections["persons"].create_index.assert_any_call(
            [("email", ASCENDING)], unique=True, name="email_unique"
        )
        mongo_client.close.assert_not_called()

    mongo_client.close.assert_called_once()


def test_lifespan_closes_external_bio_client(monkeypatch, mongo_client):
    monkeypatch.setattr(main, "connect", lambda settings: mongo_client)
    settings = Settings(ai_provider="openai", openai_api_key="sk-test")
    app = main.create_app(settings=settings)

    with TestClient(app):
        generator = app.state.person_service.bio_generator
        assert isinstance(generator, ExternalBioGenerator)
        assert not generator._client.is_closed

    assert generator._client.is_closed
    mongo_client.close.assert_called_once()
