"""
Pytest configuration and fixtures
"""
import itertools
import os
from unittest.mock import MagicMock

import pytest

# Never reach a real LLM from unit tests
os.environ["AI_PROVIDER"] = "mock"

from persons_finder.bio import MockBioGenerator
from persons_finder.core import InputSanitizer, PersonRecord
from persons_finder.services import (
    LocationService,
    PersonRepository,
    PersonService,
    SequenceGenerator,
)


@pytest.fixture
def records() -> dict:
    """Backing dict for the repository double, keyed by person id."""
    return {}


@pytest.fixture
def repository(records) -> MagicMock:
    """PersonRepository double that keeps records in memory"""
    repo = MagicMock(spec=PersonRepository)

    def find_by_email(email):
        return next((r for r in records.values() if r.email == email), None)

    def save(record):
        records[record.id] = record.model_copy(deep=True)
        return record

    repo.find_by_id.side_effect = lambda person_id: records.get(person_id)
    repo.find_by_email.side_effect = find_by_email
    repo.save.side_effect = save
    return repo


@pytest.fixture
def sequence_generator() -> MagicMock:
    generator = MagicMock(spec=SequenceGenerator)
    counter = itertools.count(1)
    generator.generate_sequence.side_effect = lambda name: next(counter)
    return generator


@pytest.fixture
def person_service(repository, sequence_generator) -> PersonService:
    return PersonService(
        repository=repository,
        sequence_generator=sequence_generator,
        bio_generator=MockBioGenerator(),
        sanitizer=InputSanitizer(),
    )


@pytest.fixture
def location_service(repository) -> LocationService:
    return LocationService(repository, default_limit=50)


@pytest.fixture
def alice(records) -> PersonRecord:
    record = PersonRecord(
        id=1,
        name="Alice",
        email="alice@example.com",
        job_title="Engineer",
        hobbies=["coding", "hiking"],
        bio="Meet a Engineer obsessed with coding and hiking because why not?",
    )
    records[record.id] = record
    return record
